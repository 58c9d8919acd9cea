import hashlib
import logging

import pytest

from blindvrf import DecodeError, HashSuite, HashSuiteError, Public, Secret, sign
from blindvrf.elliptic import G, Scalar, q, tobytes


def test_keypair():
  secret = Secret.new()
  public = secret.public
  assert public.point == Scalar.from_canonical(secret.to_bytes()) * G
  assert secret.public is public  # Cached
  assert len(secret.to_bytes()) == 32
  assert len(public.to_bytes()) == 32
  assert bytes(public) == public.to_bytes()


def test_to_bytes_from_slice():
  secret = Secret.new()
  public = secret.public
  secret_bytes = secret.to_bytes()
  public_bytes = public.to_bytes()
  assert secret == Secret.from_bytes(secret_bytes)
  assert public == Public.from_bytes(public_bytes)
  assert Secret.from_bytes(secret_bytes).public == public
  assert hash(Public.from_bytes(public_bytes)) == hash(public)
  assert hash(Secret.from_bytes(secret_bytes)) == hash(secret)
  assert Secret.from_bytes(bytearray(secret_bytes)) == secret


def test_keys_differ():
  a, b = Secret.new(), Secret.new()
  assert a != b
  assert a.public != b.public
  assert len({a.public, b.public, Public.from_bytes(bytes(a.public))}) == 2


def test_secret_decode_rejects_non_canonical(caplog):
  with caplog.at_level(logging.DEBUG, logger="blindvrf.keys"):
    assert Secret.from_bytes(tobytes(q)) is None
  assert "Rejected secret key" in caplog.text
  assert Secret.from_bytes(b"\xff" * 32) is None
  assert Secret.from_bytes(bytes(31)) is None
  assert Secret.from_bytes(tobytes(q - 1)) is not None


def test_public_decode_rejects_invalid():
  assert Public.from_bytes(b"\x01" + bytes(31)) is None
  assert Public.from_bytes(b"\xff" * 32) is None
  assert Public.from_bytes(bytes(33)) is None
  # Odd field values are never canonical encodings
  pk = bytearray(Secret.new().public.to_bytes())
  pk[0] |= 1
  assert Public.from_bytes(pk) is None


def test_secret_rng():
  assert Scalar.from_canonical(Secret.new(lambda n: bytes(n)).to_bytes()) == Scalar.from_int(0)
  secret = Secret.new(lambda n: tobytes(q + 7))
  assert int(Scalar.from_canonical(secret.to_bytes())) == 7
  assert secret.public.point == 7 * G


def test_wipe():
  with Secret.new() as secret:
    public = secret.public
    assert not secret.is_wiped
  assert secret.is_wiped
  assert repr(secret) == "Secret[wiped]"
  # The public key stays usable, the secret does not
  assert Public.from_bytes(bytes(public)) == public
  with pytest.raises(ValueError):
    secret.to_bytes()
  with pytest.raises(ValueError):
    sign(secret, b"alpha")


def test_repr_hides_secret():
  secret = Secret.new()
  assert secret.to_bytes().hex()[:8] not in repr(secret)
  assert repr(secret) == f"Secret[{secret.public.to_bytes().hex()[:8]}]"
  assert repr(secret.public) == f"Public[{secret.public.to_bytes().hex()[:8]}]"


def test_hash_suite_sizes():
  with pytest.raises(HashSuiteError) as exc:
    HashSuite(hash512=hashlib.sha256)
  assert "64-byte" in str(exc.value)
  with pytest.raises(HashSuiteError) as exc:
    HashSuite(hash256=hashlib.sha512)
  assert "32-byte" in str(exc.value)
  # Configuration errors are ValueErrors, like decode errors
  assert issubclass(HashSuiteError, ValueError)
  assert issubclass(DecodeError, ValueError)
  assert HashSuite(hash=hashlib.sha512).beta_size == 64
  assert "sha512" in repr(HashSuite())


def test_public_is_read_only():
  public = Secret.new().public
  h = hash(public)
  with pytest.raises(AttributeError):
    public.point = G
  with pytest.raises(AttributeError):
    public.extra = 1
  assert hash(public) == h


def test_wiped_secrets():
  sk = Secret.new().to_bytes()
  a, b = Secret.from_bytes(sk), Secret.from_bytes(sk)
  assert a == b
  a.wipe()
  # Zeroed bytes must not make unrelated wiped keys equal
  c = Secret.new()
  c.wipe()
  assert a != c
  assert a != b and b != a
  assert a == a
  # Hashable after wiping, by the public key derived at construction
  assert hash(a) == hash(b) == hash(b.public)
  assert hash(c) == hash(c.public)
  assert len({a, c}) == 2
