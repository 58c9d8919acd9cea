import hashlib
from typing import Any, Callable

from .elliptic import RistrettoPoint, Scalar
from .exceptions import HashSuiteError

# Any hashlib style constructor: hashlib.sha512, functools.partial(hashlib.blake2b, digest_size=24), ...
HashFactory = Callable[..., Any]


def digest_size(factory: HashFactory) -> int:
  return factory().digest_size


def digest(factory: HashFactory, *parts) -> bytes:
  h = factory()
  for part in parts:
    h.update(part)
  return h.digest()


class HashSuite:
  """
  The three hash functions the VRF needs, each in its own role.

  - hash512: 64-byte output, mapped to the group (hash-to-group)
  - hash256: 32-byte output, reduced to the Fiat-Shamir challenge
  - hash: any output size, gives the VRF output beta

  Prover and verifier must agree on all three, nothing in the proof tells
  which were used.

  :raises HashSuiteError: if hash512 or hash256 has the wrong output size
  """
  __slots__ = ("hash512", "hash256", "hash", "beta_size")

  def __init__(self, hash512: HashFactory = hashlib.sha512, hash256: HashFactory = hashlib.sha256, hash: HashFactory = hashlib.sha224):
    if digest_size(hash512) != 64:
      raise HashSuiteError(f"Hash-to-group needs a 64-byte hash, got {digest_size(hash512)} bytes")
    if digest_size(hash256) != 32:
      raise HashSuiteError(f"Challenge needs a 32-byte hash, got {digest_size(hash256)} bytes")
    self.hash512 = hash512
    self.hash256 = hash256
    self.hash = hash
    self.beta_size = digest_size(hash)

  def __repr__(self):
    names = (getattr(h, "__name__", None) or repr(h) for h in (self.hash512, self.hash256, self.hash))
    return f"HashSuite({', '.join(names)})"

  def hash_to_group(self, alpha: bytes) -> RistrettoPoint:
    return RistrettoPoint.from_uniform_bytes(digest(self.hash512, alpha))

  def challenge(self, alpha: bytes, *points: RistrettoPoint) -> Scalar:
    """Fiat-Shamir challenge over alpha and the compressed points, reduced mod q"""
    return Scalar.from_bytes_mod_order(digest(self.hash256, alpha, *map(bytes, points)))

  def beta(self, gamma: RistrettoPoint) -> bytes:
    return digest(self.hash, bytes(gamma))


DEFAULT_SUITE = HashSuite()
