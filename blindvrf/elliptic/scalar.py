from __future__ import annotations

from secrets import token_bytes
from typing import Callable

import nacl.bindings as sodium

from ..exceptions import DecodeError

# Group order (Ed25519, Curve25519 and Ristretto255)
q = 2**252 + 27742317777372353535851937790883648493

RandomSource = Callable[[int], bytes]


class Scalar:
  """
  An integer modulo the group order q, stored as its canonical 32 bytes.

  Arithmetic runs in libsodium so that secret scalars are not handled by
  Python's variable time big integers, except where converted by int().
  """
  __slots__ = ("_b",)

  def __init__(self, b: bytes):
    # Private constructor, use the classmethods to validate or reduce input
    self._b = bytes(b)

  @classmethod
  def random(cls, rng: RandomSource = token_bytes) -> Scalar:
    """Uniformly random scalar from 32 bytes of the randomness source"""
    b = rng(32)
    if len(b) != 32: raise ValueError(f"Randomness source returned {len(b)} bytes, expected 32")
    return cls.from_bytes_mod_order(b)

  @classmethod
  def from_bytes_mod_order(cls, b: bytes) -> Scalar:
    """Reduce a 32 or 64 byte little endian integer modulo q"""
    if len(b) not in (32, 64): raise ValueError("Should be 32 or 64 bytes")
    return cls(sodium.crypto_core_ed25519_scalar_reduce(bytes(b).ljust(64, b"\0")))

  @classmethod
  def from_canonical(cls, b: bytes) -> Scalar:
    """
    Decode a scalar, accepting only values below q.

    :raises DecodeError: if the bytes are not a canonical scalar
    """
    if len(b) != 32: raise DecodeError("Scalar should be exactly 32 bytes")
    s = cls(b)
    if not sodium.sodium_memcmp(bytes(cls.from_bytes_mod_order(s._b)), s._b):
      raise DecodeError("Scalar is not reduced modulo the group order")
    return s

  @classmethod
  def from_int(cls, x: int) -> Scalar:
    return cls((x % q).to_bytes(32, "little"))

  @property
  def is_zero(self) -> bool:
    return sodium.sodium_memcmp(self._b, bytes(32))

  def __bytes__(self): return self._b
  def __int__(self): return int.from_bytes(self._b, "little")
  def __hash__(self): return hash(self._b)
  def __repr__(self): return f"Scalar({self._b[:4].hex()}...)"

  def __eq__(self, other):
    if not isinstance(other, Scalar): return NotImplemented
    return sodium.sodium_memcmp(self._b, other._b)

  def __add__(self, o: Scalar) -> Scalar:
    if not isinstance(o, Scalar): return NotImplemented
    return Scalar(sodium.crypto_core_ed25519_scalar_add(self._b, o._b))

  def __sub__(self, o: Scalar) -> Scalar:
    if not isinstance(o, Scalar): return NotImplemented
    return Scalar(sodium.crypto_core_ed25519_scalar_sub(self._b, o._b))

  def __mul__(self, o):
    # Scalar * Scalar stays here, Scalar * point is handled by the point
    if not isinstance(o, Scalar): return NotImplemented
    return Scalar(sodium.crypto_core_ed25519_scalar_mul(self._b, o._b))

  def __neg__(self) -> Scalar:
    return Scalar(sodium.crypto_core_ed25519_scalar_negate(self._b))

