from __future__ import annotations

import logging
from secrets import token_bytes
from typing import Optional

import nacl.bindings as sodium

from .elliptic import G, RandomSource, RistrettoPoint, Scalar
from .exceptions import DecodeError

logger = logging.getLogger(__name__)


class Public:
  """VRF public key, a group element"""
  __slots__ = ("_point",)

  def __init__(self, point: RistrettoPoint):
    self._point = point

  @property
  def point(self) -> RistrettoPoint: return self._point

  @classmethod
  def from_bytes(cls, b) -> Optional[Public]:
    """Decode a 32-byte public key, None if it is not a valid group element."""
    try:
      return cls(RistrettoPoint.from_bytes(b))
    except DecodeError as e:
      logger.debug("Rejected public key: %s", e)
      return None

  def to_bytes(self) -> bytes:
    return self.point.compress()

  def __bytes__(self): return self.to_bytes()
  def __hash__(self): return hash(self.to_bytes())
  def __repr__(self): return f"Public[{self.to_bytes().hex()[:8]}]"

  def __eq__(self, other):
    if not isinstance(other, Public): return NotImplemented
    return self.to_bytes() == other.to_bytes()


class Secret:
  """
  VRF secret key, a scalar.

  The key bytes are kept in a bytearray that wipe() zeroes. Using the object
  as a context manager wipes it on exit. Python may still have copied the
  bytes elsewhere, so this is a best effort only.
  """
  __slots__ = ("_sk", "_public", "_wiped")

  def __init__(self, scalar: Scalar):
    self._sk = bytearray(bytes(scalar))
    self._public = Public(scalar * G)
    self._wiped = False

  @classmethod
  def new(cls, rng: RandomSource = token_bytes) -> Secret:
    """Create a random secret key"""
    return cls(Scalar.random(rng))

  @classmethod
  def from_bytes(cls, b) -> Optional[Secret]:
    """Decode a 32-byte secret key, None if it is not a canonical scalar."""
    try:
      return cls(Scalar.from_canonical(bytes(b)))
    except DecodeError as e:
      logger.debug("Rejected secret key: %s", e)
      return None

  @property
  def _scalar(self) -> Scalar:
    if self.is_wiped: raise ValueError("The secret key has been wiped")
    return Scalar(bytes(self._sk))

  @property
  def public(self) -> Public:
    return self._public

  @property
  def is_wiped(self) -> bool:
    return self._wiped

  def to_bytes(self) -> bytes:
    """Export the secret key bytes"""
    return bytes(self._scalar)

  def wipe(self) -> None:
    """Overwrite the secret key in memory. The object is unusable afterwards."""
    self._sk[:] = bytes(len(self._sk))
    self._wiped = True

  def __enter__(self) -> Secret:
    return self

  def __exit__(self, *exc) -> None:
    self.wipe()

  def __repr__(self):
    if self.is_wiped: return "Secret[wiped]"
    return f"Secret[{self.public.to_bytes().hex()[:8]}]"

  def __eq__(self, other):
    if not isinstance(other, Secret): return NotImplemented
    # Wiped keys all hold zeroes, so they are only equal to themselves
    if self.is_wiped or other.is_wiped: return self is other
    return sodium.sodium_memcmp(bytes(self._sk), bytes(other._sk))

  def __hash__(self):
    # Hash by the public key so that secret bytes do not leak through hashing
    return hash(self._public)
