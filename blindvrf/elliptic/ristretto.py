# Ristretto255 prime order group on top of the Ed25519 point arithmetic,
# with scalar multiplication done by libsodium
# https://www.rfc-editor.org/rfc/rfc9496

# A ristretto255 element is a coset of the 4-torsion on Ed25519: any EdPoint
# P + T with T of order dividing 4 stands for the same element. Equality and
# encoding are defined so that the choice of representative never shows, which
# is what gives a prime order group with canonical 32-byte encodings.

from __future__ import annotations

from typing import Union

import pysodium

from ..exceptions import DecodeError
from . import ed
from .ed import EdPoint, d
from .field import fe, minus1, one, p, sqrt_ratio_m1, sqrtm1, two
from .scalar import Scalar
from .util import mask255, toint

# Constants of the RFC. The sign matters only for SQRT_AD_MINUS_ONE, which
# is the odd (negative) root.
_is_square, _root = sqrt_ratio_m1(ed.a * d - one, one)
assert _is_square
SQRT_AD_MINUS_ONE = -_root
_, INVSQRT_A_MINUS_D = sqrt_ratio_m1(one, ed.a - d)
ONE_MINUS_D_SQ = one - d.sq
D_MINUS_ONE_SQ = (d - one).sq


class RistrettoPoint:
  """An element of the ristretto255 group"""
  __slots__ = ("_ed",)

  def __init__(self, ed: EdPoint):
    self._ed = ed

  @property
  def ed(self) -> EdPoint: return self._ed

  @staticmethod
  def from_bytes(b) -> RistrettoPoint:
    """
    Decompress a canonical 32-byte encoding.

    :raises DecodeError: if the bytes do not encode a group element
    """
    if len(b) != 32: raise DecodeError("Group element should be exactly 32 bytes")
    val = toint(bytes(b))
    # Non-canonical field values and negative field values are both rejected
    if val >= p or val & 1: raise DecodeError("Invalid encoding of a group element")
    s = fe(val)
    ss = s.sq
    u1 = one - ss
    u2 = one + ss
    u2_sqr = u2.sq
    v = -(d * u1.sq) - u2_sqr
    was_square, invsqrt = sqrt_ratio_m1(one, v * u2_sqr)
    den_x = invsqrt * u2
    den_y = invsqrt * den_x * v
    x = abs(two * s * den_x)
    y = u1 * den_y
    t = x * y
    if not was_square or t.is_negative or y.is_zero:
      raise DecodeError("Invalid encoding of a group element")
    return RistrettoPoint(EdPoint(x, y, one, t))

  @staticmethod
  def from_uniform_bytes(b) -> RistrettoPoint:
    """Map 64 uniformly random bytes to a group element. Never fails."""
    if len(b) != 64: raise ValueError("Should be exactly 64 bytes")
    b = bytes(b)
    P1 = elligator(fe(mask255(b[:32])))
    P2 = elligator(fe(mask255(b[32:])))
    return RistrettoPoint(P1 + P2)

  def compress(self) -> bytes:
    """The canonical 32-byte encoding"""
    P = self.ed
    u1 = (P.Z + P.Y) * (P.Z - P.Y)
    u2 = P.X * P.Y
    _, invsqrt = sqrt_ratio_m1(one, u1 * u2.sq)
    den1 = invsqrt * u1
    den2 = invsqrt * u2
    z_inv = den1 * den2 * P.T
    # Rotate to the coset representative with a non-negative x*y
    if (P.T * z_inv).is_negative:
      X, Y = P.Y * sqrtm1, P.X * sqrtm1
      den_inv = den1 * INVSQRT_A_MINUS_D
    else:
      X, Y = P.X, P.Y
      den_inv = den2
    if (X * z_inv).is_negative: Y = -Y
    s = abs(den_inv * (P.Z - Y))
    return bytes(s)

  def __bytes__(self): return self.compress()
  def __hash__(self): return hash(self.compress())
  def __repr__(self): return f"RistrettoPoint({self.compress().hex()})"

  def __eq__(self, othr):
    if not isinstance(othr, RistrettoPoint): return NotImplemented
    P, Q = self.ed, othr.ed
    return P.X * Q.Y == P.Y * Q.X or P.Y * Q.Y == P.X * Q.X

  def __add__(self, othr: RistrettoPoint) -> RistrettoPoint:
    if not isinstance(othr, RistrettoPoint): return NotImplemented
    return RistrettoPoint(self.ed + othr.ed)

  def __sub__(self, othr: RistrettoPoint) -> RistrettoPoint:
    if not isinstance(othr, RistrettoPoint): return NotImplemented
    return RistrettoPoint(self.ed - othr.ed)

  def __neg__(self) -> RistrettoPoint:
    return RistrettoPoint(-self.ed)

  def __mul__(self, s: Union[Scalar, int]) -> RistrettoPoint:
    """Multiply by a scalar (or an int, reduced mod q) in libsodium"""
    if isinstance(s, int): s = Scalar.from_int(s)
    if not isinstance(s, Scalar): return NotImplemented
    # libsodium refuses to return the identity, which only comes from these
    if s.is_zero or self == ZERO: return ZERO
    if self is G:
      b = pysodium.crypto_scalarmult_ristretto255_base(bytes(s))
    else:
      b = pysodium.crypto_scalarmult_ristretto255(bytes(s), self.compress())
    return RistrettoPoint.from_bytes(b)

  def __rmul__(self, s: Union[Scalar, int]) -> RistrettoPoint:
    return self * s


def elligator(t: fe) -> EdPoint:
  """The ristretto255 flavour of Elligator 2, a field element to a curve point"""
  r = sqrtm1 * t.sq
  u = (r + one) * ONE_MINUS_D_SQ
  v = (minus1 - r * d) * (r + d)
  was_square, s = sqrt_ratio_m1(u, v)
  if was_square:
    c = minus1
  else:
    s = -abs(s * t)
    c = r
  N = c * (r - one) * D_MINUS_ONE_SQ - v
  w0 = two * s * v
  w1 = N * SQRT_AD_MINUS_ONE
  w2 = one - s.sq
  w3 = one + s.sq
  return EdPoint(w0 * w3, w2 * w1, w1 * w3, w0 * w2)


# Identity element
ZERO = RistrettoPoint(ed.ZERO)

# Generator, the Ed25519 base point taken as a ristretto255 element
G = RistrettoPoint(ed.B)
