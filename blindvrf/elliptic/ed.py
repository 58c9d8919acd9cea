from __future__ import annotations

from functools import cached_property
from typing import Optional

from .field import fe, minus1, one, sqrt_ratio_m1, two, zero
from .util import tobytes

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Ed25519 constants:
a, d = minus1, -fe(121665) / fe(121666)

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

# Plain Python, not constant time. Only additions live here, scalar
# multiplication of ristretto255 elements is done by libsodium.

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  def __repr__(self): return f"EdPoint({self.x!r}, {self.y!r})"
  def __bytes__(self): return tobytes(self.y.val + (self.x.is_negative << 255))

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  @cached_property
  def is_on_curve(self) -> bool:
    """Check the curve equation and the extended coordinate T"""
    X2, Y2, Z2 = self.X.sq, self.Y.sq, self.Z.sq
    return (
      not self.Z.is_zero and
      a * X2 * Z2 + Y2 * Z2 == Z2.sq + d * X2 * Y2 and
      self.X * self.Y == self.Z * self.T
    )

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    A = (self.Y - self.X) * (othr.Y - othr.X)
    B = (self.Y + self.X) * (othr.Y + othr.X)
    C = two * self.T * othr.T * d
    D = two * self.Z * othr.Z
    E, F, G, H = B - A, D - C, D + C, B + A
    return EdPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z, -self.T)

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )

  # Coordinates are projective so only the normalised y is usable as a hash
  def __hash__(self): return self.y.val

# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator), y = 4/5 and x non-negative
_By = fe(4) / fe(5)
_is_square, _Bx = sqrt_ratio_m1(_By.sq - one, d * _By.sq + one)
assert _is_square
B = EdPoint(_Bx, _By)
