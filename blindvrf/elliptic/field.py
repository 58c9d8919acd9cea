from __future__ import annotations

from functools import cached_property
from typing import Tuple

# Field prime
p = 2**255 - 19

# Exponents for (p-1)/4 and (p-5)/8
p4 = (p - 1) // 4
p58 = (p - 5) // 8


class fe:
  """An element of the prime field modulo p = 2^255 - 19"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return self**-1

  # Ristretto and Ed25519 both call the odd field elements negative
  @cached_property
  def is_negative(self) -> bool: return bool(self.val & 1)

  @cached_property
  def is_zero(self) -> bool: return self.val == 0

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self


def sqrt_ratio_m1(u: fe, v: fe) -> Tuple[bool, fe]:
  """
  Square root of u/v, or of sqrtm1 * u/v when u/v is not a square.

  The root returned is always the non-negative one.

  :returns: (was_square, root)
  """
  v3 = v.sq * v
  v7 = v3.sq * v
  r = u * v3 * (u * v7)**p58
  check = v * r.sq
  correct_sign = check == u
  flipped_sign = check == -u
  flipped_sign_i = check == -u * sqrtm1
  if flipped_sign or flipped_sign_i: r *= sqrtm1
  return correct_sign or flipped_sign, abs(r)


zero, one, two, minus1 = fe(0), fe(1), fe(2), fe(-1)

# Square root of -1, the even one of the two
sqrtm1 = abs(two**p4)
assert sqrtm1 * sqrtm1 == minus1


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
