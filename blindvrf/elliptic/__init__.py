# A plain Python submodule for Ed25519 and Ristretto255 group arithmetic

# Field and point math in Python big integers, used on public values only.
# Scalar arithmetic and scalar multiplication of group elements run in
# libsodium.

# Lower case constants are field elements or integers, upper case are points.

from .ed import EdPoint
from .field import fe, minus1, one, p, sqrt_ratio_m1, sqrtm1, zero
from .ristretto import G, ZERO, RistrettoPoint
from .scalar import RandomSource, Scalar, q
from .util import tobytes, toint
