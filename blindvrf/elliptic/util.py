def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != 32: raise ValueError("Should be exactly 32 bytes")
  return int.from_bytes(x, "little")

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")

def mask255(b) -> int:
  """The 32 bytes as an integer with the high bit cleared"""
  return toint(b) & (1 << 255) - 1
