class DecodeError(ValueError):
  """Bytes are not the canonical encoding of a scalar or a group element"""

class HashSuiteError(ValueError):
  """Hash function output size does not fit its role"""
