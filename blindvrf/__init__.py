from .exceptions import DecodeError, HashSuiteError
from .hashes import DEFAULT_SUITE, HashSuite
from .keys import Public, Secret
from .vrf import PROOF_SIZE, Proof, beta, sign, verify
