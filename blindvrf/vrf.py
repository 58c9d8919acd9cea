"""
Verifiable random function with blinded proofs over ristretto255.

A proof (gamma, c, s) shows that log_G(Y) == log_A(gamma) where Y is the
public key and A is alpha hashed to the group, the Chaum-Pedersen equality
of discrete logs made non-interactive by hashing (Fiat-Shamir).

The output beta is the hash of gamma = x * A and so depends only on the secret
key x and alpha. The proof is randomised by the nonce k, giving a different
96-byte proof every time even though beta is always the same.
"""
from __future__ import annotations

import logging
from secrets import token_bytes
from typing import Optional

import nacl.bindings as sodium

from .elliptic import G, RandomSource, RistrettoPoint, Scalar
from .exceptions import DecodeError
from .hashes import DEFAULT_SUITE, HashSuite
from .keys import Public, Secret

logger = logging.getLogger(__name__)

PROOF_SIZE = 96


class Proof:
  __slots__ = ("_gamma", "_c", "_s")

  def __init__(self, gamma: RistrettoPoint, c: Scalar, s: Scalar):
    self._gamma = gamma
    self._c = c
    self._s = s

  @property
  def gamma(self) -> RistrettoPoint: return self._gamma

  @property
  def c(self) -> Scalar: return self._c

  @property
  def s(self) -> Scalar: return self._s

  @classmethod
  def sign(cls, secret: Secret, alpha: bytes, rng: RandomSource = token_bytes, suite: HashSuite = DEFAULT_SUITE) -> Proof:
    """Evaluate the VRF on alpha and prove it. Draws one 32-byte nonce from rng."""
    alpha = bytes(alpha)
    x = secret._scalar
    A = suite.hash_to_group(alpha)
    gamma = x * A
    k = Scalar.random(rng)
    U = k * G
    V = k * A
    # The challenge is the 256-bit hash reduced mod q, no rejection sampling
    c = suite.challenge(alpha, secret.public.point, gamma, U, V)
    s = k - c * x
    return cls(gamma, c, s)

  def verify(self, public: Public, alpha: bytes, beta: bytes, suite: HashSuite = DEFAULT_SUITE) -> bool:
    """Check the proof against the public key and alpha, and that beta is its output."""
    alpha = bytes(alpha)
    A = suite.hash_to_group(alpha)
    U = self.c * public.point + self.s * G
    V = self.c * self.gamma + self.s * A
    c = suite.challenge(alpha, public.point, self.gamma, U, V)
    # Evaluate both in constant time and combine without short-circuit
    challenge_ok = sodium.sodium_memcmp(bytes(c), bytes(self.c))
    beta_ok = sodium.sodium_memcmp(bytes(beta), self.beta(suite))
    ok = challenge_ok & beta_ok
    if not ok:
      logger.debug("VRF proof rejected for %r", public)
    return ok

  def beta(self, suite: HashSuite = DEFAULT_SUITE) -> bytes:
    """
    The VRF output, a hash of gamma.

    Anyone can compute this from the proof alone. It only means something
    after verify() has accepted the proof for the expected key and alpha.
    """
    return suite.beta(self.gamma)

  def to_bytes(self) -> bytes:
    return bytes(self.gamma) + bytes(self.c) + bytes(self.s)

  @classmethod
  def from_bytes(cls, b) -> Optional[Proof]:
    """Decode a 96-byte proof, None if any of its three fields is invalid."""
    b = bytes(b)
    if len(b) != PROOF_SIZE:
      logger.debug("Rejected proof of %d bytes", len(b))
      return None
    try:
      gamma = RistrettoPoint.from_bytes(b[:32])
      c = Scalar.from_canonical(b[32:64])
      s = Scalar.from_canonical(b[64:])
    except DecodeError as e:
      logger.debug("Rejected proof: %s", e)
      return None
    return cls(gamma, c, s)

  def __bytes__(self): return self.to_bytes()
  def __hash__(self): return hash(self.to_bytes())
  def __repr__(self): return f"Proof[{bytes(self.gamma).hex()[:8]}:{bytes(self.c).hex()[:8]}]"

  def __eq__(self, other):
    if not isinstance(other, Proof): return NotImplemented
    return self.to_bytes() == other.to_bytes()


def sign(secret: Secret, alpha: bytes, rng: RandomSource = token_bytes, suite: HashSuite = DEFAULT_SUITE) -> Proof:
  return Proof.sign(secret, alpha, rng, suite)


def verify(public: Public, alpha: bytes, beta: bytes, proof: Proof, suite: HashSuite = DEFAULT_SUITE) -> bool:
  return proof.verify(public, alpha, beta, suite)


def beta(proof: Proof, suite: HashSuite = DEFAULT_SUITE) -> bytes:
  return proof.beta(suite)
