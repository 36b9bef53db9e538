"""
⚠️ DRAFT - requires crypto review before production use

Security utilities for cryptographic operations.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.
"""

import os
import hmac
import secrets
from typing import Union

from .config import RANDOMNESS_BITS
from .exceptions import RandomnessError


# ============================================================================
# RANDOMNESS SOURCE (Fork-Safe)
# ============================================================================


class RandomnessSource:
    """
    Cryptographically secure randomness with fork detection.

    Backed by the OS CSPRNG through ``secrets``. There is no fallback: if
    the OS source is unavailable every draw raises RandomnessError.

    Example:
        >>> rng = RandomnessSource()
        >>> blinding = rng.get_random_bits()
        >>> # After fork, RNG automatically reinitializes
    """

    def __init__(self):
        """Initialize randomness source with fork detection."""
        self._pid = os.getpid()
        self._rng = secrets.SystemRandom()

    def _check_fork(self) -> None:
        if os.getpid() != self._pid:
            self.__init__()

    def get_random_scalar(self, max_value: int) -> int:
        """
        Get random scalar in [0, max_value).

        Args:
            max_value: Upper bound (exclusive, must be > 0)

        Returns:
            Random scalar in [0, max_value)

        Raises:
            ValueError: If max_value <= 0
            RandomnessError: If the OS randomness source is unavailable
        """
        if max_value <= 0:
            raise ValueError(f"max_value must be > 0, got {max_value}")
        self._check_fork()
        try:
            return self._rng.randrange(0, max_value)
        except NotImplementedError as e:
            raise RandomnessError("No secure randomness source available") from e

    def get_random_bits(self, bits: int = RANDOMNESS_BITS) -> int:
        """
        Get a uniformly random non-negative integer of at most `bits` bits.

        Args:
            bits: Entropy in bits (defaults to RANDOMNESS_BITS)

        Returns:
            Random integer in [0, 2^bits)

        Raises:
            RandomnessError: If the OS randomness source is unavailable
        """
        if bits <= 0:
            raise ValueError(f"bits must be > 0, got {bits}")
        self._check_fork()
        try:
            return self._rng.getrandbits(bits)
        except NotImplementedError as e:
            raise RandomnessError("No secure randomness source available") from e

    def get_random_bytes(self, n: int) -> bytes:
        """Get n cryptographically secure random bytes."""
        self._check_fork()
        try:
            return secrets.token_bytes(n)
        except NotImplementedError as e:
            raise RandomnessError("No secure randomness source available") from e


# ============================================================================
# CONSTANT-TIME OPERATIONS
# ============================================================================


def constant_time_compare(a: Union[bytes, str], b: Union[bytes, str]) -> bool:
    """
    Constant-time comparison to prevent timing attacks.

    Strings are compared as UTF-8 bytes so hex digests with non-ASCII
    garbage in them compare unequal instead of raising.

    Args:
        a: First value
        b: Second value

    Returns:
        True if a == b, False otherwise
    """
    if isinstance(a, str):
        a = a.encode("utf-8")
    if isinstance(b, str):
        b = b.encode("utf-8")
    return hmac.compare_digest(a, b)
