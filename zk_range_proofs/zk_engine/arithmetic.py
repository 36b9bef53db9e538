"""
Modular arithmetic primitives over arbitrary-precision integers.

All protocol values are plain Python ints; nothing here is ever routed
through floats or fixed-width types.

    mod_pow(base, exponent, modulus)   square-and-multiply exponentiation
    mod_inverse(a, m)                  extended Euclidean inverse
    is_probable_prime(n)               Miller-Rabin, used to vet parameters
"""

from typing import Optional

from .config import PRIMALITY_TEST_ROUNDS
from .security import RandomnessSource


def _require_int(value, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value)}")


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus by binary exponentiation.

    Args:
        base: Any integer (reduced mod modulus first)
        exponent: Non-negative exponent
        modulus: Modulus, must be >= 1

    Returns:
        Result in [0, modulus)

    Raises:
        TypeError: If an argument is not an int
        ValueError: If modulus < 1 or exponent < 0

    Example:
        >>> mod_pow(2, 10, 1000)
        24
    """
    _require_int(base, "base")
    _require_int(exponent, "exponent")
    _require_int(modulus, "modulus")

    if modulus < 1:
        raise ValueError(f"modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    if modulus == 1:
        return 0

    result = 1
    base = base % modulus

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus

    return result


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the multiplicative inverse of a mod m (extended Euclid).

    Args:
        a: Value to invert
        m: Modulus, must be >= 1

    Returns:
        x in [0, m) with a*x = 1 (mod m); 0 when m == 1

    Raises:
        TypeError: If an argument is not an int
        ValueError: If m < 1 or gcd(a, m) != 1
    """
    _require_int(a, "a")
    _require_int(m, "m")

    if m < 1:
        raise ValueError(f"modulus must be >= 1, got {m}")

    if m == 1:
        return 0

    old_r, r = a % m, m
    old_x, x = 1, 0

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x

    if old_r != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")

    return old_x % m


def is_probable_prime(
    n: int,
    rounds: int = PRIMALITY_TEST_ROUNDS,
    randomness_source: Optional[RandomnessSource] = None,
) -> bool:
    """
    Miller-Rabin probabilistic primality test with random bases.

    A composite passes with probability at most 4^-rounds.
    """
    _require_int(n, "n")

    if n < 2:
        return False

    for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37):
        if n == p:
            return True
        if n % p == 0:
            return False

    if randomness_source is None:
        randomness_source = RandomnessSource()

    # n - 1 = d * 2^s with d odd
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = 2 + randomness_source.get_random_scalar(n - 3)
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False

    return True
