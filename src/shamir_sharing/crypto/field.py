"""Arithmetic over the prime field GF(p)."""

from typing import Sequence

# Mersenne prime; wide enough for 64-byte secrets.
DEFAULT_PRIME = 2**521 - 1

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def reduce(value: int, prime: int = DEFAULT_PRIME) -> int:
    return value % prime


def add(a: int, b: int, prime: int = DEFAULT_PRIME) -> int:
    return (a + b) % prime


def sub(a: int, b: int, prime: int = DEFAULT_PRIME) -> int:
    return (a - b) % prime


def mul(a: int, b: int, prime: int = DEFAULT_PRIME) -> int:
    return (a * b) % prime


def inv(a: int, prime: int = DEFAULT_PRIME) -> int:
    """
    Multiplicative inverse of ``a`` modulo ``prime``.

    Raises ZeroDivisionError when ``a`` is congruent to zero.
    """
    a %= prime
    if a == 0:
        raise ZeroDivisionError("0 has no inverse in a prime field")
    return pow(a, -1, prime)


def eval_polynomial(coeffs: Sequence[int], x: int, prime: int = DEFAULT_PRIME) -> int:
    """Evaluate ``coeffs[0] + coeffs[1]*x + ...`` at ``x`` using Horner's rule."""
    acc = 0
    for coeff in reversed(coeffs):
        acc = (acc * x + coeff) % prime
    return acc


def is_probable_prime(candidate: int) -> bool:
    """Miller-Rabin with fixed bases; deterministic below 3.3e24."""
    if candidate < 2:
        return False
    for small in _WITNESSES:
        if candidate % small == 0:
            return candidate == small
    d = candidate - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for a in _WITNESSES:
        x = pow(a, d, candidate)
        if x in (1, candidate - 1):
            continue
        for _ in range(r - 1):
            x = pow(x, 2, candidate)
            if x == candidate - 1:
                break
        else:
            return False
    return True
