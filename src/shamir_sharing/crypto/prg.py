"""Randomness sources consumed by the share generator."""

import secrets
from typing import Protocol

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF


def _derive_key_iv(seed: bytes) -> tuple[bytes, bytes]:
    hkdf = HKDF(algorithm=hashes.SHA256(), length=48, salt=None, info=b"shamir-sharing/prg")
    material = hkdf.derive(seed)
    return material[:32], material[32:]


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Return a uniform integer in [0, upper)."""
        ...


class SystemRandomSource:
    """Operating-system CSPRNG via the ``secrets`` module."""

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper bound must be positive")
        return secrets.randbelow(upper)


class PrgRandomSource:
    """
    Seeded source reading an AES-CTR keystream.

    The stream continues across calls, so two sources built from the same seed
    yield the same sequence of draws. Values are made uniform by rejection
    sampling on the bit length of the bound.
    """

    def __init__(self, seed: bytes) -> None:
        key, iv = _derive_key_iv(seed)
        self._encryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()

    def _next_bytes(self, length: int) -> bytes:
        return self._encryptor.update(b"\x00" * length)

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper bound must be positive")
        bits = upper.bit_length()
        width = (bits + 7) // 8
        excess = width * 8 - bits
        while True:
            candidate = int.from_bytes(self._next_bytes(width), byteorder="big") >> excess
            if candidate < upper:
                return candidate


def default_random_source() -> RandomSource:
    return SystemRandomSource()
