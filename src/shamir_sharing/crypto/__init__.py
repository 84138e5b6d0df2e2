from .field import DEFAULT_PRIME
from .prg import PrgRandomSource, RandomSource, SystemRandomSource
from .shamir import Share, ShareSet, combine_shares, generate, reconstruct, split_secret

__all__ = [
    "DEFAULT_PRIME",
    "PrgRandomSource",
    "RandomSource",
    "SystemRandomSource",
    "Share",
    "ShareSet",
    "combine_shares",
    "generate",
    "reconstruct",
    "split_secret",
]
