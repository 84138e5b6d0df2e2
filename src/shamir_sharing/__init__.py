"""
Threshold secret sharing: split an integer secret into shares and recover it
from any threshold-sized subset.

Packages:
- crypto: field arithmetic, randomness sources, share generation and reconstruction
- config: sharing configuration loading
- utils: logging helpers
"""

from .crypto import Share, ShareSet, generate, reconstruct
from .errors import (
    DuplicateXCoordinate,
    InsufficientShares,
    InvalidParameters,
    MalformedInput,
    SecretSharingError,
)

__all__ = [
    "Share",
    "ShareSet",
    "generate",
    "reconstruct",
    "DuplicateXCoordinate",
    "InsufficientShares",
    "InvalidParameters",
    "MalformedInput",
    "SecretSharingError",
]
