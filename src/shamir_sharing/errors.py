"""Exception hierarchy for secret sharing failures."""


class SecretSharingError(ValueError):
    """Base class for all sharing errors."""


class InvalidParameters(SecretSharingError):
    """Share count, threshold, secret or field modulus is out of range."""


class InsufficientShares(SecretSharingError):
    """Fewer shares were supplied than reconstruction requires."""


class DuplicateXCoordinate(SecretSharingError):
    """Two shares offered for reconstruction carry the same x value."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate share x-coordinate {x}")
        self.x = x


class MalformedInput(SecretSharingError):
    """A user-supplied value could not be parsed."""
