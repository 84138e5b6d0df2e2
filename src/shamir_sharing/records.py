"""Serialisable share records for the command line."""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ValidationError

from .crypto.shamir import Share
from .errors import MalformedInput


class ShareRecord(BaseModel):
    """JSON form of a share together with its sharing metadata."""

    x: int
    y: int
    threshold: Optional[int] = None
    sharing_id: Optional[str] = None

    @classmethod
    def from_share(cls, share: Share) -> "ShareRecord":
        return cls(x=share.x, y=share.y, threshold=share.threshold, sharing_id=share.sharing_id)

    def to_share(self) -> Share:
        return Share(x=self.x, y=self.y, threshold=self.threshold, sharing_id=self.sharing_id)


def parse_int(text: str, name: str = "value") -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise MalformedInput(f"{name} must be an integer, got '{text}'") from exc


def parse_share_token(token: str) -> Share:
    """Parse an ``x:y`` token."""
    x_text, sep, y_text = token.partition(":")
    if not sep:
        raise MalformedInput(f"Share '{token}' is not of the form x:y")
    return Share(parse_int(x_text, "share x"), parse_int(y_text, "share y"))


def format_share_token(share: Share) -> str:
    return f"{share.x}:{share.y}"


def load_records(items: Any) -> List[Share]:
    """Validate a decoded JSON list of share records."""
    if not isinstance(items, list):
        raise MalformedInput("Share file must contain a JSON list")
    try:
        return [ShareRecord.model_validate(item).to_share() for item in items]
    except ValidationError as exc:
        raise MalformedInput(f"Invalid share record: {exc}") from exc


def dump_records(shares: Iterable[Share]) -> List[dict]:
    return [ShareRecord.from_share(share).model_dump() for share in shares]
