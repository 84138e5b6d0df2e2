"""
Shamir threshold secret sharing over GF(p).

``generate`` hides a secret as the constant term of a random polynomial of
degree ``t - 1`` and hands out ``n`` points on it. ``reconstruct`` recovers the
constant term from any ``t`` of those points by Lagrange interpolation at x=0.
"""

import uuid
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..errors import DuplicateXCoordinate, InsufficientShares, InvalidParameters
from ..utils.logging import get_logger
from .field import DEFAULT_PRIME, eval_polynomial, is_probable_prime
from .prg import RandomSource, default_random_source

logger = get_logger(__name__)

Point = Tuple[int, int]


@dataclass(frozen=True)
class Share:
    """
    One point ``(x, y)`` on the sharing polynomial.

    ``threshold`` and ``sharing_id`` are bookkeeping for the holder; they are
    not part of the cryptographic value.
    """

    x: int
    y: int
    threshold: Optional[int] = None
    sharing_id: Optional[str] = None

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def as_point(self) -> Point:
        return (self.x, self.y)


ShareLike = Union[Share, Sequence[int]]


@dataclass(frozen=True)
class ShareSet:
    """Shares gathered for a single reconstruction."""

    shares: Tuple[Share, ...]

    @classmethod
    def of(cls, shares: Iterable[ShareLike]) -> "ShareSet":
        return cls(tuple(_as_share(item) for item in shares))

    def __len__(self) -> int:
        return len(self.shares)

    def __iter__(self) -> Iterator[Share]:
        return iter(self.shares)

    @property
    def sharing_id(self) -> Optional[str]:
        ids = {share.sharing_id for share in self.shares if share.sharing_id is not None}
        if len(ids) > 1:
            raise InvalidParameters("Shares belong to different sharing instances")
        return next(iter(ids), None)

    @property
    def threshold(self) -> Optional[int]:
        thresholds = {share.threshold for share in self.shares if share.threshold is not None}
        if len(thresholds) > 1:
            raise InvalidParameters("Shares disagree on the reconstruction threshold")
        return next(iter(thresholds), None)

    def validate(self, prime: int = DEFAULT_PRIME, threshold: Optional[int] = None) -> None:
        """
        Check the set can be interpolated.

        Raises:
            InsufficientShares: empty set, or fewer shares than the threshold.
            DuplicateXCoordinate: two shares with the same x (mod prime).
            InvalidParameters: shares from different sharing instances, or
                non-integer coordinates.
        """
        if not self.shares:
            raise InsufficientShares("At least one share is required to reconstruct")
        instance = self.sharing_id
        recorded = self.threshold
        if threshold is not None and recorded is not None and threshold != recorded:
            raise InvalidParameters(
                f"Requested threshold {threshold} does not match shares' threshold {recorded}"
            )
        required = threshold if threshold is not None else recorded
        if required is not None and len(self.shares) < required:
            raise InsufficientShares(
                f"Need at least {required} shares to reconstruct, got {len(self.shares)}"
                + (f" (sharing {instance})" if instance else "")
            )
        seen = set()
        for share in self.shares:
            _check_coordinates(share.x, share.y)
            x = share.x % prime
            if x in seen:
                raise DuplicateXCoordinate(share.x)
            seen.add(x)

    def reconstruct(self, prime: int = DEFAULT_PRIME, threshold: Optional[int] = None) -> int:
        return reconstruct(self.shares, prime=prime, threshold=threshold)


def _as_share(item: ShareLike) -> Share:
    if isinstance(item, Share):
        return item
    try:
        x, y = item
    except (TypeError, ValueError) as exc:
        raise InvalidParameters(f"Share must be an (x, y) pair, got {item!r}") from exc
    _check_coordinates(x, y)
    return Share(x, y)


def _check_coordinates(x: object, y: object) -> None:
    for name, value in (("x", x), ("y", y)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidParameters(f"Share {name} must be an integer, got {value!r}")


@lru_cache(maxsize=32)
def _check_prime(prime: int) -> None:
    if prime <= 2 or not is_probable_prime(prime):
        raise InvalidParameters(f"Field modulus {prime} is not an odd prime")


def _distinct_points(n: int, prime: int, rng: RandomSource) -> List[int]:
    """Draw ``n`` distinct x-coordinates from [1, prime), redrawing repeats."""
    xs: List[int] = []
    seen = set()
    while len(xs) < n:
        x = 1 + rng.randbelow(prime - 1)
        if x in seen:
            continue
        seen.add(x)
        xs.append(x)
    return xs


def generate(
    n: int,
    t: int,
    secret: int,
    *,
    prime: int = DEFAULT_PRIME,
    rng: Optional[RandomSource] = None,
) -> List[Share]:
    """
    Split ``secret`` into ``n`` shares, any ``t`` of which reconstruct it.

    Coefficients are drawn from the whole field and every share gets a
    distinct, non-zero x-coordinate.

    Raises:
        InvalidParameters: if ``t`` is not in ``1..n``, ``n`` does not fit the
            field, ``secret`` is outside ``[0, prime)`` or ``prime`` is not prime.
    """
    _check_prime(prime)
    if n < 1:
        raise InvalidParameters(f"Share count must be at least 1, got {n}")
    if not (1 <= t <= n):
        raise InvalidParameters(f"Threshold must satisfy 1 <= t <= n, got t={t}, n={n}")
    if n > prime - 1:
        raise InvalidParameters(f"Field of size {prime} cannot hold {n} distinct shares")
    if not (0 <= secret < prime):
        raise InvalidParameters("Secret must lie in [0, prime)")
    rng = rng or default_random_source()

    coeffs = [secret] + [rng.randbelow(prime) for _ in range(t - 1)]
    sharing_id = uuid.uuid4().hex
    shares = [
        Share(x=x, y=eval_polynomial(coeffs, x, prime), threshold=t, sharing_id=sharing_id)
        for x in _distinct_points(n, prime, rng)
    ]
    logger.debug("Generated %d shares with threshold %d (sharing %s)", n, t, sharing_id)
    return shares


def reconstruct(
    shares: Iterable[ShareLike],
    *,
    prime: int = DEFAULT_PRIME,
    threshold: Optional[int] = None,
) -> int:
    """
    Recover the secret by Lagrange interpolation at x=0.

    ``threshold`` defaults to the one recorded on the shares, if any. With
    plain ``(x, y)`` pairs and no threshold the caller is responsible for
    supplying enough points: too few give a wrong value, not an error.
    """
    _check_prime(prime)
    share_set = shares if isinstance(shares, ShareSet) else ShareSet.of(shares)
    share_set.validate(prime, threshold)
    points = [share.as_point() for share in share_set]
    secret = 0
    for i, (xi, yi) in enumerate(points):
        numerator = 1
        denominator = 1
        for j, (xj, _) in enumerate(points):
            if j == i:
                continue
            numerator = (numerator * xj) % prime
            denominator = (denominator * (xj - xi)) % prime
        basis = numerator * pow(denominator, -1, prime)
        secret = (secret + yi * basis) % prime
    logger.debug("Reconstructed secret from %d shares", len(points))
    return secret


def _to_int(secret: Union[bytes, int], prime: int) -> int:
    if isinstance(secret, int):
        value = secret
    else:
        value = int.from_bytes(secret, byteorder="big")
    if value >= prime:
        raise InvalidParameters("Secret is too large for configured prime field")
    return value


def split_secret(
    secret: Union[bytes, int],
    n: int,
    t: int,
    *,
    prime: int = DEFAULT_PRIME,
    rng: Optional[RandomSource] = None,
) -> List[Share]:
    """Like :func:`generate`, but also accepts the secret as big-endian bytes."""
    return generate(n, t, _to_int(secret, prime), prime=prime, rng=rng)


def combine_shares(
    shares: Iterable[ShareLike],
    as_bytes_length: Optional[int] = None,
    *,
    prime: int = DEFAULT_PRIME,
    threshold: Optional[int] = None,
) -> Union[bytes, int]:
    """Reconstruct the secret, optionally rendering it as ``as_bytes_length`` bytes."""
    secret = reconstruct(shares, prime=prime, threshold=threshold)
    if as_bytes_length is None:
        return secret
    try:
        return secret.to_bytes(as_bytes_length, byteorder="big")
    except OverflowError as exc:
        raise InvalidParameters(
            f"Reconstructed secret does not fit in {as_bytes_length} bytes"
        ) from exc
