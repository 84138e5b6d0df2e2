"""Command-line front end: split, combine, and the split-then-recover demo."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import SharingConfig, load_config, parse_prime
from .crypto import PrgRandomSource, RandomSource, Share, SystemRandomSource, generate, reconstruct
from .errors import MalformedInput, SecretSharingError
from .records import dump_records, format_share_token, load_records, parse_int, parse_share_token
from .utils import configure_logging, get_logger

logger = get_logger(__name__)


def _random_source(seed: Optional[str]) -> RandomSource:
    if seed is None:
        return SystemRandomSource()
    logger.warning("Using seeded randomness; shares are reproducible from the seed")
    return PrgRandomSource(seed.encode("utf-8"))


def _sample(shares: Sequence[Share], k: int, rng: RandomSource) -> List[Share]:
    """Pick ``k`` shares without replacement (partial Fisher-Yates)."""
    pool = list(shares)
    for i in range(k):
        j = i + rng.randbelow(len(pool) - i)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:k]


def _split_args(args: argparse.Namespace) -> tuple[int, int, int]:
    return (
        parse_int(args.secret, "secret"),
        parse_int(args.n, "share count"),
        parse_int(args.t, "threshold"),
    )


def cmd_demo(args: argparse.Namespace, config: SharingConfig) -> int:
    secret, n, t = _split_args(args)
    rng = _random_source(args.seed)
    print(f"Original Secret: {secret}")
    shares = generate(n, t, secret, prime=config.prime, rng=rng)
    print(f"Shares: {[share.as_point() for share in shares]}")
    subset = _sample(shares, t, rng)
    print(f"Reconstructed secret: {reconstruct(subset, prime=config.prime)}")
    return 0


def cmd_split(args: argparse.Namespace, config: SharingConfig) -> int:
    secret, n, t = _split_args(args)
    shares = generate(n, t, secret, prime=config.prime, rng=_random_source(args.seed))
    if args.json:
        print(json.dumps(dump_records(shares), indent=2))
    else:
        for share in shares:
            print(format_share_token(share))
    return 0


def cmd_combine(args: argparse.Namespace, config: SharingConfig) -> int:
    shares: List[Share] = []
    if args.from_json:
        try:
            shares.extend(load_records(json.loads(Path(args.from_json).read_text())))
        except json.JSONDecodeError as exc:
            raise MalformedInput(f"Share file {args.from_json} is not valid JSON: {exc}") from exc
    shares.extend(parse_share_token(token) for token in args.shares)
    threshold = parse_int(args.threshold, "threshold") if args.threshold is not None else None
    print(reconstruct(shares, prime=config.prime, threshold=threshold))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-sharing",
        description="Shamir threshold secret sharing over a prime field",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON or YAML config file")
    parser.add_argument("--prime", default=None, help="Field modulus (overrides config)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: config file, then LOG_LEVEL)")
    parser.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Split a secret and recover it from a random threshold subset")
    split = sub.add_parser("split", help="Split a secret into shares")
    for cmd in (demo, split):
        cmd.add_argument("secret", help="Integer secret")
        cmd.add_argument("n", help="Number of shares to produce")
        cmd.add_argument("t", help="Shares required to reconstruct")
        cmd.add_argument("--seed", default=None, help="Seed for reproducible shares (testing only)")
    demo.set_defaults(handler=cmd_demo)
    split.add_argument("--json", action="store_true", help="Print shares as JSON records")
    split.set_defaults(handler=cmd_split)

    combine = sub.add_parser("combine", help="Reconstruct a secret from shares")
    combine.add_argument("shares", nargs="*", help="Shares as x:y")
    combine.add_argument("--from-json", default=None, help="Read share records written by 'split --json'")
    combine.add_argument("--threshold", default=None, help="Minimum shares required")
    combine.set_defaults(handler=cmd_combine)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config, path = load_config(args.config)
        if args.prime is not None:
            config.prime = parse_prime(args.prime)
    except SecretSharingError as exc:
        parser.error(str(exc))
    configure_logging(args.log_level or config.log_level, json_output=args.json_logs or config.json_logs)
    logger.debug("Loaded config from %s", path)
    try:
        return args.handler(args, config)
    except MalformedInput as exc:
        parser.error(str(exc))
    except SecretSharingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
