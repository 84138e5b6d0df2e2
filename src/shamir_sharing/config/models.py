import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..crypto.field import DEFAULT_PRIME, is_probable_prime
from ..errors import InvalidParameters

PRIME_ENV_VAR = "SHAMIR_PRIME"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_prime(value: Any) -> int:
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        try:
            prime = int(text, 0)
        except ValueError as exc:
            raise InvalidParameters(f"Prime '{value}' is not an integer") from exc
    elif isinstance(value, int) and not isinstance(value, bool):
        prime = value
    else:
        raise InvalidParameters(f"Prime must be an integer, got {value!r}")
    if prime <= 2 or not is_probable_prime(prime):
        raise InvalidParameters(f"Field modulus {prime} is not an odd prime")
    return prime


@dataclass
class SharingConfig:
    """
    Settings for a sharing session.

    Attributes:
        prime: Field modulus; secrets must be smaller than it.
        log_level: Level name passed to ``configure_logging``; unset falls
            back to the ``LOG_LEVEL`` environment variable.
        json_logs: Emit structured JSON log lines.
    """

    prime: int = DEFAULT_PRIME
    log_level: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SharingConfig":
        if not data:
            return cls()
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "prime":
                kwargs[key] = parse_prime(value)
            elif key == "log_level":
                level = str(value).upper()
                if level not in _LOG_LEVELS:
                    raise InvalidParameters(f"Unknown log level '{value}'")
                kwargs[key] = level
            elif key == "json_logs":
                if not isinstance(value, bool):
                    raise InvalidParameters(f"json_logs must be true or false, got {value!r}")
                kwargs[key] = value
            else:
                raise InvalidParameters(f"Unknown config key '{key}'")
        return cls(**kwargs)

    def apply_env(self) -> "SharingConfig":
        """Override the prime from the environment, if set."""
        env_value = os.getenv(PRIME_ENV_VAR)
        if env_value:
            self.prime = parse_prime(env_value)
        return self
