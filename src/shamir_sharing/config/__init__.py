from .models import PRIME_ENV_VAR, SharingConfig, parse_prime
from .system import CONFIG_ENV_VAR, CONFIG_FILENAME, load_config, resolve_config_path

__all__ = [
    "PRIME_ENV_VAR",
    "SharingConfig",
    "parse_prime",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "load_config",
    "resolve_config_path",
]
