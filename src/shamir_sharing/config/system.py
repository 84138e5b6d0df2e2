"""Locating and loading the sharing configuration file."""

import json
import os
from pathlib import Path
from typing import Optional, Tuple

import yaml

from ..errors import InvalidParameters
from .models import SharingConfig

CONFIG_FILENAME = "shamir-config.json"
CONFIG_ENV_VAR = "SHAMIR_CONFIG_PATH"


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    """
    Resolve the config file path.

    An explicit path wins, then the ``SHAMIR_CONFIG_PATH`` environment
    variable, then ``shamir-config.json`` in the working directory.
    """
    if explicit is not None:
        return Path(explicit).resolve()
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def load_config(explicit: Optional[Path] = None) -> Tuple[SharingConfig, Path]:
    """
    Load the sharing configuration; a missing file yields defaults.

    Returns:
        (config, resolved_path)

    Raises:
        InvalidParameters: if the file cannot be parsed or holds bad values.
    """
    path = resolve_config_path(explicit)
    if not path.exists():
        return SharingConfig().apply_env(), path
    text = path.read_text()
    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidParameters(f"Invalid config at {path}: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise InvalidParameters(f"Config at {path} must be a mapping")
    return SharingConfig.from_mapping(data).apply_env(), path
