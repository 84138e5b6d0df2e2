import json
from pathlib import Path

import pytest

from shamir_sharing.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    PRIME_ENV_VAR,
    SharingConfig,
    load_config,
    parse_prime,
    resolve_config_path,
)
from shamir_sharing.crypto import DEFAULT_PRIME
from shamir_sharing.errors import InvalidParameters


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(PRIME_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_and_mapping() -> None:
    assert SharingConfig.from_mapping(None).prime == DEFAULT_PRIME
    cfg = SharingConfig.from_mapping({"prime": 2**127 - 1, "log_level": "debug", "json_logs": True})
    assert cfg.prime == 2**127 - 1
    assert cfg.log_level == "DEBUG"
    assert cfg.json_logs is True


@pytest.mark.parametrize(
    "data",
    [{"prime": 15}, {"prime": 2}, {"prime": "abc"}, {"prime": True}, {"log_level": "loud"}, {"colour": "red"}],
)
def test_invalid_mappings_rejected(data: dict) -> None:
    with pytest.raises(InvalidParameters):
        SharingConfig.from_mapping(data)


def test_parse_prime_accepts_strings() -> None:
    assert parse_prime("7919") == 7919
    assert parse_prime("0x7FFFFFFF") == 2**31 - 1
    assert parse_prime("2_147_483_647") == 2**31 - 1


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    cfg, path = load_config()
    assert path == (tmp_path / CONFIG_FILENAME).resolve()
    assert cfg == SharingConfig()


def test_json_file_and_env_prime(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"prime": 7919, "log_level": "INFO"}))
    cfg, _ = load_config()
    assert cfg.prime == 7919
    assert cfg.log_level == "INFO"
    monkeypatch.setenv(PRIME_ENV_VAR, "257")
    cfg, _ = load_config()
    assert cfg.prime == 257


def test_yaml_file_via_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "conf" / "sharing.yaml"
    path.parent.mkdir()
    path.write_text("prime: 170141183460469231731687303715884105727\njson_logs: true\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, "conf/sharing.yaml")
    assert resolve_config_path() == path.resolve()
    cfg, resolved = load_config()
    assert resolved == path.resolve()
    assert cfg.prime == 2**127 - 1
    assert cfg.json_logs is True


def test_explicit_path_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, "elsewhere.json")
    explicit = tmp_path / "mine.json"
    assert resolve_config_path(explicit) == explicit.resolve()


def test_invalid_file_contents(tmp_path: Path) -> None:
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json")
    with pytest.raises(InvalidParameters):
        load_config(bad_json)
    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- 1\n- 2\n")
    with pytest.raises(InvalidParameters):
        load_config(not_mapping)


@pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
def test_json_logs_requires_boolean(value: object) -> None:
    with pytest.raises(InvalidParameters):
        SharingConfig.from_mapping({"json_logs": value})


def test_log_level_unset_by_default() -> None:
    assert SharingConfig().log_level is None
    assert SharingConfig.from_mapping({"json_logs": False}).json_logs is False
