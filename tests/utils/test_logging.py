import json
import logging
from pathlib import Path

from shamir_sharing.utils import JsonFormatter, configure_logging, get_logger


def test_configure_logging_json_and_file(tmp_path: Path) -> None:
    log_file = tmp_path / "sharing.log"
    configure_logging(level="debug", json_output=True, log_file=str(log_file))
    root = logging.getLogger()
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
        get_logger("shamir_sharing.test").info("hello %s", "world")
        for handler in root.handlers:
            handler.flush()
        line = log_file.read_text().strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "hello world"
        assert record["level"] == "INFO"
        assert record["name"] == "shamir_sharing.test"
    finally:
        configure_logging(level="WARNING")


def test_level_falls_back_to_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configure_logging()
    assert logging.getLogger().level == logging.ERROR
    monkeypatch.delenv("LOG_LEVEL")
    configure_logging()
    assert logging.getLogger().level == logging.WARNING
