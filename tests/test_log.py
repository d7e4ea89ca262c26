"""Tests for logging setup (log.py)."""

import json
import logging

from baybayin_translit.log import JSONFormatter, PrettyFormatter, setup_logging


# ── Logging ───────────────────────────────────────────────────────────────────

def test_setup_logging_level_and_handlers():
    root = setup_logging(level="debug")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_setup_logging_unknown_level_is_info():
    root = setup_logging(level="chatty")
    assert root.level == logging.INFO


def test_setup_logging_file_is_json(tmp_path):
    log_file = tmp_path / "logs" / "run.jsonl"
    root = setup_logging(level="INFO", log_file=log_file)
    logging.getLogger("baybayin_translit.test").info("hello %s", "ᜊᜆ")
    for h in root.handlers:
        h.flush()
    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "hello ᜊᜆ"
    assert record["level"] == "INFO"
    assert record["logger"] == "baybayin_translit.test"
    for h in root.handlers:
        h.close()


def test_json_formatter_extra_fields():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.extra_fields = {"mode": "pamudpod"}
    data = json.loads(JSONFormatter().format(record))
    assert data["mode"] == "pamudpod"
    assert data["message"] == "msg"


def test_setup_logging_pretty_by_default():
    root = setup_logging()
    assert isinstance(root.handlers[0].formatter, PrettyFormatter)


def test_setup_logging_json_console():
    root = setup_logging(format_type="json")
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
