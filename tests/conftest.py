"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from baybayin_translit import reverse


@pytest.fixture
def fresh_reverse_index(monkeypatch):
    """Drop the memoized reverse index for the duration of a test."""
    monkeypatch.setattr(reverse, "_REVERSE_INDEX", None)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path):
    """Write a baybayin.toml into tmp_path and return its path."""

    def _write(body: str, name: str = "baybayin.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p

    return _write
