"""
TOML configuration for the baybayin CLI.

Example baybayin.toml:

    [transliteration]
    mode = "pamudpod"

    [export]
    prefix = "bybyn"
    dir = "exports"

    [logging]
    level = "INFO"
    format = "pretty"
    file = "logs/baybayin.jsonl"

Relative paths are resolved against the config file's directory.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from baybayin_translit.mapping import Mode

DEFAULT_CONFIG_NAME = "baybayin.toml"


@dataclass(slots=True)
class Settings:
    mode: Mode = Mode.KRUS_KUDLIT
    export_prefix: str = "bybyn"
    export_dir: Path = field(default_factory=Path)
    log_level: str = "INFO"
    log_format: str = "pretty"
    log_file: Path | None = None

    @classmethod
    def from_config(cls, config_path: str | Path = DEFAULT_CONFIG_NAME) -> Settings:
        """Build Settings from a TOML config file.

        Missing sections and keys keep their defaults. An unknown mode
        falls back to Krus-Kudlit.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent
        settings = cls()

        tr_cfg = cfg.get("transliteration", {})
        if "mode" in tr_cfg:
            settings.mode = Mode.coerce(tr_cfg["mode"])

        export_cfg = cfg.get("export", {})
        if export_cfg.get("prefix"):
            settings.export_prefix = str(export_cfg["prefix"])
        if export_cfg.get("dir"):
            settings.export_dir = _resolve(export_cfg["dir"], base_dir)

        log_cfg = cfg.get("logging", {})
        if log_cfg.get("level"):
            settings.log_level = str(log_cfg["level"]).upper()
        if log_cfg.get("format"):
            settings.log_format = str(log_cfg["format"])
        if log_cfg.get("file"):
            settings.log_file = _resolve(log_cfg["file"], base_dir)

        return settings


def find_default_config() -> Path | None:
    """Look for baybayin.toml in the current directory."""
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return candidate
    return None


def _resolve(raw: str, base_dir: Path) -> Path:
    p = Path(raw)
    return p if p.is_absolute() else base_dir / p
