"""
Plain-text export of a transliteration.

The export holds both panels under their titles plus the mode used:

    Tagalog:
    mahal kita

    Krus-Kudlit:
    ᜋᜑᜎ᜔ ᜃᜒᜆ

    Mode: Krus-Kudlit
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from baybayin_translit.mapping import Mode

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r?\n")


def normalize_newlines(content: object) -> str:
    """Stringify ``content`` and convert CRLF line endings to LF."""
    return _NEWLINE_RE.sub("\n", str(content))


def timestamp_name(prefix: str = "bybyn", ext: str = "txt", when: datetime | None = None) -> str:
    """Timestamped export file name, e.g. ``bybyn-20250818-1225.txt``."""
    when = when or datetime.now()
    return f"{prefix}-{when:%Y%m%d-%H%M}.{ext}"


def build_export_text(
    source: str,
    output: str,
    mode: Mode | str = Mode.KRUS_KUDLIT,
    source_title: str = "Tagalog",
    output_title: str | None = None,
) -> str:
    mode = Mode.coerce(mode)
    left = (source_title or "Tagalog").strip()
    right = (output_title or mode.label).strip()
    return (
        f"{left}:\n{(source or '').strip()}\n\n"
        f"{right}:\n{(output or '').strip()}\n\n"
        f"Mode: {mode.label}\n"
    )


def write_export(
    content: str,
    path: str | Path,
    prefix: str = "bybyn",
    directory: bool = False,
) -> Path:
    """Write ``content`` as UTF-8 with LF line endings.

    If ``path`` is an existing directory, or ``directory`` is set, a
    timestamped file name is generated inside it (the directory is
    created if needed). Returns the path written.
    """
    path = Path(path)
    if directory or path.is_dir():
        path = path / timestamp_name(prefix)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(normalize_newlines(content))
    logger.info("Wrote export to %s", path)
    return path
