"""
Baybayin-to-Latin reverse index.

The forward table maps several Latin units onto one glyph (e/i, o/u), so
the reverse map keeps the first unit declared in ``MAPPING`` for each
glyph. Dead consonants are indexed under both the Krus-Kudlit and the
Pamudpod mark so decoding does not care which style produced the text.

The index is built on first use and kept for the life of the process.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from baybayin_translit.mapping import KRUS_KUDLIT, MAPPING, PAMUDPOD, GlyphRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReverseIndex:
    """Glyph sequence -> Latin unit, plus keys ordered longest first."""
    glyphs: Mapping[str, str]
    keys: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self.glyphs


def build_reverse_index() -> ReverseIndex:
    """Compute a fresh reverse index from the mapping table."""
    rev: dict[str, str] = {}
    for row in MAPPING:
        if row.role is GlyphRole.PUNCTUATION:
            continue
        rev.setdefault(row.glyphs, row.latin)

    for glyph, latin in list(rev.items()):
        if glyph.endswith(KRUS_KUDLIT):
            rev.setdefault(glyph[: -len(KRUS_KUDLIT)] + PAMUDPOD, latin)

    # sorted() is stable: equal lengths keep table order
    keys = tuple(sorted(rev, key=len, reverse=True))
    return ReverseIndex(glyphs=MappingProxyType(rev), keys=keys)


# ── Process-wide cache ──────────────────────────────────────────────

_REVERSE_INDEX: ReverseIndex | None = None
_REVERSE_LOCK = threading.Lock()


def get_reverse_index() -> ReverseIndex:
    """Return the memoized reverse index, building it on the first call."""
    global _REVERSE_INDEX
    index = _REVERSE_INDEX
    if index is not None:
        return index
    with _REVERSE_LOCK:
        if _REVERSE_INDEX is None:
            built = build_reverse_index()
            logger.debug("Built Baybayin reverse index: %d glyphs", len(built))
            _REVERSE_INDEX = built
        return _REVERSE_INDEX
