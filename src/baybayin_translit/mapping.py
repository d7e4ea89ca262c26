"""
Tagalog Latin-to-Baybayin mapping tables for baybayin_translit.

Principles:
- One canonical Latin unit (1-3 lowercase letters) per row, declared once
- Trigraphs and digraphs win over shorter units sharing a prefix
- e/i and o/u share a glyph; declaration order decides which spelling
  the reverse direction prefers (first declared wins)
- Dead consonants always carry the Krus-Kudlit virama; Pamudpod is a
  substitution applied to finished output, never a table row

Usage:
    from baybayin_translit.mapping import MAPPING, EXCEPTIONS, PUNCTUATION
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# Baybayin characters by Unicode codepoint (Tagalog block U+1700-U+171F).
_ = chr

VOWEL_A = _(0x1700)
VOWEL_I = _(0x1701)
VOWEL_U = _(0x1702)

KRUS_KUDLIT = _(0x1714)   # virama, cross-shaped
PAMUDPOD = _(0x1715)
KUDLIT_I = _(0x1712)      # top mark, i/e
KUDLIT_U = _(0x1713)      # bottom mark, o/u

# Tagalog block range; hyphens between two such characters are dropped.
BLOCK_START = _(0x1700)
BLOCK_END = _(0x1736)

INDEPENDENT_VOWELS = {VOWEL_A: "a", VOWEL_I: "i", VOWEL_U: "u"}


class GlyphRole(Enum):
    INDEPENDENT_VOWEL = "independent-vowel"
    BASE_CONSONANT = "base-consonant"
    DEAD_CONSONANT = "dead-consonant"
    ACCENTED_CONSONANT = "accented-consonant"
    PUNCTUATION = "punctuation"


class Mode(str, Enum):
    """Which character marks a dead (vowel-suppressed) consonant."""

    KRUS_KUDLIT = "krus-kudlit"
    PAMUDPOD = "pamudpod"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def killer(self) -> str:
        """The dead-consonant diacritic this mode writes."""
        return PAMUDPOD if self is Mode.PAMUDPOD else KRUS_KUDLIT

    @classmethod
    def coerce(cls, value: object) -> Mode:
        """Map any value onto a mode. Unrecognised values mean Krus-Kudlit."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            if key in _MODE_ALIASES:
                return _MODE_ALIASES[key]
        return cls.KRUS_KUDLIT


_MODE_LABELS = {Mode.KRUS_KUDLIT: "Krus-Kudlit", Mode.PAMUDPOD: "Pamudpod"}

_MODE_ALIASES = {
    "krus-kudlit": Mode.KRUS_KUDLIT,
    "kruskudlit": Mode.KRUS_KUDLIT,
    "pamudpod": Mode.PAMUDPOD,
    "pamupod": Mode.PAMUDPOD,   # spelling used by the original web app
}


@dataclass(frozen=True, slots=True)
class MappingEntry:
    """One row of the forward table: canonical Latin unit -> glyphs."""
    latin: str
    glyphs: str
    role: GlyphRole


# ── Consonant inventory ─────────────────────────────────────────────
# (latin stem, base glyph with inherent a, name)
# Order here fixes the order of every derived group below.

CONSONANTS = (
    ("b",  _(0x170A), "ba"),
    ("k",  _(0x1703), "ka"),
    ("d",  _(0x1707), "da - also ra in older orthography"),
    ("g",  _(0x1704), "ga"),
    ("h",  _(0x1711), "ha"),
    ("l",  _(0x170E), "la"),
    ("m",  _(0x170B), "ma"),
    ("n",  _(0x1708), "na"),
    ("p",  _(0x1709), "pa"),
    ("r",  _(0x170D), "ra - modern Unicode addition"),
    ("s",  _(0x1710), "sa"),
    ("t",  _(0x1706), "ta"),
    ("w",  _(0x170F), "wa"),
    ("y",  _(0x170C), "ya"),
    ("ng", _(0x1705), "nga - the only trigraph syllable"),
)

BASE = {stem: glyph for stem, glyph, _note in CONSONANTS}


def _build_mapping() -> tuple[MappingEntry, ...]:
    rows: list[MappingEntry] = []

    # Vowels: e collapses onto i, o onto u.
    for latin, glyph in (
        ("a", VOWEL_A), ("e", VOWEL_I), ("i", VOWEL_I), ("o", VOWEL_U), ("u", VOWEL_U),
    ):
        rows.append(MappingEntry(latin, glyph, GlyphRole.INDEPENDENT_VOWEL))

    for stem, glyph, _note in CONSONANTS:
        rows.append(MappingEntry(stem + "a", glyph, GlyphRole.BASE_CONSONANT))

    for stem, glyph, _note in CONSONANTS:
        rows.append(MappingEntry(stem, glyph + KRUS_KUDLIT, GlyphRole.DEAD_CONSONANT))

    # i is declared before e, o before u: decoding prefers Ci and Co.
    for stem, glyph, _note in CONSONANTS:
        rows.append(MappingEntry(stem + "i", glyph + KUDLIT_I, GlyphRole.ACCENTED_CONSONANT))
        rows.append(MappingEntry(stem + "e", glyph + KUDLIT_I, GlyphRole.ACCENTED_CONSONANT))

    for stem, glyph, _note in CONSONANTS:
        rows.append(MappingEntry(stem + "o", glyph + KUDLIT_U, GlyphRole.ACCENTED_CONSONANT))
        rows.append(MappingEntry(stem + "u", glyph + KUDLIT_U, GlyphRole.ACCENTED_CONSONANT))

    for symbol, replacement in PUNCTUATION.items():
        rows.append(MappingEntry(symbol, replacement, GlyphRole.PUNCTUATION))

    latins = [row.latin for row in rows]
    if len(latins) != len(set(latins)):
        raise RuntimeError("duplicate Latin unit in Baybayin mapping table")
    return tuple(rows)


# ── Punctuation ─────────────────────────────────────────────────────
# Rendered with the single and double danda look-alikes used in print.

PUNCTUATION = MappingProxyType({
    ".": " //",
    ",": " /",
})


# ── Core mapping table ──────────────────────────────────────────────

MAPPING = _build_mapping()

MAPPING_DICT = MappingProxyType({row.latin: row.glyphs for row in MAPPING})

MAX_UNIT_LENGTH = max(len(row.latin) for row in MAPPING)


# ── Whole-word exceptions ───────────────────────────────────────────
# Matched against the lowercased token before normalization.

EXCEPTIONS = MappingProxyType({
    "mga":  BASE["m"] + BASE["ng"],
    "ng":   BASE["ng"],
    "nang": BASE["ng"],
    "dyos": BASE["d"] + KRUS_KUDLIT + BASE["y"] + KUDLIT_U + BASE["s"] + KRUS_KUDLIT,
    "shi":  BASE["s"] + KUDLIT_I,
})


# ── Convenience accessors ───────────────────────────────────────────

def get_mapping_dict() -> dict[str, str]:
    """Return a mutable copy of latin unit -> glyphs, in declaration order."""
    return dict(MAPPING_DICT)


def get_sorted_keys() -> list[str]:
    """Return latin units sorted longest-first for greedy matching."""
    return sorted(MAPPING_DICT, key=len, reverse=True)


if __name__ == "__main__":
    print("=== Tagalog Baybayin Table ===\n")

    for latin in get_sorted_keys():
        print(f"  {latin:>4s} → {MAPPING_DICT[latin]}")

    print(f"\nTotal entries: {len(MAPPING)}")
    print(f"Exceptions: {', '.join(EXCEPTIONS)}")
