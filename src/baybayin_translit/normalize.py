"""
Canonicalize Latin-script Tagalog words before Baybayin mapping.

The Baybayin table only knows a small letter inventory (a e i o u and
b k d g h l m n ng p r s t w y). Spanish and English spellings are folded
onto that inventory here, and consonant clusters the script cannot write
are broken up with an inserted a.

Usage:
    from baybayin_translit.normalize import normalize_word

    normalize_word("Pilipinas")      # "pilipinas"
    normalize_word("Jesucristo")     # "hesukristo"
"""

from __future__ import annotations

import re
import unicodedata


# ── Stage 1: stress accents ─────────────────────────────────────────
# Only the generic combining block. Baybayin signs (U+1712-U+1714) are
# combining marks too and must survive.
_COMBINING_RE = re.compile("[\u0300-\u036f]")

# ── Stage 2: quotes and elided ay ───────────────────────────────────
_ELIDED_AY_RE = re.compile(r"\b(\w+)['\u2018\u2019]y\b", re.IGNORECASE)
_QUOTES_RE = re.compile(r"['\u2018\u2019]")

# ── Stage 3: letter folding, applied top to bottom ──────────────────
# Each rule sees the output of the previous one.
LETTER_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), replacement)
    for pattern, replacement in (
        ("z", "s"),
        ("ñ", "ny"),
        ("ll", "ly"),
        ("ch", "ts"),
        ("sh", "sy"),
        ("j", "h"),
        ("c(?=[eiy])", "s"),
        ("c", "k"),
        ("x", "ks"),
        ("v", "b"),
        ("q", "k"),
        ("f", "p"),
        ("th", "t"),
        ("ph", "p"),
        # cluster breaking
        ("tr", "tar"),
        ("dr", "dar"),
        ("br", "bar"),
        ("gr", "gar"),
        ("cr", "kar"),
        ("fr", "par"),
        ("pr", "par"),
        ("pl", "pal"),
        ("gl", "gal"),
        ("cl", "kal"),
        ("bl", "bal"),
        ("sl", "sal"),
        ("fl", "pal"),
    )
)


def strip_accents(text: str) -> str:
    """Decompose and drop combining accents (á -> a, ñ -> n)."""
    return _COMBINING_RE.sub("", unicodedata.normalize("NFD", text))


def expand_quotes(text: str) -> str:
    """Split elided ``'y`` into a following ``ay`` and drop other quotes."""
    return _QUOTES_RE.sub("", _ELIDED_AY_RE.sub(r"\1 ay", text))


def fold_letters(text: str) -> str:
    for pattern, replacement in LETTER_RULES:
        text = pattern.sub(replacement, text)
    return text


def normalize_word(word: str) -> str:
    """Canonicalize a raw word token to the supported letter inventory.

    Total over all input: characters the rules do not know are left as
    they are for the encoder to pass through.
    """
    if not word:
        return ""
    return fold_letters(expand_quotes(strip_accents(word.lower())))
