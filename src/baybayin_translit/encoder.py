"""
Latin-to-Baybayin encoding.

Usage:
    from baybayin_translit.encoder import encode, Mode

    encode("mahal kita")                   # Krus-Kudlit
    encode("mahal kita", Mode.PAMUDPOD)    # same glyphs, Pamudpod marks
"""

from __future__ import annotations

import re

from baybayin_translit.mapping import (
    BLOCK_END,
    BLOCK_START,
    EXCEPTIONS,
    KRUS_KUDLIT,
    MAPPING_DICT,
    MAX_UNIT_LENGTH,
    PAMUDPOD,
    PUNCTUATION,
    Mode,
)
from baybayin_translit.normalize import normalize_word


# Only ASCII whitespace separates words; NBSP and friends stay in the token.
_WORD_SPLIT_RE = re.compile(r"[ \t\n\r\f\v]+")

# Hyphens between two Baybayin characters (reduplication: ulit-ulit).
_INNER_HYPHEN_RE = re.compile(f"(?<=[{BLOCK_START}-{BLOCK_END}])-+(?=[{BLOCK_START}-{BLOCK_END}])")


def clean_hyphens(word: str) -> str:
    """Join hyphenated Baybayin runs; hyphens next to Latin fallbacks stay."""
    return _INNER_HYPHEN_RE.sub("", word)


def _scan(word: str) -> str:
    """Greedy longest-match over a normalized word.

    Tries a 3-letter unit, then 2, then 1. Characters with no mapping
    are copied through unchanged.
    """
    out: list[str] = []
    i = 0
    n = len(word)
    while i < n:
        for size in range(MAX_UNIT_LENGTH, 0, -1):
            glyphs = MAPPING_DICT.get(word[i:i + size]) if i + size <= n else None
            if glyphs is not None:
                out.append(glyphs)
                i += size
                break
        else:
            out.append(word[i])
            i += 1
    return "".join(out)


def encode_word(token: str) -> str:
    """Encode one lowercased whitespace-free token."""
    if token in PUNCTUATION:
        return PUNCTUATION[token]
    if token in EXCEPTIONS:
        return EXCEPTIONS[token]
    return clean_hyphens(_scan(normalize_word(token)))


def to_krus_kudlit(text: str) -> str:
    """Convert Latin text to Baybayin with Krus-Kudlit dead consonants.

    Whitespace runs between words collapse to a single space; leading or
    trailing whitespace leaves one space at that end.
    """
    if not text:
        return ""
    tokens = _WORD_SPLIT_RE.split(str(text).lower())
    return " ".join(encode_word(tok) for tok in tokens)


def to_pamudpod(text: str) -> str:
    """Convert Latin text to Baybayin with Pamudpod dead consonants."""
    return to_krus_kudlit(text).replace(KRUS_KUDLIT, PAMUDPOD)


def encode(text: str, mode: Mode | str = Mode.KRUS_KUDLIT) -> str:
    """Convert Latin text to Baybayin in the given mode.

    Any mode value that is not Pamudpod selects Krus-Kudlit.
    """
    if Mode.coerce(mode) is Mode.PAMUDPOD:
        return to_pamudpod(text)
    return to_krus_kudlit(text)


def convert_mode(text: str, mode: Mode | str) -> str:
    """Rewrite dead-consonant marks already in Baybayin text to ``mode``."""
    if not text:
        return ""
    mode = Mode.coerce(mode)
    other = KRUS_KUDLIT if mode is Mode.PAMUDPOD else PAMUDPOD
    return text.replace(other, mode.killer)
