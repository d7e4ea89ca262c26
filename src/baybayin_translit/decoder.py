"""
Baybayin-to-Latin decoding.

Decoding is lossy: the script writes e and i with one mark and o and u
with another, so ``decode(encode(s))`` only matches ``s`` up to that
merge. Unknown characters pass through.
"""

from __future__ import annotations

import re

from baybayin_translit.mapping import INDEPENDENT_VOWELS
from baybayin_translit.reverse import get_reverse_index

_WHITESPACE_RE = re.compile(r"\s+")
_NBSP = "\u00a0"


def decode(text: str) -> str:
    """Convert Baybayin text to an approximate Latin spelling.

    At each position the longest known glyph wins. Output whitespace is
    collapsed to single spaces and trimmed.
    """
    if not text:
        return ""
    index = get_reverse_index()
    s = str(text)
    out: list[str] = []
    i = 0
    n = len(s)

    while i < n:
        for glyph in index.keys:
            if s.startswith(glyph, i):
                out.append(index.glyphs[glyph])
                i += len(glyph)
                break
        else:
            ch = s[i]
            if ch in INDEPENDENT_VOWELS:
                out.append(INDEPENDENT_VOWELS[ch])
            else:
                out.append(" " if ch == _NBSP else ch)
            i += 1

    return _WHITESPACE_RE.sub(" ", "".join(out)).strip()
