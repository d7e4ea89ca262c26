"""baybayin-translit: Tagalog Latin <-> Baybayin transliteration."""

from baybayin_translit.mapping import Mode, MappingEntry, GlyphRole
from baybayin_translit.normalize import normalize_word
from baybayin_translit.encoder import encode, to_krus_kudlit, to_pamudpod, convert_mode
from baybayin_translit.reverse import ReverseIndex, get_reverse_index
from baybayin_translit.decoder import decode
from baybayin_translit.config import Settings

__all__ = [
    "Mode", "MappingEntry", "GlyphRole",
    "normalize_word",
    "encode", "to_krus_kudlit", "to_pamudpod", "convert_mode",
    "ReverseIndex", "get_reverse_index",
    "decode",
    "Settings",
]
