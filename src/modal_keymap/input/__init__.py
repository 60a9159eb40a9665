"""Key events and key-token parsing."""

from .keys import ANY_CHAR, Key, KeyKind
from .parser import KEYWORDS, MODIFIERS, parse_key

__all__ = [
    "ANY_CHAR",
    "Key",
    "KeyKind",
    "KEYWORDS",
    "MODIFIERS",
    "parse_key",
]
