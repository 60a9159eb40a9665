"""Textual integration for key map lookups."""

from .controller import TextualKeymapAdapter, TextualKeymapHooks
from .keys import key_from_event, key_from_textual

__all__ = [
    "TextualKeymapAdapter",
    "TextualKeymapHooks",
    "key_from_event",
    "key_from_textual",
]
