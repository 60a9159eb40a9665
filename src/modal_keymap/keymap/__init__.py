"""Mode binding tables and the bundled default keymap."""

from .document import load_default_document, load_document
from .keymap import KeyMap, KeyMapStats

__all__ = [
    "KeyMap",
    "KeyMapStats",
    "load_document",
    "load_default_document",
]
