"""Modal key bindings: parse keymap documents into mode/key/command tables."""

from .commands import CommandRef, CommandRegistry, default_registry
from .errors import KeymapError
from .input import Key, KeyKind, parse_key
from .keymap import KeyMap

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "Key",
    "KeyKind",
    "KeyMap",
    "KeymapError",
    "default_registry",
    "parse_key",
]

__version__ = "0.1.0"
