"""Translate Textual key events into key map keys."""

from __future__ import annotations

from typing import Mapping, Optional

from textual import events

from modal_keymap.input import Key, KeyKind

TEXTUAL_NAMED_KEYS: Mapping[str, Key] = {
    "backspace": Key.named(KeyKind.BACKSPACE),
    "left": Key.named(KeyKind.LEFT),
    "right": Key.named(KeyKind.RIGHT),
    "up": Key.named(KeyKind.UP),
    "down": Key.named(KeyKind.DOWN),
    "home": Key.named(KeyKind.HOME),
    "end": Key.named(KeyKind.END),
    "pageup": Key.named(KeyKind.PAGE_UP),
    "pagedown": Key.named(KeyKind.PAGE_DOWN),
    "delete": Key.named(KeyKind.DELETE),
    "insert": Key.named(KeyKind.INSERT),
    "escape": Key.named(KeyKind.ESCAPE),
    "tab": Key.named(KeyKind.TAB),
    "enter": Key.named(KeyKind.ENTER),
    "space": Key.character(" "),
}


def key_from_textual(key: str, character: Optional[str] = None) -> Optional[Key]:
    """Map a Textual key name (plus its printable character) to a ``Key``.

    Only ``ctrl`` combinations are representable; other modifier combos and
    non-printable keys without a named equivalent return ``None``.
    """

    named = TEXTUAL_NAMED_KEYS.get(key)
    if named is not None:
        return named

    modifier, separator, base = key.rpartition("+")
    if separator:
        if modifier == "ctrl" and len(base) == 1:
            return Key.ctrl(base)
        return None

    if character is not None and len(character) == 1 and character.isprintable():
        return Key.character(character)
    return None


def key_from_event(event: events.Key) -> Optional[Key]:
    return key_from_textual(event.key, event.character)


__all__ = ["TEXTUAL_NAMED_KEYS", "key_from_event", "key_from_textual"]
