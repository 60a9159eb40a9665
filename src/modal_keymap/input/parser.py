"""Parse keymap key tokens (``k``, ``ctrl-r``, ``page_up``, ``_``) into keys."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from modal_keymap.errors import KeyParseError
from modal_keymap.runtime.telemetry import record_event

from .keys import ANY_CHAR, Key, KeyKind

MODIFIER_SEPARATOR = "-"

KEYWORDS: Mapping[str, Key] = MappingProxyType(
    {
        "space": Key.character(" "),
        "backspace": Key.named(KeyKind.BACKSPACE),
        "left": Key.named(KeyKind.LEFT),
        "right": Key.named(KeyKind.RIGHT),
        "up": Key.named(KeyKind.UP),
        "down": Key.named(KeyKind.DOWN),
        "home": Key.named(KeyKind.HOME),
        "end": Key.named(KeyKind.END),
        "page_up": Key.named(KeyKind.PAGE_UP),
        "page_down": Key.named(KeyKind.PAGE_DOWN),
        "delete": Key.named(KeyKind.DELETE),
        "insert": Key.named(KeyKind.INSERT),
        "escape": Key.named(KeyKind.ESCAPE),
        "tab": Key.named(KeyKind.TAB),
        "enter": Key.named(KeyKind.ENTER),
        "_": ANY_CHAR,
    }
)

MODIFIERS = frozenset({"ctrl"})


def parse_key(token: str) -> Key:
    """Return the key described by ``token``.

    ``ctrl-<c>`` yields a control key built from the first character of the
    suffix. Unmodified tokens are matched exactly against :data:`KEYWORDS`
    and otherwise reduced to their first character, so ``"kill"`` binds
    ``k``. Both truncations are reported as ``keymap.key_truncated``
    warnings.
    """

    prefix, separator, suffix = token.partition(MODIFIER_SEPARATOR)

    if separator:
        if not suffix:
            raise KeyParseError("Keymap key is invalid", key=token)
        if prefix not in MODIFIERS:
            raise KeyParseError(f"Keymap modifier '{prefix}' is invalid", key=token)
        if len(suffix) > 1:
            _report_truncation(token, suffix[0])
        return Key.ctrl(suffix[0])

    keyword = KEYWORDS.get(token)
    if keyword is not None:
        return keyword

    if not token:
        raise KeyParseError("Keymap key is an empty string", key=token)
    if len(token) > 1:
        _report_truncation(token, token[0])
    return Key.character(token[0])


def _report_truncation(token: str, used: str) -> None:
    record_event(
        "keymap.key_truncated",
        level="warning",
        data={"token": token, "bound_to": used},
    )


__all__ = ["parse_key", "KEYWORDS", "MODIFIERS"]
