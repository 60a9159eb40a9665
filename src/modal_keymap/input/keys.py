"""Canonical key events produced by key-token parsing and input adapters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(str, Enum):
    """Closed set of key variants."""

    CHAR = "char"
    CTRL = "ctrl"
    ANY_CHAR = "any_char"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DELETE = "delete"
    INSERT = "insert"
    ESCAPE = "escape"
    TAB = "tab"
    ENTER = "enter"

    @property
    def carries_char(self) -> bool:
        return self in (KeyKind.CHAR, KeyKind.CTRL)


@dataclass(frozen=True, slots=True)
class Key:
    """Single logical key press after modifier and keyword resolution."""

    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind.carries_char:
            if self.char is None or len(self.char) != 1:
                raise ValueError(
                    f"{self.kind.value} key requires exactly one character"
                )
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} key does not take a character")

    @classmethod
    def character(cls, char: str) -> "Key":
        return cls(KeyKind.CHAR, char)

    @classmethod
    def ctrl(cls, char: str) -> "Key":
        return cls(KeyKind.CTRL, char)

    @classmethod
    def named(cls, kind: KeyKind) -> "Key":
        return cls(kind)

    @property
    def is_char(self) -> bool:
        return self.kind is KeyKind.CHAR

    @property
    def token(self) -> str:
        """Render the key the way it is written in a keymap file."""

        if self.kind is KeyKind.CHAR:
            return "space" if self.char == " " else str(self.char)
        if self.kind is KeyKind.CTRL:
            return f"ctrl-{self.char}"
        if self.kind is KeyKind.ANY_CHAR:
            return "_"
        return self.kind.value

    def __str__(self) -> str:
        return self.token


ANY_CHAR = Key(KeyKind.ANY_CHAR)

__all__ = ["Key", "KeyKind", "ANY_CHAR"]
