"""Exception hierarchy raised while building key maps."""

from __future__ import annotations

from typing import Optional


class KeymapError(ValueError):
    """Base class for every key map construction failure.

    ``mode``, ``key`` and ``command`` identify the offending entry when the
    failure can be pinned to one; they are folded into the message.
    """

    def __init__(
        self,
        message: str,
        *,
        mode: Optional[str] = None,
        key: Optional[str] = None,
        command: Optional[str] = None,
    ) -> None:
        self.reason = message
        self.mode = mode
        self.key = key
        self.command = command
        super().__init__(self._compose())

    def _compose(self) -> str:
        parts = []
        if self.mode is not None:
            parts.append(f"mode '{self.mode}'")
        if self.key is not None:
            parts.append(f"key '{self.key}'")
        if self.command is not None:
            parts.append(f"command '{self.command}'")
        if not parts:
            return self.reason
        return f"{self.reason} ({', '.join(parts)})"

    def in_mode(self, mode: str) -> "KeymapError":
        """Attach the mode the failure occurred in and refresh the message."""

        self.mode = mode
        self.args = (self._compose(),)
        return self


class KeymapSchemaError(KeymapError):
    """A node did not have the expected mapping shape."""


class KeymapTypeError(KeymapError):
    """A mode name, key token or command name was not a string."""


class KeyParseError(KeymapError):
    """A key token is empty or uses an unsupported modifier."""


class UnknownCommandError(KeymapError, LookupError):
    """A command name has no entry in the command registry."""


class KeymapDocumentError(KeymapError):
    """Keymap text could not be parsed into a document tree."""


class DefaultKeymapError(KeymapError):
    """The bundled default keymap is missing or malformed."""


__all__ = [
    "KeymapError",
    "KeymapSchemaError",
    "KeymapTypeError",
    "KeyParseError",
    "UnknownCommandError",
    "KeymapDocumentError",
    "DefaultKeymapError",
]
