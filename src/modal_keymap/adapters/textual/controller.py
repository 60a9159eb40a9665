"""Resolve Textual key events to commands through a KeyMap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from textual import events

from modal_keymap.commands import CommandRef
from modal_keymap.keymap import KeyMap

from .keys import key_from_textual


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualKeymapHooks:
    """Callbacks the adapter invokes after each resolution."""

    on_command: Callable[[CommandRef], None] = _noop
    on_unbound: Callable[[str, str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKeymapAdapter:
    """Tracks the active mode and looks up commands for incoming keys.

    An unbound key is not an error: ``on_unbound`` receives the mode and the
    Textual key name so the host can fall through to its own handling.
    """

    def __init__(
        self,
        keymap: KeyMap,
        *,
        mode: str = "normal",
        hooks: Optional[TextualKeymapHooks] = None,
    ) -> None:
        self.keymap = keymap
        self.mode = mode
        self.hooks = hooks or TextualKeymapHooks()

    def switch_mode(self, mode: str) -> None:
        self._log("mode ->", previous=self.mode, mode=mode)
        self.mode = mode

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[CommandRef]:
        translated = key_from_textual(key, character)
        command = (
            self.keymap.command_for(self.mode, translated)
            if translated is not None
            else None
        )
        self._log(
            "key ->",
            mode=self.mode,
            key=key,
            translated=translated.token if translated else None,
            command=command.id if command else None,
        )
        if command is None:
            self.hooks.on_unbound(self.mode, key)
        else:
            self.hooks.on_command(command)
        return command

    def handle_event(self, event: events.Key) -> Optional[CommandRef]:
        """Resolve ``event`` and stop its propagation when it was bound."""

        command = self.handle_textual_key(event.key, character=event.character)
        if command is not None:
            event.stop()
        return command

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        for name, value in fields.items():
            if value is not None:
                parts.append(f"{name}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualKeymapAdapter", "TextualKeymapHooks"]
