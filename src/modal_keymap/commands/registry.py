"""Explicit name -> command reference table consulted while building key maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from modal_keymap.errors import UnknownCommandError

from .models import CommandRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry contents."""

    command_count: int
    namespaces: tuple[str, ...]


class CommandRegistry:
    """Owns the command references a key map may bind to.

    Populate it fully before resolving any configuration; a name missing at
    resolution time is a construction error, not a deferred lookup.
    """

    def __init__(self, commands: Iterable[CommandRef] = ()) -> None:
        self._commands: Dict[str, CommandRef] = {}
        for command in commands:
            self.register(command)

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        if not replace and command.id in self._commands:
            raise ValueError(f"Command '{command.id}' already registered")
        self._commands[command.id] = command
        return command

    def get(self, name: str) -> Optional[CommandRef]:
        return self._commands.get(name)

    def resolve(self, name: str) -> CommandRef:
        try:
            return self._commands[name]
        except KeyError as exc:
            raise UnknownCommandError(
                f"Keymap command '{name}' doesn't exist", command=name
            ) from exc

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._commands))

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            namespaces=tuple(
                sorted({command.namespace for command in self._commands.values()})
            ),
        )

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandRef]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


__all__ = ["CommandRegistry", "RegistryStats"]
