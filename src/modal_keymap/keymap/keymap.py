"""Mode -> key -> command table built from keymap documents."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from modal_keymap.commands import CommandRef, CommandRegistry, default_registry
from modal_keymap.errors import (
    KeymapError,
    KeymapSchemaError,
    KeymapTypeError,
    UnknownCommandError,
)
from modal_keymap.input import ANY_CHAR, Key, parse_key
from modal_keymap.runtime.telemetry import record_event, span

from .document import load_default_document, load_document

ModeBindings = Dict[Key, CommandRef]


@dataclass(slots=True)
class KeyMapStats:
    """Snapshot of table size."""

    mode_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeyMap(Mapping[str, Mapping[Key, CommandRef]]):
    """Per-mode key bindings with wildcard lookup and layered merging.

    A document such as::

        normal:
          ctrl-r: cursor::move_up

    becomes ``{"normal": {Key.ctrl("r"): <cursor::move_up>}}``. Indexing the
    table yields read-only views; the only mutation is :meth:`merge`.
    """

    def __init__(
        self, modes: Optional[Mapping[str, Mapping[Key, CommandRef]]] = None
    ) -> None:
        self._modes: Dict[str, ModeBindings] = {
            mode: dict(bindings) for mode, bindings in (modes or {}).items()
        }

    @classmethod
    def from_tree(cls, tree: Any, commands: CommandRegistry) -> "KeyMap":
        """Build a table from a parsed ``mode -> {key: command}`` tree.

        Stops at the first invalid mode, key or command and raises the
        matching :class:`~modal_keymap.errors.KeymapError`.
        """

        with span("keymaps::from_tree", component="keymaps") as handle:
            try:
                modes = _parse_modes(tree, commands)
            except KeymapError as exc:
                record_event(
                    "keymap.build_failed",
                    level="error",
                    data={"mode": exc.mode, "reason": exc.reason},
                )
                raise

            keymap = cls()
            keymap._modes = modes
            handle.add_metadata("modes", len(modes))
            return keymap

    @classmethod
    def from_yaml(cls, text: str, commands: CommandRegistry) -> "KeyMap":
        return cls.from_tree(load_document(text), commands)

    @classmethod
    def default(cls, commands: Optional[CommandRegistry] = None) -> "KeyMap":
        """Build the table described by the bundled ``default.yml``."""

        with span("keymaps::default", component="keymaps"):
            tree = load_default_document()
            if commands is None:
                commands = default_registry()
            return cls.from_tree(tree, commands)

    def command_for(self, mode: str, key: Key) -> Optional[CommandRef]:
        """Return the command bound to ``key`` in ``mode``, if any.

        Character keys without an exact binding fall back to the mode's
        ``_`` wildcard binding. Unknown modes resolve to ``None``.
        """

        bindings = self._modes.get(mode)
        if bindings is None:
            return None
        command = bindings.get(key)
        if command is None and key.is_char:
            command = bindings.get(ANY_CHAR)
        return command

    def merge(self, other: "KeyMap") -> None:
        """Move ``other``'s bindings into this table, overwriting on conflict.

        Only modes this table already has are merged. Bindings for modes it
        lacks are discarded rather than added, so a user keymap can refine
        the built-in modes but never introduce new ones. ``other`` is left
        empty; merging a table into itself changes nothing.
        """

        if other is self:
            return

        with span("keymaps::merge", component="keymaps") as handle:
            merged = 0
            for mode, other_bindings in other._modes.items():
                bindings = self._modes.get(mode)
                if bindings is None:
                    record_event(
                        "keymap.merge_discarded_mode",
                        level="debug",
                        data={"mode": mode, "bindings": len(other_bindings)},
                    )
                    continue
                bindings.update(other_bindings)
                merged += len(other_bindings)
            other._modes.clear()
            handle.add_metadata("merged_bindings", merged)

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self._modes))

    def stats(self) -> KeyMapStats:
        return KeyMapStats(
            mode_count=len(self._modes),
            binding_count=sum(len(bindings) for bindings in self._modes.values()),
            modes=self.modes(),
        )

    def __getitem__(self, mode: str) -> Mapping[Key, CommandRef]:
        return MappingProxyType(self._modes[mode])

    def __iter__(self) -> Iterator[str]:
        return iter(self._modes)

    def __len__(self) -> int:
        return len(self._modes)

    def __repr__(self) -> str:
        return f"KeyMap(modes={list(self.modes())!r})"


def _parse_modes(tree: Any, commands: CommandRegistry) -> Dict[str, ModeBindings]:
    if not isinstance(tree, Mapping):
        raise KeymapSchemaError("Keymap config didn't return a hash of modes")

    modes: Dict[str, ModeBindings] = {}
    for mode, bindings in tree.items():
        if not isinstance(mode, str):
            raise KeymapTypeError(
                f"A mode key couldn't be parsed as a string: {mode!r}"
            )
        try:
            modes[mode] = _parse_mode_bindings(bindings, commands)
        except KeymapError as exc:
            exc.in_mode(mode)
            raise
    return modes


def _parse_mode_bindings(node: Any, commands: CommandRegistry) -> ModeBindings:
    """Parse one mode's ``key: command`` mapping; later duplicates win."""

    if not isinstance(node, Mapping):
        raise KeymapSchemaError(
            "Keymap mode config didn't return a hash of key bindings"
        )

    bindings: ModeBindings = {}
    for token, command_name in node.items():
        if not isinstance(token, str):
            raise KeymapTypeError(
                f"A keymap key couldn't be parsed as a string: {token!r}"
            )
        key = parse_key(token)
        if not isinstance(command_name, str):
            raise KeymapTypeError(
                f"A keymap command couldn't be parsed as a string: {command_name!r}",
                key=token,
            )
        try:
            bindings[key] = commands.resolve(command_name)
        except UnknownCommandError as exc:
            exc.key = token
            raise
    return bindings


__all__ = ["KeyMap", "KeyMapStats"]
