"""Layered keymap loading: bundled defaults plus user override files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from modal_keymap.commands import CommandRegistry, default_registry
from modal_keymap.errors import KeymapError
from modal_keymap.keymap import KeyMap
from modal_keymap.runtime.telemetry import env, env_flag, record_event, span


@dataclass(frozen=True, slots=True)
class KeymapSettings:
    """Where user keymap overrides come from."""

    user_keymap: Optional[Path] = None
    ignore_user: bool = False

    @classmethod
    def from_env(cls) -> "KeymapSettings":
        """Read ``MODAL_KEYMAP_CONFIG`` and ``MODAL_KEYMAP_IGNORE_USER``."""

        raw_path = env("CONFIG")
        return cls(
            user_keymap=Path(raw_path).expanduser() if raw_path else None,
            ignore_user=env_flag("IGNORE_USER"),
        )

    def layers(self) -> tuple[Path, ...]:
        if self.ignore_user or self.user_keymap is None:
            return ()
        return (self.user_keymap,)


def load_keymap_file(path: Path, commands: CommandRegistry) -> KeyMap:
    """Build a key map from the YAML file at ``path``."""

    text = path.read_text(encoding="utf-8")
    return KeyMap.from_yaml(text, commands)


def load_keymap(
    commands: Optional[CommandRegistry] = None,
    *,
    settings: Optional[KeymapSettings] = None,
    overrides: Iterable[Path | str] = (),
) -> KeyMap:
    """Return the default key map with every readable override merged in.

    Layers apply in order: the settings path, then ``overrides``. A missing
    file is skipped; a layer that cannot be read or built is reported as a
    ``keymap.layer_failed`` error event and skipped, leaving the earlier
    layers in effect. Failures in the bundled defaults propagate.
    """

    registry = commands if commands is not None else default_registry()
    active = settings if settings is not None else KeymapSettings.from_env()
    paths = [*active.layers(), *(Path(path) for path in overrides)]

    with span(
        "keymaps::load",
        component="keymaps",
        metadata={"layers": len(paths)},
    ) as handle:
        keymap = KeyMap.default(registry)
        applied = 0
        for path in paths:
            if not path.is_file():
                record_event("keymap.layer_missing", data={"path": str(path)})
                continue
            try:
                layer = load_keymap_file(path, registry)
            except (OSError, UnicodeDecodeError, KeymapError) as exc:
                record_event(
                    "keymap.layer_failed",
                    level="error",
                    data={"path": str(path), "error": str(exc)},
                )
                continue
            keymap.merge(layer)
            applied += 1
        handle.add_metadata("applied", applied)
        return keymap


__all__ = ["KeymapSettings", "load_keymap", "load_keymap_file"]
