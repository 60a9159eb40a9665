from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pytest

from modal_keymap.adapters.textual import (
    TextualKeymapAdapter,
    TextualKeymapHooks,
    key_from_event,
    key_from_textual,
)
from modal_keymap.commands import CommandRef
from modal_keymap.input import Key, KeyKind
from modal_keymap.keymap import KeyMap


@dataclass
class FakeKeyEvent:
    key: str
    character: Optional[str] = None
    stopped: bool = False

    def stop(self) -> None:
        self.stopped = True


@pytest.mark.parametrize(
    ("name", "character", "expected"),
    [
        ("k", "k", Key.character("k")),
        ("K", "K", Key.character("K")),
        ("dollar_sign", "$", Key.character("$")),
        ("space", " ", Key.character(" ")),
        ("ctrl+r", None, Key.ctrl("r")),
        ("pageup", None, Key.named(KeyKind.PAGE_UP)),
        ("pagedown", None, Key.named(KeyKind.PAGE_DOWN)),
        ("escape", None, Key.named(KeyKind.ESCAPE)),
        ("enter", "\r", Key.named(KeyKind.ENTER)),
        ("tab", "\t", Key.named(KeyKind.TAB)),
        ("backspace", None, Key.named(KeyKind.BACKSPACE)),
    ],
)
def test_key_from_textual(name: str, character: Optional[str], expected: Key) -> None:
    assert key_from_textual(name, character) == expected


@pytest.mark.parametrize(
    ("name", "character"),
    [("shift+tab", None), ("ctrl+shift+a", None), ("f1", None), ("ctrl+pageup", None)],
)
def test_key_from_textual_unrepresentable(name: str, character: Optional[str]) -> None:
    assert key_from_textual(name, character) is None


def make_adapter(
    commands: List[CommandRef], unbound: List[tuple[str, str]], logs: List[str]
) -> TextualKeymapAdapter:
    hooks = TextualKeymapHooks(
        on_command=commands.append,
        on_unbound=lambda mode, key: unbound.append((mode, key)),
        log=logs.append,
    )
    return TextualKeymapAdapter(KeyMap.default(), hooks=hooks)


def test_adapter_resolves_commands_for_active_mode() -> None:
    commands: List[CommandRef] = []
    adapter = make_adapter(commands, [], [])

    adapter.handle_textual_key("k", character="k")
    adapter.switch_mode("insert")
    adapter.handle_textual_key("k", character="k")

    assert commands == [
        CommandRef("cursor::move_up"),
        CommandRef("buffer::insert_char"),
    ]


def test_adapter_reports_unbound_keys() -> None:
    unbound: List[tuple[str, str]] = []
    adapter = make_adapter([], unbound, [])

    result = adapter.handle_textual_key("f5")

    assert result is None
    assert unbound == [("normal", "f5")]


def test_adapter_stops_bound_events_only() -> None:
    adapter = make_adapter([], [], [])
    bound = FakeKeyEvent("ctrl+s")
    unbound = FakeKeyEvent("ctrl+o")

    assert adapter.handle_event(bound) == CommandRef("buffer::save")  # type: ignore[arg-type]
    assert adapter.handle_event(unbound) is None  # type: ignore[arg-type]
    assert bound.stopped is True
    assert unbound.stopped is False


def test_key_from_event_reads_key_and_character() -> None:
    event = FakeKeyEvent("question_mark", "?")

    assert key_from_event(event) == Key.character("?")  # type: ignore[arg-type]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter([], [], logs)

    adapter.handle_textual_key("j", character="j")

    assert any(line.startswith("key ->") for line in logs)
    assert any("cursor::move_down" in line for line in logs)
