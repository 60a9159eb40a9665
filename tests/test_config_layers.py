from __future__ import annotations

from pathlib import Path

import pytest

from modal_keymap.commands import CommandRef, default_registry
from modal_keymap.config import KeymapSettings, load_keymap, load_keymap_file
from modal_keymap.errors import UnknownCommandError
from modal_keymap.input import Key


def write_keymap(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = write_keymap(tmp_path, "keymap.yml", "normal:\n  k: cursor::move_down\n")
    monkeypatch.setenv("MODAL_KEYMAP_CONFIG", str(path))
    monkeypatch.delenv("MODAL_KEYMAP_IGNORE_USER", raising=False)

    settings = KeymapSettings.from_env()

    assert settings.user_keymap == path
    assert settings.layers() == (path,)


def test_settings_ignore_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_KEYMAP_CONFIG", "/somewhere/keymap.yml")
    monkeypatch.setenv("MODAL_KEYMAP_IGNORE_USER", "yes")

    assert KeymapSettings.from_env().layers() == ()


def test_load_keymap_without_layers_is_default() -> None:
    keymap = load_keymap(settings=KeymapSettings())

    assert keymap.command_for("normal", Key.character("k")) == CommandRef(
        "cursor::move_up"
    )


def test_load_keymap_merges_layers_in_order(tmp_path: Path) -> None:
    first = write_keymap(tmp_path, "a.yml", "normal:\n  k: cursor::move_down\n")
    second = write_keymap(tmp_path, "b.yml", "normal:\n  k: cursor::move_left\n")

    keymap = load_keymap(settings=KeymapSettings(), overrides=[first, second])

    assert keymap.command_for("normal", Key.character("k")) == CommandRef(
        "cursor::move_left"
    )


def test_settings_layer_applies_before_overrides(tmp_path: Path) -> None:
    user = write_keymap(
        tmp_path, "user.yml", "normal:\n  k: cursor::move_down\n  x: view::scroll_up\n"
    )
    extra = write_keymap(tmp_path, "extra.yml", "normal:\n  k: cursor::move_left\n")

    keymap = load_keymap(
        settings=KeymapSettings(user_keymap=user), overrides=[str(extra)]
    )

    assert keymap.command_for("normal", Key.character("k")) == CommandRef(
        "cursor::move_left"
    )
    assert keymap.command_for("normal", Key.character("x")) == CommandRef(
        "view::scroll_up"
    )


def test_broken_layer_is_skipped(tmp_path: Path) -> None:
    broken = write_keymap(tmp_path, "broken.yml", "normal:\n  k: cursor::teleport\n")
    good = write_keymap(tmp_path, "good.yml", "normal:\n  j: cursor::move_up\n")

    keymap = load_keymap(settings=KeymapSettings(), overrides=[broken, good])

    assert keymap.command_for("normal", Key.character("k")) == CommandRef(
        "cursor::move_up"
    )
    assert keymap.command_for("normal", Key.character("j")) == CommandRef(
        "cursor::move_up"
    )


def test_unparseable_layer_is_skipped(tmp_path: Path) -> None:
    broken = write_keymap(tmp_path, "broken.yml", "normal: [unclosed\n")

    keymap = load_keymap(settings=KeymapSettings(), overrides=[broken])

    assert keymap.command_for("normal", Key.character("k")) == CommandRef(
        "cursor::move_up"
    )


def test_missing_layer_is_skipped(tmp_path: Path) -> None:
    keymap = load_keymap(
        settings=KeymapSettings(user_keymap=tmp_path / "absent.yml")
    )

    assert "normal" in keymap


def test_layer_cannot_add_modes(tmp_path: Path) -> None:
    layer = write_keymap(tmp_path, "modes.yml", "macro:\n  q: buffer::save\n")

    keymap = load_keymap(settings=KeymapSettings(), overrides=[layer])

    assert "macro" not in keymap


def test_load_keymap_file_propagates_errors(tmp_path: Path) -> None:
    path = write_keymap(tmp_path, "bad.yml", "normal:\n  k: nope\n")

    with pytest.raises(UnknownCommandError):
        load_keymap_file(path, default_registry())
