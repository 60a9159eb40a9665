"""Command-line entry point for validating and inspecting keymaps."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from modal_keymap.commands import default_registry
from modal_keymap.config import KeymapSettings, load_keymap, load_keymap_file
from modal_keymap.errors import KeymapError
from modal_keymap.keymap import KeyMap
from modal_keymap.runtime.telemetry import PRESETS, configure


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="modal-keymap", description="Validate and inspect modal keymaps."
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(PRESETS),
        help="Telemetry preset to log with (default: MODAL_KEYMAP_* environment)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate a keymap file")
    check.add_argument("path", type=Path, help="YAML keymap to validate")

    show = sub.add_parser("show", help="Print the effective bindings")
    show.add_argument("paths", nargs="*", type=Path, help="Override layers")
    show.add_argument("--mode", help="Only print this mode")
    show.add_argument(
        "--no-user",
        action="store_true",
        help="Ignore the MODAL_KEYMAP_CONFIG layer",
    )
    return parser.parse_args(argv)


def _check(path: Path, out: TextIO, err: TextIO) -> int:
    registry = default_registry()
    try:
        keymap = load_keymap_file(path, registry)
    except (OSError, UnicodeDecodeError, KeymapError) as exc:
        print(f"{path}: {exc}", file=err)
        return 1
    known = set(KeyMap.default(registry))
    stats = keymap.stats()
    print(
        f"{path}: ok ({stats.binding_count} bindings in {stats.mode_count} modes)",
        file=out,
    )
    for mode in keymap.modes():
        if mode not in known:
            print(
                f"{path}: mode '{mode}' is not a built-in mode and will be ignored",
                file=err,
            )
    return 0


def _show(
    paths: Sequence[Path], mode: Optional[str], no_user: bool, out: TextIO, err: TextIO
) -> int:
    settings = KeymapSettings(ignore_user=True) if no_user else None
    keymap = load_keymap(settings=settings, overrides=paths)
    if mode is not None and mode not in keymap:
        print(f"unknown mode '{mode}'", file=err)
        return 1
    for name in keymap.modes() if mode is None else (mode,):
        print(f"{name}:", file=out)
        bindings = keymap[name]
        for key in sorted(bindings, key=lambda k: k.token):
            print(f"  {key.token}: {bindings[key].id}", file=out)
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = _parse_args(argv)
    if args.log_preset:
        configure(preset=args.log_preset)
    if args.command == "check":
        return _check(args.path, out, err)
    return _show(args.paths, args.mode, args.no_user, out, err)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
