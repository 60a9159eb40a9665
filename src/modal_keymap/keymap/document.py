"""YAML document provider for keymap trees."""

from __future__ import annotations

from importlib import resources
from typing import Any

import yaml

from modal_keymap.errors import DefaultKeymapError, KeymapDocumentError

DEFAULT_KEYMAP_RESOURCE = "default.yml"

_MISSING = object()


def load_document(text: str) -> Any:
    """Parse ``text`` and return its first YAML document.

    Mappings come back as ``dict`` and string scalars as ``str``; every other
    scalar keeps its YAML type and is rejected later by the key map builder.
    """

    try:
        document = next(iter(yaml.safe_load_all(text)), _MISSING)
    except yaml.YAMLError as exc:
        raise KeymapDocumentError(f"Couldn't parse keymap: {exc}") from exc
    if document is _MISSING:
        raise KeymapDocumentError("Couldn't locate a document in the keymap")
    return document


def read_default_document() -> str:
    """Return the text of the keymap bundled with the package."""

    try:
        return (
            resources.files("modal_keymap.keymap")
            .joinpath(DEFAULT_KEYMAP_RESOURCE)
            .read_text(encoding="utf-8")
        )
    except (OSError, UnicodeDecodeError, ModuleNotFoundError) as exc:
        raise DefaultKeymapError("Couldn't read default keymap") from exc


def load_default_document() -> Any:
    """Parse the bundled keymap, reporting any failure as a bootstrap error."""

    text = read_default_document()
    try:
        return load_document(text)
    except KeymapDocumentError as exc:
        raise DefaultKeymapError(f"Couldn't parse default keymap: {exc.reason}") from exc


__all__ = [
    "DEFAULT_KEYMAP_RESOURCE",
    "load_document",
    "load_default_document",
    "read_default_document",
]
