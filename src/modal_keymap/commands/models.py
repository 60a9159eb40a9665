"""Command reference metadata resolved from keymap command names."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Opaque, hashable handle naming an executable command.

    The key map never invokes a command; it only stores and returns these
    references, so two references are equal when their ids are.
    """

    id: str
    description: str = field(default="", compare=False)
    metadata: Mapping[str, object] = field(
        default_factory=dict, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def namespace(self) -> str:
        """Leading ``module`` part of a ``module::name`` id."""

        head, _, _ = self.id.partition("::")
        return head

    def __str__(self) -> str:
        return self.id


__all__ = ["CommandRef"]
