"""Command references and the registry key maps resolve names against."""

from .models import CommandRef
from .registry import CommandRegistry, RegistryStats
from .builtin import BUILTIN_COMMANDS, default_registry

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "RegistryStats",
    "BUILTIN_COMMANDS",
    "default_registry",
]
