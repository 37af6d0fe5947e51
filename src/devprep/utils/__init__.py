"""Utility modules (commands, console)."""

from .commands import CommandResult, CommandRunner, is_command_available
from .console import Console

__all__ = [
    "CommandResult",
    "CommandRunner",
    "Console",
    "is_command_available",
]
