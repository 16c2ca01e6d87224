"""Command pattern: command objects and their history."""

from .command import Command
from .history import CommandHistory

__all__ = [
    "Command",
    "CommandHistory",
]
