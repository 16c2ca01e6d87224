"""CommandHistory — LIFO record of executed commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.commands import ICommand

logger = logging.getLogger(__name__)


class CommandHistory:
    """Stack of commands owned by the caller.

    The history only stores commands and never calls into them.
    Popping an empty history returns ``None``.
    """

    def __init__(self, commands: Iterable[ICommand] | None = None) -> None:
        self._commands: list[ICommand] = list(commands or [])

    def push(self, command: ICommand) -> None:
        self._commands.append(command)
        logger.debug(
            "Pushed %s (depth=%d)", type(command).__name__, len(self._commands)
        )

    def pop(self) -> ICommand | None:
        if not self._commands:
            return None
        command = self._commands.pop()
        logger.debug(
            "Popped %s (depth=%d)", type(command).__name__, len(self._commands)
        )
        return command

    def __len__(self) -> int:
        return len(self._commands)

    def clear(self) -> None:
        """Drop every recorded command."""
        self._commands.clear()
