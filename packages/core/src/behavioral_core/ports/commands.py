"""ICommand — executable action protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ICommand(Protocol):
    """Protocol for command objects.

    A command wraps a single action against whatever receiver it captured.
    Undo is not part of the contract: an undo is just another command.
    """

    def execute(self) -> bool:
        """Perform the action and return ``True`` on success."""
        ...
