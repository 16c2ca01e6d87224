"""Command base class — an action bound to its receiver."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """
    Base for concrete commands.

    Subclasses hold a reference to the receiver they act on and implement
    :meth:`execute`. The receiver is the caller's own object, never a copy,
    so whatever the command changes is visible to the caller.

    Usage::

        class TurnOnLight(Command):
            def __init__(self, light: Light) -> None:
                self.light = light

            def execute(self) -> bool:
                self.light.turn_on()
                return True

    Anything with an ``execute() -> bool`` method satisfies
    :class:`~behavioral_core.ports.commands.ICommand`; inheriting from this
    class is optional.
    """

    @abstractmethod
    def execute(self) -> bool:
        """Perform the action. Returns ``True`` on success."""
        ...
