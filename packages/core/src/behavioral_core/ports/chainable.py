"""IChainable — chain-of-responsibility link protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import TypeVar

TArg = TypeVar("TArg", default=object)


@runtime_checkable
class IChainable(Protocol[TArg]):
    """Protocol for a link in a chain of responsibility.

    A link either handles the input itself or forwards it to ``next``.
    ``next`` is ``None`` on the tail link.
    """

    @property
    def next(self) -> IChainable[TArg] | None: ...

    def is_processable(self, *args: TArg) -> bool:
        """Return ``True`` if this link handles *args*."""
        ...

    def dispatch(self, *args: TArg) -> None:
        """Handle *args* here or pass them down the chain."""
        ...

    def append(self, chainable: IChainable[TArg]) -> None:
        """Replace the successor with *chainable*."""
        ...

    def clear(self) -> None:
        """Drop the successor, making this link the tail."""
        ...
