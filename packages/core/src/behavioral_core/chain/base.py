"""Chain — unified chain-of-responsibility link."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic

from typing_extensions import TypeVar

from ..primitives.exceptions import ChainCycleError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ..ports.chainable import IChainable

logger = logging.getLogger(__name__)

TArg = TypeVar("TArg", default=object)


class Chain(ABC, Generic[TArg]):
    """A link in a singly linked chain of responsibility.

    :meth:`dispatch` offers the input to this link first. If
    :meth:`is_processable` accepts it, :meth:`handle` runs and traversal
    stops, even when later links would accept it too. Otherwise the input
    goes to ``next``; on the tail link it is dropped without any signal.

    ``append`` overwrites the successor rather than splicing, and performs
    no cycle check.
    """

    def __init__(self) -> None:
        self._next: IChainable[TArg] | None = None

    @property
    def next(self) -> IChainable[TArg] | None:
        return self._next

    def append(self, chainable: IChainable[TArg]) -> None:
        """Make *chainable* this link's successor, replacing any previous one."""
        self._next = chainable

    def clear(self) -> None:
        """Detach the successor, making this link the tail."""
        self._next = None

    def dispatch(self, *args: TArg) -> None:
        if self.is_processable(*args):
            logger.debug("%s handling input", type(self).__name__)
            self.handle(*args)
        elif self._next is not None:
            self._next.dispatch(*args)
        else:
            logger.debug("Input dropped at tail link %s", type(self).__name__)

    @abstractmethod
    def is_processable(self, *args: TArg) -> bool:
        """Return ``True`` if this link should handle *args*."""
        ...

    @abstractmethod
    def handle(self, *args: TArg) -> None:
        """Terminal action for inputs this link accepts."""
        ...

    # ── Introspection ────────────────────────────────────────────

    def links(self) -> Iterator[IChainable[TArg]]:
        """Yield this link and every successor down to the tail.

        Raises :class:`ChainCycleError` if a link is reached twice.
        """
        seen: set[int] = set()
        link: IChainable[TArg] | None = self
        while link is not None:
            if id(link) in seen:
                raise ChainCycleError(link)
            seen.add(id(link))
            yield link
            link = link.next

    @property
    def tail(self) -> IChainable[TArg]:
        *_, last = self.links()
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self.links())

    def __bool__(self) -> bool:
        # truthiness must not walk the chain
        return True


class FunctionLink(Chain[TArg]):
    """Chain link built from a predicate and an action."""

    def __init__(
        self,
        predicate: Callable[..., bool],
        action: Callable[..., None],
    ) -> None:
        super().__init__()
        self._predicate = predicate
        self._action = action

    def is_processable(self, *args: TArg) -> bool:
        return bool(self._predicate(*args))

    def handle(self, *args: TArg) -> None:
        self._action(*args)


def chain_of(*links: Chain[TArg]) -> Chain[TArg]:
    """Append *links* one after another and return the head.

    Usage::

        head = chain_of(auth, cache, fallback)
        head.dispatch(request)
    """
    if not links:
        msg = "chain_of() requires at least one link"
        raise ValueError(msg)
    for current, successor in zip(links, links[1:]):
        current.append(successor)
    return links[0]
