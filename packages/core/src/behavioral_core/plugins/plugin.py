"""Plugin base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic

from typing_extensions import TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

TArg = TypeVar("TArg", default=object)


class Plugin(ABC, Generic[TArg]):
    """Base class for plugins.

    Usage::

        class Counter(Plugin[Data]):
            @property
            def name(self) -> str:
                return "counter"

            def execute(self, data: Data) -> None:
                data.prop += 1
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identity used by the manager."""
        ...

    @abstractmethod
    def execute(self, *args: TArg) -> None:
        """Run against the arguments shared by every registered plugin."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionPlugin(Plugin[TArg]):
    """Plugin built from a name and a callable."""

    def __init__(self, name: str, action: Callable[..., None]) -> None:
        self._name = name
        self._action = action

    @property
    def name(self) -> str:
        return self._name

    def execute(self, *args: TArg) -> None:
        self._action(*args)
