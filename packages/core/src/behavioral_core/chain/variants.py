"""Compatibility variants of :class:`Chain` with alternate hook names.

Both behave exactly like :class:`Chain`; only the method names differ.
"""

from __future__ import annotations

from abc import abstractmethod

from typing_extensions import TypeVar

from .base import Chain

TArg = TypeVar("TArg", default=object)


class ProcessChain(Chain[TArg]):
    """Single-argument chain.

    Callers use ``process``; subclasses implement ``execute``.
    """

    def process(self, arg: TArg) -> None:
        self.dispatch(arg)

    def handle(self, *args: TArg) -> None:
        self.execute(*args)

    @abstractmethod
    def execute(self, arg: TArg) -> None: ...


class RequestChain(Chain[TArg]):
    """Variadic chain.

    Callers use ``execute``; subclasses implement ``processor``.
    """

    def execute(self, *args: TArg) -> None:
        self.dispatch(*args)

    def handle(self, *args: TArg) -> None:
        self.processor(*args)

    @abstractmethod
    def processor(self, *args: TArg) -> None: ...
