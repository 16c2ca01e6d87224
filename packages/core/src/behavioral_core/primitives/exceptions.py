"""Exceptions for behavioral-core.

Ordinary outcomes (duplicate registration, unknown plugin, empty history,
unhandled chain input) are reported through return values, not exceptions.
"""

from __future__ import annotations

from typing import Any


class BehavioralError(Exception):
    """Root exception for the behavioral-core toolkit."""


class ChainError(BehavioralError):
    """Base class for chain-of-responsibility errors."""


class ChainCycleError(ChainError):
    """Raised when walking a chain revisits a link.

    ``append`` never checks for cycles; this surfaces only from the
    introspection helpers (``links()``, ``tail``, ``len()``).
    """

    def __init__(self, link: Any) -> None:
        self.link = link
        super().__init__(f"Chain cycles back to {type(link).__name__} link {link!r}")
