"""Low-level primitives shared by every component."""

from .exceptions import BehavioralError, ChainCycleError, ChainError

__all__ = [
    "BehavioralError",
    "ChainCycleError",
    "ChainError",
]
