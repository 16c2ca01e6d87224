"""behavioral-core — reusable behavioural design-pattern building blocks.

Commands with a history stack, a name-unique plugin manager, and a
chain of responsibility. No I/O and no shared state: every collection is
owned by whoever constructs it.
"""

from __future__ import annotations

# ── Chain of responsibility ──────────────────────────────────────
from .chain import Chain, FunctionLink, ProcessChain, RequestChain, chain_of

# ── Command ──────────────────────────────────────────────────────
from .command import Command, CommandHistory

# ── Plugins ──────────────────────────────────────────────────────
from .plugins import FunctionPlugin, Plugin, PluginManager

# ── Ports ────────────────────────────────────────────────────────
from .ports import IChainable, ICommand, IPlugin

# ── Primitives ───────────────────────────────────────────────────
from .primitives import BehavioralError, ChainCycleError, ChainError

__all__ = [
    # Chain
    "Chain",
    "FunctionLink",
    "ProcessChain",
    "RequestChain",
    "chain_of",
    # Command
    "Command",
    "CommandHistory",
    # Plugins
    "FunctionPlugin",
    "Plugin",
    "PluginManager",
    # Ports
    "IChainable",
    "ICommand",
    "IPlugin",
    # Primitives
    "BehavioralError",
    "ChainCycleError",
    "ChainError",
]
