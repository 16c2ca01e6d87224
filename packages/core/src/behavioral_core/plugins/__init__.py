"""Plugin pattern: named plugins and the manager that runs them."""

from .manager import PluginManager
from .plugin import FunctionPlugin, Plugin

__all__ = [
    "FunctionPlugin",
    "Plugin",
    "PluginManager",
]
