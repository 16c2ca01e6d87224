"""Capability contracts. Any object satisfying these interoperates."""

from behavioral_core.ports.chainable import IChainable
from behavioral_core.ports.commands import ICommand
from behavioral_core.ports.plugins import IPlugin

__all__ = [
    "IChainable",
    "ICommand",
    "IPlugin",
]
