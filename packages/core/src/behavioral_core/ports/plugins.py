"""IPlugin — named unit of behaviour protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import TypeVar

TArg = TypeVar("TArg", default=object, contravariant=True)


@runtime_checkable
class IPlugin(Protocol[TArg]):
    """Protocol for plugins managed by a ``PluginManager``.

    ``name`` is the plugin's identity: two objects with the same name are
    the same plugin as far as the manager is concerned.
    """

    @property
    def name(self) -> str: ...

    def execute(self, *args: TArg) -> None:
        """Run the plugin against *args*."""
        ...
