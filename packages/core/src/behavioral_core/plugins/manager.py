"""PluginManager — name-unique plugin registry and executor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from typing_extensions import TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..ports.plugins import IPlugin

logger = logging.getLogger(__name__)

TArg = TypeVar("TArg", default=object)


class PluginManager(Generic[TArg]):
    """Ordered collection of plugins, unique by ``name``.

    Plugins run in registration order against the same arguments, so a
    mutation made by one plugin is visible to the next. Exceptions raised
    by a plugin are logged and propagate, skipping the remaining plugins.

    Name lookups scan from the most recently registered plugin backwards.
    """

    def __init__(self, plugins: Iterable[IPlugin[TArg]] | None = None) -> None:
        self._plugins: list[IPlugin[TArg]] = []
        if plugins is not None:
            self.register(*plugins)

    # ── Registration ─────────────────────────────────────────────

    def register(self, *plugins: IPlugin[TArg]) -> bool:
        """Append each plugin whose name is not registered yet.

        Returns ``True`` only if every plugin was appended. Duplicates are
        skipped without affecting the others.
        """
        registered = True
        for plugin in plugins:
            if self._index_of(plugin.name) != -1:
                logger.debug("Plugin %r already registered, skipping", plugin.name)
                registered = False
                continue
            self._plugins.append(plugin)
            logger.debug("Registered plugin %r", plugin.name)
        return registered

    def deregister(self, *plugins: IPlugin[TArg] | str) -> bool:
        """Remove plugins, given either as plugin objects or bare names.

        Returns ``True`` only if every item removed an entry. Unknown names
        leave the registry untouched.
        """
        deregistered = True
        for plugin in plugins:
            name = plugin if isinstance(plugin, str) else plugin.name
            index = self._index_of(name)
            if index == -1:
                logger.debug("Plugin %r is not registered", name)
                deregistered = False
                continue
            del self._plugins[index]
            logger.debug("Deregistered plugin %r", name)
        return deregistered

    # ── Execution ────────────────────────────────────────────────

    def execute(self, *args: TArg) -> None:
        """Run every registered plugin with *args*, in registration order."""
        for plugin in list(self._plugins):
            try:
                plugin.execute(*args)
            except Exception:
                logger.exception("Plugin %r failed", plugin.name)
                raise

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, name: str) -> IPlugin[TArg] | None:
        index = self._index_of(name)
        return None if index == -1 else self._plugins[index]

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._plugins]

    def __contains__(self, plugin: object) -> bool:
        if isinstance(plugin, str):
            return self._index_of(plugin) != -1
        name = getattr(plugin, "name", None)
        return isinstance(name, str) and self._index_of(name) != -1

    def __iter__(self) -> Iterator[IPlugin[TArg]]:
        return iter(list(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)

    def _index_of(self, name: str) -> int:
        for i in range(len(self._plugins) - 1, -1, -1):
            if self._plugins[i].name == name:
                return i
        return -1

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all plugins."""
        self._plugins.clear()
