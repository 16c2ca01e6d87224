import logging
from dataclasses import dataclass
from unittest.mock import Mock

import pytest

from behavioral_core.plugins import FunctionPlugin, Plugin, PluginManager
from behavioral_core.ports.plugins import IPlugin

# --- Test Models ---


@dataclass
class Data:
    prop: int = 0


class PluginA(Plugin[Data]):
    @property
    def name(self) -> str:
        return "Plugin A"

    def execute(self, data: Data) -> None:
        data.prop += 1


class PluginB(Plugin[Data]):
    @property
    def name(self) -> str:
        return "Plugin B"

    def execute(self, data: Data) -> None:
        data.prop += 2


class NamedPlugin(Plugin[Data]):
    def __init__(self, name: str, action: Mock | None = None) -> None:
        self._name = name
        self.action = action or Mock()

    @property
    def name(self) -> str:
        return self._name

    def execute(self, data: Data) -> None:
        self.action(data)


class DuplicateAdmittingManager(PluginManager[Data]):
    """Appends without the name check so duplicate names can be seeded."""

    def register(self, *plugins: Plugin[Data]) -> bool:
        self._plugins.extend(plugins)
        return True


# --- Registration Tests ---


def test_plugin_execution() -> None:
    pm: PluginManager[Data] = PluginManager()
    a, b = PluginA(), PluginB()
    data = Data()

    assert pm.register(a) is True
    assert pm.register(a) is False
    assert pm.register(b) is True
    assert pm.register(b) is False
    assert pm.deregister("bogus plugin") is False

    pm.execute(data)

    assert data.prop == 3


def test_plugin_removal() -> None:
    pm: PluginManager[Data] = PluginManager()
    a, b = PluginA(), PluginB()
    data = Data()

    pm.register(a, b)

    assert pm.deregister(a) is True
    assert pm.deregister(a.name) is False

    pm.execute(data)
    assert data.prop == 2

    assert pm.deregister(b.name) is True
    assert pm.deregister(a) is False
    assert len(pm) == 0


def test_deregister_then_execute_applies_remaining_plugins() -> None:
    pm: PluginManager[Data] = PluginManager()
    data = Data()
    pm.register(PluginA(), PluginB())

    pm.execute(data)
    assert data.prop == 3

    pm.deregister("Plugin A")
    pm.execute(data)
    assert data.prop == 5


def test_identity_is_by_name() -> None:
    pm: PluginManager[Data] = PluginManager()
    first = NamedPlugin("same")
    second = NamedPlugin("same")

    assert pm.register(first) is True
    assert pm.register(second) is False
    assert pm.names == ["same"]

    # A distinct instance with the same name removes the registered one.
    assert pm.deregister(second) is True
    assert len(pm) == 0


def test_duplicate_registration_runs_once() -> None:
    action = Mock()
    pm: PluginManager[Data] = PluginManager()
    pm.register(NamedPlugin("x", action), NamedPlugin("x", action))

    pm.execute(Data())

    action.assert_called_once()


def test_bulk_register_reports_any_failure() -> None:
    pm: PluginManager[Data] = PluginManager()
    pm.register(PluginA())

    # B is still appended even though A is rejected.
    assert pm.register(PluginA(), PluginB()) is False
    assert pm.names == ["Plugin A", "Plugin B"]


def test_bulk_deregister_reports_any_failure() -> None:
    pm: PluginManager[Data] = PluginManager()
    pm.register(PluginA(), PluginB())

    assert pm.deregister("Plugin A", "missing") is False
    assert pm.names == ["Plugin B"]

    assert pm.deregister("Plugin B") is True


def test_failed_deregister_leaves_registry_untouched() -> None:
    pm: PluginManager[Data] = PluginManager()
    pm.register(PluginA(), PluginB())
    data = Data()

    assert pm.deregister("missing", NamedPlugin("also missing")) is False
    pm.execute(data)

    assert pm.names == ["Plugin A", "Plugin B"]
    assert data.prop == 3


def test_lookup_scans_from_most_recent() -> None:
    older = NamedPlugin("dup")
    newer = NamedPlugin("dup")
    pm = DuplicateAdmittingManager([older, PluginA(), newer])

    assert pm.get("dup") is newer

    assert pm.deregister("dup") is True
    assert pm.get("dup") is older
    assert pm.names == ["dup", "Plugin A"]


# --- Execution Tests ---


def test_execute_runs_in_registration_order() -> None:
    calls: list[str] = []
    pm: PluginManager[Data] = PluginManager()
    pm.register(
        FunctionPlugin("first", lambda d: calls.append("first")),
        FunctionPlugin("second", lambda d: calls.append("second")),
        FunctionPlugin("third", lambda d: calls.append("third")),
    )

    pm.execute(Data())

    assert calls == ["first", "second", "third"]


def test_execute_shares_mutations_between_plugins() -> None:
    seen: list[int] = []

    def double(data: Data) -> None:
        seen.append(data.prop)
        data.prop *= 2

    pm: PluginManager[Data] = PluginManager(
        [PluginA(), FunctionPlugin("double", double)]
    )
    data = Data()

    pm.execute(data)

    assert seen == [1]
    assert data.prop == 2


def test_execute_passes_all_arguments() -> None:
    action = Mock()
    pm: PluginManager[int] = PluginManager([FunctionPlugin("sum", action)])

    pm.execute(1, 2, 3)

    action.assert_called_once_with(1, 2, 3)


def test_execute_with_no_plugins_is_noop() -> None:
    data = Data()
    PluginManager().execute(data)
    assert data.prop == 0


def test_plugin_failure_propagates_and_stops_execution(caplog) -> None:
    def boom(data: Data) -> None:
        raise ValueError("boom")

    later = Mock()
    pm: PluginManager[Data] = PluginManager(
        [PluginA(), FunctionPlugin("boom", boom), FunctionPlugin("later", later)]
    )
    data = Data()

    with pytest.raises(ValueError, match="boom"):
        pm.execute(data)

    assert data.prop == 1
    later.assert_not_called()
    assert "Plugin 'boom' failed" in caplog.text


# --- Introspection Tests ---


def test_contains_iter_and_clear() -> None:
    a = PluginA()
    pm: PluginManager[Data] = PluginManager([a, PluginB()])

    assert a in pm
    assert "Plugin B" in pm
    assert "missing" not in pm
    assert object() not in pm
    assert [p.name for p in pm] == ["Plugin A", "Plugin B"]
    assert pm.get("missing") is None

    pm.clear()
    assert len(pm) == 0


def test_plugins_satisfy_protocol() -> None:
    assert isinstance(PluginA(), IPlugin)
    assert isinstance(FunctionPlugin("f", print), IPlugin)
    assert repr(PluginA()) == "PluginA(name='Plugin A')"


def test_registration_logging(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="behavioral_core.plugins.manager")
    pm: PluginManager[Data] = PluginManager()

    pm.register(PluginA(), PluginA())
    pm.deregister("missing")

    assert "Registered plugin 'Plugin A'" in caplog.text
    assert "Plugin 'Plugin A' already registered, skipping" in caplog.text
    assert "Plugin 'missing' is not registered" in caplog.text
