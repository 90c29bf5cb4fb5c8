"""
tests.test_runtime

Runtime state: lazy defaults, atomic init, exporter registry ordering.
"""

from __future__ import annotations

import pytest

import vision
from vision.core.runtime import RuntimeState
from vision.exporters.base import Exporter, as_exporter


def _noop(name: str) -> Exporter:
    return Exporter(name=name, success=lambda ctx: None)


def test_lazy_state_has_console_exporter_and_no_normalization() -> None:
    state = vision.get_runtime_state()
    assert [e.name for e in state.exporters] == ["console"]
    assert state.normalization.enabled is False
    assert state.normalization.key_casing == "none"
    assert state.normalization.deep is True
    assert vision.get_runtime_state() is state


def test_lazy_state_reads_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VISION_NORMALIZATION_ENABLED", "true")
    monkeypatch.setenv("VISION_KEY_CASING", "snake_case")
    monkeypatch.setenv("VISION_DEFAULT_EXPORTER", "none")

    state = vision.get_runtime_state()
    assert state.exporters == []
    assert state.normalization.enabled is True
    assert state.normalization.key_casing == "snake_case"


def test_init_replaces_entire_state() -> None:
    vision.register_exporter(_noop("extra"))
    vision.init(exporters=[_noop("only")], normalization={"enabled": True, "key_casing": "camelCase"})

    state = vision.get_runtime_state()
    assert [e.name for e in state.exporters] == ["only"]
    assert state.normalization.key_casing == "camelCase"

    vision.init()
    state = vision.get_runtime_state()
    assert [e.name for e in state.exporters] == ["console"]
    assert state.normalization.enabled is False


def test_register_appends_and_replaces_in_place() -> None:
    vision.init(exporters=[_noop("a"), _noop("b")])
    replacement = _noop("a")

    vision.register_exporter(_noop("c"))
    vision.register_exporter(replacement)

    exporters = vision.get_runtime_state().exporters
    assert [e.name for e in exporters] == ["a", "b", "c"]
    assert exporters[0] is replacement


def test_unregister_removes_by_name_and_ignores_unknown() -> None:
    vision.init(exporters=[_noop("a"), _noop("b")])
    vision.unregister_exporter("a")
    vision.unregister_exporter("missing")
    assert [e.name for e in vision.get_runtime_state().exporters] == ["b"]


def test_exporters_property_returns_a_snapshot() -> None:
    state = RuntimeState(exporters=[_noop("a")])
    snapshot = state.exporters
    state.register(_noop("b"))
    assert [e.name for e in snapshot] == ["a"]


def test_as_exporter_adapts_duck_typed_objects() -> None:
    class Sink:
        name = "sink"

        def success(self, ctx) -> None:
            pass

        def after(self, ctx) -> None:
            pass

    exporter = as_exporter(Sink())
    assert exporter.name == "sink"
    assert exporter.after is not None
    assert exporter.error is None
    assert exporter.before is None


def test_as_exporter_rejects_incomplete_objects() -> None:
    class NoSuccess:
        name = "broken"

    with pytest.raises(TypeError):
        as_exporter(NoSuccess())
    with pytest.raises(TypeError):
        as_exporter(object())


def test_init_accepts_custom_error_detector() -> None:
    vision.init(exporters=[], error_detector=lambda value: value == "boom")
    state = vision.get_runtime_state()
    assert state.is_error_like("boom")
    assert not state.is_error_like(ValueError("x"))


# --- Module Notes -----------------------------------------------------------
# `conftest._fresh_runtime` resets the process-wide state before/after each test.
