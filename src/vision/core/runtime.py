"""
vision.core.runtime

Process-wide runtime state: exporter registry and normalization config.

Responsibilities:
- Lazily create the default state (console exporter, normalization from settings).
- Replace the whole state atomically on `init_runtime()`.
- Register (replace-in-place) and unregister exporters by name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from threading import Lock
from typing import Any, Callable

from vision.exporters.base import Exporter, as_exporter
from vision.exporters.console import ConsoleExporter
from vision.settings import VisionSettings, get_settings
from vision.utils.error_capture import is_error_like
from vision.utils.normalize import NormalizationConfig

ErrorDetector = Callable[[Any], bool]


class RuntimeState:
    """
    Ordered exporter registry plus normalization config.

    Reads and writes are guarded by a lock so threads see a consistent exporter
    list; `observe()` works on a snapshot taken at entry.
    """

    def __init__(
        self,
        *,
        exporters: Iterable[Any] = (),
        normalization: NormalizationConfig | Mapping[str, Any] | None = None,
        error_detector: ErrorDetector | None = None,
    ) -> None:
        self._lock = Lock()
        self._exporters: list[Exporter] = []
        for exporter in exporters:
            self._insert(as_exporter(exporter))
        self.normalization = _as_normalization(normalization)
        self.is_error_like: ErrorDetector = error_detector or is_error_like

    @classmethod
    def from_settings(cls, settings: VisionSettings) -> RuntimeState:
        exporters = [ConsoleExporter()] if settings.default_exporter == "console" else []
        return cls(
            exporters=exporters,
            normalization=NormalizationConfig(
                enabled=settings.normalization_enabled,
                key_casing=settings.key_casing,
                deep=settings.normalization_deep,
            ),
        )

    @property
    def exporters(self) -> list[Exporter]:
        with self._lock:
            return list(self._exporters)

    def register(self, exporter: Any) -> None:
        adapted = as_exporter(exporter)
        with self._lock:
            self._insert(adapted)

    def unregister(self, name: str) -> None:
        with self._lock:
            self._exporters = [e for e in self._exporters if e.name != name]

    def _insert(self, exporter: Exporter) -> None:
        # An existing name keeps its original position; the entry is swapped in place.
        for i, existing in enumerate(self._exporters):
            if existing.name == exporter.name:
                self._exporters[i] = exporter
                return
        self._exporters.append(exporter)


def _as_normalization(
    value: NormalizationConfig | Mapping[str, Any] | None,
) -> NormalizationConfig:
    if value is None:
        return NormalizationConfig()
    if isinstance(value, NormalizationConfig):
        return value
    return NormalizationConfig.model_validate(dict(value))


_STATE: RuntimeState | None = None
_STATE_LOCK = Lock()


def init_runtime(
    *,
    exporters: Iterable[Any] | None = None,
    normalization: NormalizationConfig | Mapping[str, Any] | None = None,
    error_detector: ErrorDetector | None = None,
) -> RuntimeState:
    """
    Replace the entire runtime state (not merged with the previous one).

    Omitted exporters default to a single console exporter; omitted normalization
    defaults to disabled.
    """

    global _STATE
    state = RuntimeState(
        exporters=[ConsoleExporter()] if exporters is None else exporters,
        normalization=normalization,
        error_detector=error_detector,
    )
    with _STATE_LOCK:
        _STATE = state
    return state


def get_runtime_state() -> RuntimeState:
    global _STATE
    with _STATE_LOCK:
        if _STATE is None:
            _STATE = RuntimeState.from_settings(get_settings())
        return _STATE


def reset_runtime() -> None:
    """Drop the state so the next access re-creates it lazily (used by tests)."""

    global _STATE
    with _STATE_LOCK:
        _STATE = None


def register_exporter(exporter: Any) -> None:
    get_runtime_state().register(exporter)


def unregister_exporter(name: str) -> None:
    get_runtime_state().unregister(name)


# --- Module Notes -----------------------------------------------------------
# Exporters registered with an existing name replace the old entry at its original
# position; they are never moved to the end.
