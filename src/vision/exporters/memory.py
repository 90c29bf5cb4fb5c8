"""
vision.exporters.memory

In-memory exporter that keeps finished contexts (tests, local debugging).
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vision.core.context import VisionContext


@dataclass(frozen=True, slots=True)
class ExportedRecord:
    context: dict[str, Any]
    error: BaseException | None = None


class MemoryExporter:
    """Thread-safe, process-local record of exported contexts (resets on restart)."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self._lock = Lock()
        self._records: list[ExportedRecord] = []

    def success(self, ctx: VisionContext) -> None:
        with self._lock:
            self._records.append(ExportedRecord(context=ctx.snapshot()))

    def error(self, ctx: VisionContext, err: BaseException) -> None:
        with self._lock:
            self._records.append(ExportedRecord(context=ctx.snapshot(), error=err))

    @property
    def records(self) -> list[ExportedRecord]:
        with self._lock:
            return list(self._records)

    @property
    def successes(self) -> list[dict[str, Any]]:
        return [r.context for r in self.records if r.error is None]

    @property
    def failures(self) -> list[ExportedRecord]:
        return [r for r in self.records if r.error is not None]

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
