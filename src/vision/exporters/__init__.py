"""
vision.exporters

Exporter contract, built-in sinks and lifecycle fan-out.

Responsibilities:
- Adapt user exporters (dataclass or duck-typed objects) to one shape.
- Provide the default console exporter and an in-memory exporter.
- Run lifecycle hooks with per-hook failure isolation.
"""

from vision.exporters.base import Exporter, as_exporter
from vision.exporters.console import ConsoleExporter
from vision.exporters.memory import MemoryExporter

__all__ = ["ConsoleExporter", "Exporter", "MemoryExporter", "as_exporter"]
