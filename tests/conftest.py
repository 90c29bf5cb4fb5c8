"""
tests.conftest

Shared fixtures.

Responsibilities:
- Isolate the process-wide runtime state between tests.
- Provide an in-memory exporter installed as the only exporter.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

import vision
from vision.core.runtime import reset_runtime
from vision.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_runtime() -> Iterator[None]:
    reset_runtime()
    get_settings.cache_clear()
    yield
    reset_runtime()
    get_settings.cache_clear()


@pytest.fixture
def memory() -> vision.MemoryExporter:
    exporter = vision.MemoryExporter()
    vision.init(exporters=[exporter])
    return exporter
