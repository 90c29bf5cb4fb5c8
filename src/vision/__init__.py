"""
vision

Structured, per-operation observability context.

Responsibilities:
- Expose the public API: observe, the mutation functions, runtime configuration.
- Expose package version metadata.

Usage:
    import vision

    async def handler() -> None:
        vision.set("user_id", 123)
        vision.push("events", "login")

    await vision.observe("user.login", handler)
"""

from vision.core.context import (
    ObserveOptions,
    VisionContext,
    capture_error,
    capture_exception,
    get_context as context,
    get_value as get,
    merge_value as merge,
    push_value as push,
    set_value as set,
)
from vision.core.observe import observe, observed
from vision.core.runtime import (
    RuntimeState,
    get_runtime_state,
    init_runtime as init,
    register_exporter,
    unregister_exporter,
)
from vision.core.store import get_current
from vision.errors import NoActiveContextError, VisionError
from vision.exporters import ConsoleExporter, Exporter, MemoryExporter
from vision.utils.normalize import NormalizationConfig

__all__ = [
    "ConsoleExporter",
    "Exporter",
    "MemoryExporter",
    "NoActiveContextError",
    "NormalizationConfig",
    "ObserveOptions",
    "RuntimeState",
    "VisionContext",
    "VisionError",
    "__version__",
    "capture_error",
    "capture_exception",
    "context",
    "get",
    "get_current",
    "get_runtime_state",
    "init",
    "merge",
    "observe",
    "observed",
    "push",
    "register_exporter",
    "set",
    "unregister_exporter",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# `set`/`get` shadow the builtins only inside this module.
