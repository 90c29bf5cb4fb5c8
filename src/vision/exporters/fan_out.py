"""
vision.exporters.fan_out

Lifecycle fan-out across registered exporters.

Responsibilities:
- Invoke one hook phase on every exporter, in registration order, sequentially.
- Await async hooks before the next exporter starts.
- Catch, log and swallow any hook failure.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Sequence

from vision.exporters.base import Exporter
from vision.observability.logging import get_logger

if TYPE_CHECKING:
    from vision.core.context import VisionContext

log = get_logger(__name__)


async def _call_hook(exporter: Exporter, hook: str, fn: Callable[..., Any], *args: Any) -> None:
    try:
        result = fn(*args)
        if inspect.isawaitable(result):
            await result
    except Exception:
        log.exception("exporter_hook_failed", exporter=exporter.name, hook=hook)


async def run_phase(
    exporters: Sequence[Exporter],
    hook: str,
    context: VisionContext,
    error: BaseException | None = None,
) -> None:
    """Run an optional hook (`before`, `after`, `on_error`) on every exporter defining it."""

    for exporter in exporters:
        fn = getattr(exporter, hook)
        if fn is None:
            continue
        args = (context,) if hook in ("before", "after") else (context, error)
        await _call_hook(exporter, hook, fn, *args)


async def fan_out_success(exporters: Sequence[Exporter], context: VisionContext) -> None:
    for exporter in exporters:
        await _call_hook(exporter, "success", exporter.success, context)


async def fan_out_error(
    exporters: Sequence[Exporter], context: VisionContext, error: BaseException
) -> None:
    for exporter in exporters:
        if exporter.error is not None:
            await _call_hook(exporter, "error", exporter.error, context, error)
        else:
            await _call_hook(exporter, "success", exporter.success, context)


# --- Module Notes -----------------------------------------------------------
# Hook failures never change the observed operation's outcome; the orchestrator
# relies on these helpers not raising `Exception`.
