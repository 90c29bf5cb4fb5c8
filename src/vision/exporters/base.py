"""
vision.exporters.base

The exporter contract.

Responsibilities:
- Describe the lifecycle hooks an exporter may implement.
- Normalize arbitrary exporter objects into an `Exporter`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable

if TYPE_CHECKING:
    from vision.core.context import VisionContext

ContextHook = Callable[["VisionContext"], "Awaitable[None] | None"]
ErrorHook = Callable[["VisionContext", BaseException], "Awaitable[None] | None"]

HOOK_NAMES = ("success", "error", "before", "after", "on_error")


@dataclass(frozen=True, slots=True)
class Exporter:
    """
    A named sink. Only `success` is required; `error` falls back to `success`
    so exporters that implement only the happy path still see failed contexts.
    Hooks may be plain functions or coroutine functions.
    """

    name: str
    success: ContextHook
    error: ErrorHook | None = None
    before: ContextHook | None = None
    after: ContextHook | None = None
    on_error: ErrorHook | None = None


def as_exporter(obj: Any) -> Exporter:
    if isinstance(obj, Exporter):
        return obj

    name = getattr(obj, "name", None)
    if not isinstance(name, str) or not name:
        raise TypeError("exporter must expose a non-empty string `name`")
    success = getattr(obj, "success", None)
    if not callable(success):
        raise TypeError(f"exporter {name!r} must implement `success(ctx)`")

    hooks = {hook: getattr(obj, hook, None) for hook in HOOK_NAMES[1:]}
    return Exporter(
        name=name,
        success=success,
        **{hook: fn for hook, fn in hooks.items() if callable(fn)},
    )


# --- Module Notes -----------------------------------------------------------
# Exporter objects are adapted at registration time; registry entries are always
# `Exporter` instances.
