"""
vision.core.store

Continuation-scoped storage for the current VisionContext.

Responsibilities:
- Make a context "current" for the whole dynamic and async extent of a callable.
- Restore the previous context (or none) on every exit path.
"""

from __future__ import annotations

import inspect
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

import structlog

if TYPE_CHECKING:
    from vision.core.context import VisionContext

T = TypeVar("T")

# asyncio copies the active contextvars.Context into each Task it creates, so
# concurrently scheduled observe() calls never see each other's context while
# tasks spawned inside a scope inherit it.
_current: ContextVar[VisionContext | None] = ContextVar("vision_context", default=None)


def get_current() -> VisionContext | None:
    return _current.get()


async def run_in_scope(context: VisionContext, fn: Callable[[], Awaitable[T] | T]) -> T:
    token = _current.set(context)
    try:
        with structlog.contextvars.bound_contextvars(
            context_id=context.id,
            context_name=context.name,
        ):
            result: Any = fn()
            if inspect.isawaitable(result):
                result = await result
            return result
    finally:
        _current.reset(token)


# --- Module Notes -----------------------------------------------------------
# Nested scopes shadow the parent only inside their own continuation; the token
# reset restores the parent (stack discipline).
