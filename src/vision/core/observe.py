"""
vision.core.observe

The `observe` orchestrator.

Responsibilities:
- Create a fresh context per call and run the operation inside its scope.
- Drive exporter lifecycle hooks: before -> (success -> after) | (error -> on_error).
- Normalize context data once, after the operation settles and before exporters run.
- Return the operation's result or re-raise its original error, unchanged.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, TypeVar

from vision.core.context import ObserveOptions, VisionContext
from vision.core.runtime import RuntimeState, get_runtime_state
from vision.core.store import run_in_scope
from vision.exporters.fan_out import fan_out_error, fan_out_success, run_phase
from vision.utils.normalize import normalize_context

T = TypeVar("T")

OptionsLike = str | ObserveOptions | Mapping[str, Any]


def resolve_options(options: OptionsLike) -> ObserveOptions:
    if isinstance(options, ObserveOptions):
        return options
    if isinstance(options, str):
        return ObserveOptions(name=options)
    return ObserveOptions.model_validate(dict(options))


async def observe(
    options: OptionsLike,
    fn: Callable[[], Awaitable[T] | T],
    *,
    runtime: RuntimeState | None = None,
) -> T:
    """
    Run `fn` inside a new vision scope and hand the resulting context to exporters.

    `runtime` defaults to the process-wide state. Exporters and normalization config
    are captured at entry: `init()`/`register_exporter()` during the call do not
    affect it.
    """

    config = resolve_options(options)
    state = runtime or get_runtime_state()
    exporters = state.exporters
    normalization = state.normalization

    context = VisionContext.create(config)

    async def _lifecycle() -> T:
        await run_phase(exporters, "before", context)

        try:
            result: Any = fn()
            if inspect.isawaitable(result):
                result = await result
        except Exception as err:
            exported = normalize_context(context, normalization)
            await fan_out_error(exporters, exported, err)
            await run_phase(exporters, "on_error", exported, err)
            raise

        exported = normalize_context(context, normalization)
        await fan_out_success(exporters, exported)
        await run_phase(exporters, "after", exported)
        return result

    return await run_in_scope(context, _lifecycle)


def observed(options: OptionsLike) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator form of `observe` for coroutine functions (and plain functions, which
    become coroutine functions).

    Usage:
        @observed("user.login")
        async def login(user_id: str) -> None:
            vision.set("user_id", user_id)
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await observe(options, lambda: func(*args, **kwargs))

        return wrapper

    return decorator


# --- Module Notes -----------------------------------------------------------
# Only `Exception` is reported to exporters. CancelledError/KeyboardInterrupt skip the
# failure phase and propagate; the scope is still restored by `run_in_scope`.
