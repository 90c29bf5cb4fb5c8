"""
vision.core.context

The per-scope context record and the mutation API.

Responsibilities:
- Define VisionContext (id, timestamp, name, scope, source, data).
- Provide set/get/push/merge on the current context.
- Provide explicit error capture into the current context.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from vision.core.runtime import get_runtime_state
from vision.core.store import get_current
from vision.errors import NoActiveContextError
from vision.utils.error_capture import create_error_entry, serialize_error


class ObserveOptions(BaseModel):
    """
    Configuration accepted by `observe()` in place of a bare name.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    scope: str | None = None
    source: str | None = None
    initial: dict[str, Any] = Field(default_factory=dict)


@dataclass(slots=True)
class VisionContext:
    # One per scope; exporters receive it (or its normalized copy) once the scope settles.
    id: str
    timestamp: str
    name: str
    scope: str | None = None
    source: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, options: ObserveOptions) -> VisionContext:
        return cls(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(tz=UTC).isoformat(),
            name=options.name,
            scope=options.scope,
            source=options.source,
            data=dict(options.initial),
        )

    def snapshot(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "name": self.name,
            "scope": self.scope,
            "source": self.source,
            "data": dict(self.data),
        }


def get_context() -> VisionContext:
    context = get_current()
    if context is None:
        raise NoActiveContextError()
    return context


def set_value(key: str, value: Any) -> None:
    context = get_context()
    if get_runtime_state().is_error_like(value):
        value = serialize_error(value)
    context.data[key] = value


def get_value(key: str, default: Any = None) -> Any:
    return get_context().data.get(key, default)


def push_value(key: str, value: Any) -> None:
    """
    Append to the list stored at `key`; a missing or non-list value is replaced
    with a new one-element list.
    """

    data = get_context().data
    existing = data.get(key)
    if isinstance(existing, list):
        data[key] = [*existing, value]
    else:
        data[key] = [value]


def merge_value(key: str, value: dict[str, Any]) -> None:
    """
    Shallow merge into the dict stored at `key` (new value wins per key); a missing
    or non-dict value is replaced wholesale.
    """

    data = get_context().data
    existing = data.get(key)
    if isinstance(existing, dict):
        data[key] = {**existing, **value}
    else:
        data[key] = dict(value)


def capture_error(
    error: Any,
    *,
    fatal: bool = False,
    handled: bool = True,
    operation: str | None = None,
    **metadata: Any,
) -> None:
    data = get_context().data
    data.update(
        create_error_entry(error, fatal=fatal, handled=handled, operation=operation, **metadata)
    )


def capture_exception(error: Any, **kwargs: Any) -> None:
    kwargs["fatal"] = True
    capture_error(error, **kwargs)


# --- Module Notes -----------------------------------------------------------
# Every function here raises NoActiveContextError outside of a scope; that error is
# never caught internally.
