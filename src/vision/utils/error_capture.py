"""
vision.utils.error_capture

Error detection and safe serialization.

Responsibilities:
- Decide whether a value "looks like" an error (heuristic, shape based).
- Serialize any thrown/captured value into a plain dict without ever raising.
- Build the standard entry stored by `capture_error`.
"""

from __future__ import annotations

import json
import traceback
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

ErrorInfo = dict[str, Any]

_ERROR_SIGNAL_KEYS = ("message", "error", "stack", "code", "errno", "cause")

_PRIMITIVES = (bool, int, float, complex, bytes)


def is_error_like(value: Any) -> bool:
    """
    True for exception instances, mappings exposing an error signal key
    (message/error/stack/code/errno/cause), or mappings whose `name`/`type`
    contains "error" (case-insensitive). False for primitives, None, and sequences.
    """

    if isinstance(value, BaseException):
        return True
    if not isinstance(value, Mapping):
        return False

    if any(key in value for key in _ERROR_SIGNAL_KEYS):
        return True
    for key in ("name", "type"):
        label = value.get(key)
        if isinstance(label, str) and "error" in label.lower():
            return True
    return False


def serialize_error(value: Any) -> ErrorInfo:
    """
    Serialize any value into an ErrorInfo dict. Never raises.
    """

    try:
        if value is None:
            return {"message": str(value), "name": "NullError", "originalValue": value}
        if isinstance(value, BaseException):
            return _serialize_exception(value, seen={id(value)})
        if isinstance(value, str):
            return {"message": value, "name": "StringError", "originalValue": value}
        if isinstance(value, Mapping):
            return _serialize_mapping(value)
        if isinstance(value, _PRIMITIVES):
            return {
                "message": str(value),
                "name": f"{type(value).__name__}Error",
                "originalValue": value,
            }
        return _serialize_object(value)
    except Exception:
        return {"message": "[Unserializable error]", "name": "SerializationError"}


def _serialize_exception(exc: BaseException, *, seen: set[int]) -> ErrorInfo:
    info: ErrorInfo = {
        "message": str(exc) or "Unknown error",
        "name": _exception_name(exc),
    }
    if exc.__traceback__ is not None:
        info["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    for key, prop in _own_properties(exc):
        if key in ("message", "name", "stack", "cause") or prop is exc:
            continue
        info[key] = prop

    cause = exc.__cause__ if exc.__cause__ is not None else getattr(exc, "cause", None)
    if cause is not None and id(cause) not in seen:
        if isinstance(cause, BaseException):
            info["cause"] = _serialize_exception(cause, seen=seen | {id(cause)})
        else:
            info["cause"] = serialize_error(cause)

    info["errorType"] = type(exc).__name__
    return info


def _exception_name(exc: BaseException) -> str:
    # AttributeError/NameError/ImportError carry an unrelated builtin `name` (the missing
    # identifier or module); only a `name` declared by a user-defined class is honored.
    for klass in type(exc).__mro__:
        if "name" in vars(klass):
            if klass.__module__ == "builtins":
                return type(exc).__name__
            break
    name = getattr(exc, "name", None)
    return name if isinstance(name, str) and name else type(exc).__name__


def _own_properties(exc: BaseException) -> list[tuple[str, Any]]:
    # Instance attributes plus properties declared on user-defined exception classes.
    # Properties that raise on access are skipped.
    props = [(k, v) for k, v in vars(exc).items() if not k.startswith("_")]
    for klass in type(exc).__mro__:
        if klass.__module__ == "builtins":
            continue
        for key, attr in vars(klass).items():
            if not isinstance(attr, property) or key.startswith("_"):
                continue
            try:
                props.append((key, getattr(exc, key)))
            except Exception:
                continue
    return props


def _serialize_mapping(obj: Mapping[Any, Any]) -> ErrorInfo:
    own = {str(k): v for k, v in obj.items() if v is not obj}
    message = obj.get("message")
    name = obj.get("name")
    if name is None:
        name = obj.get("code")

    info: ErrorInfo = {
        "message": str(message) if message is not None else _dump(own, obj),
        "name": str(name) if name is not None and is_error_like(obj) else "ObjectError",
    }
    for key, prop in own.items():
        if key in ("message", "name"):
            continue
        info[key] = prop
    return info


def _serialize_object(obj: Any) -> ErrorInfo:
    if callable(obj):
        return {"message": str(obj), "name": "functionError", "originalValue": str(obj)}

    info: ErrorInfo = {"message": _dump(obj, obj), "name": "ObjectError"}
    attrs = getattr(obj, "__dict__", None)
    if isinstance(attrs, dict):
        for key, prop in attrs.items():
            if key.startswith("_") or key in ("message", "name") or prop is obj:
                continue
            info[key] = prop
    return info


def _dump(payload: Any, original: Any) -> str:
    try:
        return json.dumps(payload, default=str)
    except (TypeError, ValueError):
        return repr(original)


def create_error_entry(
    error: Any,
    *,
    fatal: bool | None = None,
    handled: bool | None = None,
    operation: str | None = None,
    **metadata: Any,
) -> dict[str, Any]:
    """
    Standard entry stored when an error is captured explicitly.

    Keys are flat so they survive key normalization: `error`, `error.timestamp`,
    `error.fatal`, `error.handled`, `error.operation`, `error.metadata`.
    """

    entry: dict[str, Any] = {
        "error": serialize_error(error),
        "error.timestamp": datetime.now(tz=UTC).isoformat(),
    }
    if fatal is not None:
        entry["error.fatal"] = fatal
    if handled is not None:
        entry["error.handled"] = handled
    if operation:
        entry["error.operation"] = operation
    if metadata:
        entry["error.metadata"] = metadata
    return entry


# --- Module Notes -----------------------------------------------------------
# `is_error_like` is only the default detector; `vision.init(error_detector=...)`
# replaces it for `vision.set`.
