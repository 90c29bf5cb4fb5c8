"""
vision.utils.key_transforms

Key casing transforms.

Responsibilities:
- Rewrite a single key into a target casing style.
- Rewrite the keys of nested dict/list structures without mutating the input.
"""

from __future__ import annotations

import re
from typing import Any

from vision.settings import KeyCasing

_DELIMITERS = re.compile(r"[-_\s]+")
_HUMPS = re.compile(r"(?=[A-Z])")


def split_words(key: str) -> list[str]:
    """
    Split a key on delimiters, then on camel humps.

    `split_words("userId") == ["user", "Id"]`
    `split_words("XMLHttpRequest") == ["X", "M", "L", "Http", "Request"]`
    """

    if len(key) <= 1:
        return [key]

    words: list[str] = []
    for part in _DELIMITERS.split(key):
        words.extend(w for w in _HUMPS.split(part) if w)
    return words or [key]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def transform_key(key: str, style: KeyCasing) -> str:
    if style == "none":
        return key

    words = split_words(key)
    if style == "camelCase":
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if style == "snake_case":
        return "_".join(w.lower() for w in words)
    if style == "kebab-case":
        return "-".join(w.lower() for w in words)
    if style == "PascalCase":
        return "".join(_capitalize(w) for w in words)
    return key


def transform_keys(value: Any, style: KeyCasing, _visited: set[int] | None = None) -> Any:
    """
    Return a copy of `value` with every dict key (at any depth) rewritten to `style`.

    Lists and tuples keep their shape and type; other values are returned as-is.
    A container already on the current recursion path is returned unchanged rather
    than followed.
    """

    if style == "none":
        return value

    visited = _visited if _visited is not None else set()
    if not isinstance(value, (dict, list, tuple)):
        return value
    if id(value) in visited:
        return value

    visited.add(id(value))
    try:
        if isinstance(value, dict):
            return {
                (transform_key(k, style) if isinstance(k, str) else k): transform_keys(
                    v, style, visited
                )
                for k, v in value.items()
            }
        items = [transform_keys(item, style, visited) for item in value]
        return items if isinstance(value, list) else type(value)(items)
    finally:
        visited.discard(id(value))


# --- Module Notes -----------------------------------------------------------
# Collisions after renaming (e.g. "userId" and "user_id" under snake_case) resolve
# last-write-wins in iteration order.
