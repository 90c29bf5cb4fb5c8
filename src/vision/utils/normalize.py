"""
vision.utils.normalize

Context normalization applied once per scope, before exporters run.

Responsibilities:
- Produce a new context whose data keys follow the configured casing.
- Leave the source context untouched.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from vision.settings import KeyCasing
from vision.utils.key_transforms import transform_key, transform_keys

if TYPE_CHECKING:
    from vision.core.context import VisionContext


class NormalizationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = False
    key_casing: KeyCasing = Field(default="none", alias="keyCasing")
    deep: bool = True


def normalize_data(data: dict[str, Any], config: NormalizationConfig) -> dict[str, Any]:
    if not config.enabled or config.key_casing == "none":
        return dict(data)
    if config.deep:
        return transform_keys(data, config.key_casing)
    return {transform_key(k, config.key_casing): v for k, v in data.items()}


def normalize_context(context: VisionContext, config: NormalizationConfig) -> VisionContext:
    """
    Return the context to hand to exporters.

    Disabled normalization returns the context itself; otherwise a shallow copy with
    rewritten data (metadata such as id/name/timestamp is preserved).
    """

    if not config.enabled:
        return context
    return dataclasses.replace(context, data=normalize_data(context.data, config))


# --- Module Notes -----------------------------------------------------------
# Keys that exporters add after normalization are never rewritten: normalization
# runs exactly once per scope in `core.observe`.
