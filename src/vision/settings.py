"""
vision.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven defaults for the lazily created runtime state.
- Offer a cached settings instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

KeyCasing = Literal["none", "snake_case", "camelCase", "kebab-case", "PascalCase"]


class VisionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VISION_", case_sensitive=False)

    service_name: str = "vision"
    log_level: str = "INFO"

    # Normalization applied when the runtime is created lazily (no explicit init()).
    normalization_enabled: bool = False
    key_casing: KeyCasing = "none"
    normalization_deep: bool = True

    default_exporter: Literal["console", "none"] = "console"


@lru_cache(maxsize=1)
def get_settings() -> VisionSettings:
    return VisionSettings()


# --- Module Notes -----------------------------------------------------------
# An explicit `vision.init()` does not read these values; only first-use lazy
# initialization does (see `core.runtime.get_runtime_state`).
