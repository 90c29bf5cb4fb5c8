"""
vision.observability.logging

Structured logging configuration.

Responsibilities:
- Configure `structlog` for JSON logs (or a console renderer for local development).
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from vision.settings import VisionSettings, get_settings


def configure_logging(settings: VisionSettings | None = None, *, json_logs: bool = True) -> None:
    """
    Call once at application startup; the library itself never configures logging
    on import. Service name and level come from `VisionSettings`.
    """

    settings = settings or get_settings()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer(default=str)
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            # Picks up context_id/context_name bound by `core.store.run_in_scope`.
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(settings.service_name),
            structlog.processors.dict_tracebacks if json_logs else structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Scope metadata (context_id/context_name) is bound via contextvars in
# `core.store.run_in_scope`.
