"""
vision.exporters.console

Default exporter: logs finished contexts through structlog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vision.observability.logging import get_logger
from vision.utils.error_capture import serialize_error

if TYPE_CHECKING:
    from vision.core.context import VisionContext


class ConsoleExporter:
    """
    Successful contexts are logged at info level as `vision_success`; failed ones
    at error level as `vision_error`, with the serialized error attached.
    """

    def __init__(self, *, name: str = "console", logger_name: str = "vision.console") -> None:
        self.name = name
        self._log = get_logger(logger_name)

    def success(self, ctx: VisionContext) -> None:
        self._log.info("vision_success", context=ctx.snapshot())

    def error(self, ctx: VisionContext, err: BaseException) -> None:
        self._log.error("vision_error", context=ctx.snapshot(), error=serialize_error(err))
