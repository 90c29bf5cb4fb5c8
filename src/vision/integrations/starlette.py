"""
vision.integrations.starlette

ASGI middleware that observes every HTTP request.

Responsibilities:
- Generate/propagate request IDs.
- Wrap the downstream app in `vision.observe` with request metadata seeded.
- Record the response status code on the context.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable

from starlette.datastructures import Headers, MutableHeaders

from vision.core.context import ObserveOptions, set_value
from vision.core.observe import observe
from vision.settings import get_settings


class VisionMiddleware:
    """
    - Ensures every request has a request id (echoed as `x-request-id`)
    - Runs the request inside a vision scope so handlers can call `vision.set(...)`
    """

    def __init__(self, app: Callable[..., Any], *, source: str | None = None) -> None:
        self.app = app
        self._source = source

    async def __call__(
        self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]
    ) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        # Prefer a caller-provided request id for trace continuity; otherwise generate one.
        request_id = Headers(scope=scope).get("x-request-id") or str(uuid.uuid4())
        method = scope.get("method", "GET")
        path = scope.get("path", "/")

        async def send_wrapper(message: dict[str, Any]) -> None:
            if message.get("type") == "http.response.start":
                set_value("http.status_code", int(message.get("status", 500)))
                MutableHeaders(scope=message)["x-request-id"] = request_id
            await send(message)

        options = ObserveOptions(
            name=f"{method} {path}",
            scope="http",
            source=self._source or get_settings().service_name,
            initial={"request_id": request_id, "http.method": method, "http.path": path},
        )
        await observe(options, lambda: self.app(scope, receive, send_wrapper))


# --- Module Notes -----------------------------------------------------------
# Exceptions raised by the downstream app are reported to exporters and re-raised
# unchanged, so Starlette's own error handling still applies.
