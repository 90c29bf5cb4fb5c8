"""
vision.integrations

Optional adapters that wrap framework units of work in `observe()`.

Responsibilities:
- Starlette/FastAPI ASGI middleware (`vision.integrations.starlette`).
"""

# Package marker.
