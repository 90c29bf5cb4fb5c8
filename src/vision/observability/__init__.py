"""
vision.observability

Observability package for the library itself.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
