"""
vision.errors

Exceptions raised by the vision core.

Responsibilities:
- Signal mutation/access attempts made outside of any observed scope.
"""

from __future__ import annotations


class VisionError(Exception):
    pass


class NoActiveContextError(VisionError, LookupError):
    """
    Raised when a context operation (set/get/push/merge/context) is called
    outside of an `observe()` scope.
    """

    def __init__(self, message: str = "No active vision context") -> None:
        super().__init__(message)


# --- Module Notes -----------------------------------------------------------
# Exporter hook failures are deliberately not represented here: they are caught and
# logged inside `exporters.fan_out` and never reach the caller.
