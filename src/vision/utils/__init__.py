"""
vision.utils

Pure helpers used by the core (no context or runtime access).

Responsibilities:
- Error detection and safe serialization.
- Key casing transforms and context normalization.
"""

# Package marker.
