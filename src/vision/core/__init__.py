"""
vision.core

Context propagation, mutation, runtime state and orchestration.

Responsibilities:
- Continuation-scoped "current context" storage.
- Mutation API for the current context.
- Process-wide exporter registry and normalization config.
- The `observe` orchestrator driving exporter lifecycle hooks.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Import from the submodules directly; `vision/__init__.py` is the public surface.
