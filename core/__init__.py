# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the domain logic behind the two widgets:
#
#   Concave Earth navigator
#     geometry.py    sphere/vector helpers, lng wrapping, lat clamping
#     projection.py  3D → 2D camera projection and depth ordering
#     camera.py      drag / wheel / auto-rotate / selection state machine
#     session.py     asyncio runtime for one open view (timer, resizes)
#     landmarks.py   marker source + detail lookup, scoped per session
#
#   Arduino circuit workspace
#     highlight.py   line-oriented token highlighter
#     circuits.py    sketch templates → workspace props
#
#   Shared
#     models.py      dataclasses for every record
#     settings.py    tuning constants with environment overrides
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any
#   orchestration framework.  Everything here runs in a bare interpreter.
# =============================================================================
