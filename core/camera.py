# =============================================================================
# core/camera.py  —  Camera Interaction Controller
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the camera state of one concave Earth view and applies gestures to
#   it: pointer drag, scroll wheel, reset, and the auto-rotate tick.  It also
#   tracks the selected marker and which detail lookup is still wanted.
#
# THE STATE MACHINE:
#
#     ┌──────────────┐  pointer_down   ┌────────────┐
#     │ AUTO_ROTATING│ ──────────────▶ │  DRAGGING  │
#     └──────────────┘                 └────────────┘
#            ▲                          │ pointer_up / pointer_leave
#            │ toggle_auto_rotate()     ▼
#            └─────────────────────  ┌────────────┐
#                                    │    IDLE    │
#                                    └────────────┘
#
#   pointer_down always switches auto-rotate OFF.  Ending a drag never turns
#   it back on; only an explicit toggle does.
#
# DRAG MATH:
#   Deltas are measured from the LAST pointer position, not the drag start,
#   so each move applies a running delta:
#       lng ← wrap(lng − dx · drag_lng_per_px)
#       lat ← clamp(lat + dy · drag_lat_per_px, ±lat_limit)
#
# SELECTION GENERATIONS:
#   Every select() bumps a generation counter.  A detail response is only
#   accepted if it carries the current generation, so a slow lookup for an
#   old selection can never overwrite the details of a newer one.
#
# This class is synchronous and has no timers of its own.  core/session.py
# drives it from an asyncio event loop.
# =============================================================================

import logging
from enum import Enum
from typing import Optional

from core.geometry import clamp, clamp_lat, wrap_lng
from core.models import CameraState, ConcaveEarthView, LandmarkDetails, Marker, ProjectedPoint
from core.projection import project_markers
from core.settings import DEFAULT_TUNING, ViewTuning

logger = logging.getLogger(__name__)


class ControllerState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    AUTO_ROTATING = "auto_rotating"


class CameraController:
    """Gesture-driven camera for one concave Earth view."""

    def __init__(
        self,
        view: Optional[ConcaveEarthView] = None,
        tuning: ViewTuning = DEFAULT_TUNING,
        auto_rotate: bool = True,
    ):
        self.tuning = tuning
        self.camera = CameraState(fov=tuning.default_fov)
        self.initial_camera = self.camera.copy()
        self.markers: list[Marker] = []
        self.title = "Concave Earth Navigator"
        self.focus = ""
        self.aspect = 16 / 10
        self.auto_rotate = auto_rotate
        self.selected_id: Optional[str] = None
        self.details: Optional[LandmarkDetails] = None
        self.details_pending = False
        self.loaded = False

        self._anchor: Optional[tuple[float, float]] = None
        self._generation = 0

        if view is not None:
            self.load(view)

    # -------------------------------------------------------------------------
    # Props
    # -------------------------------------------------------------------------
    def load(self, view: ConcaveEarthView) -> None:
        """Adopt a fresh props payload from the tool.

        The camera jumps to the supplied camera (lat clamped, lng wrapped,
        fov bounded) and the first marker becomes the selection.
        """
        self.title = view.title
        self.focus = view.focus
        self.markers = list(view.markers)
        self.initial_camera = CameraState(
            lat=clamp_lat(view.camera.lat, self.tuning.lat_limit),
            lng=wrap_lng(view.camera.lng),
            fov=clamp(view.camera.fov, self.tuning.fov_min, self.tuning.fov_max),
        )
        self.camera = self.initial_camera.copy()
        self.loaded = True
        self.select(self.markers[0].id if self.markers else None)

    @property
    def state(self) -> ControllerState:
        if self._anchor is not None:
            return ControllerState.DRAGGING
        if self.auto_rotate:
            return ControllerState.AUTO_ROTATING
        return ControllerState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self._anchor is not None

    # -------------------------------------------------------------------------
    # Pointer gestures
    # -------------------------------------------------------------------------
    def pointer_down(self, x: float, y: float) -> None:
        self._anchor = (x, y)
        self.auto_rotate = False

    def pointer_move(self, x: float, y: float) -> bool:
        """Apply a drag step.  Returns False when no drag is in progress."""
        if self._anchor is None:
            return False
        last_x, last_y = self._anchor
        dx = x - last_x
        dy = y - last_y
        self._anchor = (x, y)
        self.camera.lng = wrap_lng(self.camera.lng - dx * self.tuning.drag_lng_per_px)
        self.camera.lat = clamp_lat(
            self.camera.lat + dy * self.tuning.drag_lat_per_px, self.tuning.lat_limit
        )
        return True

    def pointer_up(self) -> None:
        self._anchor = None

    def pointer_leave(self) -> None:
        self._anchor = None

    def wheel(self, delta_y: float) -> bool:
        """Zoom the field-of-view.  Always returns True: page scroll is suppressed."""
        self.camera.fov = clamp(
            self.camera.fov + delta_y * self.tuning.wheel_fov_per_unit,
            self.tuning.fov_min,
            self.tuning.fov_max,
        )
        return True

    # -------------------------------------------------------------------------
    # Auto-rotate & buttons
    # -------------------------------------------------------------------------
    def tick(self) -> bool:
        """One auto-rotate step.  No-op while paused or dragging."""
        if not self.auto_rotate or self._anchor is not None:
            return False
        self.camera.lng = wrap_lng(self.camera.lng + self.tuning.auto_rotate_step)
        return True

    def toggle_auto_rotate(self) -> bool:
        self.auto_rotate = not self.auto_rotate
        return self.auto_rotate

    def set_auto_rotate(self, enabled: bool) -> None:
        self.auto_rotate = enabled

    def reset(self) -> None:
        """Back to the tool-supplied camera.  Auto-rotate is left alone."""
        self.camera = self.initial_camera.copy()

    def resize(self, width: float, height: float) -> float:
        self.aspect = width / max(height, 1)
        return self.aspect

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------
    def select(self, marker_id: Optional[str]) -> int:
        """Change the selected marker and return the new lookup generation."""
        self._generation += 1
        self.selected_id = marker_id
        self.details = None
        self.details_pending = marker_id is not None
        return self._generation

    @property
    def generation(self) -> int:
        return self._generation

    def accept_details(self, generation: int, details: LandmarkDetails) -> bool:
        """Store a lookup result if it still belongs to the current selection."""
        if generation != self._generation:
            logger.debug(
                "Dropping stale details for %s (generation %d, current %d)",
                details.id, generation, self._generation,
            )
            return False
        self.details = details
        self.details_pending = False
        return True

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------
    def projected(self) -> list[tuple[Marker, ProjectedPoint]]:
        """Visible markers for the current camera, farthest first."""
        return project_markers(self.markers, self.camera, self.aspect, self.tuning)
