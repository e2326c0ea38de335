# =============================================================================
# core/session.py  —  Concave Earth View Session (async runtime)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs one CameraController inside an asyncio event loop, the way the
#   widget runs it in the browser:
#     - an auto-rotate timer that ticks every few milliseconds
#     - a viewport size feed (the "resize observer")
#     - an awaited detail lookup each time the selection changes
#
# LIFECYCLE:
#     session = ViewSession(view, fetch_details)
#     session.start()          # timer running
#     ...gestures / resizes / selections...
#     await session.close()    # "unmount": timer stopped, resizes ignored
#
#   `async with ViewSession(...) as session:` does start()/close() for you.
#
# CONCURRENCY:
#   Single event loop, no threads, no locks.  The timer and drag gestures
#   both move the camera longitude, but the controller suspends rotation
#   for the whole drag so the two never interleave.
# =============================================================================

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from core.camera import CameraController
from core.models import ConcaveEarthView, LandmarkDetails
from core.settings import DEFAULT_TUNING, ViewTuning

logger = logging.getLogger(__name__)

DetailFetcher = Callable[[str], Awaitable[LandmarkDetails]]


class ViewSession:
    """One open concave Earth view."""

    def __init__(
        self,
        view: Optional[ConcaveEarthView],
        fetch_details: DetailFetcher,
        tuning: ViewTuning = DEFAULT_TUNING,
    ):
        self.controller = CameraController(view, tuning=tuning)
        self._fetch_details = fetch_details
        self._timer: Optional[asyncio.Task] = None
        self._initial_lookup: Optional[asyncio.Task] = None
        self._observing = False
        self._closed = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    def start(self) -> None:
        """Begin the auto-rotate timer, accept viewport sizes and load the
        details of the initially selected marker."""
        if self._closed or self._timer is not None:
            return
        loop = asyncio.get_running_loop()
        self._observing = True
        self._timer = loop.create_task(self._run_timer())
        selected = self.controller.selected_id
        if selected is not None:
            self._initial_lookup = loop.create_task(self.select_marker(selected))
            self._initial_lookup.add_done_callback(_report_lookup_failure)

    async def close(self) -> None:
        """Stop the timer and the resize feed.  Safe to call twice."""
        self._closed = True
        self._observing = False
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.cancel()
        try:
            await timer
        except asyncio.CancelledError:
            pass

    async def __aenter__(self) -> "ViewSession":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def is_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def _run_timer(self) -> None:
        interval = self.controller.tuning.auto_rotate_interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            self.controller.tick()

    # -------------------------------------------------------------------------
    # Viewport
    # -------------------------------------------------------------------------
    def resize(self, width: float, height: float) -> None:
        if not self._observing:
            return
        self.controller.resize(width, height)

    @property
    def is_loading(self) -> bool:
        return not self.controller.loaded

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------
    async def select_marker(self, marker_id: str) -> Optional[LandmarkDetails]:
        """Select a marker and load its details.

        A newer selection made while this lookup is in flight wins: the
        older result is discarded rather than shown.  Returns the details
        only when they were accepted.
        """
        generation = self.controller.select(marker_id)
        details = await self._fetch_details(marker_id)
        if self.controller.accept_details(generation, details):
            return details
        return None

    # -------------------------------------------------------------------------
    # Widget extras
    # -------------------------------------------------------------------------
    def route_prompt(self) -> str:
        """Follow-up message asking the agent for a route between markers."""
        names = ", ".join(m.name for m in self.controller.markers[:3])
        return f"Suggest a travel route that connects {names} with practical flight legs"

    def overlay(self) -> tuple[str, str, str]:
        """HUD readout shown in the corner of the viewport."""
        camera = self.controller.camera
        return (
            f"{camera.lat:.2f} lat",
            f"{camera.lng:.2f} lng",
            f"{camera.fov:.0f} fov",
        )


def _report_lookup_failure(task: asyncio.Task) -> None:
    # Nothing awaits the initial lookup, so its failure is surfaced here.
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.warning("Initial landmark lookup failed: %r", error)
