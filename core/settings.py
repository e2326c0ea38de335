# =============================================================================
# core/settings.py  —  View Tuning Constants
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects every presentation-tuning number used by the projector and the
#   camera controller into one dataclass, so none of them are hardcoded in
#   the math.
#
# ENVIRONMENT OVERRIDES:
#   Each tunable can be overridden with an environment variable (loaded from
#   .env by main.py via python-dotenv):
#
#     CONCAVE_OVERSCAN          → overscan margin            (default 1.15)
#     CONCAVE_DRAG_LNG          → degrees of lng per pixel   (default 0.14)
#     CONCAVE_DRAG_LAT          → degrees of lat per pixel   (default 0.1)
#     CONCAVE_WHEEL_FOV         → degrees of fov per wheel unit (default 0.03)
#     CONCAVE_AUTO_ROTATE_STEP  → degrees of lng per tick    (default 0.12)
#     CONCAVE_AUTO_ROTATE_MS    → tick interval in ms        (default 25)
#
#   A value that doesn't parse as a number, or isn't finite and positive,
#   keeps the default and logs a warning.  Same toggle style as the
#   USE_LIVE_* switches elsewhere.
# =============================================================================

import logging
import math
import os
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewTuning:
    """Sensitivities, limits and margins for the concave Earth view."""

    # --- Projection ---
    overscan: float = 1.15             # |nx| or |ny| beyond this → culled

    # --- Camera limits ---
    lat_limit: float = 89.5            # Camera latitude saturates at ±lat_limit
    fov_min: float = 35.0
    fov_max: float = 108.0
    default_fov: float = 78.0          # Initial fov handed out by the tool

    # --- Gesture sensitivities ---
    drag_lng_per_px: float = 0.14      # Horizontal drag turns the camera west
    drag_lat_per_px: float = 0.1       # Vertical drag tilts the camera
    wheel_fov_per_unit: float = 0.03   # Scroll widens / narrows the fov

    # --- Auto-rotate ---
    auto_rotate_step: float = 0.12     # Degrees of longitude per tick
    auto_rotate_interval_ms: int = 25

    @classmethod
    def from_env(cls) -> "ViewTuning":
        """Build a ViewTuning, applying any CONCAVE_* environment overrides."""
        overrides = {}
        for f in fields(cls):
            env_name = _ENV_NAMES.get(f.name)
            if env_name is None:
                continue
            raw = os.environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                value = float(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r (not a number)", env_name, raw)
                continue
            if not math.isfinite(value) or value <= 0:
                logger.warning("Ignoring %s=%r (must be a finite positive number)", env_name, raw)
                continue
            if f.type in (int, "int"):
                value = int(value)
                if value < 1:
                    logger.warning("Ignoring %s=%r (must be at least 1)", env_name, raw)
                    continue
            overrides[f.name] = value
        return replace(cls(), **overrides)


_ENV_NAMES = {
    "overscan": "CONCAVE_OVERSCAN",
    "drag_lng_per_px": "CONCAVE_DRAG_LNG",
    "drag_lat_per_px": "CONCAVE_DRAG_LAT",
    "wheel_fov_per_unit": "CONCAVE_WHEEL_FOV",
    "auto_rotate_step": "CONCAVE_AUTO_ROTATE_STEP",
    "auto_rotate_interval_ms": "CONCAVE_AUTO_ROTATE_MS",
}


DEFAULT_TUNING = ViewTuning()
