# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every record that flows between
# the tool server, the camera logic, and the widgets that render them.
# They carry no behavior of their own.
#
# TWO FAMILIES OF MODELS:
#   1. Concave Earth — Marker, LandmarkDetails, CameraState,
#      ProjectedPoint, ConcaveEarthView
#   2. Arduino workspace — Token, CircuitComponent, CircuitWorkspace
#
#   The two families never reference each other.
#
# SERIALIZATION:
#   The tools/ layer turns these into plain dicts with dataclasses.asdict()
#   before they go over MCP.  TokenKind subclasses str so an asdict() result
#   is already JSON-friendly.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# -----------------------------------------------------------------------------
# Marker — one landmark as shown on the sphere
# -----------------------------------------------------------------------------
# Markers are received once per rendering pass and never mutated.  Their
# latitude is NOT clamped: an out-of-range value is allowed and simply ends
# up off-screen after projection.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Marker:
    """A landmark pin placed on the inside of the globe."""

    id: str                            # Unique within one view ("seoul")
    name: str                          # "Seoul"
    country: str                       # "South Korea"
    type: str                          # "city", "terrain", ...
    lat: float                         # Degrees, not clamped
    lng: float                         # Degrees, wrapped to (-180, 180]


# -----------------------------------------------------------------------------
# LandmarkDetails — the full record behind a marker
# -----------------------------------------------------------------------------
@dataclass
class LandmarkDetails:
    """Everything the details panel shows for a selected landmark."""

    id: str
    name: str
    country: str
    type: str
    lat: float
    lng: float
    facts: list[str] = field(default_factory=list)

    def to_marker(self) -> Marker:
        """Drop the facts; markers travel without them."""
        return Marker(
            id=self.id,
            name=self.name,
            country=self.country,
            type=self.type,
            lat=self.lat,
            lng=self.lng,
        )


# -----------------------------------------------------------------------------
# CameraState — where the viewer at the globe's center is looking
# -----------------------------------------------------------------------------
# Exactly one of these exists per view session.  It is mutated by drag,
# wheel and the auto-rotate timer, and reset to the tool-supplied camera.
# -----------------------------------------------------------------------------
@dataclass
class CameraState:
    """Camera orientation over the unit sphere."""

    lat: float = 0.0                   # [-89.5, 89.5]
    lng: float = 0.0                   # (-180, 180]
    fov: float = 78.0                  # Full field-of-view in degrees, [35, 108]

    def copy(self) -> "CameraState":
        return CameraState(lat=self.lat, lng=self.lng, fov=self.fov)


# -----------------------------------------------------------------------------
# ProjectedPoint — a marker after the 3D → 2D projection
# -----------------------------------------------------------------------------
# Derived and ephemeral: recomputed whenever the camera or the marker set
# changes.  Coordinates are None for points that are not visible.
# -----------------------------------------------------------------------------
@dataclass
class ProjectedPoint:
    """Viewport placement of one marker for the current camera."""

    marker_id: str
    visible: bool
    x_percent: Optional[float] = None  # 0 = left edge, 100 = right edge
    y_percent: Optional[float] = None  # 0 = top edge, 100 = bottom edge
    depth: Optional[float] = None      # Camera-space z; larger = farther along the view axis


# -----------------------------------------------------------------------------
# ConcaveEarthView — the props handed to the globe widget
# -----------------------------------------------------------------------------
@dataclass
class ConcaveEarthView:
    """Rendering-surface contract for the concave Earth navigator."""

    title: str
    focus: str
    camera: CameraState
    markers: list[Marker] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Token — one highlighted fragment of a source line
# -----------------------------------------------------------------------------
class TokenKind(str, Enum):
    PLAIN = "plain"
    KEYWORD = "keyword"
    NUMBER = "number"
    COMMENT = "comment"
    PREPROCESSOR = "preprocessor"


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind = TokenKind.PLAIN


# -----------------------------------------------------------------------------
# CircuitComponent / CircuitWorkspace — Arduino widget props
# -----------------------------------------------------------------------------
@dataclass
class CircuitComponent:
    """One part on the bill of materials."""

    name: str                          # "5mm Red LED"
    qty: int                           # How many the build needs
    purchase_url: str                  # Where to buy it


@dataclass
class CircuitWorkspace:
    """Everything the circuit workspace widget renders."""

    prompt: str                        # The user's original request
    filename: str                      # "blink_led.ino"
    code: str                          # Full sketch source
    diagram_title: str                 # Heading above the schematic preview
    diagram_notes: list[str] = field(default_factory=list)
    components: list[CircuitComponent] = field(default_factory=list)
    highlighted: list[list[Token]] = field(default_factory=list)
    # highlighted holds one token list per line of `code`.
