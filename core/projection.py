# =============================================================================
# core/projection.py  —  Spherical Camera Projector
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Places lat/lng markers on screen for a viewer standing at the center of
#   the globe and looking outward along the camera's (lat, lng).  It's a
#   pinhole camera whose optical axis is the camera's own unit vector.
#
# THE PIPELINE (per marker):
#   1. lat/lng → unit vector P                       (core/geometry.py)
#   2. camera lat/lng → orthonormal (right, up, forward) basis
#   3. camera-space coords: xCam = P·right, yCam = P·up, zCam = P·forward
#   4. zCam <= 0 → behind the viewer → not visible
#   5. perspective divide by zCam · tan(fov/2) (and aspect for x)
#   6. outside the overscan margin → not visible
#   7. normalized coords → viewport percentages (y axis flipped for screens)
#
# DEPTH ORDERING:
#   project_markers() returns visible markers farthest-first (descending
#   depth) so nearer markers are painted last and sit on top.  This is a
#   plain sort, not a z-buffer.
#
# Everything here is a pure function of its inputs.  Callers recompute on
# every camera/marker/aspect change instead of caching.
# =============================================================================

import math
from typing import Iterable

from core.geometry import Vec3, cross, deg_to_rad, dot, lat_lng_to_vec, normalize
from core.models import CameraState, Marker, ProjectedPoint
from core.settings import DEFAULT_TUNING, ViewTuning

# When the forward vector is this close to a pole, crossing it with the
# y axis degenerates, so the z axis is used as world-up instead.
POLE_THRESHOLD = 0.98

_WORLD_UP = Vec3(0.0, 1.0, 0.0)
_POLAR_UP = Vec3(0.0, 0.0, 1.0)


def camera_basis(lat: float, lng: float) -> tuple[Vec3, Vec3, Vec3]:
    """Return the (right, up, forward) basis for a camera at (lat, lng)."""
    forward = lat_lng_to_vec(lat, lng)
    world_up = _POLAR_UP if abs(forward.y) > POLE_THRESHOLD else _WORLD_UP
    right = normalize(cross(forward, world_up))
    up = normalize(cross(right, forward))
    return right, up, forward


def project_point(
    point: Vec3,
    camera: CameraState,
    aspect: float,
    tuning: ViewTuning = DEFAULT_TUNING,
    marker_id: str = "",
) -> ProjectedPoint:
    """Project a point on the unit sphere into viewport percentages.

    Args:
        point: Unit vector of the target (see lat_lng_to_vec).
        camera: Current camera orientation and fov.
        aspect: Viewport width / height.
        tuning: Supplies the overscan margin.
        marker_id: Copied onto the result so callers can match it back.

    Returns:
        A ProjectedPoint.  Not-visible points carry no coordinates.
    """
    right, up, forward = camera_basis(camera.lat, camera.lng)

    x_cam = dot(point, right)
    y_cam = dot(point, up)
    z_cam = dot(point, forward)

    if z_cam <= 0:
        return ProjectedPoint(marker_id=marker_id, visible=False)

    tan_half_fov = math.tan(deg_to_rad(camera.fov) / 2)
    nx = x_cam / (z_cam * tan_half_fov * aspect)
    ny = y_cam / (z_cam * tan_half_fov)

    if abs(nx) > tuning.overscan or abs(ny) > tuning.overscan:
        return ProjectedPoint(marker_id=marker_id, visible=False)

    return ProjectedPoint(
        marker_id=marker_id,
        visible=True,
        x_percent=(nx * 0.5 + 0.5) * 100,
        y_percent=(-ny * 0.5 + 0.5) * 100,
        depth=z_cam,
    )


def project_marker(
    marker: Marker,
    camera: CameraState,
    aspect: float,
    tuning: ViewTuning = DEFAULT_TUNING,
) -> ProjectedPoint:
    return project_point(
        lat_lng_to_vec(marker.lat, marker.lng),
        camera,
        aspect,
        tuning,
        marker_id=marker.id,
    )


def sort_by_depth(points: Iterable[ProjectedPoint]) -> list[ProjectedPoint]:
    """Farthest first.  Equal depths keep their input order."""
    return sorted(points, key=lambda p: p.depth or 0.0, reverse=True)


def project_markers(
    markers: Iterable[Marker],
    camera: CameraState,
    aspect: float,
    tuning: ViewTuning = DEFAULT_TUNING,
) -> list[tuple[Marker, ProjectedPoint]]:
    """Project every marker and keep the visible ones in paint order.

    Returns (marker, projection) pairs sorted by descending depth.
    """
    pairs = []
    for marker in markers:
        projection = project_marker(marker, camera, aspect, tuning)
        if projection.visible:
            pairs.append((marker, projection))
    # sorted() is stable even with reverse=True
    return sorted(pairs, key=lambda pair: pair[1].depth or 0.0, reverse=True)
