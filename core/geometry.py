# =============================================================================
# core/geometry.py  —  Sphere & Vector Helpers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The small amount of linear algebra the concave Earth view needs:
#   angle wrapping/clamping, lat/lng → unit vector, dot/cross/normalize.
#
# COORDINATE CONVENTION:
#   Unit sphere, y axis through the poles:
#       x = cos(lat) · cos(lng)
#       y = sin(lat)
#       z = cos(lat) · sin(lng)
#   (lat, lng in degrees at the API surface, radians internally.)
# =============================================================================

import math
from typing import NamedTuple


class Vec3(NamedTuple):
    x: float
    y: float
    z: float


def clamp(value: float, lo: float, hi: float) -> float:
    """Saturate value into [lo, hi]."""
    return min(hi, max(lo, value))


def wrap_lng(lng: float) -> float:
    """Normalize a longitude into (-180, 180].

    The result is congruent to the input modulo 360.  Non-finite input is
    returned unchanged.
    """
    if not math.isfinite(lng):
        return lng
    wrapped = (lng + 180.0) % 360.0 - 180.0
    # % lands in [-180, 180); the open end belongs to +180
    if wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def clamp_lat(lat: float, limit: float = 89.5) -> float:
    """Clamp a camera latitude to [-limit, limit]; saturates, never wraps."""
    return clamp(lat, -limit, limit)


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def lat_lng_to_vec(lat: float, lng: float) -> Vec3:
    """Unit vector for a latitude/longitude pair given in degrees."""
    lat_r = deg_to_rad(lat)
    lng_r = deg_to_rad(lng)
    cos_lat = math.cos(lat_r)
    return Vec3(
        cos_lat * math.cos(lng_r),
        math.sin(lat_r),
        cos_lat * math.sin(lng_r),
    )


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: Vec3) -> Vec3:
    # Zero-length input divides by 1 and comes back as the zero vector.
    length = math.hypot(v.x, v.y, v.z) or 1.0
    return Vec3(v.x / length, v.y / length, v.z / length)
