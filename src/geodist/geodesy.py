#!/usr/bin/env python3
"""
Great-circle and ellipsoidal distance formulas.

Both formulas take two GeoPoint values and return a DistanceResult. They are
pure functions: no I/O, no shared state.

The azimuth conventions differ. The spherical trigonometry azimuth is the
initial bearing from true north, normalized to [0, 360). The Hubeny azimuth
is 90 - atan2(north, east) and is left unnormalized, so it can be negative
for westward segments. Reports diff the two values directly.
"""

import math

from .geometry import (
    EARTH_RADIUS,
    EQUATORIAL_RADIUS,
    POLAR_RADIUS,
    DistanceResult,
    GeoPoint,
)

# Eccentricity squared of the ellipsoid
ECCENTRICITY_SQUARED = (EQUATORIAL_RADIUS**2 - POLAR_RADIUS**2) / EQUATORIAL_RADIUS**2


def to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180 / math.pi


def compute_spherical_trigonometry(p1: GeoPoint, p2: GeoPoint) -> DistanceResult:
    """
    Calculate great-circle distance and initial bearing using the spherical
    law of cosines.

    Args:
        p1: Start point
        p2: End point

    Returns:
        DistanceResult with distance in km and azimuth in degrees [0, 360)
    """
    lat1 = to_radians(p1.latitude)
    lat2 = to_radians(p2.latitude)
    dlong = to_radians(p2.longitude - p1.longitude)

    if p1 == p2:
        distance = 0.0
    else:
        cos_angle = (math.sin(lat1) * math.sin(lat2)) + (
            math.cos(lat1) * math.cos(lat2) * math.cos(dlong)
        )
        # Rounding can push the argument just outside acos's domain
        cos_angle = max(-1.0, min(1.0, cos_angle))
        distance = EARTH_RADIUS * math.acos(cos_angle)

    azimuth = to_degrees(
        math.atan2(
            math.sin(dlong),
            math.cos(lat1) * math.tan(lat2) - math.sin(lat1) * math.cos(dlong),
        )
    )
    if azimuth < 0:
        azimuth = 360 + azimuth
        if azimuth >= 360:
            azimuth = 0.0

    return DistanceResult(distance, azimuth)


def compute_hubeny_formula(p1: GeoPoint, p2: GeoPoint) -> DistanceResult:
    """
    Calculate distance and azimuth using the Hubeny approximation.

    The Hubeny formula treats the ellipsoid as locally flat around the mean
    latitude, using the meridional (M) and transverse (N) radii of curvature.
    It is accurate for separations of tens to low hundreds of kilometers and
    degrades over longer distances.

    Args:
        p1: Start point
        p2: End point

    Returns:
        DistanceResult with distance in km and azimuth as 90 - atan2(north, east)
        in degrees (not normalized)
    """
    dx = to_radians(p2.longitude - p1.longitude)
    dy = to_radians(p2.latitude - p1.latitude)
    mean_lat = to_radians((p1.latitude + p2.latitude) / 2)

    w = math.sqrt(1 - ECCENTRICITY_SQUARED * math.sin(mean_lat) ** 2)
    m = EQUATORIAL_RADIUS * (1 - ECCENTRICITY_SQUARED) / w**3
    n = EQUATORIAL_RADIUS / w

    north = dy * m
    east = dx * n * math.cos(mean_lat)

    distance = math.hypot(north, east)
    azimuth = 90 - to_degrees(math.atan2(north, east))

    return DistanceResult(distance, azimuth)
