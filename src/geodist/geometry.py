#!/usr/bin/env python3
"""
Value types and Earth constants for geodesic distance calculations.
"""

from typing import NamedTuple

# Radius used by the spherical trigonometry formula (km)
EARTH_RADIUS = 6378.137

# WGS-84-like ellipsoid used by the Hubeny formula (km)
EQUATORIAL_RADIUS = 6378.1370
POLAR_RADIUS = 6356.752314


class GeoPoint(NamedTuple):
    """Represents a geographic point with latitude and longitude in decimal degrees."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Return True if latitude is within [-90, 90] and longitude within [-180, 180]."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


class DistanceResult(NamedTuple):
    """Distance in kilometers and azimuth in degrees between two points."""

    distance: float
    azimuth: float
