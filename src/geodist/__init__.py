#!/usr/bin/env python3
"""
Geodist - great-circle and ellipsoidal distance comparison.

This package computes distances and azimuths between successive
latitude/longitude points with the spherical trigonometry (law of cosines)
formula and the Hubeny ellipsoidal approximation, and reports and plots the
two side by side.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geodist")

# Import main functions and classes for public API
from .geometry import DistanceResult, GeoPoint
from .geodesy import (
    compute_hubeny_formula,
    compute_spherical_trigonometry,
    to_degrees,
    to_radians,
)
from .locations import LocationFileError, load_locations
from .comparison import SegmentComparison, compare_locations

__all__ = [
    "DistanceResult",
    "GeoPoint",
    "compute_hubeny_formula",
    "compute_spherical_trigonometry",
    "to_degrees",
    "to_radians",
    "LocationFileError",
    "load_locations",
    "SegmentComparison",
    "compare_locations",
]
