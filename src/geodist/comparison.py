#!/usr/bin/env python3
"""
Side-by-side comparison of the spherical trigonometry and Hubeny formulas.
"""

from typing import List, NamedTuple
import logging

from .geodesy import compute_hubeny_formula, compute_spherical_trigonometry
from .geometry import DistanceResult, GeoPoint
from .locations import pair_segments

logger = logging.getLogger(__name__)


class SegmentComparison(NamedTuple):
    """Results of both formulas for one segment between consecutive points."""

    index: int
    start: GeoPoint
    end: GeoPoint
    spherical: DistanceResult
    hubeny: DistanceResult

    @property
    def distance_difference(self) -> float:
        """Absolute difference between the two distances in km."""
        return abs(self.spherical.distance - self.hubeny.distance)

    @property
    def azimuth_difference(self) -> float:
        """Absolute difference between the two azimuth values as reported."""
        return abs(self.spherical.azimuth - self.hubeny.azimuth)


def compare_segment(index: int, start: GeoPoint, end: GeoPoint) -> SegmentComparison:
    """Run both formulas on a single segment."""
    return SegmentComparison(
        index=index,
        start=start,
        end=end,
        spherical=compute_spherical_trigonometry(start, end),
        hubeny=compute_hubeny_formula(start, end),
    )


def compare_locations(points: List[GeoPoint]) -> List[SegmentComparison]:
    """
    Compare both formulas over every segment of consecutive points.

    Args:
        points: Ordered list of points

    Returns:
        One SegmentComparison per consecutive pair (empty if fewer than two points)
    """
    comparisons = []
    for index, (start, end) in enumerate(pair_segments(points)):
        comparison = compare_segment(index, start, end)
        logger.debug(
            f"Segment {index}: {start} -> {end} "
            f"spherical={comparison.spherical.distance:.6f} km/{comparison.spherical.azimuth:.4f}° "
            f"hubeny={comparison.hubeny.distance:.6f} km/{comparison.hubeny.azimuth:.4f}°"
        )
        comparisons.append(comparison)

    return comparisons
