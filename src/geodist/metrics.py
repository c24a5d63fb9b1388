"""
Module for collecting and logging metrics comparing the two distance formulas.
"""

import logging
from typing import List, NamedTuple

from .comparison import SegmentComparison
from .config import GeodistConfig

logger = logging.getLogger(__name__)


class ComparisonMetrics(NamedTuple):
    """Container for aggregate comparison metrics."""

    segment_count: int
    total_spherical_distance: float
    total_hubeny_distance: float
    max_distance_difference: float
    mean_distance_difference: float
    max_azimuth_difference: float


def collect_metrics(comparisons: List[SegmentComparison]) -> ComparisonMetrics:
    """
    Collect aggregate metrics over all segment comparisons.

    Args:
        comparisons: List of SegmentComparison objects to analyze

    Returns:
        ComparisonMetrics containing all collected metrics
    """
    if not comparisons:
        return ComparisonMetrics(0, 0.0, 0.0, 0.0, 0.0, 0.0)

    distance_differences = [c.distance_difference for c in comparisons]

    return ComparisonMetrics(
        segment_count=len(comparisons),
        total_spherical_distance=sum(c.spherical.distance for c in comparisons),
        total_hubeny_distance=sum(c.hubeny.distance for c in comparisons),
        max_distance_difference=max(distance_differences),
        mean_distance_difference=sum(distance_differences) / len(comparisons),
        max_azimuth_difference=max(c.azimuth_difference for c in comparisons),
    )


def log_metrics(metrics: ComparisonMetrics, config: GeodistConfig) -> None:
    """
    Log detailed metrics after processing.

    Args:
        metrics: ComparisonMetrics containing collected metrics
        config: GeodistConfig containing settings like the metrics flag
    """
    if not config.metrics:
        return

    logger.debug("=== GEODIST_METRICS ===")
    logger.debug(f"segments={metrics.segment_count}")
    logger.debug(f"total_spherical_km={metrics.total_spherical_distance:.6f}")
    logger.debug(f"total_hubeny_km={metrics.total_hubeny_distance:.6f}")
    logger.debug(f"max_distance_difference_km={metrics.max_distance_difference:.6f}")
    logger.debug(
        f"mean_distance_difference_km={metrics.mean_distance_difference:.6f}"
    )
    logger.debug(f"max_azimuth_difference_deg={metrics.max_azimuth_difference:.6f}")
    logger.debug("=== END_GEODIST_METRICS ===")
