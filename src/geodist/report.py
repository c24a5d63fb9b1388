#!/usr/bin/env python3
"""
Text output of segment comparisons.
"""

from typing import List, TextIO

from .comparison import SegmentComparison


def write_report(comparisons: List[SegmentComparison], out: TextIO) -> None:
    """
    Write one block per segment with both results and their differences.

    Args:
        comparisons: Segment comparisons to report
        out: Text stream to write to (typically the result file)
    """
    for comparison in comparisons:
        spherical = comparison.spherical
        hubeny = comparison.hubeny
        out.write("\n")
        out.write(f"Start: {comparison.start} End: {comparison.end}\n")
        out.write(
            f"Spherical trigonometry distance: {spherical.distance} km "
            f"azimuth: {spherical.azimuth}\n"
        )
        out.write(
            f"Hubeny formula distance: {hubeny.distance} km azimuth: {hubeny.azimuth}\n"
        )
        out.write(
            f"Distance difference: {comparison.distance_difference} km "
            f"azimuth difference: {comparison.azimuth_difference}\n"
        )


def print_summary(comparisons: List[SegmentComparison]) -> None:
    """
    Print an aligned table of segment results to stdout.

    Args:
        comparisons: Segment comparisons to print
    """
    if not comparisons:
        print("No segments to compare")
        return

    print(f"Compared {len(comparisons)} segments:")

    # Width of the distance columns, digits before the decimal point plus ".XXX"
    max_distance = max(
        max(c.spherical.distance, c.hubeny.distance) for c in comparisons
    )
    distance_width = len(f"{max_distance:.0f}") + 4
    index_width = len(str(len(comparisons) - 1))

    header = (
        f"{'#':>{index_width}} "
        f"{'spherical km':>{max(distance_width, 12)}} {'az':>8} "
        f"{'hubeny km':>{max(distance_width, 12)}} {'az':>8} "
        f"{'diff km':>{max(distance_width, 9)}}"
    )
    print(header)
    print("-" * len(header))

    for c in comparisons:
        print(
            f"{c.index:>{index_width}} "
            f"{c.spherical.distance:>{max(distance_width, 12)}.3f} {c.spherical.azimuth:>8.2f} "
            f"{c.hubeny.distance:>{max(distance_width, 12)}.3f} {c.hubeny.azimuth:>8.2f} "
            f"{c.distance_difference:>{max(distance_width, 9)}.3f}"
        )
