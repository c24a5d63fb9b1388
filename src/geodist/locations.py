#!/usr/bin/env python3
"""
Location file parsing for geodesic distance comparison.

A location file supplies an ordered sequence of points. Consecutive points
form the segments that are measured.
"""

from typing import Iterator, List, TextIO, Tuple
import csv
import logging
import os
import sys
import gpxpy
import gpxpy.gpx

from .geometry import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_FILE = "./location.csv"


class LocationFileError(ValueError):
    """Raised when a location file contains malformed or out-of-range data."""

    pass


def read_location_csv(file_input: TextIO) -> List[GeoPoint]:
    """
    Parse comma-separated location data into points.

    Every cell of every row is read as a float into a flat sequence, and each
    consecutive pair of values becomes one point (latitude, longitude). The
    usual layout is therefore one "lat,lon" row per point.

    Args:
        file_input: File-like object containing CSV data

    Returns:
        List of GeoPoint objects in file order

    Raises:
        LocationFileError: If a cell is not a number, the number of values is
            odd, or a coordinate is out of range
    """
    values: List[Tuple[float, int]] = []

    reader = csv.reader(file_input, delimiter=",")
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        for cell in row:
            try:
                values.append((float(cell), reader.line_num))
            except ValueError:
                raise LocationFileError(
                    f"Invalid coordinate {cell!r} on line {reader.line_num}"
                )

    if len(values) % 2 != 0:
        raise LocationFileError(
            f"Location data has an odd number of values ({len(values)}); "
            f"expected latitude/longitude pairs"
        )

    points = []
    for i in range(0, len(values), 2):
        (latitude, line_num), (longitude, _) = values[i], values[i + 1]
        point = GeoPoint(latitude=latitude, longitude=longitude)
        if not point.is_valid():
            raise LocationFileError(
                f"Point {point} on line {line_num} is out of range "
                f"(latitude must be within [-90, 90], longitude within [-180, 180])"
            )
        points.append(point)

    logger.debug(f"Parsed {len(points)} points from CSV data")

    return points


def read_location_gpx(file_input: TextIO) -> List[GeoPoint]:
    """
    Parse GPX data into points.

    Track points of all tracks and segments are concatenated, followed by
    route points. Waypoints are used only when the file has neither.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        List of GeoPoint objects in file order

    Raises:
        LocationFileError: If a point is out of range
        gpxpy.gpx.GPXException: If GPX file is malformed
    """
    gpx_data = gpxpy.parse(file_input)

    points = []

    for track in gpx_data.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append(GeoPoint(point.latitude, point.longitude))

    for route in gpx_data.routes:
        for point in route.points:
            points.append(GeoPoint(point.latitude, point.longitude))

    if not points:
        points = [GeoPoint(w.latitude, w.longitude) for w in gpx_data.waypoints]

    if not points:
        logger.warning("No track, route or waypoints found in GPX file")

    for i, point in enumerate(points):
        if not point.is_valid():
            raise LocationFileError(
                f"GPX point {i} {point} is out of range "
                f"(latitude must be within [-90, 90], longitude within [-180, 180])"
            )

    logger.debug(f"Parsed {len(points)} points from GPX file")

    return points


def load_locations(filename: str) -> List[GeoPoint]:
    """
    Load a location file, choosing the parser from the file extension.

    Args:
        filename: Path to a .gpx or CSV file, or "-" for CSV on stdin

    Returns:
        List of GeoPoint objects

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file can't be read
        LocationFileError: If data is malformed, out of range or not UTF-8
        gpxpy.gpx.GPXException: If GPX data is malformed
    """
    if filename == "-":
        logger.debug("Reading location data from stdin")
        return read_location_csv(sys.stdin)

    _, extension = os.path.splitext(filename)
    logger.debug(f"Reading location file: {filename}")
    try:
        if extension.lower() == ".gpx":
            with open(filename, "r", encoding="utf-8") as f:
                return read_location_gpx(f)

        with open(filename, "r", encoding="utf-8-sig", newline="") as f:
            return read_location_csv(f)
    except UnicodeDecodeError as e:
        raise LocationFileError(f"{filename} is not valid UTF-8 text: {e}")


def pair_segments(points: List[GeoPoint]) -> Iterator[Tuple[GeoPoint, GeoPoint]]:
    """Yield each pair of consecutive points."""
    for i in range(len(points) - 1):
        yield points[i], points[i + 1]
