#!/usr/bin/env python3
"""
Geodesic distance comparison tool.
This script reads a sequence of latitude/longitude points, measures every
segment between consecutive points with both the spherical trigonometry and
the Hubeny formula, appends the results to a result file and renders plots
comparing the two methods.

Requirements:
    pip install gpxpy folium matplotlib

"""

from typing import List, Optional, Sequence
import webbrowser
import argparse
import logging
import sys
import os
from gpxpy import gpx

from . import __version__
from . import visualization
from .comparison import compare_locations
from .config import GeodistConfig
from .file_utils import generate_output_filename
from .geometry import GeoPoint
from .locations import DEFAULT_LOCATION_FILE, LocationFileError, load_locations
from .metrics import collect_metrics, log_metrics
from .report import print_summary, write_report

# Configure logging
logger = logging.getLogger("geodist")

# Base name of the auto-generated map for --pair
PAIR_MAP_BASENAME = "pair"


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Compare spherical trigonometry and Hubeny distances between successive points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        default=DEFAULT_LOCATION_FILE,
        help=f"CSV (lat,lon per row) or GPX file to process, '-' for stdin (default: {DEFAULT_LOCATION_FILE})",
    )
    parser.add_argument(
        "--pair",
        type=float,
        nargs=4,
        metavar=("LAT1", "LON1", "LAT2", "LON2"),
        default=None,
        help="Compare a single pair of points instead of reading a file",
    )
    parser.add_argument(
        "--result",
        type=str,
        default="result.txt",
        help="Result file, appended to (default: result.txt)",
    )
    parser.add_argument(
        "--error-log",
        type=str,
        default="error.log",
        help="Error log file, appended to (default: error.log)",
    )
    parser.add_argument(
        "--distance-plot",
        type=str,
        default="distance.png",
        help="Distance comparison plot (default: distance.png)",
    )
    parser.add_argument(
        "--azimuth-plot",
        type=str,
        default="azimuth.png",
        help="Azimuth comparison plot (default: azimuth.png)",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Don't render comparison plots",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Also write an interactive HTML map of the segments",
    )
    parser.add_argument(
        "--map-output",
        type=str,
        default=None,
        help="Output HTML map file (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the HTML map in the default browser",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print the segment table",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geodist {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeodistConfig:
    """Build a GeodistConfig from parsed command-line arguments."""
    return GeodistConfig(
        result_file=args.result,
        error_log=args.error_log,
        distance_plot=args.distance_plot,
        azimuth_plot=args.azimuth_plot,
        no_plot=args.no_plot,
        map=args.map or args.map_output is not None,
        map_output=args.map_output,
        open_map=args.open,
        quiet=args.quiet,
        log_level=args.log_level,
        metrics=args.metrics,
    )


def determine_map_filename(input_filename: str, map_output: Optional[str]) -> str:
    """
    Determine the HTML map filename to use.

    Args:
        input_filename: Path to the input location file
        map_output: Value from --map-output argument (None if not specified)

    Returns:
        Output filename to use

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if map_output is not None:
        return map_output

    try:
        return generate_output_filename(input_filename)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate map filename: {e}")
        raise


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except webbrowser.Error as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def setup_logging(config: GeodistConfig) -> List[logging.Handler]:
    """
    Setup logging configuration.

    Console output uses the configured level. Warnings and errors are also
    appended to the error log file.

    Returns:
        Handlers added to the root logger, for teardown_logging
    """
    level = getattr(logging, config.log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
        )
    )

    file_handler = logging.FileHandler(config.error_log, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S",
        )
    )

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, logging.WARNING))
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Suppress overly verbose third-party logging
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)

    return [console_handler, file_handler]


def teardown_logging(handlers: List[logging.Handler]) -> None:
    """Detach and close handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.removeHandler(handler)
        handler.close()


def load_points(args: argparse.Namespace) -> List[GeoPoint]:
    """
    Load points from --pair or from the location file.

    Raises:
        LocationFileError: If --pair coordinates are out of range or file data is malformed
        FileNotFoundError, PermissionError, gpx.GPXException: From file loading
    """
    if args.pair is not None:
        lat1, lon1, lat2, lon2 = args.pair
        points = [GeoPoint(lat1, lon1), GeoPoint(lat2, lon2)]
        for point in points:
            if not point.is_valid():
                raise LocationFileError(f"Point {point} is out of range")
        return points

    return load_locations(args.filename)


def run(args: argparse.Namespace, config: GeodistConfig) -> int:
    """
    Process the points and write all outputs.

    Returns:
        Process exit status
    """
    source = "--pair" if args.pair is not None else args.filename
    try:
        points = load_points(args)
    except FileNotFoundError:
        logger.error(f"Location file not found: {args.filename}")
        return 1
    except PermissionError:
        logger.error(f"Cannot read location file (permission denied): {args.filename}")
        return 1
    except LocationFileError as e:
        logger.error(f"Invalid location data in {source}: {e}")
        return 1
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read location file {args.filename}: {e}")
        return 1
    logger.info(f"Loaded {len(points)} points from {source}")

    if len(points) < 2:
        logger.warning(f"Need at least two points to compare, got {len(points)}")

    comparisons = compare_locations(points)
    logger.info(f"Compared {len(comparisons)} segments")

    try:
        with open(config.result_file, "a", encoding="utf-8") as out:
            write_report(comparisons, out)
    except OSError as e:
        logger.error(f"Cannot write result file {config.result_file}: {e}")
        return 1
    logger.debug(f"Appended results to {config.result_file}")

    if not config.quiet:
        print_summary(comparisons)

    metrics = collect_metrics(comparisons)

    if not config.no_plot and comparisons:
        try:
            visualization.plot_distances(comparisons, config.distance_plot)
            visualization.plot_azimuths(comparisons, config.azimuth_plot)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to create plots: {e}")
            return 1

    if config.map and points:
        try:
            map_base = PAIR_MAP_BASENAME if args.pair is not None else args.filename
            map_filename = determine_map_filename(map_base, config.map_output)
            visualization.create_segment_map(points, comparisons, map_filename, metrics)
        except (OSError, RuntimeError, ValueError) as e:
            logger.error(f"Failed to create map: {e}")
            return 1
        if config.open_map:
            open_file_in_browser(map_filename)

    log_metrics(metrics, config)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Parses command-line arguments, compares both formulas over the points,
    and writes the result file, plots and optional map.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    try:
        handlers = setup_logging(config)
    except OSError as e:
        print(f"Cannot open error log {config.error_log}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        status = run(args, config)
    finally:
        teardown_logging(handlers)

    sys.exit(status)


if __name__ == "__main__":
    main()
