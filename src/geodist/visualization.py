#!/usr/bin/env python3
"""
Comparison plots using matplotlib and segment maps using folium.
"""

from typing import List
import logging
import folium
from folium.template import Template
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .comparison import SegmentComparison
from .geometry import GeoPoint
from .metrics import ComparisonMetrics

logger = logging.getLogger(__name__)

SPHERICAL_LABEL = "SphericalTrigonometry"
HUBENY_LABEL = "hubenyFormula"

SPHERICAL_COLOR = "#2E86AB"
HUBENY_COLOR = "#D23C4C"

FIGURE_SIZE = (8, 8)  # inches


def _plot_series(
    spherical: List[float],
    hubeny: List[float],
    title: str,
    ylabel: str,
    output_filename: str,
) -> None:
    """Draw both series as lines with point markers against segment index and save."""
    fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    try:
        ax.plot(
            range(len(spherical)),
            spherical,
            marker="o",
            color=SPHERICAL_COLOR,
            label=SPHERICAL_LABEL,
        )
        ax.plot(
            range(len(hubeny)),
            hubeny,
            marker="^",
            linestyle="--",
            color=HUBENY_COLOR,
            label=HUBENY_LABEL,
        )
        ax.set_title(title)
        ax.set_xlabel("X")
        ax.set_ylabel(ylabel)
        ax.grid(True)
        ax.legend()
        fig.savefig(output_filename)
    finally:
        plt.close(fig)

    logger.debug(f"Saved plot '{title}' to {output_filename}")


def plot_distances(comparisons: List[SegmentComparison], output_filename: str) -> None:
    """
    Plot spherical trigonometry vs Hubeny distances per segment.

    Args:
        comparisons: Segment comparisons to plot
        output_filename: Path of the image file to write
    """
    _plot_series(
        [c.spherical.distance for c in comparisons],
        [c.hubeny.distance for c in comparisons],
        "Distance between 2 points",
        "Distance [km]",
        output_filename,
    )


def plot_azimuths(comparisons: List[SegmentComparison], output_filename: str) -> None:
    """
    Plot spherical trigonometry vs Hubeny azimuths per segment.

    Args:
        comparisons: Segment comparisons to plot
        output_filename: Path of the image file to write
    """
    _plot_series(
        [c.spherical.azimuth for c in comparisons],
        [c.hubeny.azimuth for c in comparisons],
        "Azimuth between 2 points",
        "Azimuth [°]",
        output_filename,
    )


class ComparisonLegend(folium.MacroElement):
    """Legend for the segment map with aggregate distances."""

    def __init__(self, metrics: ComparisonMetrics):
        super().__init__()
        self.segment_count = metrics.segment_count
        self.total_spherical = f"{metrics.total_spherical_distance:.3f}"
        self.total_hubeny = f"{metrics.total_hubeny_distance:.3f}"
        self.max_difference = f"{metrics.max_distance_difference:.3f}"

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="geodist-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 260px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
            box-sizing: border-box;
        ">
            <b>Segments ({{ this.segment_count }})</b><br>
            <div style="margin: 4px 0; line-height: 1.3;">
                Spherical trigonometry: {{ this.total_spherical }} km
            </div>
            <div style="margin: 4px 0; line-height: 1.3;">
                Hubeny formula: {{ this.total_hubeny }} km
            </div>
            <div style="margin: 4px 0; line-height: 1.3;">
                Max difference: {{ this.max_difference }} km
            </div>
        </div>
        {% endmacro %}
        """
        )


def segment_to_html(comparison: SegmentComparison) -> str:
    """
    Format a segment comparison into HTML for popup display.

    Args:
        comparison: The SegmentComparison to format

    Returns:
        HTML-formatted string
    """
    return (
        f"<b>Segment {comparison.index}</b><br>"
        f"{comparison.start} &rarr; {comparison.end}<br>"
        f"<i>Spherical trigonometry:</i> {comparison.spherical.distance:.3f} km, "
        f"{comparison.spherical.azimuth:.2f}&deg;<br>"
        f"<i>Hubeny formula:</i> {comparison.hubeny.distance:.3f} km, "
        f"{comparison.hubeny.azimuth:.2f}&deg;<br>"
        f"<i>Difference:</i> {comparison.distance_difference:.3f} km, "
        f"{comparison.azimuth_difference:.2f}&deg;"
    )


def create_segment_map(
    points: List[GeoPoint],
    comparisons: List[SegmentComparison],
    output_filename: str,
    metrics: ComparisonMetrics,
) -> None:
    """
    Create an interactive map of the measured segments, save as HTML.

    Args:
        points: Ordered points of the location file
        comparisons: Segment comparisons to show as popups
        output_filename: Path where HTML map file should be saved
        metrics: ComparisonMetrics for the legend

    Raises:
        ValueError: If there are no points
    """
    if not points:
        raise ValueError("Cannot create map without points")

    latitudes = [p.latitude for p in points]
    longitudes = [p.longitude for p in points]
    south, north = min(latitudes), max(latitudes)
    west, east = min(longitudes), max(longitudes)

    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    segment_map = folium.Map(location=[center_lat, center_lon], tiles=None)

    folium.TileLayer(
        tiles="CartoDB positron",
        attr=(
            "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
            "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
        ),
        name="Standard",
        control=True,
        show=True,
    ).add_to(segment_map)

    folium.LayerControl().add_to(segment_map)

    for comparison in comparisons:
        folium.PolyLine(
            [
                [comparison.start.latitude, comparison.start.longitude],
                [comparison.end.latitude, comparison.end.longitude],
            ],
            color=SPHERICAL_COLOR,
            weight=3,
            opacity=0.8,
            popup=folium.Popup(segment_to_html(comparison), max_width=400),
        ).add_to(segment_map)

    folium.Marker(
        [points[0].latitude, points[0].longitude],
        popup="Start",
        icon=folium.Icon(color="green", icon="play"),
    ).add_to(segment_map)

    folium.Marker(
        [points[-1].latitude, points[-1].longitude],
        popup="End",
        icon=folium.Icon(color="red", icon="stop"),
    ).add_to(segment_map)

    segment_map.add_child(ComparisonLegend(metrics))

    segment_map.fit_bounds([[south, west], [north, east]])

    segment_map.save(output_filename)

    logger.debug(
        f"Map saved to {output_filename} with {len(comparisons)} segments"
    )
