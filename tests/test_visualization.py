import unittest
from unittest.mock import patch, MagicMock

from geodist.comparison import compare_locations
from geodist.geometry import GeoPoint
from geodist.metrics import collect_metrics
from geodist.visualization import (
    create_segment_map,
    plot_azimuths,
    plot_distances,
    segment_to_html,
)

POINTS = [
    GeoPoint(35.65500, 139.74472),
    GeoPoint(36.10056, 140.09111),
    GeoPoint(35.68123, 139.76712),
]


class TestComparisonPlots(unittest.TestCase):

    def setUp(self):
        self.comparisons = compare_locations(POINTS)

    @patch("geodist.visualization.plt")
    def test_plot_distances_saves_and_closes_figure(self, mock_plt):
        mock_fig = MagicMock(name="figure")
        mock_ax = MagicMock(name="axes")
        mock_plt.subplots.return_value = (mock_fig, mock_ax)

        plot_distances(self.comparisons, "distance.png")

        mock_plt.subplots.assert_called_once_with(figsize=(8, 8))
        mock_ax.set_title.assert_called_once_with("Distance between 2 points")
        mock_ax.set_ylabel.assert_called_once_with("Distance [km]")
        self.assertEqual(mock_ax.plot.call_count, 2)

        spherical_call, hubeny_call = mock_ax.plot.call_args_list
        self.assertEqual(
            list(spherical_call.args[1]),
            [c.spherical.distance for c in self.comparisons],
        )
        self.assertEqual(
            list(hubeny_call.args[1]), [c.hubeny.distance for c in self.comparisons]
        )
        self.assertEqual(spherical_call.kwargs["label"], "SphericalTrigonometry")
        self.assertEqual(hubeny_call.kwargs["label"], "hubenyFormula")

        mock_fig.savefig.assert_called_once_with("distance.png")
        mock_plt.close.assert_called_once_with(mock_fig)

    @patch("geodist.visualization.plt")
    def test_plot_azimuths_uses_azimuth_series(self, mock_plt):
        mock_fig = MagicMock(name="figure")
        mock_ax = MagicMock(name="axes")
        mock_plt.subplots.return_value = (mock_fig, mock_ax)

        plot_azimuths(self.comparisons, "azimuth.png")

        mock_ax.set_title.assert_called_once_with("Azimuth between 2 points")
        mock_ax.set_ylabel.assert_called_once_with("Azimuth [°]")
        spherical_call = mock_ax.plot.call_args_list[0]
        self.assertEqual(
            list(spherical_call.args[1]),
            [c.spherical.azimuth for c in self.comparisons],
        )
        mock_fig.savefig.assert_called_once_with("azimuth.png")

    @patch("geodist.visualization.plt")
    def test_figure_closed_when_save_fails(self, mock_plt):
        mock_fig = MagicMock(name="figure")
        mock_fig.savefig.side_effect = OSError("disk full")
        mock_plt.subplots.return_value = (mock_fig, MagicMock(name="axes"))

        with self.assertRaises(OSError):
            plot_distances(self.comparisons, "distance.png")

        mock_plt.close.assert_called_once_with(mock_fig)


class TestCreateSegmentMap(unittest.TestCase):

    @patch("geodist.visualization.ComparisonLegend")
    @patch("geodist.visualization.folium.Marker")
    @patch("geodist.visualization.folium.PolyLine")
    @patch("geodist.visualization.folium.LayerControl")
    @patch("geodist.visualization.folium.TileLayer")
    @patch("geodist.visualization.folium.Map")
    def test_create_segment_map_adds_one_polyline_per_segment(
        self,
        mock_folium_map,
        mock_folium_tilelayer,
        mock_folium_layercontrol,
        mock_folium_polyline,
        mock_folium_marker,
        mock_legend,
    ):
        mock_map_instance = MagicMock(name="map_instance")
        mock_folium_map.return_value = mock_map_instance

        comparisons = compare_locations(POINTS)
        metrics = collect_metrics(comparisons)

        create_segment_map(POINTS, comparisons, "segments.html", metrics)

        self.assertEqual(mock_folium_polyline.call_count, len(comparisons))
        self.assertEqual(mock_folium_marker.call_count, 2)
        mock_legend.assert_called_once_with(metrics)
        mock_map_instance.add_child.assert_called_once_with(mock_legend.return_value)
        mock_map_instance.fit_bounds.assert_called_once_with(
            [[35.655, 139.74472], [36.10056, 140.09111]]
        )
        mock_map_instance.save.assert_called_once_with("segments.html")

    def test_create_segment_map_requires_points(self):
        with self.assertRaises(ValueError):
            create_segment_map([], [], "segments.html", collect_metrics([]))


def test_segment_to_html():
    comparison = compare_locations(POINTS[:2])[0]
    html = segment_to_html(comparison)
    assert "<b>Segment 0</b>" in html
    assert f"{comparison.spherical.distance:.3f} km" in html
    assert f"{comparison.hubeny.distance:.3f} km" in html


def test_plots_written_to_disk(tmp_path):
    comparisons = compare_locations(POINTS)
    distance_png = tmp_path / "distance.png"
    azimuth_png = tmp_path / "azimuth.png"

    plot_distances(comparisons, str(distance_png))
    plot_azimuths(comparisons, str(azimuth_png))

    assert distance_png.read_bytes().startswith(b"\x89PNG")
    assert azimuth_png.read_bytes().startswith(b"\x89PNG")


def test_map_written_to_disk(tmp_path):
    comparisons = compare_locations(POINTS)
    output = tmp_path / "segments.html"

    create_segment_map(POINTS, comparisons, str(output), collect_metrics(comparisons))

    html = output.read_text(encoding="utf-8")
    assert "geodist-legend" in html
    assert "Segments (2)" in html
