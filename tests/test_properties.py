import pytest
from hypothesis import given, strategies as st
from geodist.geometry import GeoPoint
from geodist.geodesy import (
    compute_hubeny_formula,
    compute_spherical_trigonometry,
    to_degrees,
    to_radians,
)

# Strategy for valid GPS coordinates
valid_lat = st.floats(-90.0, 90.0)
valid_lon = st.floats(-180.0, 180.0)
valid_point = st.builds(GeoPoint, latitude=valid_lat, longitude=valid_lon)

FORMULAS = [compute_spherical_trigonometry, compute_hubeny_formula]


class TestDistanceProperties:

    @pytest.mark.parametrize("formula", FORMULAS)
    @given(pos1=valid_point, pos2=valid_point)
    def test_distance_is_non_negative(self, formula, pos1, pos2):
        """Distance between any two points is always non-negative."""
        assert formula(pos1, pos2).distance >= 0

    @pytest.mark.parametrize("formula", FORMULAS)
    @given(pos1=valid_point, pos2=valid_point)
    def test_distance_is_symmetric(self, formula, pos1, pos2):
        """Distance from A to B equals distance from B to A."""
        dist_ab = formula(pos1, pos2).distance
        dist_ba = formula(pos2, pos1).distance
        assert abs(dist_ab - dist_ba) < 1e-9

    @given(valid_point)
    def test_spherical_distance_to_self_is_zero(self, pos):
        """Distance from a point to itself is always zero."""
        assert compute_spherical_trigonometry(pos, pos).distance == pytest.approx(
            0.0, abs=1e-9
        )

    @given(valid_point)
    def test_hubeny_degenerate_result(self, pos):
        """Identical points give exactly zero distance and an azimuth of 90."""
        result = compute_hubeny_formula(pos, pos)
        assert result.distance == 0.0
        assert result.azimuth == 90.0


class TestAzimuthProperties:

    @given(valid_point, valid_point)
    def test_spherical_azimuth_range(self, pos1, pos2):
        """Spherical trigonometry azimuth is always in range [0, 360)."""
        azimuth = compute_spherical_trigonometry(pos1, pos2).azimuth
        assert 0 <= azimuth < 360

    @given(valid_point)
    def test_spherical_azimuth_range_for_coincident_points(self, pos):
        """Identical points still give an azimuth in [0, 360)."""
        azimuth = compute_spherical_trigonometry(pos, pos).azimuth
        assert 0 <= azimuth < 360


class TestAngleConversionProperties:

    @given(st.floats(-1e6, 1e6, allow_nan=False, allow_infinity=False))
    def test_degrees_radians_round_trip(self, x):
        assert to_degrees(to_radians(x)) == pytest.approx(x, rel=1e-12, abs=1e-12)


class TestPolarProperties:

    @given(st.sampled_from([-90.0, 90.0]), valid_lon, valid_point)
    def test_spherical_azimuth_range_from_pole(self, pole_lat, pole_lon, other):
        """Azimuths from or to a pole stay within [0, 360)."""
        pole = GeoPoint(pole_lat, pole_lon)
        for start, end in [(pole, other), (other, pole), (pole, pole)]:
            azimuth = compute_spherical_trigonometry(start, end).azimuth
            assert 0 <= azimuth < 360
