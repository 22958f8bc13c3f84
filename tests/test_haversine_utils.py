import random

import pytest

from campsite_explorer.domain.haversine_utils import haversine, radius_for_zoom


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine(43.37, -74.73, 43.37, -74.73) == 0.0

    def test_nyc_to_la(self):
        assert 3900 < haversine(40.7128, -74.006, 34.0522, -118.2437) < 4000

    def test_one_degree_latitude(self):
        assert haversine(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)

    def test_symmetric(self):
        rnd = random.Random(7)
        for _ in range(200):
            a = (rnd.uniform(-90, 90), rnd.uniform(-180, 180))
            b = (rnd.uniform(-90, 90), rnd.uniform(-180, 180))
            assert haversine(*a, *b) == haversine(*b, *a)

    def test_positive_for_distinct_points(self):
        assert haversine(43.0, -74.0, 43.0001, -74.0) > 0


class TestRadiusForZoom:
    @pytest.mark.parametrize(
        "zoom, esperado",
        [
            (22, 0.1), (16, 0.1),
            (15, 0.5), (14, 0.5),
            (13, 1.5), (12, 1.5),
            (11, 4), (10, 4),
            (9, 12), (8, 12),
            (7, 30), (6, 30),
            (5, 60), (4, 60),
            (3, 100), (0, 100),
        ],
    )
    def test_breakpoints(self, zoom, esperado):
        assert radius_for_zoom(zoom) == esperado

    def test_fractional_zoom_uses_lower_step(self):
        assert radius_for_zoom(15.9) == 0.5
        assert radius_for_zoom(3.99) == 100

    def test_monotonic_non_increasing(self):
        zooms = [z / 4 for z in range(0, 23 * 4)]
        raios = [radius_for_zoom(z) for z in zooms]
        assert all(r1 >= r2 for r1, r2 in zip(raios, raios[1:]))
