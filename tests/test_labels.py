"""Tests for label cell selection."""

import pytest

from schematic_map.errors import NoLabelSpotFound
from schematic_map.labels import LabelPlacementResolver


@pytest.fixture
def resolver():
    return LabelPlacementResolver(5, 5)


class TestPointSpot:
    """Anchor first, then left, up and up-left."""

    def test_fallback_order(self, resolver):
        expected = [(2, 2), (1, 2), (2, 1), (1, 1)]
        for cell in expected:
            spot = resolver.find_point_spot(2, 2)
            assert spot == cell
            resolver.claim(spot)

        with pytest.raises(NoLabelSpotFound):
            resolver.find_point_spot(2, 2)

    def test_candidates_off_the_grid_are_skipped(self, resolver):
        """At the origin only the anchor itself is a candidate."""
        resolver.claim(resolver.find_point_spot(0, 0))
        with pytest.raises(NoLabelSpotFound):
            resolver.find_point_spot(0, 0)

    def test_left_edge_falls_back_upwards(self, resolver):
        resolver.claim((0, 3))
        assert resolver.find_point_spot(0, 3) == (0, 2)


class TestAreaSpot:
    """Row-major scan of the box, then the row below it."""

    def test_first_free_cell_in_box(self, resolver):
        assert resolver.find_area_spot(1, 1, 2, 2) == (1, 1)
        resolver.claim((1, 1))
        assert resolver.find_area_spot(1, 1, 2, 2) == (2, 1)

    def test_row_below_box_used_when_box_is_full(self, resolver):
        for cell in [(1, 1), (2, 1), (1, 2), (2, 2)]:
            resolver.claim(cell)
        assert resolver.find_area_spot(1, 1, 2, 2) == (1, 3)

        resolver.claim((1, 3))
        resolver.claim((2, 3))
        with pytest.raises(NoLabelSpotFound):
            resolver.find_area_spot(1, 1, 2, 2)

    def test_no_row_below_bottom_edge(self, resolver):
        resolver.claim((0, 4))
        resolver.claim((1, 4))
        with pytest.raises(NoLabelSpotFound):
            resolver.find_area_spot(0, 4, 1, 4)


class TestClaim:
    def test_claims_are_exclusive(self, resolver):
        resolver.claim((3, 3))
        assert resolver.is_claimed((3, 3))
        assert resolver.claimed == [(3, 3)]
        with pytest.raises(NoLabelSpotFound):
            resolver.claim((3, 3))
