"""Tests for ASCII map and route reports."""

import pytest

from schematic_map.config import build_map, load_config
from schematic_map.reporter import format_route, generate_report, summarize_route


class TestRoute:
    def test_summarize_collapses_straight_legs(self):
        path = [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2)]
        assert summarize_route(path) == [("east", 3, (3, 0)), ("south", 2, (3, 2))]

    def test_summarize_rejects_jumps(self):
        with pytest.raises(ValueError, match="single grid hop"):
            summarize_route([(0, 0), (2, 0)])

    def test_format_route(self):
        text = format_route([(2, 2), (2, 1), (1, 1)], "Station", "Fair")
        assert text.splitlines() == [
            "** Route: Station -> Fair (2 hops) **",
            "  - north 1 to (2, 1)",
            "  - west 1 to (1, 1)",
        ]

    def test_format_zero_hop_route(self):
        text = format_route([(1, 1)])
        assert "(1, 1) -> (1, 1) (0 hops)" in text
        assert "Already at destination" in text


class TestGenerateReport:
    def test_sections(self, campus_map):
        report = generate_report(campus_map)
        lines = report.splitlines()
        assert lines[0] == "--- Schematic Map Report ---"
        assert lines[-1] == "--- End of Report ---"
        assert "  - Title: Campus Map" in lines
        assert "  - Size (W x H): 10 x 5" in lines
        assert "  - Grid Nodes: 50" in lines
        assert "  - Connections: 10" in lines
        assert "  - area: 7" in lines
        assert "  - Label Spots Claimed: 14" in lines
        assert "  - area: park (3), building (3), water (1)" in lines
        assert "** Rejected **" not in report

    def test_filters_and_rejections_from_config(self, campus_yaml):
        config = load_config(campus_yaml)
        report = generate_report(build_map(config), config)
        assert "  - Map ID: 7" in report
        assert "  - By type: park (1), building (1)" in report
        assert "** Rejected **" in report
        assert "line place 'Green Mile': TypeCategoryMismatch" in report

    def test_untitled_empty_map(self):
        from schematic_map.diagram import MapDiagram

        report = generate_report(MapDiagram(2, 2, map_id=1))
        assert "  - Title: (untitled)" in report
        assert "  - By type: (none)" in report
        assert "  - Street Edges: 0" in report
