"""Tests for the plotly map figure."""

from schematic_map.visualize import HIGHLIGHT_COLOR, ROUTE_COLOR, build_figure, render_map


def _traces(fig, name):
    return [t for t in fig.data if t.name == name]


class TestBuildFigure:
    def test_layers_present(self, campus_map):
        fig = build_figure(campus_map)
        names = {t.name for t in fig.data}
        assert {"Streets", "park", "building", "water", "street", "transitLine", "poi"} <= names
        assert len(fig.layout.annotations) == 14
        assert fig.layout.title.text == "Campus Map"

    def test_one_legend_entry_per_block_type(self, campus_map):
        parks = _traces(build_figure(campus_map), "park")
        assert len(parks) == 3
        assert [t.showlegend for t in parks] == [True, False, False]

    def test_highlight(self, campus_map):
        fig = build_figure(campus_map, highlight_ids=campus_map.ids_by_name("Main Street"))
        streets = _traces(fig, "street")
        assert streets[0].line.color == HIGHLIGHT_COLOR
        assert streets[1].line.color != HIGHLIGHT_COLOR

    def test_route_layer(self, rectangle_map):
        path = rectangle_map.find_path((0, 0), (3, 2)).unwrap()
        fig = build_figure(rectangle_map, path=path)
        route = _traces(fig, "Route")[0]
        assert list(route.x) == [0, 1, 2, 3, 3, 3]
        assert route.line.color == ROUTE_COLOR

    def test_labels_optional(self, campus_map):
        fig = build_figure(campus_map, show_labels=False)
        assert len(fig.layout.annotations) == 0

    def test_y_axis_points_down(self, rectangle_map):
        fig = build_figure(rectangle_map)
        assert tuple(fig.layout.yaxis.range) == (2.5, -0.5)


class TestRenderMap:
    def test_writes_html(self, campus_map, tmp_path):
        out = tmp_path / "nested" / "map.html"
        render_map(campus_map, out)
        assert out.exists()
        assert "plotly" in out.read_text().lower()
