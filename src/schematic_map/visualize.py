"""Plotly 2D visualization of a schematic map."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import plotly.graph_objects as go

from schematic_map.diagram import MapDiagram
from schematic_map.geometry import BlockPlace, Coord, LinePlace, NodePlace

# Place type color map
TYPE_COLORS: dict[str, str] = {
    "park": "rgba(90, 170, 90, 0.70)",
    "building": "rgba(150, 130, 110, 0.70)",
    "water": "rgba(70, 140, 220, 0.70)",
    "hospital": "rgba(220, 90, 90, 0.70)",
    "street": "rgba(110, 110, 110, 0.90)",
    "transitLine": "rgba(230, 150, 40, 0.90)",
    "poi": "rgba(40, 40, 160, 0.90)",
    "specialEvent": "rgba(170, 60, 170, 0.90)",
    "incident": "rgba(210, 40, 40, 0.90)",
}
STREET_COLOR = "rgba(200, 200, 200, 0.90)"
HIGHLIGHT_COLOR = "rgba(255, 200, 0, 1.0)"
ROUTE_COLOR = "rgba(20, 110, 255, 0.95)"
BLOCK_INSET = 0.12


def _get_color(place_type: str) -> str:
    return TYPE_COLORS.get(place_type, "rgba(130, 130, 130, 0.7)")


def _rect(xs: list[float | None], ys: list[float | None], x0: float, y0: float, x1: float, y1: float) -> None:
    xs.extend([x0, x1, x1, x0, x0, None])
    ys.extend([y0, y0, y1, y1, y0, None])


def _add_streets(fig: go.Figure, diagram: MapDiagram) -> None:
    xs: list[float | None] = []
    ys: list[float | None] = []
    for a, b in diagram.graph.edges():
        xs.extend([a[0], b[0], None])
        ys.extend([a[1], b[1], None])
    if xs:
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line=dict(color=STREET_COLOR, width=6),
                name="Streets",
                hoverinfo="skip",
            )
        )


def _add_blocks(fig: go.Figure, blocks: list[BlockPlace], highlight: set[str]) -> None:
    by_type: dict[str, list[BlockPlace]] = {}
    for b in blocks:
        by_type.setdefault(b.type, []).append(b)

    for place_type, places in by_type.items():
        color = _get_color(place_type)
        for b in places:
            xs: list[float | None] = []
            ys: list[float | None] = []
            _rect(
                xs, ys,
                b.x + BLOCK_INSET, b.y + BLOCK_INSET,
                b.x + b.width - BLOCK_INSET, b.y + b.height - BLOCK_INSET,
            )
            outline = HIGHLIGHT_COLOR if b.id in highlight else color
            fig.add_trace(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="lines",
                    fill="toself",
                    fillcolor=color,
                    line=dict(color=outline, width=4 if b.id in highlight else 0.5),
                    name=place_type,
                    legendgroup=place_type,
                    showlegend=(b is places[0]),
                    hoveron="fills",
                    hoverinfo="text",
                    hovertext=f"{b.name}: {b.description}" if b.description else b.name,
                    hovertemplate="%{hovertext}<extra></extra>",
                )
            )


def _add_lines(fig: go.Figure, lines: list[LinePlace], highlight: set[str]) -> None:
    for idx, ln in enumerate(lines):
        highlighted = ln.id in highlight
        fig.add_trace(
            go.Scatter(
                x=[ln.x1, ln.x2],
                y=[ln.y1, ln.y2],
                mode="lines",
                line=dict(
                    color=HIGHLIGHT_COLOR if highlighted else _get_color(ln.type),
                    width=8 if highlighted else 4,
                ),
                name=ln.type,
                legendgroup=ln.type,
                showlegend=all(other.type != ln.type for other in lines[:idx]),
                hoverinfo="text",
                hovertext=f"{ln.name}: {ln.description}" if ln.description else ln.name,
                hovertemplate="%{hovertext}<extra></extra>",
            )
        )


def _add_nodes(fig: go.Figure, nodes: list[NodePlace], highlight: set[str]) -> None:
    by_type: dict[str, list[NodePlace]] = {}
    for n in nodes:
        by_type.setdefault(n.type, []).append(n)

    for place_type, places in by_type.items():
        fig.add_trace(
            go.Scatter(
                x=[n.x for n in places],
                y=[n.y for n in places],
                mode="markers",
                marker=dict(
                    size=[16 if n.id in highlight else 11 for n in places],
                    color=_get_color(place_type),
                    line=dict(
                        color=[HIGHLIGHT_COLOR if n.id in highlight else "white" for n in places],
                        width=2,
                    ),
                ),
                name=place_type,
                legendgroup=place_type,
                hoverinfo="text",
                hovertext=[f"{n.name}: {n.description}" if n.description else n.name for n in places],
                hovertemplate="%{hovertext}<extra></extra>",
            )
        )


def _add_labels(fig: go.Figure, diagram: MapDiagram) -> None:
    for place in diagram.all_places():
        spot = diagram.label_spot(place.id)
        if spot is None:
            continue
        fig.add_annotation(
            x=spot[0] + 0.15,
            y=spot[1] + 0.3,
            text=place.name,
            showarrow=False,
            xanchor="left",
            font=dict(size=10),
        )


def _add_route(fig: go.Figure, path: list[Coord]) -> None:
    fig.add_trace(
        go.Scatter(
            x=[p[0] for p in path],
            y=[p[1] for p in path],
            mode="lines",
            line=dict(color=ROUTE_COLOR, width=5),
            name="Route",
            hoverinfo="skip",
        )
    )
    ends = [path[0], path[-1]]
    fig.add_trace(
        go.Scatter(
            x=[p[0] for p in ends],
            y=[p[1] for p in ends],
            mode="markers",
            marker=dict(size=14, color=ROUTE_COLOR, symbol="circle-open", line=dict(width=3)),
            name="Route ends",
            hoverinfo="skip",
            showlegend=False,
        )
    )


def build_figure(
    diagram: MapDiagram,
    highlight_ids: Iterable[str] = (),
    path: list[Coord] | None = None,
    cell_size: int = 50,
    show_labels: bool = True,
) -> go.Figure:
    """Draw streets, places, labels, highlights and an optional route."""
    highlight = set(highlight_ids)
    by_category = diagram.places.places_by_category()
    fig = go.Figure()

    _add_streets(fig, diagram)
    _add_blocks(fig, by_category["area"], highlight)
    _add_lines(fig, by_category["segment"], highlight)
    _add_nodes(fig, by_category["point"], highlight)
    if path:
        _add_route(fig, path)
    if show_labels:
        _add_labels(fig, diagram)

    fig.update_layout(
        title=diagram.title or f"Map {diagram.id}",
        width=diagram.width * cell_size + 260,
        height=diagram.height * cell_size + 160,
        plot_bgcolor="white",
        legend=dict(orientation="v"),
    )
    fig.update_xaxes(range=[-0.5, diagram.width - 0.5], showgrid=False, zeroline=False, dtick=1)
    # Screen layout: y grows downward.
    fig.update_yaxes(
        range=[diagram.height - 0.5, -0.5],
        showgrid=False,
        zeroline=False,
        dtick=1,
        scaleanchor="x",
        scaleratio=1,
    )
    return fig


def render_map(
    diagram: MapDiagram,
    output_path: str | Path,
    highlight_ids: Iterable[str] = (),
    path: list[Coord] | None = None,
    cell_size: int = 50,
    show_labels: bool = True,
    open_browser: bool = False,
) -> go.Figure:
    """Render the map to a standalone HTML file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_figure(
        diagram,
        highlight_ids=highlight_ids,
        path=path,
        cell_size=cell_size,
        show_labels=show_labels,
    )
    fig.write_html(str(output_path))
    if open_browser:
        import webbrowser

        webbrowser.open(f"file://{output_path.resolve()}")
    return fig
