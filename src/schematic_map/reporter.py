"""Functions for generating ASCII reports of a map and of a computed route."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from schematic_map.diagram import MapDiagram
from schematic_map.geometry import Coord

if TYPE_CHECKING:
    from schematic_map.config import MapConfig

_DIRECTIONS: dict[Coord, str] = {
    (1, 0): "east",
    (-1, 0): "west",
    (0, 1): "south",
    (0, -1): "north",
}


def summarize_route(path: list[Coord]) -> list[tuple[str, int, Coord]]:
    """Collapse a hop-by-hop path into straight legs of (direction, hops, end)."""
    legs: list[tuple[str, int, Coord]] = []
    for prev, cur in zip(path, path[1:]):
        step = (cur[0] - prev[0], cur[1] - prev[1])
        direction = _DIRECTIONS.get(step)
        if direction is None:
            raise ValueError(f"path step {prev} -> {cur} is not a single grid hop")
        if legs and legs[-1][0] == direction:
            legs[-1] = (direction, legs[-1][1] + 1, cur)
        else:
            legs.append((direction, 1, cur))
    return legs


def format_route(path: list[Coord], source_label: str = "", destination_label: str = "") -> str:
    start = source_label or str(path[0])
    end = destination_label or str(path[-1])
    lines = [f"** Route: {start} -> {end} ({len(path) - 1} hops) **"]
    legs = summarize_route(path)
    if not legs:
        lines.append("  - Already at destination")
    for direction, hops, stop in legs:
        lines.append(f"  - {direction} {hops} to {stop}")
    return "\n".join(lines)


def generate_report(diagram: MapDiagram, config: MapConfig | None = None) -> str:
    """Generates a detailed, multi-line ASCII report of the map."""
    graph = diagram.graph
    by_category = diagram.places.places_by_category()

    report_lines = [
        "--- Schematic Map Report ---",
        "",
        "** Map **",
        f"  - Title: {diagram.title or '(untitled)'}",
        f"  - Map ID: {diagram.id}",
        f"  - Size (W x H): {graph.width} x {graph.height}",
        "",
        "** Street Network **",
        f"  - Grid Nodes: {len(graph.nodes)}",
        f"  - Intersections In Use: {len(graph.intersections())}",
        f"  - Connections: {len(graph.connections)}",
        f"  - Street Edges: {len(graph.edges())}",
        "",
        "** Places **",
    ]
    for category, places in by_category.items():
        report_lines.append(f"  - {category}: {len(places)}")
    report_lines.append(f"  - Label Spots Claimed: {len(diagram.places.labels.claimed)}")
    report_lines.append("")

    report_lines.append("** Legend **")
    for category, types in diagram.legend().items():
        if not types:
            continue
        counts = Counter(p.type for p in by_category[category])
        entries = ", ".join(f"{t} ({counts[t]})" for t in types)
        report_lines.append(f"  - {category}: {entries}")
    report_lines.append("")

    filters_cfg = config.filters if config is not None else None
    report_lines.append("** Filters **")
    for by, options in (
        ("type", filters_cfg.types if filters_cfg else None),
        ("name", filters_cfg.names if filters_cfg else None),
    ):
        menu = diagram.filter_menu(by=by, options=options)
        entries = ", ".join(f"{option} ({len(ids)})" for option, ids in menu.items())
        report_lines.append(f"  - By {by}: {entries or '(none)'}")
    report_lines.append("")

    if diagram.rejected:
        report_lines.append("** Rejected **")
        for label, exc in diagram.rejected:
            report_lines.append(f"  - {label}: {exc.kind.value} - {exc}")
        report_lines.append("")

    report_lines.append("--- End of Report ---")
    return "\n".join(report_lines)
