"""Rich-Click CLI for schematic_map."""

from __future__ import annotations

import logging
from pathlib import Path
import re
import sys

import rich_click as click

click.rich_click.USE_RICH_MARKUP = True

_COORD_RE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


def _parse_location(diagram, text: str):
    """Turn "X,Y", a place id or a place name into a navigation location."""
    match = _COORD_RE.match(text)
    if match:
        return (int(match.group(1)), int(match.group(2)))
    if diagram.place(text) is not None:
        return text
    ids = diagram.ids_by_name(text)
    if ids:
        return ids[0]
    return text


@click.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    default=Path("output"),
    show_default=True,
    help="Output directory for generated files.",
)
@click.option("--report/--no-report", default=True, show_default=True, help="Print an ASCII summary report.")
@click.option("--viz/--no-viz", default=True, show_default=True, help="Render the map to HTML.")
@click.option("--highlight-type", "highlight_types", multiple=True, help="Highlight every place of this type.")
@click.option("--highlight-name", "highlight_names", multiple=True, help="Highlight every place with this name.")
@click.option("--source", type=str, default=None, help="Route start: X,Y, a place id or a place name.")
@click.option("--destination", type=str, default=None, help="Route end: X,Y, a place id or a place name.")
@click.option("--open-browser", is_flag=True, default=False, show_default="False", help="Auto-open HTML after generation.")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Also write a rotating debug log here.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable verbose logging.")
def generate(
    config_file: Path,
    output_dir: Path,
    report: bool,
    viz: bool,
    highlight_types: tuple[str, ...],
    highlight_names: tuple[str, ...],
    source: str | None,
    destination: str | None,
    open_browser: bool,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Build the schematic map described by CONFIG_FILE, then report, route and render it."""
    from schematic_map.config import build_map, load_config
    from schematic_map.logging_config import setup_logging

    setup_logging(console_level=logging.DEBUG if verbose else logging.WARNING, log_file=log_file)

    click.echo(f"Loading map: {config_file}")
    config = load_config(config_file)

    click.echo("Building map...")
    diagram = build_map(config)
    output_dir.mkdir(parents=True, exist_ok=True)

    if report:
        from schematic_map.reporter import generate_report

        summary_text = generate_report(diagram, config)
        click.echo(summary_text)
        summary_path = output_dir / "map_summary.txt"
        summary_path.write_text(summary_text + "\n")
        click.echo(f"Writing summary report: {summary_path}")

    path = None
    if source or destination:
        if not (source and destination):
            raise click.BadParameter("--source and --destination must be given together")
        from schematic_map.reporter import format_route

        result = diagram.find_path(
            _parse_location(diagram, source), _parse_location(diagram, destination)
        )
        if not result.ok:
            click.echo(f"Error: {result.kind.value}: {result.error}", err=True)
            sys.exit(1)
        path = result.value
        click.echo(format_route(path, source, destination))

    highlight_ids: list[str] = []
    for place_type in (*config.visualizer.initial_highlight_types, *highlight_types):
        highlight_ids.extend(diagram.ids_by_type(place_type))
    for name in highlight_names:
        highlight_ids.extend(diagram.ids_by_name(name))

    if viz:
        from schematic_map.visualize import render_map

        viz_path = output_dir / "map_visualization.html"
        click.echo(f"Rendering visualization: {viz_path}")
        render_map(
            diagram,
            viz_path,
            highlight_ids=highlight_ids,
            path=path,
            cell_size=config.visualizer.cell_size,
            show_labels=config.visualizer.show_labels,
            open_browser=open_browser,
        )

    click.echo("Done!")


# Keep the public CLI symbol name stable for entry points.
app = generate


if __name__ == "__main__":
    app()
