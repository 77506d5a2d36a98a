"""Tests for the schematic-map command line."""

import logging

import pytest
from click.testing import CliRunner

from schematic_map.cli import app


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """The CLI reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerate:
    def test_report_only(self, runner, campus_yaml, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(app, [str(campus_yaml), "--output-dir", str(out), "--no-viz"])
        assert result.exit_code == 0, result.output
        assert "--- Schematic Map Report ---" in result.output
        assert (out / "map_summary.txt").exists()
        assert not (out / "map_visualization.html").exists()

    def test_route_by_name(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [
                str(campus_yaml),
                "--output-dir", str(tmp_path),
                "--no-viz", "--no-report",
                "--source", "Main Street",
                "--destination", "University Station",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "** Route: Main Street -> University Station (4 hops) **" in result.output

    def test_route_by_coordinates(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [
                str(campus_yaml),
                "--output-dir", str(tmp_path),
                "--no-viz", "--no-report",
                "--source", "0,0",
                "--destination", "8, 4",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "(12 hops)" in result.output

    def test_visualization_with_highlights(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [
                str(campus_yaml),
                "--output-dir", str(tmp_path),
                "--no-report",
                "--highlight-type", "park",
                "--highlight-name", "Main Street",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "map_visualization.html").exists()

    def test_log_file(self, runner, campus_yaml, tmp_path):
        log_file = tmp_path / "logs" / "map.log"
        result = runner.invoke(
            app,
            [str(campus_yaml), "--output-dir", str(tmp_path), "--no-viz", "--log-file", str(log_file)],
        )
        assert result.exit_code == 0, result.output
        assert "Green Mile" in log_file.read_text()


class TestErrors:
    def test_no_route(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [
                str(campus_yaml),
                "--output-dir", str(tmp_path),
                "--no-viz", "--no-report",
                "--source", "0,0",
                "--destination", "5,2",
            ],
        )
        assert result.exit_code == 1
        assert "NoPathFound" in result.output

    def test_unknown_place(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [
                str(campus_yaml),
                "--output-dir", str(tmp_path),
                "--no-viz", "--no-report",
                "--source", "Nowhere",
                "--destination", "0,0",
            ],
        )
        assert result.exit_code == 1
        assert "UnsupportedLocation" in result.output

    def test_source_without_destination(self, runner, campus_yaml, tmp_path):
        result = runner.invoke(
            app,
            [str(campus_yaml), "--output-dir", str(tmp_path), "--no-viz", "--source", "0,0"],
        )
        assert result.exit_code == 2

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2
