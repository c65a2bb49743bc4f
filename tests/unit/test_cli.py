"""Tests for the command-line interface and coordinate parsing."""

import json
import logging

import pytest
from typer.testing import CliRunner

from geoanalyzer import __version__
from geoanalyzer.cli.app import app
from geoanalyzer.cli.parsing import parse_point
from geoanalyzer.domain import Point
from geoanalyzer.exceptions import PointParseError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    """Drop handlers installed by configure_logging between tests."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


class TestParsePoint:
    """Tests for parse_point."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3 4", Point(3.0, 4.0)),
            ("3,4", Point(3.0, 4.0)),
            ("  -1.5 ,  2e1 ", Point(-1.5, 20.0)),
            ("(0, -7)", Point(0.0, -7.0)),
        ],
    )
    def test_accepted_forms(self, text, expected):
        assert parse_point(text) == expected

    @pytest.mark.parametrize("text", ["", "3", "1 2 3", "a b", "nan 0", "1 inf"])
    def test_rejected(self, text):
        with pytest.raises(PointParseError):
            parse_point(text)


class TestCommands:
    """Tests for the one-shot commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_line(self):
        result = runner.invoke(app, ["line", "--p1", "0", "0", "--p2", "3", "4"])
        assert result.exit_code == 0
        assert "Length: 5.00 units" in result.output
        assert "Ascending" in result.output
        assert "  4 | " in result.output

    def test_line_negative_coordinates(self):
        result = runner.invoke(app, ["line", "--p1", "-3", "-1", "--p2", "2", "-1"])
        assert result.exit_code == 0
        assert "Horizontal" in result.output

    def test_vertical_line(self):
        result = runner.invoke(app, ["line", "--p1", "1", "0", "--p2", "1", "5", "--no-plot"])
        assert result.exit_code == 0
        assert "Undefined" in result.output
        assert "Graph" not in result.output

    def test_triangle(self):
        result = runner.invoke(
            app, ["triangle", "--p1", "0", "0", "--p2", "3", "0", "--p3", "0", "4"]
        )
        assert result.exit_code == 0
        assert "Scalene triangle" in result.output
        assert "Right-angled" in result.output
        assert "Area: 6.00 sq units" in result.output

    def test_invalid_triangle(self):
        result = runner.invoke(
            app, ["triangle", "--p1", "0", "0", "--p2", "1", "0", "--p3", "2", "0"]
        )
        assert result.exit_code == 0
        assert "collinear" in result.output
        assert "Graph" not in result.output

    def test_quad(self):
        result = runner.invoke(
            app,
            ["quad", "--p1", "0", "0", "--p2", "2", "0", "--p3", "3", "2", "--p4", "1", "2"],
        )
        assert result.exit_code == 0
        assert "Parallelogram" in result.output

    def test_circle(self):
        result = runner.invoke(app, ["circle", "--center", "0", "0", "--boundary", "5", "0"])
        assert result.exit_code == 0
        assert "Radius: 5.00" in result.output
        assert "Area: 78.54" in result.output
        assert "Circumference: 31.42" in result.output

    def test_degenerate_circle(self):
        result = runner.invoke(app, ["circle", "-c", "2", "2", "-b", "2", "2"])
        assert result.exit_code == 0
        assert "Radius is zero" in result.output

    def test_json_output(self):
        result = runner.invoke(
            app, ["circle", "--center", "0", "0", "--boundary", "5", "0", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["shape"] == "circle"
        assert data["result"]["area"] == pytest.approx(78.5398, abs=1e-3)
        assert isinstance(data["grid"], list)

    def test_no_plot_skips_grid(self):
        result = runner.invoke(app, ["line", "--p1", "0", "0", "--p2", "3", "4", "--no-plot"])
        assert result.exit_code == 0
        assert "Length: 5.00 units" in result.output
        assert " | " not in result.output

    def test_no_plot_large_coordinates(self):
        """Far-apart points are classified without building a huge grid."""
        result = runner.invoke(
            app, ["line", "--p1", "0", "0", "--p2", "100000", "100000", "--no-plot"]
        )
        assert result.exit_code == 0
        assert "Ascending" in result.output

    def test_json_without_plot(self):
        result = runner.invoke(
            app,
            [
                "quad",
                "--p1", "0", "0",
                "--p2", "2", "0",
                "--p3", "2", "2",
                "--p4", "0", "2",
                "--json",
                "--no-plot",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["result"]["category"] == "square"
        assert data["grid"] is None

    def test_non_finite_coordinate(self):
        result = runner.invoke(app, ["line", "--p1", "nan", "0", "--p2", "1", "1"])
        assert result.exit_code == 1
        assert "not a finite number" in result.output

    def test_plot(self):
        result = runner.invoke(app, ["plot", "0,0", "3,3"])
        assert result.exit_code == 0
        assert "  3 | . . | . . 2 . ." in result.output

    def test_plot_negative_point(self):
        result = runner.invoke(app, ["plot", "--", "-1,-1"])
        assert result.exit_code == 0
        assert " -1 | . . 1 | . ." in result.output

    def test_plot_too_many_points(self):
        result = runner.invoke(app, ["plot", "0,0", "1,1", "2,2", "3,3", "4,4"])
        assert result.exit_code == 1
        assert "between 1 and 4" in result.output

    def test_plot_bad_point(self):
        result = runner.invoke(app, ["plot", "1;2"])
        assert result.exit_code == 1
        assert "Cannot read point" in result.output

    def test_padding_option(self):
        result = runner.invoke(app, ["--padding", "0", "plot", "1,1"])
        assert result.exit_code == 0
        assert "  1 | | 1" in result.output
        assert "  0 | + -" in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "plot", "1,1"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            ["--log-file", str(log_file), "line", "--p1", "0", "0", "--p2", "1", "1"],
        )
        assert result.exit_code == 0
        assert "Shape analyzed" in log_file.read_text(encoding="utf-8")


class TestMenu:
    """Tests for the interactive menu."""

    def test_line_then_exit(self):
        result = runner.invoke(app, ["menu"], input="1\n0 0\n3 4\n0\n")
        assert result.exit_code == 0
        assert "Ascending" in result.output
        assert "Goodbye" in result.output
        assert "1 analyzed" in result.output

    def test_invalid_choice(self):
        result = runner.invoke(app, ["menu"], input="9\n0\n")
        assert result.exit_code == 0
        assert "Invalid choice" in result.output

    def test_reprompts_on_bad_point(self):
        result = runner.invoke(app, ["menu"], input="2\n0 0\nfoo\n1 0\n2 0\n0\n")
        assert result.exit_code == 0
        assert "Cannot read point" in result.output
        assert "collinear" in result.output
        assert "1 rejected" in result.output

    def test_end_of_input_exits(self):
        result = runner.invoke(app, ["menu"], input="4\n0 0\n")
        assert result.exit_code == 0
        assert "Session complete" in result.output
        assert "0 analyzed" in result.output

    def test_all_shapes(self):
        script = "\n".join(
            [
                "1", "0 0", "2 0",
                "2", "0 0", "2 0", "1 1.732",
                "3", "0 0", "2 0", "2 2", "0 2",
                "4", "0 0", "5 0",
                "0",
            ]
        )
        result = runner.invoke(app, ["menu"], input=script + "\n")
        assert result.exit_code == 0
        assert "Horizontal" in result.output
        assert "Equilateral triangle" in result.output
        assert "Square" in result.output
        assert "Radius: 5.00" in result.output
        assert "4 analyzed" in result.output
