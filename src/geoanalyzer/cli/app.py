"""CLI application entry point for geoanalyzer.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.prompt import Prompt

from geoanalyzer import __version__
from geoanalyzer.cli.output import (
    console,
    print_analysis,
    print_error,
    print_grid,
    print_header,
    print_menu,
    print_session_summary,
)
from geoanalyzer.cli.parsing import parse_point
from geoanalyzer.config import AnalyzerSettings, LoggingConfig, RenderConfig
from geoanalyzer.core import Analysis, ShapeAnalyzer
from geoanalyzer.domain import Point
from geoanalyzer.exceptions import GeoAnalyzerError, PointParseError
from geoanalyzer.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="geoanalyzer",
    help="Classify lines, triangles, quadrilaterals and circles and plot them as text.",
    add_completion=False,
    no_args_is_help=True,
)

JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the analysis as JSON"),
]
PlotOption = Annotated[
    bool,
    typer.Option(
        "--plot/--no-plot",
        help="Draw the figure on a text grid (--no-plot also leaves grid null in --json)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Geoanalyzer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    padding: Annotated[
        int,
        typer.Option(
            "--padding",
            help="Empty grid units around the plotted figure",
            min=0,
            max=10,
        ),
    ] = 2,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Analyze planar figures from their coordinates.

    Example:
        geoanalyzer quad --p1 0 0 --p2 2 0 --p3 2 2 --p4 0 2
    """
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: " + ", ".join(LOG_LEVELS),
        )
        raise typer.Exit(code=1)

    settings = AnalyzerSettings(
        render=RenderConfig(padding=padding),
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = ShapeAnalyzer(settings, logger)


@contextmanager
def _exit_on_error() -> Iterator[None]:
    try:
        yield
    except GeoAnalyzerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _report(analysis: Analysis, as_json: bool) -> None:
    if as_json:
        console.print_json(data=analysis.to_dict())
    else:
        print_analysis(analysis)


@app.command()
def line(
    ctx: typer.Context,
    p1: Annotated[tuple[float, float], typer.Option("--p1", metavar="X Y", help="First endpoint")],
    p2: Annotated[tuple[float, float], typer.Option("--p2", metavar="X Y", help="Second endpoint")],
    as_json: JsonOption = False,
    plot: PlotOption = True,
) -> None:
    """Measure a line segment and classify its orientation."""
    with _exit_on_error():
        analysis = ctx.obj.line(Point(*p1), Point(*p2), plot=plot)
    _report(analysis, as_json)


@app.command()
def triangle(
    ctx: typer.Context,
    p1: Annotated[tuple[float, float], typer.Option("--p1", metavar="X Y", help="First vertex")],
    p2: Annotated[tuple[float, float], typer.Option("--p2", metavar="X Y", help="Second vertex")],
    p3: Annotated[tuple[float, float], typer.Option("--p3", metavar="X Y", help="Third vertex")],
    as_json: JsonOption = False,
    plot: PlotOption = True,
) -> None:
    """Classify a triangle by its sides and detect right angles.

    Collinear points are reported as an invalid triangle.
    """
    with _exit_on_error():
        analysis = ctx.obj.triangle(Point(*p1), Point(*p2), Point(*p3), plot=plot)
    _report(analysis, as_json)


@app.command()
def quad(
    ctx: typer.Context,
    p1: Annotated[tuple[float, float], typer.Option("--p1", metavar="X Y", help="First vertex")],
    p2: Annotated[tuple[float, float], typer.Option("--p2", metavar="X Y", help="Second vertex")],
    p3: Annotated[tuple[float, float], typer.Option("--p3", metavar="X Y", help="Third vertex")],
    p4: Annotated[tuple[float, float], typer.Option("--p4", metavar="X Y", help="Fourth vertex")],
    as_json: JsonOption = False,
    plot: PlotOption = True,
) -> None:
    """Estimate the kind of a quadrilateral.

    Give the vertices in order around the shape (clockwise or
    counter-clockwise); the order is not checked.
    """
    with _exit_on_error():
        analysis = ctx.obj.quadrilateral(
            Point(*p1), Point(*p2), Point(*p3), Point(*p4), plot=plot
        )
    _report(analysis, as_json)


@app.command()
def circle(
    ctx: typer.Context,
    center: Annotated[
        tuple[float, float], typer.Option("--center", "-c", metavar="X Y", help="Center point")
    ],
    boundary: Annotated[
        tuple[float, float],
        typer.Option("--boundary", "-b", metavar="X Y", help="Any point on the circumference"),
    ],
    as_json: JsonOption = False,
    plot: PlotOption = True,
) -> None:
    """Measure a circle from its center and a point on the circumference.

    A zero radius is reported as a degenerate circle.
    """
    with _exit_on_error():
        analysis = ctx.obj.circle(Point(*center), Point(*boundary), plot=plot)
    _report(analysis, as_json)


@app.command(context_settings={"ignore_unknown_options": True})
def plot(
    ctx: typer.Context,
    points: Annotated[
        list[str],
        typer.Argument(help="One to four points written as X,Y", metavar="X,Y..."),
    ],
) -> None:
    """Plot up to four labeled points around the origin without classifying them."""
    with _exit_on_error():
        grid = ctx.obj.plot([parse_point(text) for text in points])
    print_grid("Graph (positive y at the top):", grid)


def _ask_point(label: str) -> Point:
    """Prompt until the user enters a valid point."""
    while True:
        text = Prompt.ask(f"Enter {label} (x y)", console=console)
        try:
            return parse_point(text)
        except PointParseError as e:
            print_error(str(e))


def _menu_line(analyzer: ShapeAnalyzer) -> Analysis:
    return analyzer.line(_ask_point("point 1"), _ask_point("point 2"))


def _menu_triangle(analyzer: ShapeAnalyzer) -> Analysis:
    return analyzer.triangle(
        _ask_point("point 1"), _ask_point("point 2"), _ask_point("point 3")
    )


def _menu_quadrilateral(analyzer: ShapeAnalyzer) -> Analysis:
    console.print("  Enter the points in order (clockwise or counter-clockwise)")
    return analyzer.quadrilateral(
        _ask_point("point 1"),
        _ask_point("point 2"),
        _ask_point("point 3"),
        _ask_point("point 4"),
    )


def _menu_circle(analyzer: ShapeAnalyzer) -> Analysis:
    return analyzer.circle(_ask_point("center point"), _ask_point("a point on the circumference"))


MENU_ACTIONS: dict[str, Callable[[ShapeAnalyzer], Analysis]] = {
    "1": _menu_line,
    "2": _menu_triangle,
    "3": _menu_quadrilateral,
    "4": _menu_circle,
}


@app.command()
def menu(ctx: typer.Context) -> None:
    """Run the interactive analyzer menu.

    Choose a figure, type its points as "x y" and read the result. Enter 0
    (or end the input) to leave; a session summary is printed on exit.
    """
    analyzer: ShapeAnalyzer = ctx.obj
    print_header(__version__)

    while True:
        print_menu()
        try:
            choice = Prompt.ask("Enter choice", console=console).strip()
            if choice == "0":
                console.print("\nExiting. Goodbye!")
                break

            action = MENU_ACTIONS.get(choice)
            if action is None:
                print_error("Invalid choice. Please try again.")
                continue

            analysis = action(analyzer)
        except EOFError:
            break

        print_analysis(analysis)

    print_session_summary(analyzer.stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
