"""Rich console output helpers for the CLI.

This module formats classifier results for people: numbers are shown with
two decimals and categories with their long names. Grids are printed as-is.
"""

from rich.console import Console
from rich.text import Text

from geoanalyzer.core import Analysis
from geoanalyzer.domain import (
    CircleResult,
    LineCategory,
    LineResult,
    QuadrilateralCategory,
    QuadrilateralResult,
    TriangleResult,
)
from geoanalyzer.utils import AnalysisStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

LINE_LABELS = {
    LineCategory.VERTICAL: "Vertical",
    LineCategory.HORIZONTAL: "Horizontal",
    LineCategory.ASCENDING: "Ascending",
    LineCategory.DESCENDING: "Descending",
}

QUADRILATERAL_LABELS = {
    QuadrilateralCategory.SQUARE: "Square",
    QuadrilateralCategory.RHOMBUS: "Rhombus (Diamond)",
    QuadrilateralCategory.RECTANGLE: "Rectangle",
    QuadrilateralCategory.PARALLELOGRAM: "Parallelogram",
    QuadrilateralCategory.KITE: "Kite",
    QuadrilateralCategory.GENERAL: "General Quadrilateral / Trapezoid",
}


def _num(value: float) -> str:
    return f"{value:.2f}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Geoanalyzer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_menu() -> None:
    """Print the interactive menu."""
    console.print("\nSelect an operation:")
    console.print("  1. Analyze 2 points (line segment)")
    console.print("  2. Analyze 3 points (triangle classification)")
    console.print("  3. Analyze 4 points (quadrilateral classification)")
    console.print("  4. Analyze circle (center + point on circumference)")
    console.print("  0. Exit")


def print_line_result(result: LineResult) -> None:
    console.print(f"  Length: {_num(result.length)} units")
    if result.slope is None:
        console.print("  Slope: Undefined (vertical line)")
    else:
        console.print(f"  Slope: {_num(result.slope)}")
    console.print(f"  Type: [bold]{LINE_LABELS[result.category]}[/bold]")


def print_triangle_result(result: TriangleResult) -> None:
    a, b, c = result.sides
    console.print(f"  Side lengths: A={_num(a)}, B={_num(b)}, C={_num(c)}")
    if not result.is_valid:
        print_error("These points do not form a valid triangle (collinear)")
        return

    console.print(f"  Perimeter: {_num(result.perimeter)}")
    console.print(f"  Area: {_num(result.area)} sq units")
    console.print(
        f"  Classification: [bold]{result.category.value.capitalize()} triangle[/bold]"
    )
    if result.right_angled:
        console.print("  Property: Right-angled")


def print_quadrilateral_result(result: QuadrilateralResult) -> None:
    console.print("  Sides: " + ", ".join(_num(s) for s in result.sides))
    console.print("  Diagonals: " + ", ".join(_num(d) for d in result.diagonals))
    console.print(f"  Perimeter: {_num(result.perimeter)}")
    console.print(
        f"  Shape estimate: [bold]{QUADRILATERAL_LABELS[result.category]}[/bold]"
    )


def print_circle_result(result: CircleResult) -> None:
    if not result.is_valid:
        print_error("Radius is zero", details="This is a point, not a circle.")
        return

    console.print(f"  Radius: {_num(result.radius)}")
    console.print(f"  Diameter: {_num(result.diameter)}")
    console.print(f"  Circumference: {_num(result.circumference)}")
    console.print(f"  Area: {_num(result.area)}")


def print_grid(title: str, grid: str) -> None:
    """Print a rendered text grid.

    Args:
        title: Line printed above the grid
        grid: Output of the grid renderer
    """
    console.print(f"\n  {title}\n")
    console.print(Text(grid), soft_wrap=True)


def print_analysis(analysis: Analysis) -> None:
    """Print an analysis result and its grid, if one was rendered.

    Args:
        analysis: Result from ShapeAnalyzer
    """
    result = analysis.result
    if isinstance(result, LineResult):
        print_step("Line segment analysis")
        print_line_result(result)
    elif isinstance(result, TriangleResult):
        print_step("Triangle classification")
        print_triangle_result(result)
    elif isinstance(result, QuadrilateralResult):
        print_step("Quadrilateral classification")
        print_quadrilateral_result(result)
    else:
        print_step("Circle analysis")
        print_circle_result(result)

    if analysis.grid is not None:
        title = (
            "Graph (approximate circle):"
            if isinstance(result, CircleResult)
            else "Graph (positive y at the top):"
        )
        print_grid(title, analysis.grid)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_session_summary(stats: AnalysisStats) -> None:
    """Print totals for an interactive session.

    Args:
        stats: Statistics collected by the analyzer
    """
    console.print(f"\n[bold green]{SYM_OK} Session complete[/bold green]")
    console.print(
        f"  {stats.analyzed_count} analyzed {SYM_DOT} {stats.valid_count} valid "
        f"{SYM_DOT} {stats.invalid_count} rejected"
    )
    if stats.by_shape:
        shapes = sorted(stats.by_shape.items(), key=lambda item: item[0].value)
        console.print("  " + f" {SYM_DOT} ".join(f"{n} {shape.value}" for shape, n in shapes))
