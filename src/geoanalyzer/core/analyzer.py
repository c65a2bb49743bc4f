"""Analysis orchestration: classify a figure, then plot it.

Classification and rendering are independent consumers of the same points.
The renderer re-derives its grid from the raw coordinates and never sees
the classifier's result, except that terminal outcomes (invalid triangle,
degenerate circle) are not plotted at all.

Key components:
- Analysis: Classifier result plus the rendered grid
- ShapeAnalyzer: Runs classifier and renderer and logs every request
"""

from dataclasses import dataclass
from typing import Any

import structlog

from geoanalyzer.config import AnalyzerSettings, get_default_settings
from geoanalyzer.core.classifiers import (
    analyze_circle,
    analyze_line,
    analyze_quadrilateral,
    analyze_triangle,
)
from geoanalyzer.core.renderer import GridRenderer
from geoanalyzer.domain import Canvas, Point, ShapeKind, ShapeResult
from geoanalyzer.utils import AnalysisLogger, AnalysisStats


@dataclass(frozen=True)
class Analysis:
    """Outcome of one analysis request.

    Attributes:
        shape: Kind of figure analyzed
        points: Input points in the order given
        result: Classifier output
        grid: Text grid, None when the figure was rejected
    """

    shape: ShapeKind
    points: tuple[Point, ...]
    result: ShapeResult
    grid: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dictionary.

        Returns:
            Dictionary with shape, points, result and grid lines
        """
        return {
            "shape": self.shape.value,
            "points": [p.to_dict() for p in self.points],
            "result": self.result.to_dict(),
            "grid": self.grid.splitlines() if self.grid is not None else None,
        }


class ShapeAnalyzer:
    """Front end to the classifiers and the grid renderer.

    Example:
        analyzer = ShapeAnalyzer()
        analysis = analyzer.triangle(Point(0, 0), Point(3, 0), Point(0, 4))
        print(analysis.result.category, analysis.result.right_angled)
        print(analysis.grid)

    Every shape method takes plot=False to skip rasterization; the grid
    grows with the coordinate range, so large inputs should not be plotted.
    """

    def __init__(
        self,
        settings: AnalyzerSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize analyzer with configuration.

        Args:
            settings: Application settings (uses defaults if None)
            logger: Bound logger (uses the "geoanalyzer" logger if None)
        """
        self.settings = settings or get_default_settings()
        self.renderer = GridRenderer(self.settings.render)
        self.analysis_logger = AnalysisLogger(logger or structlog.get_logger("geoanalyzer"))

    @property
    def stats(self) -> AnalysisStats:
        """Statistics for every analysis run by this instance."""
        return self.analysis_logger.stats

    def _plotted(self, subject: str, canvas: Canvas) -> str:
        self.analysis_logger.log_render(subject, canvas.bbox.width, canvas.bbox.height)
        return canvas.to_text()

    def line(self, p1: Point, p2: Point, plot: bool = True) -> Analysis:
        """Analyze a line segment and plot its endpoints."""
        result = analyze_line(p1, p2)
        self.analysis_logger.log_analysis(ShapeKind.LINE, result.category.value, 2)
        grid = None
        if plot:
            grid = self._plotted(ShapeKind.LINE.value, self.renderer.rasterize_points([p1, p2]))
        return Analysis(shape=ShapeKind.LINE, points=(p1, p2), result=result, grid=grid)

    def triangle(self, p1: Point, p2: Point, p3: Point, plot: bool = True) -> Analysis:
        """Analyze a triangle and plot its vertices unless it is invalid."""
        points = (p1, p2, p3)
        result = analyze_triangle(p1, p2, p3)

        if not result.is_valid:
            self.analysis_logger.log_terminal_outcome(
                ShapeKind.TRIANGLE, result.category.value, "points are collinear"
            )
            return Analysis(shape=ShapeKind.TRIANGLE, points=points, result=result)

        self.analysis_logger.log_analysis(ShapeKind.TRIANGLE, result.category.value, 3)
        grid = None
        if plot:
            grid = self._plotted(ShapeKind.TRIANGLE.value, self.renderer.rasterize_points(points))
        return Analysis(shape=ShapeKind.TRIANGLE, points=points, result=result, grid=grid)

    def quadrilateral(
        self, p1: Point, p2: Point, p3: Point, p4: Point, plot: bool = True
    ) -> Analysis:
        """Analyze a quadrilateral given in cyclic order and plot its vertices."""
        points = (p1, p2, p3, p4)
        result = analyze_quadrilateral(p1, p2, p3, p4)
        self.analysis_logger.log_analysis(ShapeKind.QUADRILATERAL, result.category.value, 4)
        grid = None
        if plot:
            grid = self._plotted(
                ShapeKind.QUADRILATERAL.value, self.renderer.rasterize_points(points)
            )
        return Analysis(shape=ShapeKind.QUADRILATERAL, points=points, result=result, grid=grid)

    def circle(self, center: Point, boundary: Point, plot: bool = True) -> Analysis:
        """Analyze a circle and plot it unless the radius is zero."""
        points = (center, boundary)
        result = analyze_circle(center, boundary)

        if not result.is_valid:
            self.analysis_logger.log_terminal_outcome(
                ShapeKind.CIRCLE, result.status.value, "radius is zero"
            )
            return Analysis(shape=ShapeKind.CIRCLE, points=points, result=result)

        self.analysis_logger.log_analysis(ShapeKind.CIRCLE, result.status.value, 2)
        grid = None
        if plot:
            grid = self._plotted(
                ShapeKind.CIRCLE.value, self.renderer.rasterize_circle(center, result.radius)
            )
        return Analysis(shape=ShapeKind.CIRCLE, points=points, result=result, grid=grid)

    def plot(self, points: list[Point]) -> str:
        """Plot 1-4 labeled points without classifying them."""
        return self._plotted("points", self.renderer.rasterize_points(points))
