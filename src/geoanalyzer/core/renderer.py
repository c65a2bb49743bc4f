"""Text grid rendering for analyzed figures.

Figures are drawn on an integer grid, one cell per unit, with the y axis
growing upwards. Real coordinates are truncated toward zero to find their
cell, so (2.7, -0.4) lands on (2, 0).

There are two ways to size the grid:
- points_bounding_box: encloses 1-4 points and always includes the origin
- circle_bounding_box: center +/- (radius + padding), origin not forced in

They are kept separate on purpose; a circle far from the origin is plotted
without the axes.

Cell priority, highest first:
1. Point label (1-based, lowest index wins) in point mode
2. Circumference marker, then center marker, in circle mode
3. Origin, y axis, x axis
4. Empty space
"""

import logging
import math
from collections.abc import Sequence

from geoanalyzer.config import RenderConfig
from geoanalyzer.domain import BoundingBox, Canvas, Point
from geoanalyzer.exceptions import PointCountError, RenderError

logger = logging.getLogger(__name__)

MAX_POINTS = 4
DEFAULT_PADDING = 2


def _grid_cell(point: Point) -> tuple[int, int]:
    """Truncate a point to its integer grid cell."""
    return int(point.x), int(point.y)


def points_bounding_box(points: Sequence[Point], padding: int = DEFAULT_PADDING) -> BoundingBox:
    """Calculate the plot extent for a set of labeled points.

    The box starts at the first point, grows to cover the others, is then
    forced to contain the origin and finally padded on every side.

    Args:
        points: One to four points
        padding: Grid units added on every side

    Returns:
        Padded bounding box containing all points and (0, 0)

    Raises:
        PointCountError: If fewer than one or more than four points are given

    Examples:
        >>> points_bounding_box([Point(0.0, 0.0), Point(3.0, 3.0)])
        BoundingBox(min_x=-2, max_x=5, min_y=-2, max_y=5)
    """
    if not 1 <= len(points) <= MAX_POINTS:
        raise PointCountError(len(points), MAX_POINTS)

    x, y = _grid_cell(points[0])
    bbox = BoundingBox(min_x=x, max_x=x, min_y=y, max_y=y)
    for point in points[1:]:
        bbox = bbox.expand_to(*_grid_cell(point))

    return bbox.expand_to(0, 0).padded(padding)


def circle_bounding_box(
    center: Point, radius: float, padding: int = DEFAULT_PADDING
) -> BoundingBox:
    """Calculate the plot extent for a circle.

    Center and radius are truncated separately before the padding is
    applied. The origin is not forced into the box.

    Args:
        center: Circle center
        radius: Circle radius
        padding: Grid units added beyond the radius on every side

    Returns:
        Bounding box around the circle

    Raises:
        RenderError: If the radius is negative or not finite
    """
    if not math.isfinite(radius) or radius < 0:
        raise RenderError(f"Cannot plot a circle with radius {radius}")

    cx, cy = _grid_cell(center)
    reach = int(radius) + padding
    return BoundingBox(min_x=cx - reach, max_x=cx + reach, min_y=cy - reach, max_y=cy + reach)


class GridRenderer:
    """Rasterizes figures onto a text canvas.

    The renderer is stateless apart from its configuration and can be
    shared between requests.

    Example:
        renderer = GridRenderer()
        print(renderer.render_points([Point(0, 0), Point(3, 3)]))
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer with configuration.

        Args:
            config: Render configuration (uses defaults if None)
        """
        self.config = config or RenderConfig()

    def _background(self, x: int, y: int) -> str:
        if x == 0 and y == 0:
            return self.config.origin_marker
        if x == 0:
            return self.config.y_axis_marker
        if y == 0:
            return self.config.x_axis_marker
        return self.config.empty_marker

    def rasterize_points(self, points: Sequence[Point]) -> Canvas:
        """Draw labeled points on a canvas that includes the origin.

        Args:
            points: One to four points, labeled 1..n in order

        Returns:
            Canvas with point labels over the axes
        """
        bbox = points_bounding_box(points, self.config.padding)
        cells = [_grid_cell(p) for p in points]
        logger.debug("Plotting %d points in %s", len(points), bbox)

        rows: list[list[str]] = []
        for y in range(bbox.max_y, bbox.min_y - 1, -1):
            row: list[str] = []
            for x in range(bbox.min_x, bbox.max_x + 1):
                label = next(
                    (str(i) for i, cell in enumerate(cells, start=1) if cell == (x, y)),
                    None,
                )
                row.append(label if label is not None else self._background(x, y))
            rows.append(row)

        return Canvas(bbox=bbox, rows=rows, footer=True)

    def rasterize_circle(self, center: Point, radius: float) -> Canvas:
        """Draw a circle outline and its center.

        A cell is on the circumference when its distance to the real center
        is within the configured thickness of the radius.

        Args:
            center: Circle center
            radius: Circle radius

        Returns:
            Canvas with the circle over the axes
        """
        bbox = circle_bounding_box(center, radius, self.config.padding)
        center_cell = _grid_cell(center)
        logger.debug("Plotting circle r=%.3f in %s", radius, bbox)

        rows: list[list[str]] = []
        for y in range(bbox.max_y, bbox.min_y - 1, -1):
            row: list[str] = []
            for x in range(bbox.min_x, bbox.max_x + 1):
                d = math.hypot(x - center.x, y - center.y)
                if abs(d - radius) < self.config.circle_thickness:
                    row.append(self.config.circumference_marker)
                elif (x, y) == center_cell:
                    row.append(self.config.center_marker)
                else:
                    row.append(self._background(x, y))
            rows.append(row)

        return Canvas(bbox=bbox, rows=rows)

    def render_points(self, points: Sequence[Point]) -> str:
        """Render labeled points as a text grid."""
        return self.rasterize_points(points).to_text()

    def render_circle(self, center: Point, radius: float) -> str:
        """Render a circle as a text grid."""
        return self.rasterize_circle(center, radius).to_text()


def render_points(points: Sequence[Point]) -> str:
    """Render 1-4 labeled points with the default configuration."""
    return GridRenderer().render_points(points)


def render_circle(center: Point, radius: float) -> str:
    """Render a circle with the default configuration."""
    return GridRenderer().render_circle(center, radius)
