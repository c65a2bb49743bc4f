"""Tests for domain models to verify they work correctly."""

import math

import pytest

from geoanalyzer.domain import (
    BoundingBox,
    Canvas,
    CircleResult,
    CircleStatus,
    LineCategory,
    LineResult,
    Point,
    QuadrilateralCategory,
    QuadrilateralResult,
    TriangleCategory,
    TriangleResult,
)
from geoanalyzer.exceptions import InvalidCoordinateError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(1.5, -2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(3.0, 4.0).to_tuple() == (3.0, 4.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(3.25, -7.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_coordinates_rejected(self, bad: float) -> None:
        """NaN and infinite coordinates are not points."""
        with pytest.raises(InvalidCoordinateError):
            Point(bad, 0.0)
        with pytest.raises(InvalidCoordinateError):
            Point(0.0, bad)


class TestResults:
    """Tests for classifier result types."""

    def test_line_result_to_dict(self) -> None:
        result = LineResult(length=5.0, slope=None, category=LineCategory.VERTICAL)
        assert result.to_dict() == {"length": 5.0, "slope": None, "category": "vertical"}

    def test_invalid_triangle_has_no_metrics(self) -> None:
        """An invalid triangle keeps its sides only."""
        result = TriangleResult(sides=(1.0, 1.0, 2.0), category=TriangleCategory.INVALID)
        assert not result.is_valid
        assert result.perimeter is None
        assert result.area is None
        assert result.right_angled is False

    def test_valid_triangle_to_dict(self) -> None:
        result = TriangleResult(
            sides=(3.0, 5.0, 4.0),
            category=TriangleCategory.SCALENE,
            perimeter=12.0,
            area=6.0,
            right_angled=True,
        )
        assert result.is_valid
        data = result.to_dict()
        assert data["sides"] == [3.0, 5.0, 4.0]
        assert data["category"] == "scalene"
        assert data["right_angled"] is True

    def test_quadrilateral_result_to_dict(self) -> None:
        result = QuadrilateralResult(
            sides=(2.0, 2.0, 2.0, 2.0),
            diagonals=(2.83, 2.83),
            perimeter=8.0,
            category=QuadrilateralCategory.SQUARE,
        )
        data = result.to_dict()
        assert data["category"] == "square"
        assert data["diagonals"] == [2.83, 2.83]

    def test_degenerate_circle(self) -> None:
        result = CircleResult(status=CircleStatus.DEGENERATE, radius=0.0)
        assert not result.is_valid
        assert result.to_dict()["area"] is None


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_dimensions_are_inclusive(self) -> None:
        bbox = BoundingBox(min_x=-2, max_x=5, min_y=-1, max_y=1)
        assert bbox.width == 8
        assert bbox.height == 3

    def test_contains(self) -> None:
        bbox = BoundingBox(min_x=0, max_x=3, min_y=0, max_y=3)
        assert bbox.contains(0, 0)
        assert bbox.contains(3, 3)
        assert not bbox.contains(4, 0)
        assert not bbox.contains(0, -1)

    def test_expand_to(self) -> None:
        bbox = BoundingBox(min_x=2, max_x=2, min_y=3, max_y=3).expand_to(0, 0)
        assert bbox == BoundingBox(min_x=0, max_x=2, min_y=0, max_y=3)

    def test_padded(self) -> None:
        bbox = BoundingBox(min_x=0, max_x=3, min_y=0, max_y=3).padded(2)
        assert bbox == BoundingBox(min_x=-2, max_x=5, min_y=-2, max_y=5)


class TestCanvas:
    """Tests for Canvas class."""

    @pytest.fixture
    def canvas(self) -> Canvas:
        bbox = BoundingBox(min_x=-1, max_x=1, min_y=0, max_y=1)
        return Canvas(bbox=bbox, rows=[[".", "|", "1"], ["-", "+", "-"]])

    def test_cell_lookup(self, canvas: Canvas) -> None:
        """Top row is max_y, first column is min_x."""
        assert canvas.cell(1, 1) == "1"
        assert canvas.cell(0, 0) == "+"
        assert canvas.cell(-1, 1) == "."

    def test_cell_outside_raises(self, canvas: Canvas) -> None:
        with pytest.raises(IndexError):
            canvas.cell(2, 0)

    def test_row_labels(self, canvas: Canvas) -> None:
        assert canvas.row_labels() == [1, 0]

    def test_to_text(self, canvas: Canvas) -> None:
        assert canvas.to_text() == "  1 | . | 1\n  0 | - + -"

    def test_rows_end_at_last_cell(self, canvas: Canvas) -> None:
        """Cells are space-separated with no trailing separator."""
        for line in canvas.to_text().splitlines():
            assert not line.endswith(" ")

    def test_to_text_with_footer(self, canvas: Canvas) -> None:
        canvas.footer = True
        assert canvas.to_text().splitlines()[-1] == "      ------"
