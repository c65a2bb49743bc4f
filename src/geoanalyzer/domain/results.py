"""Classification results for each supported shape kind.

Results are plain value objects built fresh for every request. Two of them
carry a terminal outcome instead of raising: a triangle that violates the
triangle inequality is INVALID and a circle with zero radius is DEGENERATE.
In both cases the metrics that would follow the check are left as None.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ShapeKind(str, Enum):
    """Kind of figure being analyzed."""

    LINE = "line"
    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"
    CIRCLE = "circle"


class LineCategory(str, Enum):
    """Orientation of a line segment."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class TriangleCategory(str, Enum):
    """Side-based triangle classification.

    Right-angledness is reported separately because it combines freely with
    every valid category (a 3-4-5 triangle is scalene and right-angled).
    """

    INVALID = "invalid"
    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


class QuadrilateralCategory(str, Enum):
    """Side/diagonal based quadrilateral estimate."""

    SQUARE = "square"
    RHOMBUS = "rhombus"
    RECTANGLE = "rectangle"
    PARALLELOGRAM = "parallelogram"
    KITE = "kite"
    GENERAL = "general"


class CircleStatus(str, Enum):
    """Whether the circle has a usable radius."""

    VALID = "valid"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class LineResult:
    """Analysis of a line segment.

    Attributes:
        length: Distance between the two endpoints
        slope: Rise over run, None for vertical segments
        category: Orientation of the segment
    """

    length: float
    slope: float | None
    category: LineCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "slope": self.slope,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class TriangleResult:
    """Analysis of a triangle.

    Attributes:
        sides: Lengths of P1P2, P2P3 and P3P1
        category: Side classification, INVALID when the points are collinear
        perimeter: Sum of the sides (None when invalid)
        area: Area from Heron's formula (None when invalid)
        right_angled: True if one angle is a right angle
    """

    sides: tuple[float, float, float]
    category: TriangleCategory
    perimeter: float | None = None
    area: float | None = None
    right_angled: bool = False

    @property
    def is_valid(self) -> bool:
        """Check whether the points form a real triangle."""
        return self.category is not TriangleCategory.INVALID

    def to_dict(self) -> dict[str, Any]:
        return {
            "sides": list(self.sides),
            "category": self.category.value,
            "perimeter": self.perimeter,
            "area": self.area,
            "right_angled": self.right_angled,
        }


@dataclass(frozen=True)
class QuadrilateralResult:
    """Analysis of a quadrilateral given in cyclic order.

    Attributes:
        sides: Lengths of P1P2, P2P3, P3P4 and P4P1
        diagonals: Lengths of P1P3 and P2P4
        perimeter: Sum of the sides
        category: Shape estimate
    """

    sides: tuple[float, float, float, float]
    diagonals: tuple[float, float]
    perimeter: float
    category: QuadrilateralCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "sides": list(self.sides),
            "diagonals": list(self.diagonals),
            "perimeter": self.perimeter,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class CircleResult:
    """Analysis of a circle given by its center and a boundary point.

    Attributes:
        status: VALID, or DEGENERATE when the radius is zero
        radius: Distance from center to the boundary point
        diameter: Twice the radius (None when degenerate)
        circumference: 2πr (None when degenerate)
        area: πr² (None when degenerate)
    """

    status: CircleStatus
    radius: float
    diameter: float | None = None
    circumference: float | None = None
    area: float | None = None

    @property
    def is_valid(self) -> bool:
        """Check whether the circle has a non-zero radius."""
        return self.status is CircleStatus.VALID

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "radius": self.radius,
            "diameter": self.diameter,
            "circumference": self.circumference,
            "area": self.area,
        }


ShapeResult = LineResult | TriangleResult | QuadrilateralResult | CircleResult
