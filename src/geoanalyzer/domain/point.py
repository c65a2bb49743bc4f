"""Point type for planar coordinates.

Every figure the analyzer understands is described by a handful of points:
two for a line segment, three for a triangle, four for a quadrilateral and
a center plus a boundary point for a circle.
"""

import math
from dataclasses import dataclass
from typing import Any

from geoanalyzer.exceptions import InvalidCoordinateError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.x):
            raise InvalidCoordinateError("x", self.x)
        if not math.isfinite(self.y):
            raise InvalidCoordinateError("y", self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
