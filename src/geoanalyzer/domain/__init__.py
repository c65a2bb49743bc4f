"""Domain models for geoanalyzer.

This module contains the value types passed between the classifiers, the
renderer and the CLI. All models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for JSON output
- Built fresh for every analysis request

Key classes:
- Point: A finite (x, y) coordinate pair
- LineResult, TriangleResult, QuadrilateralResult, CircleResult: classifier output
- BoundingBox: Integer plot extent
- Canvas: Character grid produced by the renderer
"""

from geoanalyzer.domain.grid import BoundingBox, Canvas
from geoanalyzer.domain.point import Point
from geoanalyzer.domain.results import (
    CircleResult,
    CircleStatus,
    LineCategory,
    LineResult,
    QuadrilateralCategory,
    QuadrilateralResult,
    ShapeKind,
    ShapeResult,
    TriangleCategory,
    TriangleResult,
)

__all__: list[str] = [
    # Enums
    "CircleStatus",
    "LineCategory",
    "QuadrilateralCategory",
    "ShapeKind",
    "TriangleCategory",
    # Core types
    "Point",
    "LineResult",
    "TriangleResult",
    "QuadrilateralResult",
    "CircleResult",
    "ShapeResult",
    "BoundingBox",
    "Canvas",
]
