"""Shape classifiers for lines, triangles, quadrilaterals and circles.

Each classifier measures the figure with the metric primitives and then
walks an ordered chain of checks; the first check that matches decides the
category. The order is part of the behavior: with tolerance-based equality
several checks can hold at once (every square also has equal opposite
sides), and the earlier, stricter check must win.

All functions are pure and keep no state between calls.
"""

import math

from geoanalyzer.core.metrics import approx_equal, distance, slope
from geoanalyzer.domain import (
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


def analyze_line(p1: Point, p2: Point) -> LineResult:
    """Measure a line segment and classify its orientation.

    A segment whose endpoints share (approximately) the same x is vertical
    and its slope is never computed. Coincident points are accepted and
    classify as vertical with zero length.

    Args:
        p1: First endpoint
        p2: Second endpoint

    Returns:
        LineResult with length, slope and orientation
    """
    length = distance(p1, p2)

    if approx_equal(p1.x, p2.x):
        return LineResult(length=length, slope=None, category=LineCategory.VERTICAL)

    m = slope(p1, p2)
    if approx_equal(m, 0.0):
        category = LineCategory.HORIZONTAL
    elif m > 0:
        category = LineCategory.ASCENDING
    else:
        category = LineCategory.DESCENDING

    return LineResult(length=length, slope=m, category=category)


def _is_degenerate_triangle(a: float, b: float, c: float) -> bool:
    return a + b <= c or a + c <= b or b + c <= a


def _triangle_category(a: float, b: float, c: float) -> TriangleCategory:
    if approx_equal(a, b) and approx_equal(b, c):
        return TriangleCategory.EQUILATERAL
    if approx_equal(a, b) or approx_equal(b, c) or approx_equal(c, a):
        return TriangleCategory.ISOSCELES
    return TriangleCategory.SCALENE


def _is_right_angled(a: float, b: float, c: float) -> bool:
    # Squared lengths compared with the same absolute tolerance as lengths.
    aa, bb, cc = a * a, b * b, c * c
    return approx_equal(aa + bb, cc) or approx_equal(aa + cc, bb) or approx_equal(bb + cc, aa)


def analyze_triangle(p1: Point, p2: Point, p3: Point) -> TriangleResult:
    """Measure and classify a triangle.

    Process:
    1. Measure the sides P1P2, P2P3 and P3P1
    2. Reject collinear or coincident points via the triangle inequality
    3. Compute perimeter and area (Heron's formula)
    4. Classify by sides: equilateral, then isosceles, then scalene
    5. Detect a right angle with the Pythagorean relation

    An invalid triangle is a terminal outcome: only the measured sides are
    reported and no further metrics are computed.

    Args:
        p1: First vertex
        p2: Second vertex
        p3: Third vertex

    Returns:
        TriangleResult, with category INVALID for degenerate input
    """
    a = distance(p1, p2)
    b = distance(p2, p3)
    c = distance(p3, p1)
    sides = (a, b, c)

    if _is_degenerate_triangle(a, b, c):
        return TriangleResult(sides=sides, category=TriangleCategory.INVALID)

    perimeter = a + b + c
    s = perimeter / 2
    # Rounding can push a near-flat triangle's radicand slightly below zero.
    radicand = max(s * (s - a) * (s - b) * (s - c), 0.0)

    return TriangleResult(
        sides=sides,
        category=_triangle_category(a, b, c),
        perimeter=perimeter,
        area=math.sqrt(radicand),
        right_angled=_is_right_angled(a, b, c),
    )


def _quadrilateral_category(
    s1: float, s2: float, s3: float, s4: float, d1: float, d2: float
) -> QuadrilateralCategory:
    diagonals_equal = approx_equal(d1, d2)

    if approx_equal(s1, s2) and approx_equal(s2, s3) and approx_equal(s3, s4):
        return QuadrilateralCategory.SQUARE if diagonals_equal else QuadrilateralCategory.RHOMBUS

    if approx_equal(s1, s3) and approx_equal(s2, s4):
        return (
            QuadrilateralCategory.RECTANGLE
            if diagonals_equal
            else QuadrilateralCategory.PARALLELOGRAM
        )

    if (approx_equal(s1, s2) and approx_equal(s3, s4)) or (
        approx_equal(s2, s3) and approx_equal(s4, s1)
    ):
        return QuadrilateralCategory.KITE

    return QuadrilateralCategory.GENERAL


def analyze_quadrilateral(p1: Point, p2: Point, p3: Point, p4: Point) -> QuadrilateralResult:
    """Measure a quadrilateral and estimate its shape.

    The points must be given in cyclic order (clockwise or counter-clockwise).
    This is not verified: the estimate only compares side and diagonal
    lengths, so crossed or non-convex input still gets a category.

    Args:
        p1: First vertex
        p2: Second vertex
        p3: Third vertex
        p4: Fourth vertex

    Returns:
        QuadrilateralResult with sides, diagonals, perimeter and category
    """
    s1 = distance(p1, p2)
    s2 = distance(p2, p3)
    s3 = distance(p3, p4)
    s4 = distance(p4, p1)
    d1 = distance(p1, p3)
    d2 = distance(p2, p4)

    return QuadrilateralResult(
        sides=(s1, s2, s3, s4),
        diagonals=(d1, d2),
        perimeter=s1 + s2 + s3 + s4,
        category=_quadrilateral_category(s1, s2, s3, s4, d1, d2),
    )


def analyze_circle(center: Point, boundary: Point) -> CircleResult:
    """Measure a circle from its center and one point on the circumference.

    A zero radius is a terminal outcome: the circle is DEGENERATE and only
    the measured radius is reported.

    Args:
        center: Center of the circle
        boundary: Any point on the circumference

    Returns:
        CircleResult with radius, diameter, circumference and area
    """
    radius = distance(center, boundary)

    if approx_equal(radius, 0.0):
        return CircleResult(status=CircleStatus.DEGENERATE, radius=radius)

    return CircleResult(
        status=CircleStatus.VALID,
        radius=radius,
        diameter=radius * 2,
        circumference=2 * math.pi * radius,
        area=math.pi * radius**2,
    )
