"""Metric primitives shared by every classifier.

All equality-like geometric checks go through approx_equal so that the
whole package agrees on a single absolute tolerance. Floating-point values
are never compared with ==.
"""

import math

from geoanalyzer.domain import Point

EPSILON = 0.001


def distance(a: Point, b: Point) -> float:
    """Calculate the Euclidean distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance, 0.0 for coincident points

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def slope(a: Point, b: Point) -> float:
    """Calculate the slope of the line through two points.

    The caller must rule out vertical lines first (see approx_equal on the
    x coordinates); a zero run raises ZeroDivisionError and a near-zero run
    gives a meaningless value.

    Args:
        a: First point
        b: Second point

    Returns:
        Rise over run
    """
    return (b.y - a.y) / (b.x - a.x)


def approx_equal(a: float, b: float) -> bool:
    """Compare two values with the package-wide tolerance.

    Args:
        a: First value
        b: Second value

    Returns:
        True if the values differ by less than EPSILON
    """
    return abs(a - b) < EPSILON
