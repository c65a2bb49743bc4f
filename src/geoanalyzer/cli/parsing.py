"""Parsing of coordinates typed by the user.

Accepted forms for a point are "x y", "x,y", "x, y" and "(x, y)".
"""

import re

from geoanalyzer.domain import Point
from geoanalyzer.exceptions import InvalidCoordinateError, PointParseError

_SEPARATOR = re.compile(r"[\s,]+")


def parse_point(text: str) -> Point:
    """Parse a point from text.

    Args:
        text: Two numbers separated by whitespace and/or a comma

    Returns:
        Parsed point

    Raises:
        PointParseError: If the text does not hold exactly two finite numbers

    Examples:
        >>> parse_point("3 -4.5")
        Point(x=3.0, y=-4.5)
        >>> parse_point("(1, 2)")
        Point(x=1.0, y=2.0)
    """
    body = text.strip()
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1].strip()

    parts = [p for p in _SEPARATOR.split(body) if p]
    if len(parts) != 2:
        raise PointParseError(text, f"expected 2 numbers, found {len(parts)}")

    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise PointParseError(text, "coordinates must be numbers") from e

    try:
        return Point(x, y)
    except InvalidCoordinateError as e:
        raise PointParseError(text, "coordinates must be finite") from e
