"""Exception hierarchy for Geoanalyzer."""


class GeoAnalyzerError(Exception):
    """Base exception for all Geoanalyzer errors."""

    pass


class GeometryError(GeoAnalyzerError):
    """Errors in geometric input or calculations."""

    pass


class InvalidCoordinateError(GeometryError):
    """A coordinate is not a finite real number."""

    def __init__(self, axis: str, value: float) -> None:
        self.axis = axis
        self.value = value
        super().__init__(f"Coordinate {axis}={value} is not a finite number")


class RenderError(GeoAnalyzerError):
    """Errors related to grid rendering."""

    pass


class PointCountError(RenderError):
    """Wrong number of points supplied to the point plotter."""

    def __init__(self, count: int, maximum: int) -> None:
        self.count = count
        self.maximum = maximum
        super().__init__(f"Can plot between 1 and {maximum} points, got {count}")


class InputError(GeoAnalyzerError):
    """Errors related to user-supplied text input."""

    pass


class PointParseError(InputError):
    """Text could not be parsed as an (x, y) point."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot read point from '{text}': {reason}")
