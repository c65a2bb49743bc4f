"""Grid types used while plotting figures as text.

A BoundingBox fixes the integer extent of the plot and a Canvas holds the
character cells inside it. Both are built for a single render and thrown
away afterwards.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BoundingBox:
    """Integer extent of a plot, inclusive on every side.

    Attributes:
        min_x: Leftmost column
        max_x: Rightmost column
        min_y: Bottom row
        max_y: Top row
    """

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.max_y - self.min_y + 1

    def contains(self, x: int, y: int) -> bool:
        """Check if a grid coordinate lies inside the box."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def expand_to(self, x: int, y: int) -> "BoundingBox":
        """Return the smallest box containing this one and (x, y)."""
        return BoundingBox(
            min_x=min(self.min_x, x),
            max_x=max(self.max_x, x),
            min_y=min(self.min_y, y),
            max_y=max(self.max_y, y),
        )

    def padded(self, margin: int) -> "BoundingBox":
        """Return the box grown by margin units on every side."""
        return BoundingBox(
            min_x=self.min_x - margin,
            max_x=self.max_x + margin,
            min_y=self.min_y - margin,
            max_y=self.max_y + margin,
        )


@dataclass
class Canvas:
    """Character cells covering a bounding box.

    Rows are stored top to bottom, so rows[0] is y == max_y, and each row
    runs left to right from min_x.

    Attributes:
        bbox: Extent of the canvas
        rows: Cell characters, one list per grid row
        footer: Draw a horizontal rule under the last row
    """

    bbox: BoundingBox
    rows: list[list[str]] = field(default_factory=list)
    footer: bool = False

    def cell(self, x: int, y: int) -> str:
        """Get the character drawn at grid coordinate (x, y).

        Raises:
            IndexError: If (x, y) is outside the canvas
        """
        if not self.bbox.contains(x, y):
            raise IndexError(f"({x}, {y}) is outside the canvas")
        return self.rows[self.bbox.max_y - y][x - self.bbox.min_x]

    def row_labels(self) -> list[int]:
        """Y coordinate of each row, top to bottom."""
        return list(range(self.bbox.max_y, self.bbox.min_y - 1, -1))

    def to_text(self) -> str:
        """Render the canvas as lines of text.

        Each row is prefixed with its y coordinate, right-aligned to three
        characters, followed by " | ". Cells are separated by one space and
        a row ends at its last cell, with no trailing separator.
        """
        lines = [
            f"{y:3d} | " + " ".join(row)
            for y, row in zip(self.row_labels(), self.rows, strict=True)
        ]
        if self.footer:
            lines.append(" " * 6 + "--" * self.bbox.width)
        return "\n".join(lines)
