"""Path command and outline types.

This module defines the geometric vocabulary shared by every stage:
- CommandKind: Enum of the five path command kinds
- PathCommand: A single command with its points
- BoundingBox: Axis-aligned extent of an outline
- GlyphOutline: Commands plus bounding box for one rendered line
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

Coordinate = tuple[float, float]


class CommandKind(Enum):
    """Path command kind.

    Each kind carries a fixed number of points:
    - MOVE_TO, LINE_TO: the end point
    - QUAD_TO: one control point and the end point
    - CUBIC_TO: two control points and the end point
    - CLOSE_PATH: no points
    """

    MOVE_TO = "M"
    LINE_TO = "L"
    QUAD_TO = "Q"
    CUBIC_TO = "C"
    CLOSE_PATH = "Z"

    @property
    def point_count(self) -> int:
        """Number of coordinate pairs this kind carries."""
        return _POINT_COUNTS[self]


_POINT_COUNTS = {
    CommandKind.MOVE_TO: 1,
    CommandKind.LINE_TO: 1,
    CommandKind.QUAD_TO: 2,
    CommandKind.CUBIC_TO: 3,
    CommandKind.CLOSE_PATH: 0,
}


def format_number(value: float, precision: int = 2) -> str:
    """Format a coordinate with fixed precision.

    Negative zero is normalized so that output does not depend on the sign
    of values that round to zero.
    """
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path command.

    Attributes:
        kind: Command kind
        points: Coordinate pairs, control points first and end point last
    """

    kind: CommandKind
    points: tuple[Coordinate, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) != self.kind.point_count:
            raise ValueError(
                f"{self.kind.name} takes {self.kind.point_count} points, "
                f"got {len(self.points)}"
            )

    def map_points(self, func: Callable[[float, float], Coordinate]) -> "PathCommand":
        """Return the same command with every point passed through func."""
        return PathCommand(self.kind, tuple(func(x, y) for x, y in self.points))

    def format(self, precision: int = 2) -> str:
        """Format as a path data fragment, e.g. ``Q 1.00 2.00 3.00 4.00``."""
        tokens = [self.kind.value]
        for x, y in self.points:
            tokens.append(format_number(x, precision))
            tokens.append(format_number(y, precision))
        return " ".join(tokens)


def move_to(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.MOVE_TO, ((x, y),))


def line_to(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.LINE_TO, ((x, y),))


def quad_to(cx: float, cy: float, x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.QUAD_TO, ((cx, cy), (x, y)))


def cubic_to(
    c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
) -> PathCommand:
    return PathCommand(CommandKind.CUBIC_TO, ((c1x, c1y), (c2x, c2y), (x, y)))


def close_path() -> PathCommand:
    return PathCommand(CommandKind.CLOSE_PATH)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        xmin: Minimum X coordinate
        xmax: Maximum X coordinate
        ymin: Minimum Y coordinate
        ymax: Maximum Y coordinate
    """

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def empty(cls, x: float = 0.0, y: float = 0.0) -> "BoundingBox":
        """Zero-size box at the given point."""
        return cls(x, x, y, y)

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> "BoundingBox":
        """Build from a fontTools ``(xMin, yMin, xMax, yMax)`` tuple."""
        xmin, ymin, xmax, ymax = bounds
        return cls(xmin, xmax, ymin, ymax)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def translated(self, dx: float, dy: float) -> "BoundingBox":
        """Return the box shifted by (dx, dy)."""
        return BoundingBox(self.xmin + dx, self.xmax + dx, self.ymin + dy, self.ymax + dy)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Return the smallest box containing both boxes."""
        return BoundingBox(
            min(self.xmin, other.xmin),
            max(self.xmax, other.xmax),
            min(self.ymin, other.ymin),
            max(self.ymax, other.ymax),
        )


@dataclass(frozen=True)
class GlyphOutline:
    """Outline of one line of text rendered at a given size.

    Attributes:
        commands: Path commands in glyph space (Y up)
        bbox: Tight bounding box of the commands
        unmapped: Characters that had no glyph in the font, in order
    """

    commands: tuple[PathCommand, ...]
    bbox: BoundingBox
    unmapped: tuple[str, ...] = field(default=())

    def __iter__(self):
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def is_empty(self) -> bool:
        """Check if the outline has no commands."""
        return not self.commands


def iter_points(commands: Iterable[PathCommand]) -> Iterable[Coordinate]:
    """Yield every point of every command, control points included."""
    for command in commands:
        yield from command.points


def format_path_data(commands: Iterable[PathCommand], precision: int = 2) -> str:
    """Format commands as space separated path data, e.g. ``M 0.00 0.00 Z``."""
    return " ".join(command.format(precision) for command in commands)
