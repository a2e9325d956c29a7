"""Layout records and the finished stencil document."""

from dataclasses import dataclass, field

from textstencil.domain.path import (
    BoundingBox,
    PathCommand,
    format_number,
    format_path_data,
)

FILL_RULE = "evenodd"


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One non-blank input line in stacking order.

    Attributes:
        text: The line text
        stack_y: Vertical stacking offset in glyph space (0 for the bottom line)
        bbox: Bounding box of the line rendered at the origin
    """

    text: str
    stack_y: float
    bbox: BoundingBox


@dataclass(frozen=True, slots=True)
class UnmappedGlyph:
    """A character the font could not render.

    Attributes:
        character: The unmapped character
        font_name: Name of the font that was queried
    """

    character: str
    font_name: str = ""

    @property
    def code_point(self) -> str:
        return f"U+{ord(self.character):04X}"

    def __str__(self) -> str:
        where = f" in '{self.font_name}'" if self.font_name else ""
        return f"No glyph for {self.character!r} ({self.code_point}){where}"


@dataclass(frozen=True)
class StencilDocument:
    """A compiled stencil: one compound path filled with the even-odd rule.

    Attributes:
        commands: Backing rectangle followed by every glyph command, in
            document space (origin top-left, Y down)
        width: Document width, padding included
        height: Document height, padding included
        fill_rule: Always ``evenodd``
        warnings: Characters rendered with the fallback glyph
    """

    commands: tuple[PathCommand, ...]
    width: float
    height: float
    fill_rule: str = FILL_RULE
    warnings: tuple[UnmappedGlyph, ...] = field(default=())

    @classmethod
    def empty(cls) -> "StencilDocument":
        """Document for text with no non-blank lines."""
        return cls(commands=(), width=0.0, height=0.0)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def path_data(self, precision: int = 2) -> str:
        """Format the commands as an SVG path data string."""
        return format_path_data(self.commands, precision)

    def dimensions(self, precision: int = 2) -> tuple[str, str]:
        """Width and height formatted like the path data."""
        return format_number(self.width, precision), format_number(self.height, precision)
