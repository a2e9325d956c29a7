"""Path compilation: glyph outlines to one compound document-space path."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from textstencil.core.glyph_source import GlyphSource
from textstencil.core.transform import CoordinateTransformer
from textstencil.domain import (
    LineRecord,
    PathCommand,
    close_path,
    format_path_data,
    line_to,
    move_to,
)

__all__ = ["CompiledPath", "compile_path", "format_path_data", "rectangle_commands"]


@dataclass(frozen=True)
class CompiledPath:
    """Compiled compound path.

    Attributes:
        commands: Rectangle commands followed by every glyph command
        unmapped: Unmapped characters seen while compiling, in order
    """

    commands: tuple[PathCommand, ...]
    unmapped: tuple[str, ...] = ()


def rectangle_commands(width: float, height: float) -> list[PathCommand]:
    """Closed backing rectangle from (0, 0) to (width, height)."""
    return [
        move_to(0.0, 0.0),
        line_to(width, 0.0),
        line_to(width, height),
        line_to(0.0, height),
        close_path(),
    ]


def compile_path(
    lines: Sequence[LineRecord],
    offsets: Mapping[int, float],
    transformer: CoordinateTransformer,
    source: GlyphSource,
    point_size: float,
    rect_width: float,
    rect_height: float,
) -> CompiledPath:
    """Compile the stencil's compound path.

    Each line is re-queried at its aligned offset and stack position, then
    every point (control points and end points alike) is mapped into
    document space. The map is affine, so curves stay exact.

    Args:
        lines: Laid out lines, bottom to top
        offsets: X offset per line index
        transformer: Glyph-space to document-space transform
        source: Glyph source used for layout
        point_size: Em size in output units
        rect_width: Width of the backing rectangle
        rect_height: Height of the backing rectangle

    Returns:
        Rectangle and glyph commands with any unmapped characters
    """
    commands = rectangle_commands(rect_width, rect_height)
    unmapped: list[str] = []

    for index, line in enumerate(lines):
        outline = source.outline(line.text, point_size, x=offsets[index], y=line.stack_y)
        commands.extend(command.map_points(transformer.transform) for command in outline)
        unmapped.extend(outline.unmapped)

    return CompiledPath(commands=tuple(commands), unmapped=tuple(unmapped))
