"""Horizontal alignment of lines within the text block."""

from collections.abc import Sequence

from textstencil.config import Alignment
from textstencil.domain import LineRecord


def line_offset(line: LineRecord, block_width: float, mode: Alignment) -> float:
    """X offset that places a line's left edge for the given alignment.

    The offset cancels the line's own left bearing (``bbox.xmin``) so the
    aligned line starts at 0 for LEFT and ends at ``block_width`` for RIGHT.
    """
    line_width = line.bbox.xmax - line.bbox.xmin
    line_min_x = line.bbox.xmin

    if mode is Alignment.LEFT:
        return -line_min_x
    if mode is Alignment.CENTER:
        return (block_width - line_width) / 2 - line_min_x
    if mode is Alignment.RIGHT:
        return (block_width - line_width) - line_min_x
    raise ValueError(f"Unknown alignment: {mode!r}")


def resolve_offsets(
    lines: Sequence[LineRecord], block_width: float, mode: Alignment
) -> dict[int, float]:
    """Compute the x offset of every line.

    Args:
        lines: Laid out lines
        block_width: Width of the union of all line boxes
        mode: Validated alignment mode

    Returns:
        Mapping from line index to x offset
    """
    return {index: line_offset(line, block_width, mode) for index, line in enumerate(lines)}
