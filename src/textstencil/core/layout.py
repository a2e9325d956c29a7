"""Line layout: splitting text and stacking lines bottom-up."""

from textstencil.core.glyph_source import GlyphSource
from textstencil.domain import LineRecord

LINE_HEIGHT_FACTOR = 1.2


def split_lines(text: str) -> list[str]:
    """Split on line breaks, keeping empty and trailing empty lines.

    ``\\r\\n`` and lone ``\\r`` are treated as ``\\n``.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_blank(line: str) -> bool:
    return not line.strip()


def layout_lines(
    text: str,
    point_size: float,
    source: GlyphSource,
    line_height_factor: float = LINE_HEIGHT_FACTOR,
) -> list[LineRecord]:
    """Lay out text as a stack of lines.

    Lines are processed last to first. Every line, blank or not, advances
    the stack by ``point_size * line_height_factor``; only non-blank lines
    produce a record. Glyph space Y points up, so the first input line ends
    up at the top of the stack.

    Args:
        text: Text with line breaks
        point_size: Em size in output units
        source: Glyph source used to measure each line
        line_height_factor: Line advance as a multiple of the point size

    Returns:
        Records ordered bottom to top; empty if every line is blank
    """
    advance = point_size * line_height_factor
    records: list[LineRecord] = []
    stack_y = 0.0

    for line in reversed(split_lines(text)):
        if not is_blank(line):
            outline = source.outline(line, point_size)
            records.append(LineRecord(text=line, stack_y=stack_y, bbox=outline.bbox))
        stack_y += advance

    return records
