"""Domain models for textstencil.

All models are immutable value objects, created inside a single generation
call and independent of fontTools implementation details.

Key classes:
- PathCommand: A move/line/quad/cubic/close command with its points
- BoundingBox: Axis-aligned extent
- GlyphOutline: Commands and bounding box of one rendered line
- LineRecord: A laid out line with its stacking offset
- StencilDocument: The compiled compound path and its dimensions
"""

from textstencil.domain.document import (
    FILL_RULE,
    LineRecord,
    StencilDocument,
    UnmappedGlyph,
)
from textstencil.domain.path import (
    BoundingBox,
    CommandKind,
    Coordinate,
    GlyphOutline,
    PathCommand,
    close_path,
    cubic_to,
    format_number,
    format_path_data,
    iter_points,
    line_to,
    move_to,
    quad_to,
)

__all__: list[str] = [
    "FILL_RULE",
    # Enums
    "CommandKind",
    # Core types
    "BoundingBox",
    "Coordinate",
    "GlyphOutline",
    "LineRecord",
    "PathCommand",
    "StencilDocument",
    "UnmappedGlyph",
    # Helpers
    "close_path",
    "cubic_to",
    "format_number",
    "format_path_data",
    "iter_points",
    "line_to",
    "move_to",
    "quad_to",
]
