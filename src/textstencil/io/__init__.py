"""Font and document I/O layer for textstencil.

This module handles reading fonts using fonttools and writing finished
stencils as SVG documents.

Key responsibilities:
- Load TTF/OTF fonts into read-only handles
- Resolve catalog font identifiers
- Convert fonttools drawing calls to domain path commands
- Render and save SVG documents

Key classes:
- FontReader: Load fonts and build handles
- FontCatalog: Resolve identifiers to loaded fonts
- OutlinePen: Record glyph outlines as path commands
- SvgWriter: Save stencil documents
"""

from textstencil.io.converter import OutlinePen
from textstencil.io.reader import FontCatalog, FontHandle, FontReader
from textstencil.io.writer import (
    DEFAULT_OUTPUT_NAME,
    SvgWriter,
    format_dimensions,
    render_svg,
)

__all__ = [
    "DEFAULT_OUTPUT_NAME",
    "FontCatalog",
    "FontHandle",
    "FontReader",
    "OutlinePen",
    "SvgWriter",
    "format_dimensions",
    "render_svg",
]
