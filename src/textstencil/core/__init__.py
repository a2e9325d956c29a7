"""Core compilation pipeline for textstencil.

The stages, leaves first:

- Glyph extraction: one line of text to outline commands and bounding box
- Line layout: split text and stack lines bottom-up
- Block metrics and coordinate transform: glyph space to document space
- Alignment: per-line horizontal offsets
- Path compilation: backing rectangle plus transformed glyph commands
- Generation: orchestration into a StencilDocument

All stages are pure functions of their inputs; the only shared resource is
the read-only font handle behind the glyph source.
"""

from textstencil.core.alignment import line_offset, resolve_offsets
from textstencil.core.compiler import (
    CompiledPath,
    compile_path,
    format_path_data,
    rectangle_commands,
)
from textstencil.core.generator import StencilGenerator, generate_stencil
from textstencil.core.glyph_source import FontToolsGlyphSource, GlyphSource
from textstencil.core.layout import LINE_HEIGHT_FACTOR, layout_lines, split_lines
from textstencil.core.transform import BlockMetrics, CoordinateTransformer

__all__ = [
    "LINE_HEIGHT_FACTOR",
    "BlockMetrics",
    "CompiledPath",
    "CoordinateTransformer",
    "FontToolsGlyphSource",
    "GlyphSource",
    "StencilGenerator",
    "compile_path",
    "format_path_data",
    "generate_stencil",
    "layout_lines",
    "line_offset",
    "rectangle_commands",
    "resolve_offsets",
    "split_lines",
]
