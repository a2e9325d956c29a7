"""Glyph outline extraction.

A glyph source turns one line of text at a point size into outline
commands and a tight bounding box in glyph space (Y up, origin on the
baseline at the start of the line).
"""

from typing import Protocol, runtime_checkable

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.teePen import TeePen
from fontTools.pens.transformPen import TransformPen

from textstencil.config import UnmappedGlyphPolicy
from textstencil.domain import BoundingBox, GlyphOutline
from textstencil.exceptions import GlyphSourceError, InvalidParameterError
from textstencil.io.converter import OutlinePen
from textstencil.io.reader import FontHandle

LINE_BREAKS = ("\r", "\n")


@runtime_checkable
class GlyphSource(Protocol):
    """Capability to render a single line of text as glyph outlines."""

    @property
    def name(self) -> str: ...

    def outline(
        self, text: str, point_size: float, x: float = 0.0, y: float = 0.0
    ) -> GlyphOutline:
        """Render text with its origin at (x, y)."""
        ...


class FontToolsGlyphSource:
    """Glyph source backed by a fonttools font handle.

    Characters are mapped through the font's best Unicode cmap and laid out
    left to right by their advance widths. No kerning or shaping is applied.
    One em equals ``point_size`` output units.

    Characters missing from the cmap follow the unmapped glyph policy:
    NOTDEF draws the font's fallback glyph, SKIP advances by its width
    without drawing, ERROR raises GlyphSourceError. Unmapped characters are
    reported on the returned outline in both non-error modes.

    Example:
        source = FontToolsGlyphSource(catalog.load("Allerta Stencil"))
        outline = source.outline("HELLO", 40.0)
    """

    def __init__(
        self,
        font: FontHandle,
        unmapped_policy: UnmappedGlyphPolicy = UnmappedGlyphPolicy.NOTDEF,
    ) -> None:
        self._font = font
        self._unmapped_policy = UnmappedGlyphPolicy(unmapped_policy)

    @property
    def name(self) -> str:
        return self._font.name

    @property
    def unmapped_policy(self) -> UnmappedGlyphPolicy:
        return self._unmapped_policy

    def outline(
        self, text: str, point_size: float, x: float = 0.0, y: float = 0.0
    ) -> GlyphOutline:
        """Render one line of text.

        Args:
            text: A single line of text (no line breaks)
            point_size: Em size in output units, must be positive
            x: X coordinate of the line origin
            y: Y coordinate of the line origin (the baseline)

        Returns:
            Outline commands, tight bounding box and unmapped characters.
            An outline without contours has an empty box at (x, y).

        Raises:
            InvalidParameterError: If text spans lines or point_size <= 0
            GlyphSourceError: If the font cannot be drawn, or a character is
                unmapped under the ERROR policy
        """
        if any(brk in text for brk in LINE_BREAKS):
            raise InvalidParameterError("text", text, "glyph source takes a single line")
        if not point_size > 0:
            raise InvalidParameterError("point_size", point_size, "must be positive")

        glyph_set = self._font.glyph_set
        scale = point_size / self._font.units_per_em
        outline_pen = OutlinePen(glyph_set)
        bounds_pen = BoundsPen(glyph_set)
        tee = TeePen(outline_pen, bounds_pen)

        unmapped: list[str] = []
        advance = 0.0

        for char in text:
            glyph_name = self._font.glyph_name_for(char)
            draw = True
            if glyph_name is None:
                if self._unmapped_policy is UnmappedGlyphPolicy.ERROR:
                    raise GlyphSourceError(
                        f"no glyph for {char!r} (U+{ord(char):04X})", self.name
                    )
                unmapped.append(char)
                glyph_name = self._font.notdef_glyph
                draw = self._unmapped_policy is UnmappedGlyphPolicy.NOTDEF

            try:
                glyph = glyph_set[glyph_name]
                if draw:
                    pen = TransformPen(tee, (scale, 0, 0, scale, x + advance * scale, y))
                    glyph.draw(pen)
                advance += self._font.advance_width(glyph_name)
            except Exception as e:
                raise GlyphSourceError(f"cannot draw glyph '{glyph_name}': {e}", self.name) from e

        if bounds_pen.bounds is None:
            bbox = BoundingBox.empty(x, y)
        else:
            bbox = BoundingBox.from_bounds(bounds_pen.bounds)

        return GlyphOutline(
            commands=tuple(outline_pen.commands),
            bbox=bbox,
            unmapped=tuple(unmapped),
        )
