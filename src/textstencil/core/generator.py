"""Stencil generation orchestration.

This module sequences layout, block measurement, alignment and path
compilation into a finished StencilDocument.

Key components:
- StencilGenerator: Reusable generator bound to a glyph source
- generate_stencil: One-shot functional form
"""

import math
import time

from textstencil.config import Alignment, StencilSettings, get_default_settings
from textstencil.core.alignment import resolve_offsets
from textstencil.core.compiler import compile_path
from textstencil.core.glyph_source import GlyphSource
from textstencil.core.layout import layout_lines
from textstencil.core.transform import BlockMetrics, CoordinateTransformer
from textstencil.domain import FILL_RULE, StencilDocument, UnmappedGlyph
from textstencil.exceptions import InvalidParameterError
from textstencil.utils import GenerationLogger


def _check_number(name: str, value: float, allow_zero: bool) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidParameterError(name, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidParameterError(name, value, f"must be {bound}")
    return float(value)


def _check_alignment(alignment: Alignment | str) -> Alignment:
    try:
        return Alignment(alignment)
    except ValueError:
        valid = ", ".join(mode.value for mode in Alignment)
        raise InvalidParameterError(
            "alignment", alignment, f"must be one of {valid}"
        ) from None


class StencilGenerator:
    """Compiles text into stencil documents.

    The generator holds only its injected glyph source and settings, both
    read-only, so concurrent ``generate`` calls do not interfere and
    identical inputs always produce identical documents.

    Example:
        source = FontToolsGlyphSource(catalog.load("Allerta Stencil"))
        generator = StencilGenerator(source)
        document = generator.generate("HELLO", point_size=40, padding=10)
    """

    def __init__(
        self,
        source: GlyphSource,
        settings: StencilSettings | None = None,
        logger: GenerationLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            source: Glyph source for the selected font
            settings: Application settings (defaults if None)
            logger: Generation logger (a fresh one if None)
        """
        self.source = source
        self.settings = settings or get_default_settings()
        self.logger = logger or GenerationLogger()

    def generate(
        self,
        text: str,
        point_size: float,
        padding: float,
        alignment: Alignment | str = Alignment.CENTER,
    ) -> StencilDocument:
        """Generate a stencil document.

        Text without any non-blank line yields the empty document (no
        commands, zero width and height). This is a normal result, not an
        error.

        Args:
            text: Text with line breaks
            point_size: Em size in output units (millimeters in the SVG)
            padding: Margin around the text block
            alignment: left, center or right

        Returns:
            The compiled document

        Raises:
            InvalidParameterError: If a parameter violates its precondition
            GlyphSourceError: If glyph outlines cannot be produced
        """
        if not isinstance(text, str):
            raise InvalidParameterError("text", text, "must be a string")
        point_size = _check_number("point_size", point_size, allow_zero=False)
        padding = _check_number("padding", padding, allow_zero=True)
        mode = _check_alignment(alignment)

        start_time = time.perf_counter()
        self.logger.log_generation_start(self.source.name, point_size, padding, mode.value)

        layout_config = self.settings.layout
        lines = layout_lines(text, point_size, self.source, layout_config.line_height_factor)
        if not lines:
            self.logger.log_empty_input()
            return StencilDocument.empty()

        metrics = BlockMetrics.measure(lines, padding)
        self.logger.log_layout(len(lines), metrics.block_width, metrics.total_text_height)

        offsets = resolve_offsets(lines, metrics.block_width, mode)
        transformer = CoordinateTransformer.from_metrics(metrics, padding)
        compiled = compile_path(
            lines,
            offsets,
            transformer,
            self.source,
            point_size,
            metrics.rect_width,
            metrics.rect_height,
        )

        warnings = self._collect_warnings(compiled.unmapped)
        document = StencilDocument(
            commands=compiled.commands,
            width=metrics.rect_width,
            height=metrics.rect_height,
            fill_rule=FILL_RULE,
            warnings=warnings,
        )

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.log_document(document, duration_ms)
        return document

    def _collect_warnings(self, unmapped: tuple[str, ...]) -> tuple[UnmappedGlyph, ...]:
        """Deduplicate unmapped characters in first-seen order."""
        warnings = tuple(
            UnmappedGlyph(character=char, font_name=self.source.name)
            for char in dict.fromkeys(unmapped)
        )
        for warning in warnings:
            self.logger.log_unmapped_glyph(warning)
        return warnings


def generate_stencil(
    text: str,
    point_size: float,
    padding: float,
    font: GlyphSource,
    alignment: Alignment | str = Alignment.CENTER,
    settings: StencilSettings | None = None,
) -> StencilDocument:
    """Generate a stencil document in one call.

    Args:
        text: Text with line breaks
        point_size: Em size in output units
        padding: Margin around the text block
        font: Glyph source for the selected, already loaded font
        alignment: left, center or right
        settings: Application settings (defaults if None)

    Returns:
        The compiled document
    """
    return StencilGenerator(font, settings).generate(text, point_size, padding, alignment)
