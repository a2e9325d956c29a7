"""Converters between fonttools pens and domain models.

This module turns fonttools drawing calls into the domain's path commands.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from textstencil.domain.path import (
    PathCommand,
    close_path,
    cubic_to,
    line_to,
    move_to,
    quad_to,
)


class OutlinePen(BasePen):
    """Pen that records drawing calls as PathCommand objects.

    BasePen decomposes the segment forms fonts may use into single
    segments before they reach this pen:
    - ``qCurveTo`` runs with several off-curve points (TrueType implied
      on-curve points) become consecutive single quadratic segments
    - ``curveTo`` super-Bezier runs become consecutive cubic segments
    - components are drawn in place using the glyph set

    Open contours (``endPath``) are left without a close command.

    Example:
        pen = OutlinePen(font.getGlyphSet())
        glyph_set["A"].draw(pen)
        commands = pen.commands
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.commands: list[PathCommand] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(move_to(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(line_to(*pt))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.commands.append(quad_to(*pt1, *pt2))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.commands.append(cubic_to(*pt1, *pt2, *pt3))

    def _closePath(self) -> None:
        self.commands.append(close_path())

    def _endPath(self) -> None:
        pass
