"""Shared fixtures: small fonts built with fontTools.

The TrueType test font uses 1000 units per em, so at point size 40 one
font unit is 0.04 output units. Glyphs:

- ``A``: square from (0, 0) to (1000, 1000), advance 1000
- ``B``: the same square with a square hole from 250 to 750
- ``I``: bar from x 100 to 400, height 1000, advance 500
- ``O``: closed quadratic contour with implied on-curve points
- ``j``: box from (0, -200) to (400, 700), advance 500
- ``space``: empty, advance 500
- ``Adieresis`` (U+00C4): composite referencing ``A``
- ``.notdef``: box from (50, 0) to (450, 700), advance 500

The CFF test font maps ``O`` to a cubic contour within the same square.
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from textstencil.core import FontToolsGlyphSource
from textstencil.io import FontHandle, FontReader

UPM = 1000
FAMILY_NAME = "Test Stencil"


def _rect(pen, xmin: float, ymin: float, xmax: float, ymax: float, clockwise: bool = True) -> None:
    corners = [(xmin, ymin), (xmin, ymax), (xmax, ymax), (xmax, ymin)]
    if not clockwise:
        corners.reverse()
    pen.moveTo(corners[0])
    for corner in corners[1:]:
        pen.lineTo(corner)
    pen.closePath()


def _tt_glyph(draw=None, glyph_set=None):
    pen = TTGlyphPen(glyph_set)
    if draw is not None:
        draw(pen)
    return pen.glyph()


def _draw_quadratic_o(pen) -> None:
    pen.moveTo((500, 0))
    pen.qCurveTo((1000, 0), (1000, 1000), (500, 1000))
    pen.qCurveTo((0, 1000), (0, 0), (500, 0))
    pen.closePath()


def _draw_b(pen) -> None:
    _rect(pen, 0, 0, 1000, 1000)
    _rect(pen, 250, 250, 750, 750, clockwise=False)


def _draw_composite(pen) -> None:
    pen.addComponent("A", (1, 0, 0, 1, 0, 0))


def build_truetype_font(path: Path) -> Path:
    """Build the TrueType test font at path."""
    glyph_order = [".notdef", "space", "A", "B", "I", "O", "j", "Adieresis"]
    cmap = {
        ord(" "): "space",
        ord("A"): "A",
        ord("B"): "B",
        ord("I"): "I",
        ord("O"): "O",
        ord("j"): "j",
        0x00C4: "Adieresis",
    }
    advance_widths = {
        ".notdef": 500,
        "space": 500,
        "A": 1000,
        "B": 1000,
        "I": 500,
        "O": 1000,
        "j": 500,
        "Adieresis": 1000,
    }
    glyphs = {
        ".notdef": _tt_glyph(lambda pen: _rect(pen, 50, 0, 450, 700)),
        "space": _tt_glyph(),
        "A": _tt_glyph(lambda pen: _rect(pen, 0, 0, 1000, 1000)),
        "B": _tt_glyph(_draw_b),
        "I": _tt_glyph(lambda pen: _rect(pen, 100, 0, 400, 1000)),
        "O": _tt_glyph(_draw_quadratic_o),
        "j": _tt_glyph(lambda pen: _rect(pen, 0, -200, 400, 700)),
    }
    # Components are checked against the glyphs built so far
    glyphs["Adieresis"] = _tt_glyph(_draw_composite, glyph_set=glyphs)

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    # Left side bearings must match xMin or glyf drawing shifts the outline
    left_bearings = {"I": 100, ".notdef": 50}
    metrics = {
        name: (width, left_bearings.get(name, 0))
        for name, width in advance_widths.items()
    }
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": FAMILY_NAME, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


def _cff_charstring(width: int, draw):
    pen = T2CharStringPen(width, None)
    draw(pen)
    return pen.getCharString()


def _draw_cubic_o(pen) -> None:
    pen.moveTo((500, 0))
    pen.curveTo((776, 0), (1000, 224), (1000, 500))
    pen.curveTo((1000, 776), (776, 1000), (500, 1000))
    pen.curveTo((224, 1000), (0, 776), (0, 500))
    pen.curveTo((0, 224), (224, 0), (500, 0))
    pen.closePath()


def build_cff_font(path: Path) -> Path:
    """Build the CFF test font at path."""
    glyph_order = [".notdef", "A", "O"]
    advance_widths = {".notdef": 500, "A": 1000, "O": 1000}
    char_strings = {
        ".notdef": _cff_charstring(500, lambda pen: _rect(pen, 50, 0, 450, 700)),
        "A": _cff_charstring(1000, lambda pen: _rect(pen, 0, 0, 1000, 1000, clockwise=False)),
        "O": _cff_charstring(1000, _draw_cubic_o),
    }

    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("O"): "O"})
    fb.setupCFF("TestStencilCFF-Regular", {"FullName": "Test Stencil CFF"}, char_strings, {})
    metrics = {name: (width, 0) for name, width in advance_widths.items()}
    metrics[".notdef"] = (500, 50)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Test Stencil CFF", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def font_dir(tmp_path_factory) -> Path:
    """Directory holding the built test fonts."""
    return tmp_path_factory.mktemp("fonts")


@pytest.fixture(scope="session")
def ttf_path(font_dir: Path) -> Path:
    return build_truetype_font(font_dir / "TestStencil-Regular.ttf")


@pytest.fixture(scope="session")
def otf_path(font_dir: Path) -> Path:
    return build_cff_font(font_dir / "TestStencilCFF-Regular.otf")


@pytest.fixture(scope="session")
def font_handle(ttf_path: Path) -> FontHandle:
    reader = FontReader(ttf_path)
    reader.load()
    return reader.handle()


@pytest.fixture(scope="session")
def cff_handle(otf_path: Path) -> FontHandle:
    reader = FontReader(otf_path)
    reader.load()
    return reader.handle()


@pytest.fixture
def source(font_handle: FontHandle) -> FontToolsGlyphSource:
    """Glyph source over the TrueType test font."""
    return FontToolsGlyphSource(font_handle)
