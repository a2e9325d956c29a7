"""Integration tests for stencil document properties.

These tests run the full pipeline against the built test fonts and check
properties that must hold for any input:
- Blank text produces the empty document
- The backing rectangle always comes first and spans the document
- Every glyph point lies inside the padded rectangle
- Padding grows the document without moving glyphs relative to each other
- Alignment never changes the document size
- Output is deterministic
"""

import pytest

from textstencil.config import Alignment
from textstencil.core import FontToolsGlyphSource, StencilGenerator
from textstencil.domain import CommandKind, iter_points
from textstencil.io import render_svg

SAMPLES = ["A", "AB", "A\nA", "AA\nI", "O\nj", "B A\n\nIO", "A\n", "\nA"]


@pytest.fixture
def generator(source):
    return StencilGenerator(source)


def _glyph_points(document):
    return list(iter_points(document.commands[5:]))


class TestEmptiness:
    """Blank input produces an empty document."""

    @pytest.mark.parametrize("text", ["", " ", "\n", "  \n\t"])
    def test_blank_text(self, generator, text):
        document = generator.generate(text, 40, 10)
        assert document.is_empty
        assert (document.width, document.height) == (0, 0)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_non_blank_text(self, generator, text):
        assert not generator.generate(text, 40, 10).is_empty


class TestRectangle:
    """The backing rectangle leads the path."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_rectangle_prefix(self, generator, text):
        document = generator.generate(text, 40, 10)
        w, h = document.width, document.height
        assert [c.points for c in document.commands[:4]] == [
            ((0.0, 0.0),),
            ((w, 0.0),),
            ((w, h),),
            ((0.0, h),),
        ]
        assert document.commands[4].kind is CommandKind.CLOSE_PATH


class TestContainment:
    """Glyph points stay inside the padding."""

    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize("padding", [0, 5, 10])
    def test_points_inside_padding(self, generator, text, padding):
        document = generator.generate(text, 40, padding)
        for x, y in _glyph_points(document):
            assert padding - 0.01 <= x <= document.width - padding + 0.01
            assert padding - 0.01 <= y <= document.height - padding + 0.01


class TestPadding:
    """Padding adds a uniform margin."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_dimensions_grow_by_twice_padding(self, generator, text):
        tight = generator.generate(text, 40, 0)
        padded = generator.generate(text, 40, 7)
        assert padded.width == pytest.approx(tight.width + 14)
        assert padded.height == pytest.approx(tight.height + 14)

    def test_glyphs_shift_by_padding(self, generator):
        tight = _glyph_points(generator.generate("AB\nO", 40, 0))
        padded = _glyph_points(generator.generate("AB\nO", 40, 7))
        assert len(tight) == len(padded)
        for (x0, y0), (x1, y1) in zip(tight, padded):
            assert x1 == pytest.approx(x0 + 7)
            assert y1 == pytest.approx(y0 + 7)


class TestAlignmentInvariance:
    """Alignment only moves lines horizontally."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_size_independent_of_alignment(self, generator, text):
        documents = [generator.generate(text, 40, 10, mode) for mode in Alignment]
        for document in documents[1:]:
            assert document.width == pytest.approx(documents[0].width)
            assert document.height == pytest.approx(documents[0].height)
            assert len(document.commands) == len(documents[0].commands)

    def test_y_coordinates_independent_of_alignment(self, generator):
        left = generator.generate("AA\nI", 40, 10, Alignment.LEFT)
        right = generator.generate("AA\nI", 40, 10, Alignment.RIGHT)
        left_ys = [y for _, y in _glyph_points(left)]
        right_ys = [y for _, y in _glyph_points(right)]
        assert left_ys == pytest.approx(right_ys)


class TestDeterminism:
    """Identical inputs render identical bytes."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_same_svg(self, font_handle, text):
        first = StencilGenerator(FontToolsGlyphSource(font_handle)).generate(text, 33, 4, "right")
        second = StencilGenerator(FontToolsGlyphSource(font_handle)).generate(text, 33, 4, "right")
        assert render_svg(first) == render_svg(second)


class TestScenarios:
    """Worked examples with exact output."""

    def test_single_square(self, generator):
        document = generator.generate("A", 40, 10)
        assert document.dimensions() == ("60.00", "60.00")
        assert document.path_data().startswith(
            "M 0.00 0.00 L 60.00 0.00 L 60.00 60.00 L 0.00 60.00 Z M "
        )
        xs = [x for x, _ in _glyph_points(document)]
        ys = [y for _, y in _glyph_points(document)]
        assert (min(xs), max(xs)) == (pytest.approx(10), pytest.approx(50))
        assert (min(ys), max(ys)) == (pytest.approx(10), pytest.approx(50))

    def test_two_lines_without_padding(self, generator):
        document = generator.generate("A\nA", 40, 0)
        assert document.dimensions() == ("40.00", "88.00")
        ys = sorted({round(y, 6) for _, y in _glyph_points(document)})
        assert ys == [0, 40, 48, 88]

    def test_left_and_right(self, generator):
        left = generator.generate("AA\nA", 40, 10, "left")
        right = generator.generate("AA\nA", 40, 10, "right")
        assert left.width == pytest.approx(100)
        bottom_left = [x for x, _ in _glyph_points(left)[:4]]
        bottom_right = [x for x, _ in _glyph_points(right)[:4]]
        assert min(bottom_left) == pytest.approx(10)
        assert max(bottom_right) == pytest.approx(90)

    def test_descender_extends_plate(self, generator):
        document = generator.generate("A\nj", 40, 10)
        assert document.height == pytest.approx(96 + 20)
        assert min(y for _, y in _glyph_points(document)) == pytest.approx(10)

    def test_holes_survive(self, generator):
        document = generator.generate("B", 40, 10)
        moves = [c for c in document.commands if c.kind is CommandKind.MOVE_TO]
        # Rectangle, outer contour and hole
        assert len(moves) == 3

    def test_notdef_warning(self, generator):
        document = generator.generate("AZ", 40, 10)
        assert [str(w) for w in document.warnings] == [
            "No glyph for 'Z' (U+005A) in 'Test Stencil'"
        ]
        assert document.width == pytest.approx(18 + 40 + 20)
