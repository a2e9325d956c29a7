"""SVG writer for saving stencil documents.

This module renders a StencilDocument as a standalone SVG file sized in
millimeters, with a single black path filled using the even-odd rule.
"""

from pathlib import Path

from textstencil.domain.document import StencilDocument
from textstencil.exceptions import ExportError

DEFAULT_OUTPUT_NAME = "stencil.svg"

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
    'width="{width}mm" height="{height}mm">\n'
    '  <path fill="black" stroke="none" fill-rule="{fill_rule}" d="{path_data}"/>\n'
    "</svg>\n"
)


def render_svg(document: StencilDocument, precision: int = 2) -> str:
    """Render a stencil document as SVG markup.

    The output is a pure function of the document, so identical documents
    always render to identical bytes.

    Args:
        document: Compiled stencil document
        precision: Decimal places for dimensions and coordinates

    Returns:
        SVG document as a string
    """
    width, height = document.dimensions(precision)
    return _SVG_TEMPLATE.format(
        width=width,
        height=height,
        fill_rule=document.fill_rule,
        path_data=document.path_data(precision),
    )


def format_dimensions(width: float, height: float) -> str:
    """Format document dimensions for display.

    Returns:
        e.g. ``Dimensions: 60.0mm x 60.0mm``
    """
    return f"Dimensions: {width:.1f}mm x {height:.1f}mm"


class SvgWriter:
    """Writes stencil documents as SVG files.

    Example:
        writer = SvgWriter(Path("stencil.svg"))
        writer.save(document)
    """

    def __init__(self, output_path: Path | None = None, precision: int = 2) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Destination file (default: stencil.svg)
            precision: Decimal places for numbers in the output
        """
        self._output_path = output_path or Path(DEFAULT_OUTPUT_NAME)
        self._precision = precision

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, document: StencilDocument) -> Path:
        """Write the document to the output path.

        Raises:
            ExportError: If the file cannot be written
        """
        svg = render_svg(document, self._precision)
        try:
            self._output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise ExportError(str(self._output_path), str(e)) from e
        return self._output_path
