"""Textstencil - Turn text into a single vector stencil shape.

Textstencil compiles multi-line text into one compound SVG path: a solid
backing rectangle with the glyph outlines cut out as holes using the even-odd
fill rule, ready for laser cutting or 3D printing.

Example:
    $ textstencil "HELLO" --font AllertaStencil-Regular.ttf

This will create stencil.svg sized in millimeters.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
