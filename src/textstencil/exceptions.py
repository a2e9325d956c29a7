"""Exception hierarchy for Textstencil."""


class StencilError(Exception):
    """Base exception for all Textstencil errors."""

    pass


class InvalidParameterError(StencilError, ValueError):
    """A generation parameter violates its precondition."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class FontError(StencilError):
    """Errors related to font resources."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontNotFoundError(FontError, InvalidParameterError):
    """Font identifier does not resolve to a known font."""

    def __init__(self, identifier: str, known: list[str] | None = None) -> None:
        self.identifier = identifier
        self.known = known or []
        reason = "unknown font"
        if self.known:
            reason += f" (known: {', '.join(self.known)})"
        InvalidParameterError.__init__(self, "font", identifier, reason)


class GlyphSourceError(FontError):
    """Glyph outlines could not be produced from the font."""

    def __init__(self, reason: str, font_name: str | None = None) -> None:
        self.reason = reason
        self.font_name = font_name
        where = f" in '{font_name}'" if font_name else ""
        super().__init__(f"Glyph extraction failed{where}: {reason}")


class ExportError(StencilError):
    """Error writing a stencil document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
