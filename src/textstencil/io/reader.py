"""Font reader and catalog for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files, the
FontHandle it produces for glyph extraction, and the FontCatalog that
resolves font identifiers to loaded handles.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

from textstencil.config import FontConfig, FontEntry
from textstencil.exceptions import FontLoadError, FontNotFoundError


@dataclass(frozen=True)
class FontHandle:
    """A fully decompiled font, safe to query from concurrent calls.

    Attributes:
        name: Display name of the font (family name or file stem)
        font: The fonttools TTFont object
        glyph_set: Glyph set used for drawing outlines
        cmap: Best Unicode cmap, code point to glyph name
        units_per_em: Font units per em
    """

    name: str
    font: TTFont
    glyph_set: Any
    cmap: dict[int, str] = field(repr=False)
    units_per_em: int

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavoured fonts, 'TrueType' otherwise."""
        if "CFF " in self.font or "CFF2" in self.font:
            return "OpenType"
        return "TrueType"

    @property
    def notdef_glyph(self) -> str:
        """Name of the fallback glyph (first in glyph order)."""
        return self.font.getGlyphOrder()[0]

    def glyph_name_for(self, char: str) -> str | None:
        """Glyph name mapped to a character, or None if unmapped."""
        return self.cmap.get(ord(char))

    def advance_width(self, glyph_name: str) -> float:
        """Horizontal advance of a glyph in font units."""
        return self.glyph_set[glyph_name].width


class FontReader:
    """Loads TTF/OTF fonts and produces font handles.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        handle = reader.handle()
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or is not a valid font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def family_name(self) -> str:
        """Return the family name, falling back to the file stem."""
        font = self._require_font()
        if "name" in font:
            name = font["name"].getDebugName(1)
            if name:
                return name
        return self._font_path.stem

    def handle(self) -> FontHandle:
        """Build a read-only handle for glyph extraction.

        All tables are decompiled here so later queries never mutate the
        font, which makes the handle safe to share between calls.

        Raises:
            RuntimeError: If font has not been loaded yet
            FontLoadError: If the font lacks the tables needed for outlines
        """
        font = self._require_font()
        try:
            font.ensureDecompiled()
            cmap = font.getBestCmap() or {}
            glyph_set = font.getGlyphSet()
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        return FontHandle(
            name=self.family_name,
            font=font,
            glyph_set=glyph_set,
            cmap=dict(cmap),
            units_per_em=self.units_per_em,
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


class FontCatalog:
    """Resolves font identifiers to loaded font handles.

    Identifiers are catalog file names or labels, matched
    case-insensitively. Each font is loaded at most once per catalog.

    Example:
        catalog = FontCatalog(FontConfig(font_dir=Path("fonts")))
        handle = catalog.load("Allerta Stencil")
    """

    def __init__(self, config: FontConfig | None = None) -> None:
        self._config = config or FontConfig()
        self._handles: dict[Path, FontHandle] = {}

    @property
    def font_dir(self) -> Path:
        return self._config.font_dir

    def entries(self) -> list[FontEntry]:
        """All catalog entries, in catalog order."""
        return list(self._config.catalog)

    def available(self) -> list[FontEntry]:
        """Catalog entries whose font file exists in the font directory."""
        return [entry for entry in self._config.catalog if (self.font_dir / entry.value).is_file()]

    def resolve(self, identifier: str) -> Path:
        """Resolve an identifier to a font file path.

        Raises:
            FontNotFoundError: If the identifier matches no catalog entry
        """
        wanted = identifier.strip().lower()
        for entry in self._config.catalog:
            if wanted in (entry.value.lower(), entry.label.lower()):
                return self.font_dir / entry.value
        raise FontNotFoundError(identifier, [entry.value for entry in self._config.catalog])

    def load(self, identifier: str) -> FontHandle:
        """Load a catalog font by identifier.

        Raises:
            FontNotFoundError: If the identifier is unknown
            FontLoadError: If the font file is missing or invalid
        """
        return self.load_path(self.resolve(identifier))

    def load_path(self, path: Path) -> FontHandle:
        """Load any font file, reusing a previously loaded handle."""
        key = path.resolve()
        handle = self._handles.get(key)
        if handle is None:
            reader = FontReader(path)
            reader.load()
            handle = reader.handle()
            self._handles[key] = handle
        return handle
