"""CLI application entry point for textstencil.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from textstencil import __version__
from textstencil.cli.output import (
    console,
    print_empty,
    print_error,
    print_font_catalog,
    print_font_info,
    print_header,
    print_step,
    print_success,
    print_unmapped_glyphs,
    print_validation_warning,
)
from textstencil.cli.validators import (
    validate_alignment,
    validate_font,
    validate_padding,
    validate_point_size,
    validate_text,
)
from textstencil.config import (
    FontConfig,
    InputLimits,
    LayoutConfig,
    LoggingConfig,
    StencilSettings,
    UnmappedGlyphPolicy,
)
from textstencil.core import FontToolsGlyphSource, StencilGenerator
from textstencil.exceptions import FontLoadError, StencilError
from textstencil.io import DEFAULT_OUTPUT_NAME, FontCatalog, SvgWriter, render_svg
from textstencil.utils import GenerationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="textstencil",
    help="Turn text into an SVG stencil: a solid plate with the letters cut out.",
    add_completion=False,
    no_args_is_help=True,
)

# Option defaults follow the recommended input ranges
_LIMITS = InputLimits()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Textstencil[/bold blue] v{__version__}")
        raise typer.Exit()


def _read_text(text: str) -> str:
    """Read text from stdin for ``-``, otherwise expand ``\\n`` escapes."""
    if text == "-":
        return sys.stdin.read()
    return text.replace("\\n", "\n")


@app.command()
def stencil(
    text: Annotated[
        str | None,
        typer.Argument(
            help="Text to stencil. Use \\n for line breaks, or - to read stdin",
            show_default=False,
        ),
    ] = None,
    font: Annotated[
        str | None,
        typer.Option(
            "--font",
            "-f",
            help="Catalog font file name or label (default: first catalog font)",
        ),
    ] = None,
    font_file: Annotated[
        Path | None,
        typer.Option(
            "--font-file",
            help="Use this TTF/OTF file instead of a catalog font",
        ),
    ] = None,
    font_dir: Annotated[
        Path,
        typer.Option(
            "--font-dir",
            help="Directory holding the catalog font files",
        ),
    ] = Path("."),
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in mm (5-200)",
        ),
    ] = _LIMITS.point_size_default,
    padding: Annotated[
        float,
        typer.Option(
            "--padding",
            "-p",
            help="Padding around the text in mm (0-100)",
        ),
    ] = _LIMITS.padding_default,
    align: Annotated[
        str,
        typer.Option(
            "--align",
            "-a",
            help="Line alignment (left|center|right)",
        ),
    ] = _LIMITS.default_alignment.value,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path(DEFAULT_OUTPUT_NAME),
    to_stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Write the SVG to stdout instead of a file",
        ),
    ] = False,
    unmapped: Annotated[
        str,
        typer.Option(
            "--unmapped",
            help="Characters missing from the font (notdef|skip|error)",
        ),
    ] = "notdef",
    list_fonts: Annotated[
        bool,
        typer.Option(
            "--list-fonts",
            help="List catalog fonts and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate an SVG stencil from TEXT.

    The stencil is a solid rectangle with the glyph outlines cut out using
    the even-odd fill rule, sized in millimeters.

    Example:
        textstencil "HELLO\\nWORLD" --font "Allerta Stencil" --align left
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        policy = UnmappedGlyphPolicy(unmapped.lower())
    except ValueError:
        print_error(
            f"Invalid unmapped policy: {unmapped}",
            details="Valid values: notdef, skip, error",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = StencilSettings(
        layout=LayoutConfig(unmapped_policy=policy),
        fonts=FontConfig(font_dir=font_dir),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    catalog = FontCatalog(settings.fonts)

    if list_fonts:
        available = {entry.value for entry in catalog.available()}
        print_font_catalog(catalog.entries(), available)
        raise typer.Exit(code=0)

    if text is None:
        print_error("Missing TEXT argument", details="Pass the text to stencil, or - to read stdin.")
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        limits = settings.limits
        checks = [
            validate_text(_read_text(text), limits),
            validate_point_size(size, limits),
            validate_padding(padding, limits),
            validate_alignment(align),
        ]
        if font_file is None:
            known = [entry.value for entry in catalog.entries()]
            known += [entry.label for entry in catalog.entries()]
            checks.append(validate_font(font or settings.fonts.default_font, known))

        if not quiet:
            for check in checks:
                if not check.valid and check.error:
                    print_validation_warning(check.error)

        text_value, size_value, padding_value, alignment = (c.value for c in checks[:4])

        if not quiet:
            print_step("Loading font")
        if font_file is not None:
            font_path = font_file
        else:
            font_path = catalog.resolve(checks[4].value)
        handle = catalog.load_path(font_path)

        if not quiet:
            print_font_info(handle.name, str(font_path), handle.format, handle.units_per_em)
            print_step("Generating")

        source = FontToolsGlyphSource(handle, policy)
        generator = StencilGenerator(source, settings, GenerationLogger(logger))
        document = generator.generate(text_value, size_value, padding_value, alignment)

        if document.is_empty:
            if not quiet:
                print_empty()
            raise typer.Exit(code=0)

        precision = settings.layout.precision
        if to_stdout:
            typer.echo(render_svg(document, precision), nl=False)
            written = None
        else:
            written = str(SvgWriter(output, precision).save(document))

        if not quiet:
            print_unmapped_glyphs(document.warnings)
            print_success(
                output_path=written,
                width=document.width,
                height=document.height,
                commands=len(document.commands),
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except StencilError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
