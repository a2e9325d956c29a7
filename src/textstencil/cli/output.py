"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from textstencil.config import FontEntry
from textstencil.domain import UnmappedGlyph
from textstencil.io import format_dimensions

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Textstencil[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_name: str, font_path: str, font_type: str, upm: int) -> None:
    """Print font information.

    Args:
        font_name: Family name of the font
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_name, style="bold")
    line.append(f" ({font_type}) {SYM_DOT} {upm:,} UPM")
    console.print(line)
    console.print(Text(f"  {font_path}"))


def print_validation_warning(message: str) -> None:
    """Print a warning about an input that was clamped or defaulted."""
    console.print(f"  [yellow]{SYM_WARN}[/yellow] {message}")


def print_unmapped_glyphs(glyphs: tuple[UnmappedGlyph, ...] | list[UnmappedGlyph]) -> None:
    """Print characters that were rendered with the fallback glyph."""
    if not glyphs:
        return
    console.print(f"\n[yellow]{SYM_WARN} {len(glyphs)} unmapped characters[/yellow]")
    for glyph in glyphs:
        console.print(Text(f"  {glyph}"))


def print_font_catalog(entries: list[FontEntry], available: set[str]) -> None:
    """Print the font catalog with availability."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Font")
    table.add_column("File")
    table.add_column("")
    for entry in entries:
        status = f"[green]{SYM_OK}[/green]" if entry.value in available else f"[red]{SYM_ERR}[/red]"
        table.add_row(entry.label, entry.value, status)
    console.print(table)


def print_empty() -> None:
    """Print notice for text without any non-blank line."""
    console.print(f"\n{SYM_DOT} No text to stencil, document is empty")


def print_success(output_path: str | None, width: float, height: float, commands: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None when written to stdout)
        width: Document width in mm
        height: Document height in mm
        commands: Number of path commands
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)
    console.print(f"  {format_dimensions(width, height)} {SYM_DOT} {commands} commands")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
