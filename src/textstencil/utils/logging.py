"""Logging utilities for Textstencil."""

import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path

import structlog

from textstencil.domain import StencilDocument, UnmappedGlyph

_HANDLER_NAME = "textstencil"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


@dataclass
class GenerationStats:
    """Running totals from generation runs.

    Only counters are kept, so a long-lived generator holds a fixed amount
    of state no matter how many documents it produces.
    """

    documents: int = 0
    empty_documents: int = 0
    lines: int = 0
    commands: int = 0
    unmapped: int = 0
    last_duration_ms: float | None = None


def get_logger(name: str = "textstencil") -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the stdlib logger ``name``.

    Levels and handlers come from the stdlib logging tree, so library code
    stays silent below WARNING until configure_logging is called.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=list(_PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=list(_PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("textstencil")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking stencil generation and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or get_logger()
        self._stats = GenerationStats()
        self._lock = threading.Lock()

    def log_generation_start(
        self, font: str, point_size: float, padding: float, alignment: str
    ) -> None:
        """Log start of a generation call."""
        self._logger.debug(
            "Generating stencil",
            font=font,
            point_size=point_size,
            padding=padding,
            alignment=alignment,
        )

    def log_layout(self, line_count: int, block_width: float, block_height: float) -> None:
        """Log layout results."""
        self._logger.debug(
            "Lines laid out",
            lines=line_count,
            block_width=round(block_width, 2),
            block_height=round(block_height, 2),
        )
        with self._lock:
            self._stats.lines += line_count

    def log_unmapped_glyph(self, glyph: UnmappedGlyph) -> None:
        """Log a character rendered with the fallback glyph."""
        self._logger.warning(
            "Unmapped glyph",
            character=glyph.character,
            code_point=glyph.code_point,
            font=glyph.font_name,
        )
        with self._lock:
            self._stats.unmapped += 1

    def log_empty_input(self) -> None:
        """Log text without any non-blank line."""
        self._logger.debug("No non-blank lines, returning empty document")
        with self._lock:
            self._stats.documents += 1
            self._stats.empty_documents += 1

    def log_document(self, document: StencilDocument, duration_ms: float) -> None:
        """Log a finished document."""
        self._logger.info(
            "Stencil generated",
            width=round(document.width, 2),
            height=round(document.height, 2),
            commands=len(document.commands),
            warnings=len(document.warnings),
            duration_ms=round(duration_ms, 2),
        )
        with self._lock:
            self._stats.documents += 1
            self._stats.commands += len(document.commands)
            self._stats.last_duration_ms = duration_ms

    @property
    def stats(self) -> GenerationStats:
        """Snapshot of the current generation statistics."""
        with self._lock:
            return replace(self._stats)
