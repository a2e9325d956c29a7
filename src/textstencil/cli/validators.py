"""Input validation for the command line front end.

Each validator clamps or defaults its input instead of rejecting it and
reports what it changed, so the user gets a stencil plus a warning.
"""

import math
from dataclasses import dataclass
from typing import Any

from textstencil.config import Alignment, InputLimits


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one input.

    Attributes:
        valid: True if the input was accepted unchanged
        value: The accepted, clamped or default value
        error: What was wrong with the input
    """

    valid: bool
    value: Any
    error: str | None = None


def _parse_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _validate_range(
    value: Any, label: str, low: float, high: float, default: float
) -> ValidationResult:
    num = _parse_float(value)
    if math.isnan(num):
        return ValidationResult(False, default, f"{label} must be a number")
    if num < low or num > high:
        return ValidationResult(
            False,
            max(low, min(high, num)),
            f"{label} must be between {low:g} and {high:g}",
        )
    return ValidationResult(True, num)


def validate_point_size(value: Any, limits: InputLimits | None = None) -> ValidationResult:
    limits = limits or InputLimits()
    return _validate_range(
        value, "Font size", limits.point_size_min, limits.point_size_max, limits.point_size_default
    )


def validate_padding(value: Any, limits: InputLimits | None = None) -> ValidationResult:
    limits = limits or InputLimits()
    return _validate_range(
        value, "Padding", limits.padding_min, limits.padding_max, limits.padding_default
    )


def validate_text(text: Any, limits: InputLimits | None = None) -> ValidationResult:
    """Validate text, truncating it to the maximum length."""
    limits = limits or InputLimits()
    if not isinstance(text, str):
        return ValidationResult(False, "", "Text must be a string")
    if len(text) > limits.text_max_length:
        return ValidationResult(
            False,
            text[: limits.text_max_length],
            f"Text exceeds maximum length of {limits.text_max_length}",
        )
    return ValidationResult(True, text)


def validate_font(font_name: str, valid_fonts: list[str]) -> ValidationResult:
    """Validate a font identifier against the known fonts.

    Matching ignores case and surrounding whitespace, and the accepted value
    is the known spelling. Unknown fonts fall back to the first known font.
    """
    wanted = str(font_name).strip().lower()
    for known in valid_fonts:
        if known.lower() == wanted:
            return ValidationResult(True, known)
    return ValidationResult(False, valid_fonts[0] if valid_fonts else "", "Invalid font selected")


def validate_alignment(align: Any) -> ValidationResult:
    """Validate alignment, falling back to center."""
    try:
        return ValidationResult(True, Alignment(str(align).lower()))
    except ValueError:
        return ValidationResult(False, Alignment.CENTER, "Invalid alignment")
