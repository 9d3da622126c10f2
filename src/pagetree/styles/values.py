"""Scalar value normalization: measures with units, colors, and typography keywords."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

__all__ = [
    "Measure",
    "parse_measure",
    "parse_number",
    "normalize_color",
    "hex_to_rgb",
    "normalize_font_weight",
    "normalize_font_family",
    "parse_line_height",
    "parse_text_align",
    "parse_flex_direction",
    "parse_justify_content",
    "parse_align_items",
    "js_round",
]


@dataclass(frozen=True)
class Measure:
    """A numeric CSS value paired with its unit (``px``, ``%``, ``em``, ``rem``)."""

    value: int | float
    unit: str

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"


# Leading number, the way a lenient CSS reader consumes "20px" or "1.5em".
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Suffixes checked in order; "rem" must precede "em".
_UNIT_SUFFIXES = ("%", "rem", "em", "px")

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _tidy(number: float) -> int | float:
    """Collapse integral floats to ints so 20.0 serializes as 20."""
    if math.isfinite(number) and number == int(number):
        return int(number)
    return number


def js_round(number: float) -> int:
    """Round half up, matching the rounding the platform's editor applies."""
    return int(math.floor(number + 0.5))


def parse_number(raw: object) -> int | float | None:
    """Read the leading number of *raw*; ``None`` when there is none."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return _tidy(float(raw))
    match = _NUMBER_RE.match(str(raw))
    if match is None:
        return None
    return _tidy(float(match.group(1)))


def parse_measure(raw: object, default_unit: str = "px") -> Measure | None:
    """Parse a CSS length such as ``48px``, ``1.5rem`` or ``50%``.

    Bare numbers take *default_unit*, and so do units outside ``%``, ``rem``,
    ``em`` and ``px``: ``20vh`` reads as ``20`` in *default_unit*, since the
    target format stores no other unit. Absent or unparsable input returns
    ``None``; callers omit the field rather than substituting zero.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    value = parse_number(text)
    if value is None:
        return None
    for suffix in _UNIT_SUFFIXES:
        if text.endswith(suffix):
            return Measure(value, suffix)
    return Measure(value, default_unit)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


def hex_to_rgb(value: str) -> str:
    """Convert a 3, 6 or 8 digit hex color to ``rgb()`` / ``rgba()`` notation."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    if len(digits) == 8:
        alpha = int(digits[6:8], 16) / 255
        return f"rgba({r}, {g}, {b}, {alpha:.2f})"
    return f"rgb({r}, {g}, {b})"


def normalize_color(color: str | None) -> str | None:
    """Normalize a color for the platform.

    Hex colors become ``rgb()``/``rgba()``; ``rgb``/``rgba`` values and named
    colors pass through unchanged, so the function is idempotent.
    """
    if not color:
        return None
    color = color.strip()
    if not color:
        return None
    if color.startswith("rgb"):
        return color
    if color.startswith("#"):
        if _HEX_RE.match(color):
            return hex_to_rgb(color)
        return color
    return color


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------

_FONT_WEIGHTS = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

_LINE_HEIGHTS = {
    "none": 100,
    "tight": 110,
    "snug": 120,
    "normal": 140,
    "relaxed": 160,
    "loose": 180,
}


def normalize_font_weight(weight: str | None) -> str | None:
    """Map weight keywords (``bold``, ``semibold``...) to numeric strings."""
    if weight is None:
        return None
    weight = str(weight).strip()
    return _FONT_WEIGHTS.get(weight, weight)


def normalize_font_family(family: str | None) -> str | None:
    """Normalize a font stack to ``"Primary", fallback`` form.

    ``Poppins`` and ``'Poppins', sans-serif`` both become
    ``"Poppins", sans-serif``.
    """
    if not family:
        return None
    font = family.strip()
    if not font:
        return None
    if font.startswith('"') and "," in font:
        return font
    font = font.strip("'\"")
    if "," in font:
        primary, _, rest = font.partition(",")
        primary = primary.strip().strip("'\"")
        fallback = ", ".join(p.strip() for p in rest.split(",")) or "sans-serif"
        return f'"{primary}", {fallback}'
    return f'"{font}", sans-serif'


def parse_line_height(value: str | None) -> Measure | None:
    """Express a line height as a percentage.

    Multipliers below 5 scale by 100 (``1.5`` -> ``150%``); keywords such as
    ``relaxed`` map to fixed percentages; anything else falls back to 140%.
    """
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("%"):
        number = parse_number(text)
        return Measure(number if number is not None else 140, "%")
    number = parse_number(text)
    if number is not None and 0 < number < 5:
        return Measure(js_round(number * 100), "%")
    if text in _LINE_HEIGHTS:
        return Measure(_LINE_HEIGHTS[text], "%")
    return Measure(number or 140, "%")


def parse_text_align(value: str | None) -> str:
    if value in ("left", "center", "right"):
        return value
    return "center"


def parse_flex_direction(value: str | None) -> str:
    if value in ("row", "column", "row-reverse", "column-reverse"):
        return value
    return "row"


def parse_justify_content(value: str | None) -> str:
    if value in (
        "flex-start",
        "center",
        "flex-end",
        "space-between",
        "space-around",
        "space-evenly",
    ):
        return value
    return "center"


def parse_align_items(value: str | None) -> str:
    if value in ("flex-start", "center", "flex-end", "stretch", "baseline"):
        return value
    return "center"
