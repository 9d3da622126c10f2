"""Value resolution and CSS value normalization."""

from pagetree.styles.box import (
    Background,
    Border,
    Spacing,
    background_params,
    border_params,
    corner_values,
    parse_background,
    parse_border,
    parse_radius,
    parse_spacing,
    spacing_style_params,
)
from pagetree.styles.declarations import parse_declarations
from pagetree.styles.resolver import PROPERTIES, PropertySpec, ResolvedValue, Source, resolve
from pagetree.styles.shadow import SHADOW_PRESETS, Shadow, parse_shadow, shadow_params
from pagetree.styles.values import (
    Measure,
    normalize_color,
    normalize_font_family,
    normalize_font_weight,
    parse_line_height,
    parse_measure,
)

__all__ = [
    "Measure",
    "parse_measure",
    "normalize_color",
    "normalize_font_family",
    "normalize_font_weight",
    "parse_line_height",
    "parse_declarations",
    "Shadow",
    "SHADOW_PRESETS",
    "parse_shadow",
    "shadow_params",
    "Border",
    "Background",
    "Spacing",
    "parse_border",
    "border_params",
    "parse_background",
    "background_params",
    "parse_radius",
    "corner_values",
    "parse_spacing",
    "spacing_style_params",
    "PropertySpec",
    "PROPERTIES",
    "ResolvedValue",
    "Source",
    "resolve",
]
