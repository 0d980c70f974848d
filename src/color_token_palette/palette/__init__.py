# src/color_token_palette/palette/__init__.py
"""
Does: Expose the palette: Color, the ColorName enumeration with values()/resolve(),
      ladder grouping/validation and text lookup.
Used by: export.formats, the CLI, and library callers.
"""

from __future__ import annotations

from .color import RGB, Color
from .ladder import (
    UnknownLadderError,
    check_ladder,
    ladder,
    ladder_families,
    ladder_weights,
    ladders,
    standalone_names,
    validate_palette,
)
from .lookup import (
    UnknownColorTokenError,
    lookup_color,
    normalize_color_key,
    parse_color_name,
    resolve_name,
    suggest_color_names,
)
from .tokens import (
    ColorName,
    PaletteIntegrityError,
    color_table,
    colors,
    resolve,
    values,
)

__all__ = [
    # Values
    "Color",
    "RGB",
    # Enumeration
    "ColorName",
    "values",
    "resolve",
    "colors",
    "color_table",
    # Ladders
    "ladder",
    "ladders",
    "ladder_families",
    "ladder_weights",
    "standalone_names",
    "check_ladder",
    "validate_palette",
    # Text lookup
    "parse_color_name",
    "resolve_name",
    "lookup_color",
    "normalize_color_key",
    "suggest_color_names",
    # Errors
    "PaletteIntegrityError",
    "UnknownLadderError",
    "UnknownColorTokenError",
]
