"""
color_token_palette
===================

Does: Root package for the palette color tokens (Black, White, Orange and the
      TestPrimary/TestSecondary/TestNeutral shade ladders).
Returns: Re-exports the palette API (ColorName, values, resolve, Color, lookup helpers).
Used by: Application code, the `ctp` CLI, and tests.
"""

from .palette import (
    Color,
    ColorName,
    UnknownColorTokenError,
    colors,
    lookup_color,
    parse_color_name,
    resolve,
    resolve_name,
    values,
)

__all__: list[str] = [
    "Color",
    "ColorName",
    "UnknownColorTokenError",
    "values",
    "resolve",
    "colors",
    "parse_color_name",
    "resolve_name",
    "lookup_color",
]
__version__ = "0.1.0"
__docformat__ = "google"
