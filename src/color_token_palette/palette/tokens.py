"""
tokens
======

Does: Declare the closed, ordered set of palette color names (ColorName) and the two
      accessors over it: values() for every name in declaration order, resolve() to map
      a name onto its Color.
Used By: palette.ladder, palette.lookup, export.formats, cli.
Returns: Enum members, tuples and Color instances; the color table is read-only.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .color import Color
from .constants import PATH_ROOT, TOKEN_TABLE

__all__ = [
    "ColorName",
    "PaletteIntegrityError",
    "values",
    "resolve",
    "colors",
    "color_table",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class PaletteIntegrityError(ValueError):
    """Raise when the token table breaks a palette invariant."""


class ColorName(Enum):
    """One member per palette token; the value is the token path."""

    BLACK = "colors.black"
    WHITE = "colors.white"
    ORANGE_100 = "colors.orange.100"
    ORANGE_200 = "colors.orange.200"
    ORANGE_300 = "colors.orange.300"
    ORANGE_400 = "colors.orange.400"
    ORANGE_500 = "colors.orange.500"
    ORANGE_600 = "colors.orange.600"
    ORANGE_700 = "colors.orange.700"
    ORANGE_800 = "colors.orange.800"
    ORANGE_900 = "colors.orange.900"
    TEST_PRIMARY_50 = "colors.test-primary.50"
    TEST_PRIMARY_100 = "colors.test-primary.100"
    TEST_PRIMARY_200 = "colors.test-primary.200"
    TEST_PRIMARY_300 = "colors.test-primary.300"
    TEST_PRIMARY_400 = "colors.test-primary.400"
    TEST_PRIMARY_500 = "colors.test-primary.500"
    TEST_PRIMARY_600 = "colors.test-primary.600"
    TEST_PRIMARY_700 = "colors.test-primary.700"
    TEST_PRIMARY_800 = "colors.test-primary.800"
    TEST_PRIMARY_900 = "colors.test-primary.900"
    TEST_SECONDARY_50 = "colors.test-secondary.50"
    TEST_SECONDARY_100 = "colors.test-secondary.100"
    TEST_SECONDARY_200 = "colors.test-secondary.200"
    TEST_SECONDARY_300 = "colors.test-secondary.300"
    TEST_SECONDARY_400 = "colors.test-secondary.400"
    TEST_SECONDARY_500 = "colors.test-secondary.500"
    TEST_SECONDARY_600 = "colors.test-secondary.600"
    TEST_SECONDARY_700 = "colors.test-secondary.700"
    TEST_SECONDARY_800 = "colors.test-secondary.800"
    TEST_SECONDARY_900 = "colors.test-secondary.900"
    TEST_NEUTRAL_50 = "colors.test-neutral.50"
    TEST_NEUTRAL_100 = "colors.test-neutral.100"
    TEST_NEUTRAL_200 = "colors.test-neutral.200"
    TEST_NEUTRAL_300 = "colors.test-neutral.300"
    TEST_NEUTRAL_400 = "colors.test-neutral.400"
    TEST_NEUTRAL_500 = "colors.test-neutral.500"
    TEST_NEUTRAL_600 = "colors.test-neutral.600"
    TEST_NEUTRAL_700 = "colors.test-neutral.700"
    TEST_NEUTRAL_800 = "colors.test-neutral.800"
    TEST_NEUTRAL_900 = "colors.test-neutral.900"

    @property
    def path(self) -> str:
        return self.value

    @property
    def family(self) -> Optional[str]:
        """Ladder family ('orange', 'test-primary', ...); None for standalone tokens."""
        parts = self.value.split(".")
        return parts[1] if len(parts) == 3 else None

    @property
    def weight(self) -> Optional[int]:
        parts = self.value.split(".")
        return int(parts[2]) if len(parts) == 3 else None

    @property
    def display_name(self) -> str:
        """CamelCase name as the iOS enum spells it, minus the 'Colors' prefix."""
        parts = self.value.split(".")[1:]
        words = [w for part in parts for w in part.split("-")]
        return "".join(w if w.isdigit() else w.capitalize() for w in words)

    @property
    def color(self) -> Color:
        return resolve(self)

    def __str__(self) -> str:
        return self.display_name


# ── Color table (built once, read-only) ──────────────────────────────────────
def _build_table() -> Mapping[ColorName, Color]:
    declared = [m.value for m in ColorName]
    generated = [path for path, _ in TOKEN_TABLE]
    if declared != generated:
        missing = sorted(set(generated) - set(declared))
        extra = sorted(set(declared) - set(generated))
        raise PaletteIntegrityError(
            f"ColorName out of sync with token table (missing={missing}, extra={extra})"
        )
    for path in generated:
        if path.split(".")[0] != PATH_ROOT:
            raise PaletteIntegrityError(f"Token path outside '{PATH_ROOT}': {path}")
    table = {ColorName(path): Color.from_hex(hx) for path, hx in TOKEN_TABLE}
    logger.debug("Built color table with %d tokens", len(table))
    return MappingProxyType(table)


_COLOR_TABLE: Mapping[ColorName, Color] = _build_table()
_VALUES: Tuple[ColorName, ...] = tuple(ColorName)
_COLORS: Tuple[Color, ...] = tuple(_COLOR_TABLE[name] for name in _VALUES)


# ── Accessors ────────────────────────────────────────────────────────────────
def values() -> Tuple[ColorName, ...]:
    """Does: Return every color name in declaration order (same tuple on every call)."""
    return _VALUES


def resolve(name: ColorName) -> Color:
    """Does: Map a color name to its Color.

    Total over ColorName. Strings are not accepted here; use
    ``palette.lookup.parse_color_name`` to turn text into a ColorName first.

    Raises:
        TypeError: If ``name`` is not a ColorName member.
    """
    if not isinstance(name, ColorName):
        raise TypeError(
            f"resolve() expects a ColorName, got {type(name).__name__}; "
            "use parse_color_name() for text"
        )
    return _COLOR_TABLE[name]


def colors() -> Tuple[Color, ...]:
    """Does: Return the colors in declaration order, index-aligned with values()."""
    return _COLORS


def color_table() -> Mapping[ColorName, Color]:
    """Does: Return the read-only name -> Color mapping."""
    return _COLOR_TABLE
