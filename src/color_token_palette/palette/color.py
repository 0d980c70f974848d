"""
color
=====

Does: Define the immutable Color value behind every palette token (RGBA floats in [0, 1])
      plus the hex / packed-ARGB / 0-255 views the platform outputs use.
Used By: palette.tokens (color table), export.formats (hex values), cli (show/list).
Returns: Color instances; no global state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import webcolors

__all__ = ["Color", "RGB"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]


def _check_channel(name: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} channel out of bounds [0, 1]: {value}")
    return value


@dataclass(frozen=True)
class Color:
    """An sRGB color with straight alpha.

    Channels are floats in ``[0, 1]``, the same representation ``UIColor``
    takes in ``colorWithRed:green:blue:alpha:``.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_hex(cls, text: str, alpha: float = 1.0) -> Color:
        """Does: Build a Color from '#rgb' or '#rrggbb' (case-insensitive).

        Raises:
            ValueError: If ``text`` is not a valid hex color.
        """
        r, g, b = webcolors.hex_to_rgb(webcolors.normalize_hex(text))
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha)

    @classmethod
    def from_rgb255(cls, rgb: RGB, alpha: float = 1.0) -> Color:
        """Does: Build a Color from an 8-bit (r, g, b) triple."""
        r, g, b = rgb
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB out of bounds: {rgb}")
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha)

    @classmethod
    def from_argb(cls, value: int) -> Color:
        """Does: Build a Color from a packed 0xAARRGGBB integer (Compose ``Color(0x…)``)."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value out of range: {value:#x}")
        a = (value >> 24) & 0xFF
        r = (value >> 16) & 0xFF
        g = (value >> 8) & 0xFF
        b = value & 0xFF
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    # ── Views ────────────────────────────────────────────────────────────────
    @property
    def rgb255(self) -> RGB:
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
        )

    @property
    def hex(self) -> str:
        """Lowercase '#rrggbb' (alpha is not encoded)."""
        return webcolors.rgb_to_hex(self.rgb255)

    @property
    def argb(self) -> int:
        r, g, b = self.rgb255
        a = int(round(self.alpha * 255))
        return (a << 24) | (r << 16) | (g << 8) | b

    def components(self, precision: int = 3) -> Tuple[float, float, float, float]:
        """Does: Return (r, g, b, a) rounded the way the iOS output prints them."""
        return (
            round(self.red, precision),
            round(self.green, precision),
            round(self.blue, precision),
            round(self.alpha, precision),
        )

    def css_name(self) -> Optional[str]:
        """Does: Return the CSS3 keyword for an exact match (e.g. 'black'), else None."""
        if self.alpha != 1.0:
            return None
        try:
            return webcolors.hex_to_name(self.hex, spec="css3")
        except ValueError:
            logger.debug("No CSS3 name for %s", self.hex)
            return None

    def __str__(self) -> str:
        if self.alpha == 1.0:
            return self.hex
        return f"{self.hex} (alpha={self.alpha:.3f})"
