# tests/test_palette_color.py
from __future__ import annotations

import dataclasses

import pytest

"""
color tests
===========

Does: Validate Color construction (hex/ARGB/8-bit), channel bounds, and the
      hex/ARGB/component/CSS-name views.
"""

from color_token_palette.palette.color import Color


def test_from_hex_long_and_short_forms():
    assert Color.from_hex("#FFF") == Color(1.0, 1.0, 1.0)
    assert Color.from_hex("#ed8936").rgb255 == (237, 137, 54)
    assert Color.from_hex("#ED8936").hex == "#ed8936"


@pytest.mark.parametrize("bad", ["ed8936x", "#12", "#gggggg", ""])
def test_from_hex_invalid(bad):
    with pytest.raises(ValueError):
        Color.from_hex(bad)


def test_channel_bounds_validation():
    with pytest.raises(ValueError):
        Color(1.2, 0.0, 0.0)
    with pytest.raises(ValueError):
        Color(0.0, -0.1, 0.0)
    with pytest.raises(ValueError):
        Color(0.0, 0.0, 0.0, alpha=2.0)


def test_from_rgb255_bounds():
    assert Color.from_rgb255((0, 0, 0)).hex == "#000000"
    with pytest.raises(ValueError):
        Color.from_rgb255((256, 0, 0))


def test_from_argb_roundtrip_and_alpha():
    c = Color.from_argb(0xFFED8936)
    assert c.hex == "#ed8936"
    assert c.alpha == 1.0
    assert c.argb == 0xFFED8936

    translucent = Color.from_argb(0x80FF0000)
    assert translucent.alpha == pytest.approx(128 / 255)
    assert translucent.rgb255 == (255, 0, 0)
    assert "alpha=" in str(translucent)

    with pytest.raises(ValueError):
        Color.from_argb(0x1_0000_0000)


def test_components_rounding():
    assert Color.from_hex("#4a54c8").components() == (0.29, 0.329, 0.784, 1.0)
    assert Color.from_hex("#4a54c8").components(precision=1) == (0.3, 0.3, 0.8, 1.0)


def test_css_name_exact_only():
    assert Color.from_hex("#000000").css_name() == "black"
    assert Color.from_hex("#ffffff").css_name() == "white"
    assert Color.from_hex("#ed8936").css_name() is None
    assert Color(0.0, 0.0, 0.0, alpha=0.5).css_name() is None


def test_color_is_immutable_and_hashable():
    c = Color.from_hex("#000000")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.red = 1.0  # type: ignore[misc]
    assert len({c, Color.from_hex("#000")}) == 1
    assert str(c) == "#000000"
