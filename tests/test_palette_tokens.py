# tests/test_palette_tokens.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

"""
tokens tests
============

Does: Check the closed ColorName set, values()/resolve() contract, and pin the
      resolved colors against the generated constants.
"""

from color_token_palette.palette import Color, ColorName, color_table, colors, resolve, values


# ──────────────────────────────────────────────────────────────────────────────
# values()
# ──────────────────────────────────────────────────────────────────────────────
def test_values_is_declaration_order_and_complete():
    names = values()
    assert names == tuple(ColorName)
    assert len(names) == 41
    assert len(set(names)) == 41
    assert names[0] is ColorName.BLACK
    assert names[1] is ColorName.WHITE
    assert names[2] is ColorName.ORANGE_100
    assert names[-1] is ColorName.TEST_NEUTRAL_900


def test_values_is_idempotent():
    assert values() == values()
    assert list(values()) == list(values())


def test_member_values_are_unique_paths():
    paths = [n.path for n in values()]
    assert len(set(paths)) == len(paths)
    assert all(p.startswith("colors.") for p in paths)


# ──────────────────────────────────────────────────────────────────────────────
# resolve()
# ──────────────────────────────────────────────────────────────────────────────
def test_every_token_resolves_to_a_color():
    for name in values():
        c = resolve(name)
        assert isinstance(c, Color)
        assert name.color is c


@pytest.mark.parametrize(
    "name,hex_",
    [
        (ColorName.BLACK, "#000000"),
        (ColorName.WHITE, "#ffffff"),
        (ColorName.ORANGE_500, "#ed8936"),
        (ColorName.ORANGE_100, "#fffaf0"),
        (ColorName.TEST_PRIMARY_50, "#e5f0fd"),
        (ColorName.TEST_SECONDARY_700, "#32344f"),
        (ColorName.TEST_NEUTRAL_900, "#0f172a"),
    ],
)
def test_resolve_pins_generated_hex(name, hex_):
    assert resolve(name).hex == hex_


@pytest.mark.parametrize(
    "name,argb",
    [
        (ColorName.ORANGE_500, 0xFFED8936),
        (ColorName.TEST_PRIMARY_800, 0xFF34335F),
        (ColorName.TEST_SECONDARY_50, 0xFFEDF5EE),
        (ColorName.TEST_NEUTRAL_400, 0xFF94A3B8),
    ],
)
def test_resolve_matches_packed_argb_constants(name, argb):
    assert resolve(name) == Color.from_argb(argb)


def test_resolve_matches_ios_components():
    assert resolve(ColorName.BLACK).components() == (0.0, 0.0, 0.0, 1.0)
    assert resolve(ColorName.WHITE).components() == (1.0, 1.0, 1.0, 1.0)
    assert resolve(ColorName.ORANGE_500).components() == (0.929, 0.537, 0.212, 1.0)
    assert resolve(ColorName.TEST_PRIMARY_800).components() == (0.204, 0.2, 0.373, 1.0)


@pytest.mark.parametrize("bad", ["Orange500", "colors.orange.500", 6, None])
def test_resolve_rejects_non_members(bad):
    with pytest.raises(TypeError):
        resolve(bad)


# ──────────────────────────────────────────────────────────────────────────────
# Table shape
# ──────────────────────────────────────────────────────────────────────────────
def test_colors_index_aligned_with_values():
    assert len(colors()) == len(values())
    for name, c in zip(values(), colors()):
        assert resolve(name) == c


def test_color_table_is_read_only():
    table = color_table()
    with pytest.raises(TypeError):
        table[ColorName.BLACK] = Color(1.0, 0.0, 0.0)  # type: ignore[index]
    with pytest.raises(TypeError):
        del table[ColorName.WHITE]  # type: ignore[attr-defined]


def test_member_properties():
    n = ColorName.TEST_PRIMARY_50
    assert n.family == "test-primary"
    assert n.weight == 50
    assert n.display_name == "TestPrimary50"
    assert str(n) == "TestPrimary50"

    assert ColorName.BLACK.family is None
    assert ColorName.BLACK.weight is None
    assert ColorName.BLACK.display_name == "Black"


def test_concurrent_reads_see_the_same_table():
    expected = [resolve(n) for n in values()]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: [resolve(n) for n in values()], range(32)))
    assert all(r == expected for r in results)
