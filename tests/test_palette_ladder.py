# tests/test_palette_ladder.py
from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

"""
ladder tests
============

Does: Check family grouping/order, gap-free weights, and that check_ladder rejects
      duplicate, decreasing, non-standard and gapped ladders.
"""

lad = importlib.import_module("color_token_palette.palette.ladder")
from color_token_palette.palette import ColorName, PaletteIntegrityError


def test_families_in_declaration_order():
    assert lad.ladder_families() == ("orange", "test-primary", "test-secondary", "test-neutral")


def test_weights_per_family():
    assert lad.ladder_weights("orange") == (100, 200, 300, 400, 500, 600, 700, 800, 900)
    full = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
    for fam in ("test-primary", "test-secondary", "test-neutral"):
        assert lad.ladder_weights(fam) == full


@pytest.mark.parametrize("spelling", ["test-primary", "test_primary", "Test Primary", "colors.test-primary"])
def test_ladder_accepts_spellings(spelling):
    members = lad.ladder(spelling)
    assert members[0] is ColorName.TEST_PRIMARY_50
    assert members[-1] is ColorName.TEST_PRIMARY_900


def test_unknown_family():
    with pytest.raises(lad.UnknownLadderError) as ei:
        lad.ladder("purple")
    assert isinstance(ei.value, LookupError)
    assert "orange" in str(ei.value)


def test_standalone_and_ladders_cover_palette():
    standalone = lad.standalone_names()
    assert standalone == (ColorName.BLACK, ColorName.WHITE)
    total = len(standalone) + sum(len(m) for m in lad.ladders().values())
    assert total == len(ColorName)


def test_validate_palette_reports_each_ladder():
    report = lad.validate_palette()
    assert set(report) == set(lad.ladder_families())
    assert report["orange"][0] == 100


# ──────────────────────────────────────────────────────────────────────────────
# Broken ladders (fake values() on the module object)
# ──────────────────────────────────────────────────────────────────────────────
def _fake(weights):
    return lambda: tuple(SimpleNamespace(family="x", weight=w) for w in weights)


@pytest.mark.parametrize(
    "weights,fragment",
    [
        ((100, 100, 200), "duplicate"),
        ((200, 100), "not increasing"),
        ((100, 150, 200), "non-standard"),
        ((100, 300, 400), "gap"),
    ],
)
def test_check_ladder_rejects(monkeypatch, weights, fragment):
    monkeypatch.setattr(lad, "values", _fake(weights), raising=True)
    with pytest.raises(PaletteIntegrityError, match=fragment):
        lad.check_ladder("x")


def test_check_ladder_accepts_contiguous_run(monkeypatch):
    monkeypatch.setattr(lad, "values", _fake((300, 400, 500)), raising=True)
    assert lad.check_ladder("x") == (300, 400, 500)
