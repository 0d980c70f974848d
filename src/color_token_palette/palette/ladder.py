"""
ladder
======

Does: Group ColorName members into ladder families (same base name, varying weight),
      order them by weight, and check the palette invariants (unique names, total
      color table, gap-free increasing ladders).
Used By: export.formats (nested output), cli (list/check), tests.
Returns: Tuples of names/weights; validate_palette() returns the checked family map.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Tuple

from .constants import STANDARD_WEIGHTS, TOKEN_TABLE
from .tokens import ColorName, PaletteIntegrityError, color_table, resolve, values

__all__ = [
    "UnknownLadderError",
    "ladder_families",
    "ladder",
    "ladders",
    "ladder_weights",
    "standalone_names",
    "check_ladder",
    "validate_palette",
]

logger = logging.getLogger(__name__)


class UnknownLadderError(LookupError):
    """Raise when a ladder family name is not part of the palette."""

    def __init__(self, family: str, known: Tuple[str, ...]):
        self.family = family
        self.known = known
        super().__init__(f"Unknown ladder family '{family}' (known: {', '.join(known)})")


def _norm_family(family: str) -> str:
    f = str(family).strip().lower().replace("_", "-").replace(" ", "-")
    if f.startswith("colors."):
        f = f[len("colors."):]
    return f


@lru_cache(maxsize=1)
def _families() -> Dict[str, Tuple[ColorName, ...]]:
    grouped: Dict[str, list] = {}
    for name in values():
        if name.family is not None:
            grouped.setdefault(name.family, []).append(name)
    return {fam: tuple(sorted(members, key=lambda n: n.weight)) for fam, members in grouped.items()}


def ladder_families() -> Tuple[str, ...]:
    """Does: Return ladder family names in declaration order."""
    return tuple(_families())


def ladder(family: str) -> Tuple[ColorName, ...]:
    """Does: Return the members of one family sorted by weight.

    Accepts 'test-primary', 'test_primary', 'Test Primary' or 'colors.test-primary'.
    """
    fams = _families()
    key = _norm_family(family)
    if key not in fams:
        raise UnknownLadderError(family, tuple(fams))
    return fams[key]


def ladders() -> Dict[str, Tuple[ColorName, ...]]:
    """Does: Return a fresh {family: members} dict in declaration order."""
    return dict(_families())


def ladder_weights(family: str) -> Tuple[int, ...]:
    return tuple(n.weight for n in ladder(family))


def standalone_names() -> Tuple[ColorName, ...]:
    """Does: Return tokens that belong to no ladder (Black, White)."""
    return tuple(n for n in values() if n.family is None)


def check_ladder(family: str) -> Tuple[int, ...]:
    """Does: Check one family's weights are unique, increasing and gap-free.

    Gap-free means the weights form a contiguous run of STANDARD_WEIGHTS
    (100..900 is fine, 100/300 is not).

    Raises:
        PaletteIntegrityError: On the first violated rule.
    """
    # declaration order, not the sorted view: the table itself must be ordered
    declared = tuple(n.weight for n in values() if n.family == _norm_family(family))
    if not declared:
        raise UnknownLadderError(family, ladder_families())

    if len(set(declared)) != len(declared):
        raise PaletteIntegrityError(f"{family}: duplicate weights {declared}")
    if any(b <= a for a, b in zip(declared, declared[1:])):
        raise PaletteIntegrityError(f"{family}: weights not increasing {declared}")
    unknown = [w for w in declared if w not in STANDARD_WEIGHTS]
    if unknown:
        raise PaletteIntegrityError(f"{family}: non-standard weights {unknown}")
    start = STANDARD_WEIGHTS.index(declared[0])
    expected = STANDARD_WEIGHTS[start:start + len(declared)]
    if declared != expected:
        raise PaletteIntegrityError(f"{family}: gap in weights {declared} (expected {expected})")
    return declared


def validate_palette() -> Dict[str, Tuple[int, ...]]:
    """Does: Check every palette invariant; return {family: weights} when all hold.

    Raises:
        PaletteIntegrityError: If names repeat, a token does not resolve,
            or a ladder is broken.
    """
    names = values()
    if len(set(names)) != len(names) or len(names) != len(TOKEN_TABLE):
        raise PaletteIntegrityError(
            f"Expected {len(TOKEN_TABLE)} unique names, got {len(set(names))}/{len(names)}"
        )
    displays = [n.display_name for n in names]
    if len(set(displays)) != len(displays):
        raise PaletteIntegrityError("Display names collide")
    table = color_table()
    for n in names:
        if n not in table or resolve(n) is None:
            raise PaletteIntegrityError(f"{n.display_name} does not resolve to a color")

    report = {fam: check_ladder(fam) for fam in ladder_families()}
    logger.debug("Palette OK: %d tokens, ladders=%s", len(names), report)
    return report
