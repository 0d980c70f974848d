# src/color_token_palette/palette/lookup.py
"""
lookup.

Does: Resolve free-form token text ('Orange500', 'colors.test-primary.50', 'ORANGE_500',
      'test primary 50', ...) onto ColorName, with close-match suggestions on failure.
Returns: parse_color_name(), resolve_name(), lookup_color(), normalize_color_key().
Used by: The CLI and any caller that only has a string instead of a ColorName.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from functools import lru_cache
from typing import Dict, Tuple, Union

from rapidfuzz import fuzz, process

from color_token_palette.utils.log import debug

from .color import Color
from .tokens import ColorName, resolve, values

__all__ = [
    "UnknownColorTokenError",
    "normalize_color_key",
    "parse_color_name",
    "resolve_name",
    "lookup_color",
    "suggest_color_names",
]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_LIMIT = 3
SUGGEST_CUTOFF = 70  # rapidfuzz WRatio, 0..100

_FANCY_HYPHENS = {"\u2010", "\u2011", "\u2012", "\u2013", "\u2014", "\u2212"}
_CASE_BREAK_RE = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Za-z])(?=\d)|(?<=\d)(?=[A-Za-z])")
_SEPARATORS_RE = re.compile(r"[\s._\-/]+")
_ROOT_WORDS = {"colors", "color"}


class UnknownColorTokenError(KeyError):
    """Raise when text does not name a palette token.

    Attributes:
        query: The text as given.
        suggestions: Closest ColorName members, best first (may be empty).
    """

    def __init__(self, query: str, suggestions: Tuple[ColorName, ...] = ()):
        self.query = query
        self.suggestions = suggestions
        msg = f"Unknown color token {query!r}"
        if suggestions:
            msg += ". Did you mean: " + ", ".join(s.display_name for s in suggestions) + "?"
        self.message = msg
        super().__init__(msg)

    def __str__(self) -> str:
        return self.message


def normalize_color_key(text: str) -> str:
    """
    Does: Fold any spelling of a token to 'family words weight':
          NFKC + ASCII hyphens, camelCase/digit breaks, separators -> space,
          lowercase, drop a leading 'colors'/'color' root.
    Returns: Normalized key ('' for blank input).
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    s = unicodedata.normalize("NFKC", text)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    s = _CASE_BREAK_RE.sub(" ", s.strip())
    words = _SEPARATORS_RE.sub(" ", s).lower().split()
    if len(words) > 1 and words[0] in _ROOT_WORDS:
        words = words[1:]
    return " ".join(words)


@lru_cache(maxsize=1)
def _index() -> Dict[str, ColorName]:
    idx: Dict[str, ColorName] = {}
    for name in values():
        key = normalize_color_key(name.display_name)
        if key in idx:
            # two tokens folding onto one key would make text lookup ambiguous
            raise ValueError(f"Ambiguous lookup key {key!r}: {idx[key]} / {name}")
        idx[key] = name
    return idx


def suggest_color_names(text: str, limit: int = SUGGEST_LIMIT) -> Tuple[ColorName, ...]:
    """Does: Return up to `limit` closest ColorName members for text (best first)."""
    key = normalize_color_key(text)
    if not key:
        return ()
    idx = _index()
    hits = process.extract(
        key, list(idx), scorer=fuzz.WRatio, limit=limit, score_cutoff=SUGGEST_CUTOFF
    )
    return tuple(idx[choice] for choice, _score, _pos in hits)


def parse_color_name(text: str) -> ColorName:
    """Does: Map token text onto a ColorName.

    Raises:
        UnknownColorTokenError: If no token matches; carries suggestions.
        TypeError: If text is not a string.
    """
    key = normalize_color_key(text)
    hit = _index().get(key)
    if hit is not None:
        debug(f"'{text}' -> {hit.display_name}", topic="lookup")
        return hit
    suggestions = suggest_color_names(text)
    log.debug("Unknown color token %r (key=%r, suggestions=%s)", text, key, suggestions)
    raise UnknownColorTokenError(text, suggestions)


def resolve_name(text: str) -> Color:
    """Does: Parse token text and return its Color."""
    return resolve(parse_color_name(text))


def lookup_color(name: Union[ColorName, str]) -> Color:
    """Does: Accept either a ColorName or token text and return its Color."""
    if isinstance(name, ColorName):
        return resolve(name)
    return resolve_name(name)
