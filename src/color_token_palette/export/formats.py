"""
formats
=======

Does: Serialize the palette into design-token JSON shapes (W3C, Style Dictionary,
      Figma Variables, Tokens Studio). Format presets live in data/token_formats.json.
Used By: cli (export/formats commands) and callers handing tokens to other tools.
Returns: TokenFormat presets, plain dicts ready for json.dumps, or JSON text.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from color_token_palette.palette import ColorName, ladders, standalone_names
from color_token_palette.utils.load_config import load_config
from color_token_palette.utils.log import debug

__all__ = [
    "TokenFormat",
    "load_token_formats",
    "reload_token_formats",
    "get_token_format",
    "list_available_formats",
    "format_tokens",
    "dump_tokens",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

FORMATS_FILE = "token_formats"
_VALUE_KEYS = ("$value", "value")
_REQUIRED = ("display_name", "value_key", "type_key", "root_key", "nested")


@dataclass(frozen=True)
class TokenFormat:
    """How one token ecosystem lays out a color token."""

    name: str
    display_name: str
    value_key: str
    type_key: Optional[str]
    root_key: str
    nested: bool
    description: str = ""
    common_use: Tuple[str, ...] = ()


def _validate_formats(data: Dict[str, Any]) -> Dict[str, Any]:
    """Turn the raw preset JSON into {'default': str, 'formats': {name: TokenFormat}}."""
    raw = data.get("formats")
    if not isinstance(raw, dict) or not raw:
        raise ValueError("'formats' must be a non-empty object")

    formats: Dict[str, TokenFormat] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            raise ValueError(f"format {name!r} must be an object")
        missing = [k for k in _REQUIRED if k not in entry]
        if missing:
            raise ValueError(f"format {name!r} missing keys: {missing}")
        if entry["value_key"] not in _VALUE_KEYS:
            raise ValueError(f"format {name!r}: value_key must be one of {_VALUE_KEYS}")
        formats[name.lower()] = TokenFormat(
            name=name.lower(),
            display_name=str(entry["display_name"]),
            value_key=entry["value_key"],
            type_key=entry["type_key"],
            root_key=str(entry["root_key"]),
            nested=bool(entry["nested"]),
            description=str(entry.get("description", "")),
            common_use=tuple(entry.get("common_use", ())),
        )

    default = str(data.get("default", next(iter(formats)))).lower()
    if default not in formats:
        raise ValueError(f"default format {default!r} is not defined")
    return {"default": default, "formats": formats}


@lru_cache(maxsize=1)
def _presets() -> Dict[str, Any]:
    return load_config(FORMATS_FILE, mode="validated_dict", validator=_validate_formats)


def load_token_formats() -> Dict[str, TokenFormat]:
    """Does: Return {name: TokenFormat} for every preset, in file order."""
    return dict(_presets()["formats"])


def reload_token_formats() -> None:
    """Does: Drop cached presets so the next call re-reads the data file."""
    _presets.cache_clear()


def get_token_format(name: Union[str, TokenFormat, None] = None) -> TokenFormat:
    """Does: Look up a preset by name.

    ``None`` gives the default preset (w3c). Unknown names log a warning and
    fall back to the default rather than failing an export.

    Raises:
        TypeError: If ``name`` is neither a string nor a TokenFormat.
    """
    if isinstance(name, TokenFormat):
        return name
    presets = _presets()
    formats: Dict[str, TokenFormat] = presets["formats"]
    if name is None:
        return formats[presets["default"]]
    if not isinstance(name, str):
        raise TypeError(f"expected str or TokenFormat, got {type(name).__name__}")
    if not name.strip():
        return formats[presets["default"]]
    fmt = formats.get(name.strip().lower())
    if fmt is None:
        logger.warning(
            "Unknown token format %r, falling back to %s format", name, presets["default"]
        )
        return formats[presets["default"]]
    return fmt


def list_available_formats() -> str:
    """Does: Render the presets as CLI help text."""
    blocks = []
    for fmt in load_token_formats().values():
        structure = f"{fmt.root_key} → {fmt.value_key}"
        common = ", ".join(fmt.common_use[:2])
        blocks.append(
            f"  {fmt.name:<15} - {fmt.display_name}\n"
            f"    Structure: {structure:<20} | Common use: {common}"
        )
    return "\n\n".join(blocks)


def _leaf(name: ColorName, fmt: TokenFormat) -> Dict[str, str]:
    leaf = {fmt.value_key: name.color.hex}
    if fmt.type_key:
        leaf[fmt.type_key] = "color"
    return leaf


def format_tokens(
    fmt: Union[str, TokenFormat, None] = None,
    *,
    namespace: Optional[str] = None,
    description: Optional[str] = None,
    include_metadata: bool = True,
) -> Dict[str, Any]:
    """Does: Build the token document for the whole palette.

    Nested formats::

        {root: {"black": {...}, "orange": {"100": {value_key: "#fffaf0", ...}}}}

    Flat formats::

        {root: {"black": {...}, "orange-100": {...}}}

    Args:
        fmt: Preset name or TokenFormat; default preset when None.
        namespace: Prefix for top-level keys ('brand' -> 'brand-orange').
        description: '$description' on the section (w3c only).
        include_metadata: Put the section-level type marker on nested formats.
    """
    fmt = get_token_format(fmt)
    prefix = f"{namespace}-" if namespace else ""
    section: Dict[str, Any] = {}

    if fmt.nested:
        if fmt.type_key and include_metadata:
            section[fmt.type_key] = "color"
        if description and fmt.name == "w3c":
            section["$description"] = description
        for name in standalone_names():
            section[f"{prefix}{name.path.split('.')[-1]}"] = _leaf(name, fmt)
        for family, members in ladders().items():
            section[f"{prefix}{family}"] = {str(n.weight): _leaf(n, fmt) for n in members}
    else:
        for name in standalone_names():
            section[f"{prefix}{name.path.split('.')[-1]}"] = _leaf(name, fmt)
        for family, members in ladders().items():
            for n in members:
                section[f"{prefix}{family}-{n.weight}"] = _leaf(n, fmt)

    debug(f"formatted {len(section)} entries as {fmt.name}", topic="export")
    return {fmt.root_key: section}


def dump_tokens(
    fmt: Union[str, TokenFormat, None] = None,
    path: Union[str, os.PathLike, None] = None,
    *,
    indent: int = 2,
    **options: Any,
) -> str:
    """Does: Serialize format_tokens() to JSON; also write it to `path` when given."""
    fmt = get_token_format(fmt)
    text = json.dumps(format_tokens(fmt, **options), indent=indent, ensure_ascii=False) + "\n"
    if path is not None:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        logger.info("Wrote %s tokens to %s", fmt.name, out)
    return text
