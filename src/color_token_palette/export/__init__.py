# src/color_token_palette/export/__init__.py
"""
Does: Expose token-format presets and palette serialization.
Used by: The CLI 'export' and 'formats' commands.
"""

from __future__ import annotations

from .formats import (
    TokenFormat,
    dump_tokens,
    format_tokens,
    get_token_format,
    list_available_formats,
    load_token_formats,
    reload_token_formats,
)

__all__ = [
    "TokenFormat",
    "load_token_formats",
    "reload_token_formats",
    "get_token_format",
    "list_available_formats",
    "format_tokens",
    "dump_tokens",
]
