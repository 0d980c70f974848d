"""
constants
=========

Does: Hold the generated color-token table (token path -> hex) in declaration order.
Used By: palette.tokens (enum + color table), palette.ladder (standard weights).
Returns: Pure tuples; nothing here is mutated after import.
"""

from __future__ import annotations

from typing import Tuple

__all__ = ["TOKEN_TABLE", "STANDARD_WEIGHTS", "PATH_ROOT"]

# Do not edit by hand: values mirror the style-dictionary output for the palette.
PATH_ROOT = "colors"

TOKEN_TABLE: Tuple[Tuple[str, str], ...] = (
    ("colors.black", "#000000"),
    ("colors.white", "#ffffff"),
    # ── orange ───────────────────────────────────────────────────────────────
    ("colors.orange.100", "#fffaf0"),
    ("colors.orange.200", "#feebc8"),
    ("colors.orange.300", "#fbd38d"),
    ("colors.orange.400", "#f6ad55"),
    ("colors.orange.500", "#ed8936"),
    ("colors.orange.600", "#dd6b20"),
    ("colors.orange.700", "#c05621"),
    ("colors.orange.800", "#9c4221"),
    ("colors.orange.900", "#7b341e"),
    # ── test-primary ─────────────────────────────────────────────────────────
    ("colors.test-primary.50", "#e5f0fd"),
    ("colors.test-primary.100", "#c7d3e6"),
    ("colors.test-primary.200", "#96b2da"),
    ("colors.test-primary.300", "#7395ca"),
    ("colors.test-primary.400", "#566bc9"),
    ("colors.test-primary.500", "#4a54c8"),
    ("colors.test-primary.600", "#473ea7"),
    ("colors.test-primary.700", "#3e44b6"),
    ("colors.test-primary.800", "#34335f"),
    ("colors.test-primary.900", "#2d288f"),
    # ── test-secondary ───────────────────────────────────────────────────────
    ("colors.test-secondary.50", "#edf5ee"),
    ("colors.test-secondary.100", "#d9e4e8"),
    ("colors.test-secondary.200", "#c3daef"),
    ("colors.test-secondary.300", "#a7b6ca"),
    ("colors.test-secondary.400", "#708f97"),
    ("colors.test-secondary.500", "#536977"),
    ("colors.test-secondary.600", "#42546d"),
    ("colors.test-secondary.700", "#32344f"),
    ("colors.test-secondary.800", "#24283e"),
    ("colors.test-secondary.900", "#191b28"),
    # ── test-neutral ─────────────────────────────────────────────────────────
    ("colors.test-neutral.50", "#f7fafc"),
    ("colors.test-neutral.100", "#f1f5f9"),
    ("colors.test-neutral.200", "#e2e8f0"),
    ("colors.test-neutral.300", "#cbd5e1"),
    ("colors.test-neutral.400", "#94a3b8"),
    ("colors.test-neutral.500", "#64748b"),
    ("colors.test-neutral.600", "#475569"),
    ("colors.test-neutral.700", "#334155"),
    ("colors.test-neutral.800", "#1e293b"),
    ("colors.test-neutral.900", "#0f172a"),
)

# Shade ladder steps; a family uses a contiguous run of these.
STANDARD_WEIGHTS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
