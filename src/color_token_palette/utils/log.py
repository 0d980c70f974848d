"""
log.py.

Does: Topic-gated debug printer controlled by PALETTE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the CLI, lookup and export.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_topics"]

ENV_VAR = "PALETTE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PALETTE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Turn on extra topics for this process (the CLI's --debug uses 'all')."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _DEBUG_TOPICS | {t.strip().lower() for t in topics if t.strip()}


def debug(
    msg: str,
    topic: str = "palette",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via PALETTE_DEBUG_TOPICS.
    """
    if not _DEBUG_TOPICS:
        return
    topic_key = topic.lower().strip()
    if "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS:
        if stream is None:
            stream = sys.stderr
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
