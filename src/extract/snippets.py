"""Snippet extraction from resolved line ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def extract_snippet(lines: Sequence[str], start: int, end: int) -> str:
    """Join ``lines[start..end]`` (inclusive, 0-based) with newlines.

    Indices are expected to come from a ResolvedRange; anything else is a
    caller bug.
    """
    if start < 0 or end < start or end >= len(lines):
        msg = f"snippet range {start}..{end} out of bounds for {len(lines)} lines"
        raise ValueError(msg)
    return "\n".join(lines[start : end + 1])


__all__ = ["extract_snippet"]
