"""Definition occurrence lookup and range decoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from parse.scip_index import ROLE_DEFINITION


@dataclass(frozen=True)
class DecodedRange:
    """1-based start/end lines taken from an occurrence range."""

    start_line: int
    end_line: int

    @property
    def is_unset(self) -> bool:
        return self.start_line == 0 and self.end_line == 0


def has_role(symbol_roles: int, role: int) -> bool:
    """Return True when the role bitmask includes ``role``."""
    return symbol_roles & role != 0


def select_definition(document: Any, symbol: Any) -> Any | None:
    """Return the first definition occurrence of ``symbol`` in ``document``.

    Occurrences are scanned in document order. Returns None when the symbol
    has no occurrence carrying the definition role.
    """
    for occurrence in document.occurrences:
        if occurrence.symbol == symbol.symbol and has_role(
            occurrence.symbol_roles, ROLE_DEFINITION
        ):
            return occurrence
    return None


def decode_range(occurrence: Any) -> DecodedRange | None:
    """Decode the line span of an occurrence range.

    ``[startLine, startCol, endLine, endCol]`` gives both lines;
    ``[startLine, startCol, endCol]`` implies the end line equals the start
    line. Shorter ranges have no usable span and return None; extra
    trailing integers are ignored.
    """
    rng = list(occurrence.range)
    if len(rng) >= 4:
        return DecodedRange(start_line=rng[0], end_line=rng[2])
    if len(rng) == 3:
        return DecodedRange(start_line=rng[0], end_line=rng[0])
    return None


__all__ = ["DecodedRange", "decode_range", "has_role", "select_definition"]
