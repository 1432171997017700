"""Line range resolution for definition occurrences.

Index producers often report only the declaration line of a construct. When
the decoded range does not span several lines, the end of the construct is
recovered by balancing curly braces forward from the start line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from extract.occurrences import DecodedRange

OPEN_DELIMITER = "{"
CLOSE_DELIMITER = "}"


class ClosingDelimiterNotFound(Exception):
    """Raised when a brace-balance scan reaches end-of-file."""


class RangeFailureReason(str, Enum):
    NO_DEFINITION = "no_definition"
    START_OUT_OF_BOUNDS = "start_out_of_bounds"
    INVALID_RANGE = "invalid_range"


@dataclass(frozen=True)
class ResolvedRange:
    """Validated 0-based inclusive line span.

    ``adjustments`` lists the corrections made while resolving (clamping,
    heuristic fallback) so callers can report them.
    """

    start: int
    end: int
    heuristic_applied: bool = False
    adjustments: tuple[str, ...] = ()

    @property
    def line(self) -> int:
        return self.start + 1

    @property
    def line_from(self) -> int:
        return self.start + 1

    @property
    def line_to(self) -> int:
        return self.end + 1


@dataclass(frozen=True)
class RangeFailure:
    reason: RangeFailureReason
    message: str


def find_block_end(lines: Sequence[str], start: int) -> int:
    """Return the index of the line closing the block opened at ``start``.

    Counts opening minus closing braces per line, character by character
    (braces in strings or comments count too). Once a brace has opened, the
    first line after ``start`` where the running count drops to zero or
    below ends the block. A block balanced on the start line itself does not
    end there; the scan moves on to the next non-positive line.

    Raises:
        ClosingDelimiterNotFound: If no brace opens, or the count never drops
            on a later line.
    """
    depth = 0
    opened = False
    for i in range(start, len(lines)):
        line = lines[i]
        opens = line.count(OPEN_DELIMITER)
        opened = opened or opens > 0
        depth += opens
        depth -= line.count(CLOSE_DELIMITER)
        if opened and depth <= 0 and i != start:
            return i
    msg = f"could not find closing brace after line {start + 1}"
    raise ClosingDelimiterNotFound(msg)


def resolve_range(
    decoded: DecodedRange | None, lines: Sequence[str]
) -> ResolvedRange | RangeFailure:
    """Resolve a decoded occurrence range against the document's lines.

    Args:
        decoded: 1-based lines from the definition occurrence, or None when
            the occurrence has no usable span.
        lines: Document text split into lines.

    Returns:
        A ResolvedRange with 0-based inclusive indices, or a RangeFailure
        naming why the symbol cannot be placed.
    """
    if decoded is None or decoded.is_unset:
        return RangeFailure(
            RangeFailureReason.NO_DEFINITION,
            "definition occurrence not found or invalid range",
        )

    adjustments: list[str] = []
    start = decoded.start_line - 1
    end = decoded.end_line - 1

    if start < 0:
        adjustments.append(f"start line index ({start}) is less than 0; using 0")
        start = 0
    if end < start:
        adjustments.append(
            f"end line index ({end}) is less than start ({start}); using start"
        )
        end = start

    total = len(lines)
    if start >= total:
        return RangeFailure(
            RangeFailureReason.START_OUT_OF_BOUNDS,
            f"start line index ({start}) exceeds total lines ({total})",
        )

    heuristic_applied = False
    if end == start:
        try:
            end = find_block_end(lines, start)
            heuristic_applied = True
        except ClosingDelimiterNotFound as exc:
            adjustments.append(f"could not determine end line: {exc}")

    if end >= total:
        adjustments.append(
            f"end line index ({end}) exceeds total lines ({total}); using last line"
        )
        end = total - 1

    if start < 0 or end < start or end >= total:
        return RangeFailure(
            RangeFailureReason.INVALID_RANGE,
            f"invalid line range: start={start}, end={end}",
        )

    return ResolvedRange(
        start=start,
        end=end,
        heuristic_applied=heuristic_applied,
        adjustments=tuple(adjustments),
    )


__all__ = [
    "ClosingDelimiterNotFound",
    "RangeFailure",
    "RangeFailureReason",
    "ResolvedRange",
    "find_block_end",
    "resolve_range",
]
