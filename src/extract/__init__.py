"""Range resolution and snippet extraction for scipmap."""

from extract.context import build_context
from extract.occurrences import DecodedRange, decode_range, has_role, select_definition
from extract.ranges import (
    ClosingDelimiterNotFound,
    RangeFailure,
    RangeFailureReason,
    ResolvedRange,
    find_block_end,
    resolve_range,
)
from extract.snippets import extract_snippet
from extract.source_cache import SourceTextCache, SourceUnavailableError

__all__ = [
    "ClosingDelimiterNotFound",
    "DecodedRange",
    "RangeFailure",
    "RangeFailureReason",
    "ResolvedRange",
    "SourceTextCache",
    "SourceUnavailableError",
    "build_context",
    "decode_range",
    "extract_snippet",
    "find_block_end",
    "has_role",
    "resolve_range",
    "select_definition",
]
