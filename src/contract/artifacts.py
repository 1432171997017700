"""Output contract for the structure artifact.

This module defines the stable surface downstream consumers of
``structure.json`` rely on: field names and order, context keys and the
code-type sentinel that never appears in output.
"""

from __future__ import annotations

STRUCTURE_JSON = "structure.json"

# Field order of each element object in the output array.
CODE_ELEMENT_FIELDS = (
    "name",
    "signature",
    "code_type",
    "docstring",
    "line",
    "line_from",
    "line_to",
    "context",
)

CONTEXT_FILE_PATH = "file_path"
CONTEXT_FILE_NAME = "file_name"
CONTEXT_MODULE = "module"
CONTEXT_STRUCT_NAME = "struct_name"
CONTEXT_SNIPPET = "snippet"

REQUIRED_CONTEXT_KEYS = frozenset({CONTEXT_FILE_PATH, CONTEXT_FILE_NAME})
OPTIONAL_CONTEXT_KEYS = frozenset(
    {CONTEXT_MODULE, CONTEXT_STRUCT_NAME, CONTEXT_SNIPPET}
)

# Code type of symbols whose kind is not recognized; filtered from output.
UNKNOWN_CODE_TYPE = "Unknown"


__all__ = [
    "CODE_ELEMENT_FIELDS",
    "CONTEXT_FILE_NAME",
    "CONTEXT_FILE_PATH",
    "CONTEXT_MODULE",
    "CONTEXT_SNIPPET",
    "CONTEXT_STRUCT_NAME",
    "OPTIONAL_CONTEXT_KEYS",
    "REQUIRED_CONTEXT_KEYS",
    "STRUCTURE_JSON",
    "UNKNOWN_CODE_TYPE",
]
