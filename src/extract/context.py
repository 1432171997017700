"""Context mapping for code elements."""

from __future__ import annotations

from typing import Any

from contract.artifacts import (
    CONTEXT_FILE_NAME,
    CONTEXT_FILE_PATH,
    CONTEXT_MODULE,
    CONTEXT_SNIPPET,
    CONTEXT_STRUCT_NAME,
)
from parse.symbol_ids import impl_struct_name, module_token
from utils import base_name


def build_context(document: Any, symbol: Any, snippet: str = "") -> dict[str, str]:
    """Build the key/value context for a symbol.

    Always carries ``file_path`` and ``file_name``. ``module``,
    ``struct_name`` and ``snippet`` appear only when they can be derived.
    Keys are returned in sorted order.
    """
    relative_path: str = document.relative_path
    ctx = {
        CONTEXT_FILE_PATH: relative_path,
        CONTEXT_FILE_NAME: base_name(relative_path),
    }

    module = module_token(symbol.symbol)
    if module is not None:
        ctx[CONTEXT_MODULE] = module

    struct_name = impl_struct_name(symbol.symbol)
    if struct_name is not None:
        ctx[CONTEXT_STRUCT_NAME] = struct_name

    if snippet:
        ctx[CONTEXT_SNIPPET] = snippet

    return dict(sorted(ctx.items()))


__all__ = ["build_context"]
