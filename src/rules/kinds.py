"""Symbol kind classification into code-type labels."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from contract.artifacts import UNKNOWN_CODE_TYPE
from parse.scip_index import SymbolKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEFAULT_CODE_TYPES: dict[SymbolKind, str] = {
    SymbolKind.AbstractMethod: "Abstract Method",
    SymbolKind.Array: "Array",
    SymbolKind.Class: "Class",
    SymbolKind.Constant: "Constant",
    SymbolKind.Enum: "Enum",
    SymbolKind.Error: "Error",
    SymbolKind.Function: "Function",
    SymbolKind.Instance: "Instance",
    SymbolKind.Interface: "Interface",
    SymbolKind.Library: "Library",
    SymbolKind.Macro: "Macro",
    SymbolKind.Method: "Method",
    SymbolKind.MethodAlias: "Method Alias",
    SymbolKind.Module: "Module",
    SymbolKind.Object: "Object",
    SymbolKind.Package: "Package",
    SymbolKind.Signature: "Signature",
    SymbolKind.StaticVariable: "Static Variable",
    SymbolKind.Struct: "Struct",
    SymbolKind.Trait: "Trait",
    SymbolKind.TraitMethod: "Trait Method",
    SymbolKind.Type: "Type",
    SymbolKind.TypeAlias: "Type Alias",
    SymbolKind.TypeClass: "Type Class",
    SymbolKind.TypeClassMethod: "Type Class Method",
    SymbolKind.Union: "Union",
}

_LABEL_OVERRIDES: dict[SymbolKind, str] = {
    SymbolKind.Lang: "Language",
}

_WORD_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def kind_label(kind: SymbolKind) -> str:
    """Return the display label for a SCIP kind (``StaticMethod`` -> ``Static Method``)."""
    if kind in DEFAULT_CODE_TYPES:
        return DEFAULT_CODE_TYPES[kind]
    if kind in _LABEL_OVERRIDES:
        return _LABEL_OVERRIDES[kind]
    return _WORD_BOUNDARY.sub(" ", kind.name)


def build_code_types(enabled: Iterable[str] = ()) -> dict[int, str]:
    """Return the recognized kind table, extended with ``enabled`` kind names."""
    table: dict[int, str] = {
        int(kind): label for kind, label in DEFAULT_CODE_TYPES.items()
    }
    for name in enabled:
        kind = SymbolKind[name]
        table[int(kind)] = kind_label(kind)
    return table


def classify_kind(kind: int, code_types: Mapping[int, str] | None = None) -> str:
    """Map a SCIP kind tag to its code-type label.

    Tags outside the recognized table map to ``UNKNOWN_CODE_TYPE``; filtering
    those out is up to the caller.
    """
    table = DEFAULT_CODE_TYPES if code_types is None else code_types
    return table.get(kind, UNKNOWN_CODE_TYPE)


__all__ = [
    "DEFAULT_CODE_TYPES",
    "build_code_types",
    "classify_kind",
    "kind_label",
]
