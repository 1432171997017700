"""SCIP index and symbol parsing for scipmap."""

from parse.scip_index import (
    ROLE_DEFINITION,
    IndexLoadError,
    SymbolKind,
    message_class,
    parse_index,
    read_scip_index,
)
from parse.symbol_ids import (
    Descriptor,
    ParsedSymbol,
    SymbolParseError,
    display_name,
    impl_struct_name,
    module_token,
    parse_symbol,
)

__all__ = [
    "ROLE_DEFINITION",
    "Descriptor",
    "IndexLoadError",
    "ParsedSymbol",
    "SymbolKind",
    "SymbolParseError",
    "display_name",
    "impl_struct_name",
    "message_class",
    "module_token",
    "parse_index",
    "parse_symbol",
    "read_scip_index",
]
