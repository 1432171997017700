"""Code element generator: flattens a SCIP index into CodeElements."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from artifacts.models.artifacts.elements import CodeElement
from contract.artifacts import UNKNOWN_CODE_TYPE
from extract.context import build_context
from extract.occurrences import decode_range, select_definition
from extract.ranges import RangeFailure, resolve_range
from extract.snippets import extract_snippet
from extract.source_cache import SourceTextCache, SourceUnavailableError
from parse.symbol_ids import display_name
from rules.kinds import classify_kind

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def _signature(symbol: Any) -> str:
    if symbol.HasField("signature_documentation"):
        return symbol.signature_documentation.text
    return ""


def _docstring(symbol: Any) -> str:
    return "\n".join(symbol.documentation)


class ElementsGenerator:
    """Builds CodeElement records from the documents of a SCIP index."""

    def __init__(
        self,
        cache: SourceTextCache | None = None,
        code_types: Mapping[int, str] | None = None,
    ) -> None:
        self.cache = cache if cache is not None else SourceTextCache()
        self.code_types = code_types

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "elements"

    def generate(self, index: Any) -> list[CodeElement]:
        """Generate elements for every qualifying symbol, in index order."""
        elements: list[CodeElement] = []
        skipped = 0
        for document in index.documents:
            for symbol in document.symbols:
                element = self.process_symbol(document, symbol)
                if element is None:
                    skipped += 1
                    continue
                elements.append(element)

        logger.debug(
            "%s: %d elements generated, %d symbols skipped",
            self.name,
            len(elements),
            skipped,
        )
        return elements

    def process_symbol(self, document: Any, symbol: Any) -> CodeElement | None:
        """Build the element for one symbol, or None when it is skipped."""
        code_type = classify_kind(symbol.kind, self.code_types)
        if code_type == UNKNOWN_CODE_TYPE:
            return None

        logger.debug(
            "Processing symbol: %s in file: %s", symbol.symbol, document.relative_path
        )

        occurrence = select_definition(document, symbol)
        if occurrence is None:
            logger.warning(
                "Skipping symbol %s: no definition occurrence in %s",
                symbol.symbol,
                document.relative_path,
            )
            return None
        decoded = decode_range(occurrence)

        reported = self.cache.is_unreadable(document.relative_path)
        try:
            lines = self.cache.get_lines(document)
        except SourceUnavailableError as exc:
            if decoded is None or decoded.is_unset:
                logger.warning(
                    "Skipping symbol %s: definition occurrence has no usable range",
                    symbol.symbol,
                )
                return None
            log = logger.debug if reported else logger.warning
            log("Could not extract snippet for symbol %s: %s", symbol.symbol, exc)
            return self._element(
                document,
                symbol,
                code_type,
                line_from=max(decoded.start_line, 1),
                line_to=max(decoded.end_line, decoded.start_line, 1),
            )

        resolved = resolve_range(decoded, lines)
        if isinstance(resolved, RangeFailure):
            logger.warning(
                "Skipping symbol %s (%s): %s",
                symbol.symbol,
                resolved.reason.value,
                resolved.message,
            )
            return None

        for adjustment in resolved.adjustments:
            logger.warning("Symbol %s: %s", symbol.symbol, adjustment)

        snippet = extract_snippet(lines, resolved.start, resolved.end)
        return self._element(
            document,
            symbol,
            code_type,
            line_from=resolved.line_from,
            line_to=resolved.line_to,
            snippet=snippet,
        )

    def _element(
        self,
        document: Any,
        symbol: Any,
        code_type: str,
        *,
        line_from: int,
        line_to: int,
        snippet: str = "",
    ) -> CodeElement:
        return CodeElement(
            name=display_name(symbol.symbol),
            signature=_signature(symbol),
            code_type=code_type,
            docstring=_docstring(symbol),
            line=line_from,
            line_from=line_from,
            line_to=line_to,
            context=build_context(document, symbol, snippet),
        )


__all__ = ["ElementsGenerator"]
