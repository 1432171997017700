"""Per-run cache of source file text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from utils import split_lines

logger = logging.getLogger(__name__)


class SourceUnavailableError(Exception):
    """Raised when a document's source text cannot be obtained."""


class SourceTextCache:
    """Lazily loads and memoizes the full text of each indexed document.

    Entries are keyed by the document's relative path and live for the whole
    run. There is no staleness check: a run works on one snapshot of the
    source tree.
    """

    def __init__(self, source_root: Path | None = None) -> None:
        self.source_root = source_root if source_root is not None else Path()
        self._texts: dict[str, str] = {}
        self._failures: dict[str, str] = {}

    def __contains__(self, relative_path: object) -> bool:
        return relative_path in self._texts

    def __len__(self) -> int:
        return len(self._texts)

    def get_text(self, document: Any) -> str:
        """Return the full text of ``document``.

        Embedded document text wins over disk. A failed read is remembered
        for the rest of the run and is not retried.

        Raises:
            SourceUnavailableError: If the file cannot be read.
        """
        relative_path: str = document.relative_path
        cached = self._texts.get(relative_path)
        if cached is not None:
            return cached

        if document.text:
            self._texts[relative_path] = document.text
            return document.text

        failure = self._failures.get(relative_path)
        if failure is not None:
            raise SourceUnavailableError(failure)

        abs_path = (self.source_root / relative_path).resolve()
        try:
            text = abs_path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            msg = f"unable to read file {abs_path}: {exc}"
            self._failures[relative_path] = msg
            raise SourceUnavailableError(msg) from exc

        logger.debug("Loaded source text for %s from %s", relative_path, abs_path)
        self._texts[relative_path] = text
        return text

    def is_unreadable(self, relative_path: str) -> bool:
        """Return True if reading ``relative_path`` has already failed."""
        return relative_path in self._failures

    def get_lines(self, document: Any) -> list[str]:
        """Return the document text split into lines."""
        return split_lines(self.get_text(document))


__all__ = ["SourceTextCache", "SourceUnavailableError"]
