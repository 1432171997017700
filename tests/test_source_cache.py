from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from extract.source_cache import SourceTextCache, SourceUnavailableError
from scip_builders import make_document

if TYPE_CHECKING:
    from pathlib import Path


def test_embedded_text_is_returned_and_cached(tmp_path: Path) -> None:
    cache = SourceTextCache(tmp_path)
    document = make_document("pkg/a.go", text="package a\n")

    assert cache.get_text(document) == "package a\n"
    assert "pkg/a.go" in cache
    assert len(cache) == 1


def test_text_is_read_relative_to_source_root(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "b.go").write_text("package b\nfunc B() {}\n", encoding="utf-8")
    cache = SourceTextCache(tmp_path)

    text = cache.get_text(make_document("pkg/b.go"))

    assert text == "package b\nfunc B() {}\n"


def test_second_lookup_is_served_from_cache(tmp_path: Path) -> None:
    source = tmp_path / "c.go"
    source.write_text("package c\n", encoding="utf-8")
    cache = SourceTextCache(tmp_path)
    document = make_document("c.go")

    first = cache.get_text(document)
    source.unlink()

    assert cache.get_text(document) == first


def test_cached_path_wins_over_later_embedded_text(tmp_path: Path) -> None:
    cache = SourceTextCache(tmp_path)
    cache.get_text(make_document("d.go", text="first"))

    assert cache.get_text(make_document("d.go", text="second")) == "first"


def test_missing_file_failure_is_remembered(tmp_path: Path) -> None:
    cache = SourceTextCache(tmp_path)
    document = make_document("missing.go")

    with pytest.raises(SourceUnavailableError, match="unable to read file"):
        cache.get_text(document)
    assert "missing.go" not in cache
    assert cache.is_unreadable("missing.go")

    (tmp_path / "missing.go").write_text("package m\n", encoding="utf-8")
    with pytest.raises(SourceUnavailableError, match="unable to read file"):
        cache.get_text(document)


def test_invalid_utf8_is_replaced(tmp_path: Path) -> None:
    (tmp_path / "bin.go").write_bytes(b"ok \xff\n")
    cache = SourceTextCache(tmp_path)

    assert cache.get_text(make_document("bin.go")) == "ok \ufffd\n"


def test_get_lines_keeps_trailing_empty_line_and_carriage_returns(
    tmp_path: Path,
) -> None:
    cache = SourceTextCache(tmp_path)
    document = make_document("e.go", text="a\r\nb\n")

    assert cache.get_lines(document) == ["a\r", "b", ""]
