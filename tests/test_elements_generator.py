from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from artifacts.generators.elements import ElementsGenerator
from contract.artifacts import UNKNOWN_CODE_TYPE
from extract.source_cache import SourceTextCache
from parse.scip_index import ROLE_READ_ACCESS, SymbolKind
from rules.kinds import build_code_types
from scip_builders import make_document, make_index, make_occurrence, make_symbol

if TYPE_CHECKING:
    from pathlib import Path

FUNC_TEXT = "func f() {\n  return 1\n}"
F = "scip-go gomod example v1 `example/pkg`/f()."
G = "scip-go gomod example v1 `example/pkg`/g()."
V = "scip-go gomod example v1 `example/pkg`/v."


def _generator(
    tmp_path: Path, code_types: dict[int, str] | None = None
) -> ElementsGenerator:
    return ElementsGenerator(cache=SourceTextCache(tmp_path), code_types=code_types)


def test_function_element_is_assembled(tmp_path: Path) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[
            make_symbol(
                F,
                SymbolKind.Function,
                documentation=["Returns one.", "Always."],
                signature="func f() int",
            )
        ],
        occurrences=[make_occurrence(F, [1, 5, 6])],
    )

    elements = _generator(tmp_path).generate(make_index(document))

    assert len(elements) == 1
    element = elements[0]
    assert element.name == "f"
    assert element.signature == "func f() int"
    assert element.code_type == "Function"
    assert element.docstring == "Returns one.\nAlways."
    assert (element.line, element.line_from, element.line_to) == (1, 1, 3)
    assert element.context == {
        "file_name": "f.go",
        "file_path": "pkg/f.go",
        "module": "v1",
        "snippet": FUNC_TEXT,
    }


def test_missing_signature_documentation_gives_empty_signature(
    tmp_path: Path,
) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5, 1, 6])],
    )

    (element,) = _generator(tmp_path).generate(make_index(document))

    assert element.signature == ""
    assert element.docstring == ""


def test_unknown_kinds_are_filtered_without_warnings(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(V, SymbolKind.Variable), make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5, 6])],
    )

    with caplog.at_level(logging.WARNING):
        elements = _generator(tmp_path).generate(make_index(document))

    assert [e.name for e in elements] == ["f"]
    assert all(e.code_type != UNKNOWN_CODE_TYPE for e in elements)
    assert V not in caplog.text


def test_enabled_kinds_are_emitted(tmp_path: Path) -> None:
    document = make_document(
        "pkg/f.go",
        text="var v = 1",
        symbols=[make_symbol(V, SymbolKind.Variable)],
        occurrences=[make_occurrence(V, [1, 4, 5])],
    )
    generator = _generator(tmp_path, code_types=build_code_types(["Variable"]))

    (element,) = generator.generate(make_index(document))

    assert element.code_type == "Variable"
    assert (element.line_from, element.line_to) == (1, 1)


def test_symbol_without_definition_is_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(G)],
        occurrences=[make_occurrence(G, [1, 5, 6], roles=ROLE_READ_ACCESS)],
    )

    with caplog.at_level(logging.WARNING):
        elements = _generator(tmp_path).generate(make_index(document))

    assert elements == []
    assert "no definition occurrence" in caplog.text


def test_symbol_with_short_range_is_skipped(tmp_path: Path) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5])],
    )

    assert _generator(tmp_path).generate(make_index(document)) == []


def test_symbol_past_end_of_file_is_skipped(tmp_path: Path) -> None:
    document = make_document(
        "pkg/f.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [40, 0, 40, 1])],
    )

    assert _generator(tmp_path).generate(make_index(document)) == []


def test_unreadable_source_still_emits_element_without_snippet(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    document = make_document(
        "pkg/missing.go",
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [4, 5, 9, 1])],
    )

    with caplog.at_level(logging.WARNING):
        (element,) = _generator(tmp_path).generate(make_index(document))

    assert (element.line, element.line_from, element.line_to) == (4, 4, 9)
    assert "snippet" not in element.context
    assert element.context["file_name"] == "missing.go"
    assert "Could not extract snippet" in caplog.text


def test_source_is_read_from_disk_when_not_embedded(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "f.go").write_text(
        "package pkg\n\n" + FUNC_TEXT + "\n", encoding="utf-8"
    )
    document = make_document(
        "pkg/f.go",
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [3, 5, 6])],
    )

    (element,) = _generator(tmp_path).generate(make_index(document))

    assert (element.line_from, element.line_to) == (3, 5)
    assert element.context["snippet"] == FUNC_TEXT


def test_elements_follow_document_then_symbol_order(tmp_path: Path) -> None:
    first = make_document(
        "b.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(G), make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5, 6]), make_occurrence(G, [1, 5, 6])],
    )
    second = make_document(
        "a.go",
        text=FUNC_TEXT,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5, 6])],
    )

    elements = _generator(tmp_path).generate(make_index(first, second))

    assert [(e.context["file_path"], e.name) for e in elements] == [
        ("b.go", "g"),
        ("b.go", "f"),
        ("a.go", "f"),
    ]


def test_multi_line_range_skips_brace_scan(tmp_path: Path) -> None:
    text = "func f() {\n  a()\n  b()\n}\n"
    document = make_document(
        "pkg/f.go",
        text=text,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 0, 2, 5])],
    )

    (element,) = _generator(tmp_path).generate(make_index(document))

    assert (element.line_from, element.line_to) == (1, 2)
    assert element.context["snippet"] == "func f() {\n  a()"


def test_brace_free_file_keeps_single_line_span(tmp_path: Path) -> None:
    text = "\n".join(f"l{n}" for n in range(1, 11))
    document = make_document(
        "pkg/consts.go",
        text=text,
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [5, 0, 5, 10])],
    )

    (element,) = _generator(tmp_path).generate(make_index(document))

    assert (element.line, element.line_from, element.line_to) == (5, 5, 5)
    assert element.context["snippet"] == "l5"


def test_unreadable_source_is_warned_about_once_per_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    document = make_document(
        "pkg/missing.go",
        symbols=[make_symbol(F), make_symbol(G)],
        occurrences=[make_occurrence(F, [1, 5, 6]), make_occurrence(G, [3, 5, 6])],
    )

    with caplog.at_level(logging.WARNING):
        elements = _generator(tmp_path).generate(make_index(document))

    assert [e.name for e in elements] == ["f", "g"]
    warnings = [
        r for r in caplog.records if "Could not extract snippet" in r.getMessage()
    ]
    assert len(warnings) == 1
