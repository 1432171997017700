from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from verify.verify import DeterminismResult, verify_determinism

from artifacts.write import generate_structure
from rules.config import ScipMapConfig
from scip_builders import make_document, make_occurrence, make_symbol, write_index

if TYPE_CHECKING:
    from pathlib import Path

F = "scip-go gomod example v1 `example/pkg`/f()."


def _write_minimal_index(root: Path) -> Path:
    document = make_document(
        "pkg/f.go",
        text="func f() {\n}\n",
        symbols=[make_symbol(F)],
        occurrences=[make_occurrence(F, [1, 5, 6])],
    )
    return write_index(root / "index.scip", document)


def test_verify_determinism_requires_output_file(tmp_path: Path) -> None:
    index_path = _write_minimal_index(tmp_path)

    with pytest.raises(FileNotFoundError, match="Structure file does not exist"):
        verify_determinism(
            input_path=index_path,
            output_path=tmp_path / "missing.json",
            config=ScipMapConfig(),
        )


def test_verify_determinism_rejects_directory_output(tmp_path: Path) -> None:
    index_path = _write_minimal_index(tmp_path)
    output_dir = tmp_path / "structure.json"
    output_dir.mkdir()

    with pytest.raises(IsADirectoryError):
        verify_determinism(
            input_path=index_path,
            output_path=output_dir,
            config=ScipMapConfig(),
        )


def test_verify_determinism_round_trip(tmp_path: Path) -> None:
    index_path = _write_minimal_index(tmp_path)
    output_path = tmp_path / "structure.json"
    generate_structure(
        input_path=index_path,
        output_path=output_path,
        source_root=tmp_path,
        config=ScipMapConfig(),
    )

    result = verify_determinism(
        input_path=index_path,
        output_path=output_path,
        source_root=tmp_path,
        config=ScipMapConfig(),
    )

    assert result == DeterminismResult(
        ok=True, output=str(output_path), element_count=1
    )


def test_verify_determinism_reports_mismatch(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    output_path = tmp_path / "structure.json"
    output_path.write_text("[]\n", encoding="utf-8")

    def _fake_generate_structure(
        *,
        input_path: Path,
        output_path: Path,
        source_root: Path | None = None,
        config: ScipMapConfig | None = None,
    ) -> dict[str, object]:
        output_path.write_text('[\n  {"name": "f"}\n]\n', encoding="utf-8")
        return {"element_count": 1, "output": str(output_path)}

    monkeypatch.setattr(
        "verify.verify.generate_structure",
        _fake_generate_structure,
    )

    result = verify_determinism(
        input_path=tmp_path / "index.scip",
        output_path=output_path,
    )

    assert result == DeterminismResult(
        ok=False, output=str(output_path), element_count=1
    )
