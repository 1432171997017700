"""Determinism verification for scipmap output."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.write import generate_structure

if TYPE_CHECKING:
    from rules.config import ScipMapConfig


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    output: str
    element_count: int = 0


def verify_determinism(
    *,
    input_path: Path,
    output_path: Path,
    source_root: Path | None = None,
    config: ScipMapConfig | None = None,
) -> DeterminismResult:
    """Verify that an existing structure file is reproducible.

    Regenerates the structure from the same index and source files into a
    temporary directory and compares it byte-for-byte against
    ``output_path``.

    Args:
        input_path: SCIP index the output was generated from.
        output_path: Existing structure.json to verify.
        source_root: Directory document paths are resolved against.
        config: Optional configuration used for regeneration.

    Returns:
        DeterminismResult with ok status and the regenerated element count.

    Raises:
        FileNotFoundError: If output_path does not exist.
        IsADirectoryError: If output_path is a directory.
    """
    if not output_path.exists():
        msg = f"Structure file does not exist: {output_path}"
        raise FileNotFoundError(msg)
    if output_path.is_dir():
        msg = f"Structure path is a directory: {output_path}"
        raise IsADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        regenerated_path = Path(temp_dir) / output_path.name
        summary = generate_structure(
            input_path=input_path,
            output_path=regenerated_path,
            source_root=source_root,
            config=config,
        )
        ok = filecmp.cmp(output_path, regenerated_path, shallow=False)

    element_count = summary.get("element_count", 0)
    return DeterminismResult(
        ok=ok,
        output=str(output_path),
        element_count=element_count if isinstance(element_count, int) else 0,
    )
