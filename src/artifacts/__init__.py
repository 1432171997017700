"""Structure generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import ScipMapConfig


def generate_structure(
    *,
    input_path: Path,
    output_path: Path,
    source_root: Path | None = None,
    config: ScipMapConfig | None = None,
) -> dict[str, object]:
    """Generate the structure artifact via lazy import to avoid package import cycles."""
    from artifacts.write import generate_structure as _generate_structure

    return _generate_structure(
        input_path=input_path,
        output_path=output_path,
        source_root=source_root,
        config=config,
    )


__all__ = ["generate_structure"]
