from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.generators import ElementsGenerator
from artifacts.utils import OutputWriteError, _write_json_array
from extract.source_cache import SourceTextCache
from parse.scip_index import read_scip_index
from rules.config import load_config
from rules.kinds import build_code_types

if TYPE_CHECKING:
    from rules.config import ScipMapConfig

logger = logging.getLogger(__name__)


def generate_structure(
    *,
    input_path: Path,
    output_path: Path,
    source_root: Path | None = None,
    config: ScipMapConfig | None = None,
) -> dict[str, object]:
    """Convert a SCIP index into a structure.json file.

    Args:
        input_path: SCIP index to read
        output_path: JSON file to write (parent directories are created)
        source_root: Directory document paths are resolved against; defaults
            to the config's source_root
        config: Optional configuration; loaded from the working directory
            when omitted

    Returns:
        Dictionary with the element count and the output path.

    Raises:
        IndexLoadError: If the index cannot be read or decoded.
        OutputWriteError: If the output file cannot be written.
    """
    if config is None:
        config = load_config(Path.cwd())

    if source_root is None:
        source_root = Path(config.source_root)

    index = read_scip_index(input_path, scip_pb2_module=config.scip_pb2_module)
    logger.debug("Loaded %d documents from %s", len(index.documents), input_path)

    generator = ElementsGenerator(
        cache=SourceTextCache(source_root),
        code_types=build_code_types(config.kinds.enable),
    )
    elements = generator.generate(index)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"failed to create JSON output file {output_path}: {exc}"
        raise OutputWriteError(msg) from exc
    _write_json_array(output_path, elements)

    return {
        "element_count": len(elements),
        "output": str(output_path),
    }
