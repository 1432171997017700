"""Utility functions for artifact generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class OutputWriteError(Exception):
    """Raised when the output artifact cannot be created or written."""


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization."""
    from dataclasses import asdict, is_dataclass

    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def _dump_json_array(records: Sequence[object]) -> bytes:
    """Serialize records as an indented JSON array.

    Keys keep model field order; characters such as ``<`` and ``&`` are not
    escaped.
    """
    payload = [_to_dict(rec) for rec in records]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2) + b"\n"


def _write_json_array(path: Path, records: Sequence[object]) -> None:
    data = _dump_json_array(records)
    try:
        path.write_bytes(data)
    except OSError as exc:
        msg = f"failed to write JSON output file {path}: {exc}"
        raise OutputWriteError(msg) from exc

