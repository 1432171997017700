"""Validation helpers for the structure artifact."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import orjson
from pydantic import ValidationError

from contract.artifacts import (
    OPTIONAL_CONTEXT_KEYS,
    REQUIRED_CONTEXT_KEYS,
    UNKNOWN_CODE_TYPE,
)
from contract.models import CodeElement

if TYPE_CHECKING:
    from pathlib import Path

ARTIFACT_NAME = "structure"
KNOWN_CONTEXT_KEYS = REQUIRED_CONTEXT_KEYS | OPTIONAL_CONTEXT_KEYS


@dataclass(frozen=True)
class ValidationMessage:
    artifact: str
    path: Path
    message: str
    index: int | None = None

    def location(self) -> str:
        if self.index is None:
            return str(self.path)
        return f"{self.path}[{self.index}]"

    def to_dict(self) -> dict[str, object]:
        return {
            "artifact": self.artifact,
            "path": str(self.path),
            "index": self.index,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    element_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_structure(path: Path) -> ValidationResult:
    """Validate a structure.json file against the output contract."""
    result = ValidationResult()

    if not path.exists():
        result.errors.append(
            ValidationMessage(
                artifact=ARTIFACT_NAME,
                path=path,
                message="Structure file does not exist.",
            )
        )
        return result

    if not path.is_file():
        result.errors.append(
            ValidationMessage(
                artifact=ARTIFACT_NAME,
                path=path,
                message="Structure path is not a file.",
            )
        )
        return result

    try:
        raw = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.errors.append(
            ValidationMessage(
                artifact=ARTIFACT_NAME,
                path=path,
                message=f"Invalid JSON: {exc}.",
            )
        )
        return result

    if not isinstance(raw, list):
        result.errors.append(
            ValidationMessage(
                artifact=ARTIFACT_NAME,
                path=path,
                message="Expected JSON array of code elements.",
            )
        )
        return result

    for index, data in enumerate(raw):
        try:
            element = CodeElement.model_validate(data)
        except ValidationError as exc:
            result.errors.append(
                ValidationMessage(
                    artifact=ARTIFACT_NAME,
                    path=path,
                    index=index,
                    message=f"Schema validation failed: {exc}.",
                )
            )
            continue

        result.element_count += 1
        for message in _element_problems(element):
            result.errors.append(
                ValidationMessage(
                    artifact=ARTIFACT_NAME,
                    path=path,
                    index=index,
                    message=message,
                )
            )
        for key in sorted(set(element.context) - KNOWN_CONTEXT_KEYS):
            result.warnings.append(
                ValidationMessage(
                    artifact=ARTIFACT_NAME,
                    path=path,
                    index=index,
                    message=f"Unrecognized context key '{key}'.",
                )
            )

    return result


def _element_problems(element: CodeElement) -> list[str]:
    problems: list[str] = []

    if element.code_type == UNKNOWN_CODE_TYPE:
        problems.append(f"Element has excluded code_type '{UNKNOWN_CODE_TYPE}'.")

    if element.line != element.line_from:
        problems.append(
            f"line ({element.line}) differs from line_from ({element.line_from})."
        )

    if element.line_from < 1:
        problems.append(f"line_from ({element.line_from}) is not 1-based.")

    if element.line_to < element.line_from:
        problems.append(
            f"line_to ({element.line_to}) is before line_from ({element.line_from})."
        )

    missing = sorted(REQUIRED_CONTEXT_KEYS - set(element.context))
    if missing:
        problems.append(f"Context is missing keys: {', '.join(missing)}.")

    return problems


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_structure",
]
