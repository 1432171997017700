"""Code element models for the structure artifact.

This module contains the model for one flattened symbol record of
``structure.json``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CodeElement(BaseModel):
    """A code element extracted from a SCIP index."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    signature: str
    code_type: str
    docstring: str
    line: int = Field(description="1-based start line (same as line_from)")
    line_from: int
    line_to: int
    context: dict[str, str] = Field(default_factory=dict)


__all__ = ["CodeElement"]
