"""Model namespace for scipmap artifact schemas."""

from artifacts.models.artifacts.elements import CodeElement

__all__ = ["CodeElement"]
