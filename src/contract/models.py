"""Structure artifact models exposed at the output contract boundary."""

from artifacts.models.artifacts.elements import CodeElement

__all__ = ["CodeElement"]
