"""Artifact generators for scipmap."""

from artifacts.generators.elements import ElementsGenerator

__all__ = ["ElementsGenerator"]
