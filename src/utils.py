"""Shared utilities for scipmap."""

from __future__ import annotations

from pathlib import PurePosixPath


def split_lines(text: str) -> list[str]:
    """Split source text into lines on ``\\n`` only.

    Carriage returns stay attached to their line, and text ending with a
    newline yields a trailing empty line, so line indices match the raw file.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a', 'b', '']
        >>> split_lines("")
        ['']
    """
    return text.split("\n")


def base_name(relative_path: str) -> str:
    """Return the last element of a slash-separated path.

    Examples:
        >>> base_name("src/pkg/mod.go")
        'mod.go'
        >>> base_name("src/pkg/")
        'pkg'
        >>> base_name("")
        '.'
    """
    name = PurePosixPath(relative_path.replace("\\", "/")).name
    return name or "."
