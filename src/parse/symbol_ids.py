"""SCIP symbol identifier parsing.

A global symbol reads ``<scheme> <manager> <package-name> <version>
<descriptors>``, where spaces inside the package fields are escaped by
doubling them and ``.`` stands for an empty field. Local symbols read
``local <id>``.

Besides the grammar-level parser, this module holds the two token heuristics
used for element context (``module_token`` and ``impl_struct_name``). Both
split on single spaces and index by position; they are kept as-is so
existing outputs stay stable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

DescriptorSuffix = Literal[
    "namespace",
    "type",
    "term",
    "method",
    "type_parameter",
    "parameter",
    "meta",
    "macro",
]

IMPL_MARKER = "impl"
MODULE_TOKEN_INDEX = 3

# Descriptor separators and trailing "(...)" / "[...]" groups in unparsed symbols.
_FALLBACK_SEPARATORS = re.compile(r"[/#.:!]")
_FALLBACK_TRAILER = re.compile(r"(\([^()]*\)|\[[^\[\]]*\])+$")

_SUFFIXES: dict[str, DescriptorSuffix] = {
    "/": "namespace",
    "#": "type",
    ".": "term",
    ":": "meta",
    "!": "macro",
}


class SymbolParseError(ValueError):
    """Raised when a symbol string does not follow the SCIP grammar."""


@dataclass(frozen=True)
class Descriptor:
    name: str
    suffix: DescriptorSuffix
    disambiguator: str = ""


@dataclass(frozen=True)
class ParsedSymbol:
    """Typed view of a SCIP symbol identifier."""

    scheme: str
    manager: str = ""
    package_name: str = ""
    package_version: str = ""
    descriptors: tuple[Descriptor, ...] = ()
    local_id: str | None = None

    @property
    def is_local(self) -> bool:
        return self.local_id is not None

    @property
    def name(self) -> str:
        if self.local_id is not None:
            return self.local_id
        if self.descriptors:
            return self.descriptors[-1].name
        return ""


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_+-$"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            msg = (
                f"expected {ch!r} at offset {self.pos} in symbol {self.text!r}, "
                f"found {self.peek()!r}"
            )
            raise SymbolParseError(msg)
        self.pos += 1

    def read_space_terminated(self) -> str:
        chars: list[str] = []
        while not self.at_end():
            ch = self.text[self.pos]
            if ch == " ":
                if self.text[self.pos + 1 : self.pos + 2] == " ":
                    chars.append(" ")
                    self.pos += 2
                    continue
                self.pos += 1
                break
            chars.append(ch)
            self.pos += 1
        else:
            msg = f"unexpected end of symbol {self.text!r} in package fields"
            raise SymbolParseError(msg)
        value = "".join(chars)
        return "" if value == "." else value

    def read_name(self) -> str:
        if self.peek() == "`":
            return self._read_escaped_name()
        start = self.pos
        while not self.at_end() and _is_identifier_char(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            msg = f"empty descriptor name at offset {start} in symbol {self.text!r}"
            raise SymbolParseError(msg)
        return self.text[start : self.pos]

    def _read_escaped_name(self) -> str:
        self.pos += 1
        chars: list[str] = []
        while not self.at_end():
            ch = self.text[self.pos]
            if ch == "`":
                if self.text[self.pos + 1 : self.pos + 2] == "`":
                    chars.append("`")
                    self.pos += 2
                    continue
                self.pos += 1
                return "".join(chars)
            chars.append(ch)
            self.pos += 1
        msg = f"unterminated escaped name in symbol {self.text!r}"
        raise SymbolParseError(msg)

    def read_descriptor(self) -> Descriptor:
        ch = self.peek()
        if ch == "[":
            self.pos += 1
            name = self.read_name()
            self.expect("]")
            return Descriptor(name=name, suffix="type_parameter")
        if ch == "(":
            self.pos += 1
            name = self.read_name()
            self.expect(")")
            return Descriptor(name=name, suffix="parameter")

        name = self.read_name()
        suffix_char = self.peek()
        if suffix_char in _SUFFIXES:
            self.pos += 1
            return Descriptor(name=name, suffix=_SUFFIXES[suffix_char])
        if suffix_char == "(":
            self.pos += 1
            start = self.pos
            while not self.at_end() and _is_identifier_char(self.text[self.pos]):
                self.pos += 1
            disambiguator = self.text[start : self.pos]
            self.expect(")")
            self.expect(".")
            return Descriptor(
                name=name, suffix="method", disambiguator=disambiguator
            )

        msg = f"unknown descriptor suffix {suffix_char!r} in symbol {self.text!r}"
        raise SymbolParseError(msg)


def parse_symbol(symbol: str) -> ParsedSymbol:
    """Parse a SCIP symbol string into a ParsedSymbol.

    Raises:
        SymbolParseError: If the string is empty or malformed.
    """
    if not symbol:
        msg = "empty symbol"
        raise SymbolParseError(msg)

    if symbol.startswith("local "):
        return ParsedSymbol(scheme="local", local_id=symbol[len("local ") :])

    reader = _Reader(symbol)
    scheme = reader.read_space_terminated()
    manager = reader.read_space_terminated()
    package_name = reader.read_space_terminated()
    package_version = reader.read_space_terminated()

    descriptors: list[Descriptor] = []
    while not reader.at_end():
        descriptors.append(reader.read_descriptor())

    return ParsedSymbol(
        scheme=scheme,
        manager=manager,
        package_name=package_name,
        package_version=package_version,
        descriptors=tuple(descriptors),
    )


def symbol_tokens(symbol: str) -> list[str]:
    """Split a symbol on single spaces, without honoring escapes."""
    return symbol.split(" ")


def module_token(symbol: str) -> str | None:
    """Return the fourth space-delimited token, if there are more than three."""
    tokens = symbol_tokens(symbol)
    if len(tokens) > MODULE_TOKEN_INDEX:
        return tokens[MODULE_TOKEN_INDEX]
    return None


def impl_struct_name(symbol: str) -> str | None:
    """Return the token following the first non-final ``impl`` token."""
    tokens = symbol_tokens(symbol)
    for i, token in enumerate(tokens):
        if token == IMPL_MARKER and i + 1 < len(tokens):
            return tokens[i + 1]
    return None


def display_name(symbol: str) -> str:
    """Return the human-readable name of a symbol.

    Uses the last descriptor of the parsed symbol. Strings the parser rejects
    fall back to the last non-empty descriptor segment of the last space
    token, without method parentheses or type parameter brackets.
    """
    try:
        parsed = parse_symbol(symbol)
    except SymbolParseError:
        parsed = None
    if parsed is not None and parsed.name:
        return parsed.name

    tokens = symbol_tokens(symbol)
    if len(tokens) > 1:
        segments = [
            _FALLBACK_TRAILER.sub("", segment)
            for segment in _FALLBACK_SEPARATORS.split(tokens[-1])
        ]
        segments = [segment for segment in segments if segment]
        if segments:
            return segments[-1]
    return symbol


__all__ = [
    "Descriptor",
    "ParsedSymbol",
    "SymbolParseError",
    "display_name",
    "impl_struct_name",
    "module_token",
    "parse_symbol",
    "symbol_tokens",
]
