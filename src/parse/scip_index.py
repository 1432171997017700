"""SCIP index decoding for scipmap.

The index is a protobuf ``scip.Index`` message. Message classes are built at
runtime from a descriptor covering the subset of the SCIP schema this tool
reads; unknown fields are skipped by the protobuf runtime. Callers that ship
their own generated bindings can pass the module name instead.
"""

from __future__ import annotations

import importlib
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

_FIELD = descriptor_pb2.FieldDescriptorProto

ROLE_DEFINITION = 0x01
ROLE_IMPORT = 0x02
ROLE_WRITE_ACCESS = 0x04
ROLE_READ_ACCESS = 0x08
ROLE_GENERATED = 0x10
ROLE_TEST = 0x20
ROLE_FORWARD_DEFINITION = 0x40


class SymbolKind(IntEnum):
    """``scip.SymbolInformation.Kind`` tags."""

    UnspecifiedKind = 0
    Array = 1
    Assertion = 2
    AssociatedType = 3
    Attribute = 4
    Axiom = 5
    Boolean = 6
    Class = 7
    Constant = 8
    Constructor = 9
    DataFamily = 10
    Enum = 11
    EnumMember = 12
    Event = 13
    Fact = 14
    Field = 15
    File = 16
    Function = 17
    Getter = 18
    Grammar = 19
    Instance = 20
    Interface = 21
    Key = 22
    Lang = 23
    Lemma = 24
    Macro = 25
    Method = 26
    MethodReceiver = 27
    Message = 28
    Module = 29
    Namespace = 30
    Null = 31
    Number = 32
    Object = 33
    Operator = 34
    Package = 35
    PackageObject = 36
    Parameter = 37
    ParameterLabel = 38
    Pattern = 39
    Predicate = 40
    Property = 41
    Protocol = 42
    Quasiquoter = 43
    SelfParameter = 44
    Setter = 45
    Signature = 46
    Subscript = 47
    String = 48
    Struct = 49
    Tactic = 50
    Theorem = 51
    ThisParameter = 52
    Trait = 53
    Type = 54
    TypeAlias = 55
    TypeClass = 56
    TypeFamily = 57
    TypeParameter = 58
    Value = 59
    Variable = 60
    Contract = 62
    Error = 63
    Library = 64
    Modifier = 65
    AbstractMethod = 66
    MethodSpecification = 67
    ProtocolMethod = 68
    PureVirtualMethod = 69
    TraitMethod = 70
    TypeClassMethod = 71
    Accessor = 72
    Delegate = 73
    MethodAlias = 74
    SingletonClass = 75
    SingletonMethod = 76
    StaticDataMember = 77
    StaticEvent = 78
    StaticField = 79
    StaticMethod = 80
    StaticProperty = 81
    StaticVariable = 82
    Union = 83
    Extension = 84
    Mixin = 85
    Concept = 86


class IndexLoadError(Exception):
    """Raised when the SCIP index cannot be read or decoded."""


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    *,
    repeated: bool = False,
    type_name: str | None = None,
) -> None:
    label = _FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL
    field = message.field.add(name=name, number=number, type=field_type, label=label)
    if type_name is not None:
        field.type_name = type_name


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="scipmap/scip.proto",
        package="scip",
        syntax="proto3",
    )

    index = file_proto.message_type.add(name="Index")
    _add_field(
        index, "documents", 2, _FIELD.TYPE_MESSAGE,
        repeated=True, type_name=".scip.Document",
    )

    document = file_proto.message_type.add(name="Document")
    _add_field(document, "relative_path", 1, _FIELD.TYPE_STRING)
    _add_field(
        document, "occurrences", 2, _FIELD.TYPE_MESSAGE,
        repeated=True, type_name=".scip.Occurrence",
    )
    _add_field(
        document, "symbols", 3, _FIELD.TYPE_MESSAGE,
        repeated=True, type_name=".scip.SymbolInformation",
    )
    _add_field(document, "language", 4, _FIELD.TYPE_STRING)
    _add_field(document, "text", 5, _FIELD.TYPE_STRING)

    occurrence = file_proto.message_type.add(name="Occurrence")
    _add_field(occurrence, "range", 1, _FIELD.TYPE_INT32, repeated=True)
    _add_field(occurrence, "symbol", 2, _FIELD.TYPE_STRING)
    _add_field(occurrence, "symbol_roles", 3, _FIELD.TYPE_INT32)

    symbol = file_proto.message_type.add(name="SymbolInformation")
    _add_field(symbol, "symbol", 1, _FIELD.TYPE_STRING)
    _add_field(symbol, "documentation", 3, _FIELD.TYPE_STRING, repeated=True)
    # Enum on the wire is a varint; int32 keeps unrecognized tags intact.
    _add_field(symbol, "kind", 5, _FIELD.TYPE_INT32)
    _add_field(symbol, "display_name", 6, _FIELD.TYPE_STRING)
    _add_field(
        symbol, "signature_documentation", 7, _FIELD.TYPE_MESSAGE,
        type_name=".scip.Document",
    )

    return file_proto


_MESSAGES: dict[str, Any] | None = None


def _get_messages() -> dict[str, Any]:
    """Build and return the SCIP message classes, keyed by message name."""
    global _MESSAGES
    if _MESSAGES is None:
        pool = descriptor_pool.DescriptorPool()
        pool.AddSerializedFile(_build_file_descriptor().SerializeToString())
        _MESSAGES = {
            name: message_factory.GetMessageClass(
                pool.FindMessageTypeByName(f"scip.{name}")
            )
            for name in ("Index", "Document", "Occurrence", "SymbolInformation")
        }
    return _MESSAGES


def message_class(name: str) -> Any:
    """Return the built-in SCIP message class for ``name`` (e.g. ``"Index"``)."""
    return _get_messages()[name]


def _load_bindings(module_name: str) -> ModuleType:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Failed to import SCIP bindings module '{module_name}': {exc}"
        raise IndexLoadError(msg) from exc
    if not hasattr(module, "Index"):
        msg = f"SCIP bindings module '{module_name}' has no Index message"
        raise IndexLoadError(msg)
    return module


def parse_index(data: bytes, *, scip_pb2_module: str | None = None) -> Any:
    """Decode serialized SCIP bytes into an ``Index`` message."""
    if scip_pb2_module:
        index = _load_bindings(scip_pb2_module).Index()
    else:
        index = message_class("Index")()

    try:
        index.ParseFromString(data)
    except DecodeError as exc:
        msg = f"failed to unmarshal SCIP index: {exc}"
        raise IndexLoadError(msg) from exc
    return index


def read_scip_index(path: Path, *, scip_pb2_module: str | None = None) -> Any:
    """Read and decode the SCIP index at ``path``.

    Args:
        path: Location of the ``index.scip`` file.
        scip_pb2_module: Optional importable module with generated SCIP
            bindings to decode with instead of the built-in descriptor.

    Returns:
        The decoded ``Index`` message.

    Raises:
        IndexLoadError: If the file cannot be read or is not a valid index.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"failed to read SCIP file: {exc}"
        raise IndexLoadError(msg) from exc

    return parse_index(data, scip_pb2_module=scip_pb2_module)


__all__ = [
    "ROLE_DEFINITION",
    "IndexLoadError",
    "SymbolKind",
    "message_class",
    "parse_index",
    "read_scip_index",
]
