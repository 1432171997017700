"""Stable output contract surface for scipmap.

Treat these exports as the authoritative boundary for consumers of
``structure.json``.
"""

from contract.artifacts import (
    CODE_ELEMENT_FIELDS,
    STRUCTURE_JSON,
    UNKNOWN_CODE_TYPE,
)


def __getattr__(name: str) -> object:
    if name == "CodeElement":
        from contract.models import CodeElement

        return CodeElement

    if name in {"ValidationMessage", "ValidationResult", "validate_structure"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_structure,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_structure": validate_structure,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "CODE_ELEMENT_FIELDS",
    "STRUCTURE_JSON",
    "UNKNOWN_CODE_TYPE",
    "CodeElement",
    "ValidationMessage",
    "ValidationResult",
    "validate_structure",
]
