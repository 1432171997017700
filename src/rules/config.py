from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from parse.scip_index import SymbolKind

CONFIG_FILENAME = "scipmap.toml"

DEFAULT_INPUT = "index.scip"
DEFAULT_OUTPUT = "structure.json"


class KindsConfig(BaseModel):
    """Opt-in SCIP kinds beyond the default recognized set."""

    model_config = ConfigDict(extra="forbid")

    enable: list[str] = Field(
        default_factory=list,
        description="SCIP SymbolInformation.Kind names to emit (e.g. 'Constructor')",
    )

    @field_validator("enable")
    @classmethod
    def validate_kind_names(cls, v: list[str]) -> list[str]:
        """Reject names that are not SCIP kinds."""
        valid = set(SymbolKind.__members__) - {"UnspecifiedKind"}
        for name in v:
            if name not in valid:
                msg = (
                    f"Invalid kind '{name}'. "
                    "Expected a SCIP SymbolInformation.Kind name such as "
                    "'Constructor' or 'Field'"
                )
                raise ValueError(msg)
        return v


class ScipMapConfig(BaseModel):
    """Configuration for scipmap structure generation."""

    model_config = ConfigDict(extra="forbid")

    input: str = Field(
        default=DEFAULT_INPUT,
        description="Path to the input SCIP index file",
    )
    output: str = Field(
        default=DEFAULT_OUTPUT,
        description="Path to the output JSON file",
    )
    source_root: str = Field(
        default=".",
        description="Directory that document relative paths are resolved against",
    )
    scip_pb2_module: str | None = Field(
        default=None,
        description="Importable module with generated SCIP bindings (optional)",
    )
    kinds: KindsConfig = Field(
        default_factory=KindsConfig,
        description="Kind classification overrides",
    )

    @field_validator("input", "output")
    @classmethod
    def validate_non_empty(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            msg = "path must be a non-empty string"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path, config_path: Path | None = None) -> ScipMapConfig:
    """Load configuration from scipmap.toml if it exists.

    An explicitly given ``config_path`` must exist; the default file under
    ``root`` is optional.
    """
    if config_path is None:
        config_path = Path(root) / CONFIG_FILENAME
        if not config_path.is_file():
            return ScipMapConfig()
    elif not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigError(msg)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ScipMapConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "KindsConfig",
    "ScipMapConfig",
    "load_config",
]
