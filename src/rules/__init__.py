"""Configuration and classification rules for scipmap."""

from rules.config import (
    ConfigError,
    KindsConfig,
    ScipMapConfig,
    load_config,
)
from rules.kinds import build_code_types, classify_kind, kind_label

__all__ = [
    "ConfigError",
    "KindsConfig",
    "ScipMapConfig",
    "build_code_types",
    "classify_kind",
    "kind_label",
    "load_config",
]
