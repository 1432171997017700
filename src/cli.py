"""Command-line interface for scipmap."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from artifacts.utils import OutputWriteError
from artifacts.write import generate_structure
from contract.validation import validate_structure
from parse.scip_index import IndexLoadError
from rules.config import ConfigError, ScipMapConfig, load_config
from verify.verify import verify_determinism

COMMANDS = ("generate", "validate", "verify")
DEFAULT_COMMAND = "generate"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure application logging with a Rich handler on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a scipmap.toml file (default: ./scipmap.toml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-symbol progress",
    )


def _add_io_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        default=None,
        help="Path to the input SCIP index file (default: index.scip)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Path to the output JSON file (default: structure.json)",
    )
    parser.add_argument(
        "--source-root",
        default=None,
        help="Directory document paths are resolved against (default: .)",
    )
    parser.add_argument(
        "--scip-pb2-module",
        default=None,
        help="Importable module with generated SCIP protobuf bindings",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scipmap",
        description="Flatten a SCIP index into structure.json. "
        "Without a subcommand, runs generate.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate structure.json from a SCIP index"
    )
    _add_io_options(generate_parser)
    _add_common_options(generate_parser)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a structure.json file"
    )
    validate_parser.add_argument(
        "--output",
        default=None,
        help="Structure file to validate (default: structure.json)",
    )
    _add_common_options(validate_parser)

    verify_parser = subparsers.add_parser(
        "verify", help="Verify that structure.json regenerates identically"
    )
    _add_io_options(verify_parser)
    _add_common_options(verify_parser)

    return parser


def _load_config(args: argparse.Namespace) -> ScipMapConfig:
    config_path = None
    if args.config is not None:
        config_path = Path(args.config).expanduser().resolve()
    config = load_config(Path.cwd(), config_path)

    overrides = {
        key: value
        for key, value in (
            ("input", getattr(args, "input", None)),
            ("output", getattr(args, "output", None)),
            ("source_root", getattr(args, "source_root", None)),
            ("scip_pb2_module", getattr(args, "scip_pb2_module", None)),
        )
        if value is not None
    }
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def _resolve(path: str) -> Path:
    return Path(path).expanduser().resolve()


def _handle_generate(config: ScipMapConfig) -> int:
    output_path = _resolve(config.output)
    summary = generate_structure(
        input_path=_resolve(config.input),
        output_path=output_path,
        source_root=_resolve(config.source_root),
        config=config,
    )
    sys.stdout.write(
        f"Successfully generated {config.output} "
        f"with {summary['element_count']} code elements\n"
    )
    return 0


def _handle_validate(config: ScipMapConfig) -> int:
    result = validate_structure(_resolve(config.output))
    for warning in result.warnings:
        sys.stderr.write(f"warning: {warning.location()}: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(config: ScipMapConfig) -> int:
    output_path = _resolve(config.output)
    try:
        result = verify_determinism(
            input_path=_resolve(config.input),
            output_path=output_path,
            source_root=_resolve(config.source_root),
            config=config,
        )
    except (FileNotFoundError, IsADirectoryError) as exc:
        sys.stderr.write(f"output: {output_path}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        sys.stderr.write(f"mismatch: {result.output}\n")
        return 1
    return 0


def _with_default_command(argv: list[str] | None) -> list[str]:
    """Run ``generate`` when no subcommand is named."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (args[0] not in COMMANDS and args[0] not in {"-h", "--help"}):
        return [DEFAULT_COMMAND, *args]
    return args


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(_with_default_command(argv))

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = _load_config(args)

        if args.command == "generate":
            return _handle_generate(config)

        if args.command == "validate":
            return _handle_validate(config)

        if args.command == "verify":
            return _handle_verify(config)
    except (ConfigError, IndexLoadError, OutputWriteError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
