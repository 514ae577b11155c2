"""Command-line interface for checking object-space configuration files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from object_space import __version__
from object_space.config import (
    ConfigSyntaxError,
    ResourceError,
    SchemaError,
    descriptor_variants,
    detector_variants,
    generate_parameter_docs,
    load_object_space_config,
)
from object_space.geometry import inner_corner_count


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="object-space",
        description="Validate object-space configuration for sensor calibration",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a configuration file",
        description="Load and validate an object-space TOML file.",
    )
    check_parser.add_argument(
        "config_path",
        type=Path,
        help="Path to object-space TOML file",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    check_parser.set_defaults(func=cmd_check)

    docs_parser = subparsers.add_parser(
        "docs",
        help="Print parameter documentation",
        description="Print markdown documentation for every detector and descriptor.",
    )
    docs_parser.set_defaults(func=cmd_docs)

    return parser


def cmd_check(args: argparse.Namespace) -> int:
    """
    Execute check command.

    Parameters
    ----------
    args
        Parsed arguments with config_path and verbose

    Returns
    -------
    int
        0 if valid, 1 if unreadable, 2 for TOML syntax errors, 3 for schema errors
    """
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_object_space_config(args.config_path)
    except ResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ConfigSyntaxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except SchemaError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 3

    detector = config.camera.detector
    print(
        f"Configuration valid. Camera detector '{detector.TAG}' "
        f"({detector.width}x{detector.height}, {inner_corner_count(detector)} "
        f"inner corners), descriptor '{config.camera.descriptor.TAG}'."
    )
    return 0


def cmd_docs(args: argparse.Namespace) -> int:
    """
    Execute docs command.

    Parameters
    ----------
    args
        Parsed arguments (unused)

    Returns
    -------
    int
        Always 0
    """
    for cls in detector_variants.variants() + descriptor_variants.variants():
        print(generate_parameter_docs(cls))
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for CLI.

    Parameters
    ----------
    argv
        Command-line arguments (defaults to sys.argv[1:])

    Returns
    -------
    int
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
