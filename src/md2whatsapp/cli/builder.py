#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/cli/builder.py
"""Argument parser and exit codes for the md2whatsapp CLI."""

from __future__ import annotations

import argparse

from md2whatsapp import __version__
from md2whatsapp.constants import DEFAULT_TABLE_THRESHOLD, TABLE_FORMAT_CHOICES
from md2whatsapp.exceptions import FileError, ParsingError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def positive_int(value: str) -> int:
    """Argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """Argparse type for integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``md2whatsapp`` command.

    Renderer flags default to None so that a flag which was not given does
    not mask the environment or the configuration file.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="md2whatsapp",
        description="Convert Markdown to WhatsApp formatted text.",
        epilog=(
            "Environment variables MD2WHATSAPP_TABLE_FORMAT, MD2WHATSAPP_TABLE_THRESHOLD and "
            "MD2WHATSAPP_MAX_TABLE_ROWS set defaults; MD2WHATSAPP_CONFIG names a config file."
        ),
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to convert; '-' or omitted reads standard input",
    )
    parser.add_argument("--out", "-o", metavar="PATH", help="Write the result to PATH instead of standard output")

    renderer_group = parser.add_argument_group("WhatsApp rendering options")
    renderer_group.add_argument(
        "--table-format",
        choices=TABLE_FORMAT_CHOICES,
        default=None,
        help="Table rendering strategy (default: auto)",
    )
    renderer_group.add_argument(
        "--table-threshold",
        type=positive_int,
        metavar="N",
        default=None,
        help=f"Maximum table width in characters for auto mode (default: {DEFAULT_TABLE_THRESHOLD})",
    )
    renderer_group.add_argument(
        "--max-table-rows",
        type=non_negative_int,
        metavar="N",
        default=None,
        help="In auto mode, render tables with more body rows than N as lists",
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", metavar="PATH", help="Load settings from a TOML, YAML or JSON file")
    config_group.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files. Ignores auto-discovered configs, "
        "MD2WHATSAPP_CONFIG environment variable, and any --config flag.",
    )

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    logging_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names",
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2whatsapp {__version__}")

    return parser


__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "create_parser",
    "get_exit_code_for_exception",
]
