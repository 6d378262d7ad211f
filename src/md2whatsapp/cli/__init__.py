"""Command-line interface for md2whatsapp.

Reads Markdown from a file or standard input and writes WhatsApp formatted
text to standard output or a file.

Environment Variable Support
----------------------------
MD2WHATSAPP_TABLE_FORMAT, MD2WHATSAPP_TABLE_THRESHOLD and
MD2WHATSAPP_MAX_TABLE_ROWS override the configuration file; command-line
flags override both. MD2WHATSAPP_CONFIG names the configuration file when
--config is not given.

Examples
--------
Convert a file::

    $ md2whatsapp notes.md

Convert standard input and save the result::

    $ cat notes.md | md2whatsapp --out message.txt

Force list-style tables::

    $ MD2WHATSAPP_TABLE_FORMAT=always-list md2whatsapp notes.md

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from md2whatsapp.api import resolve_renderer_options, to_whatsapp
from md2whatsapp.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2whatsapp.cli.config import load_config_with_priority, merge_configs
from md2whatsapp.constants import ENV_CONFIG_PATH, ENV_PREFIX
from md2whatsapp.exceptions import FileError
from md2whatsapp.logging_utils import configure_logging, resolve_log_level
from md2whatsapp.options.whatsapp import WhatsAppRendererOptions
from md2whatsapp.utils.io import write_text

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]

_RENDERER_KEYS = ("table_format", "table_threshold", "max_table_rows")


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = resolve_log_level(parsed_args.log_level)

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _env_config() -> Dict[str, Any]:
    """Collect renderer settings from MD2WHATSAPP_* environment variables."""
    config: Dict[str, Any] = {}
    for key in _RENDERER_KEYS:
        value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            config[key] = value
    return config


def _args_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    return {key: getattr(parsed_args, key) for key in _RENDERER_KEYS if getattr(parsed_args, key) is not None}


def build_renderer_options(parsed_args: argparse.Namespace) -> WhatsAppRendererOptions:
    """Resolve renderer options from flags, environment and config file.

    Priority (highest first): command-line flags, environment variables,
    configuration file, defaults.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file is named but cannot be loaded

    """
    file_config: Dict[str, Any] = {}
    if not parsed_args.no_config:
        file_config = load_config_with_priority(parsed_args.config, os.environ.get(ENV_CONFIG_PATH))

    config = merge_configs(file_config, _env_config())
    config = merge_configs(config, _args_config(parsed_args))
    logger.debug(f"Renderer configuration: {config}")
    return resolve_renderer_options(config)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read input file {source}: {e}", file_path=source, original_error=e) from e


def _write_output(text: str, destination: str | None) -> None:
    if destination is None:
        sys.stdout.write(text)
        return
    try:
        write_text(text, destination)
    except OSError as e:
        raise FileError(f"Cannot write output file {destination}: {e}", file_path=destination, original_error=e) from e


def main(args: list[str] | None = None) -> int:
    """Execute the md2whatsapp command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_renderer_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markdown = _read_input(parsed_args.input)
        result = to_whatsapp(markdown, options)
        _write_output(result + "\n", parsed_args.out)
    except Exception as e:
        print(f"Error during conversion: {e}", file=sys.stderr)
        logger.debug("Conversion failed", exc_info=True)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
