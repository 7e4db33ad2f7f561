"""Command-line interface for docnorm.

Reads editor documents as JSON, normalizes them, and writes the canonical
form to stdout, a file, or back in place.

Examples
--------
Format a document to stdout::

    $ docnorm document.json

Format from stdin::

    $ cat document.json | docnorm

Rewrite files in place::

    $ docnorm --in-place docs/*.json

Verify documents are already canonical (e.g. in CI)::

    $ docnorm --check docs/*.json

Bound nesting depth and pretty-print::

    $ docnorm --max-depth 64 --indent 2 document.json

Configuration Files
-------------------
Option defaults are read from ``.docnorm.toml``, ``.docnorm.yaml``,
``.docnorm.yml``, ``.docnorm.json`` or ``[tool.docnorm]`` in
``pyproject.toml``, searched from the current directory upward and then in
the home directory. ``--config`` or ``$DOCNORM_CONFIG`` name a file
explicitly; ``--no-config`` disables discovery. Command-line flags always
win over config values.

"""

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

from docnorm.api import format_document
from docnorm.cli.builder import create_parser
from docnorm.cli.config import discover_config_file, load_config_file
from docnorm.constants import (
    CONFIG_ENV_VAR,
    EXIT_CHECK_FAILED,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SERIALIZATION_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from docnorm.exceptions import (
    ConfigurationError,
    DocnormError,
    ParseError,
    SerializationError,
    ValidationError,
)
from docnorm.logging_utils import configure_logging
from docnorm.options import FormatterOptions

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def get_exit_code(error: BaseException) -> int:
    """Map an exception to the CLI exit status.

    Parameters
    ----------
    error : BaseException
        The error that stopped processing

    Returns
    -------
    int
        Exit status for the error kind

    """
    if isinstance(error, ParseError):
        return EXIT_PARSING_ERROR
    if isinstance(error, (ValidationError, ConfigurationError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(error, SerializationError):
        return EXIT_SERIALIZATION_ERROR
    if isinstance(error, OSError):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _resolve_config_path(parsed_args: argparse.Namespace) -> Optional[Path]:
    if parsed_args.no_config:
        return None
    if parsed_args.config:
        return Path(parsed_args.config)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return discover_config_file()


def build_options(parsed_args: argparse.Namespace) -> FormatterOptions:
    """Merge config file values and command-line flags into options.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    FormatterOptions
        Options with CLI flags taking precedence over config values

    Raises
    ------
    ConfigurationError
        If the config file or an option value is invalid

    """
    config: dict[str, Any] = {}
    config_path = _resolve_config_path(parsed_args)
    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        config.update(load_config_file(config_path))

    options = FormatterOptions.from_dict(config)

    overrides = {
        field.name: getattr(parsed_args, field.name)
        for field in fields(FormatterOptions)
        if getattr(parsed_args, field.name, None) is not None
    }
    if overrides:
        options = options.create_updated(**overrides)
    return options


def _read_input(source: str) -> bytes:
    if source == STDIN_MARKER:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _is_canonical(original: bytes, formatted: str) -> bool:
    try:
        return original.decode("utf-8").rstrip("\r\n") == formatted
    except UnicodeDecodeError:
        return False


def _write_stdout(formatted: str, use_rich: bool) -> None:
    if use_rich:
        from rich.console import Console

        Console().print_json(formatted)
    else:
        sys.stdout.write(formatted + "\n")
        sys.stdout.flush()


def process_input(source: str, parsed_args: argparse.Namespace, options: FormatterOptions) -> int:
    """Format a single input and write or check the result.

    Parameters
    ----------
    source : str
        File path, or ``-`` for stdin
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    options : FormatterOptions
        Formatting options

    Returns
    -------
    int
        Exit status for this input

    """
    label = "<stdin>" if source == STDIN_MARKER else source
    try:
        original = _read_input(source)
        formatted = format_document(original, options)

        if parsed_args.check:
            if _is_canonical(original, formatted):
                logger.info("%s is already canonical", label)
                return EXIT_SUCCESS
            print(f"would reformat {label}", file=sys.stderr)
            return EXIT_CHECK_FAILED

        if parsed_args.in_place and source != STDIN_MARKER:
            Path(source).write_text(formatted + "\n", encoding="utf-8")
            logger.info("Formatted %s", label)
        elif parsed_args.out:
            Path(parsed_args.out).write_text(formatted + "\n", encoding="utf-8")
            logger.info("Wrote %s", parsed_args.out)
        else:
            _write_stdout(formatted, parsed_args.rich)
        return EXIT_SUCCESS

    except (DocnormError, OSError) as e:
        logger.error("%s: %s", label, e)
        return get_exit_code(e)


def main(args: list[str] | None = None) -> int:
    """Execute the docnorm CLI.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit status

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    inputs = parsed_args.input or [STDIN_MARKER]
    if parsed_args.out and len(inputs) > 1:
        print("Error: --out can only be used with a single input", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    if parsed_args.in_place and parsed_args.out:
        print("Error: --in-place and --out cannot be combined", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = build_options(parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    exit_code = EXIT_SUCCESS
    for source in inputs:
        result = process_input(source, parsed_args, options)
        if exit_code == EXIT_SUCCESS:
            exit_code = result
    return exit_code
