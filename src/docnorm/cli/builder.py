#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the docnorm CLI.

Formatter option flags are generated from the fields of
:class:`~docnorm.options.FormatterOptions`, using each field's ``help``
and ``type`` metadata, so new options only need to be declared once.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, Field, fields
from typing import Any

from docnorm.api import get_version
from docnorm.constants import CONFIG_ENV_VAR
from docnorm.options import FormatterOptions


def _flag_for(field: Field[Any]) -> str:
    return "--" + field.name.replace("_", "-")


def add_formatter_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per FormatterOptions field.

    Every generated argument defaults to None so that only options given on
    the command line override values from a config file.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to add the argument group to

    """
    group = parser.add_argument_group("formatter options")
    for field in fields(FormatterOptions):
        help_text = field.metadata.get("help", "")

        if field.type in ("bool", bool):
            group.add_argument(
                _flag_for(field),
                dest=field.name,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=help_text,
            )
        else:
            if field.default is not MISSING and field.default is not None:
                help_text = f"{help_text} (default: {field.default})"
            group.add_argument(
                _flag_for(field),
                dest=field.name,
                type=field.metadata.get("type", str),
                default=None,
                metavar="N",
                help=help_text,
            )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``docnorm`` command

    """
    parser = argparse.ArgumentParser(
        prog="docnorm",
        description="Normalize rich-text editor JSON documents into canonical form.",
    )
    parser.add_argument(
        "input",
        nargs="*",
        help="Document files to format; reads stdin when omitted or '-'",
    )
    parser.add_argument("--out", "-o", type=str, help="Write the formatted document to this file")
    parser.add_argument("--in-place", "-i", action="store_true", help="Rewrite input files with their formatted form")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Write nothing; exit with status 8 if any input is not already canonical",
    )
    parser.add_argument("--rich", action="store_true", help="Pretty-print JSON output to the terminal with rich")

    add_formatter_option_arguments(parser)

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config", type=str, help=f"Path to a config file (JSON, TOML or YAML); also read from ${CONFIG_ENV_VAR}"
    )
    config_group.add_argument("--no-config", action="store_true", help="Ignore config files and $" + CONFIG_ENV_VAR)

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", type=str, help="Also write log messages to this file")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Enable verbose (DEBUG) logging")
    logging_group.add_argument("--trace", action="store_true", help="Trace logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser
