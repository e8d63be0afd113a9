"""Command-line layer: argument parsing, reporting and process bootstrap."""

from chessmoves.cli.bootstrap import run_cli
from chessmoves.cli.parser import InputError, ParsedInput, parse_args, parse_string
from chessmoves.cli.reporting import format_error

__all__ = [
    "InputError",
    "ParsedInput",
    "format_error",
    "parse_args",
    "parse_string",
    "run_cli",
]
