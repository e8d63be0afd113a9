"""Process bootstrap: argv -> settings -> move query -> stdout / exit code."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import NoReturn

from chessmoves.cli.parser import (
    InputError,
    ParsedInput,
    parse_args,
    parse_string,
    usage_help,
)
from chessmoves.cli.reporting import report_error, report_result
from chessmoves.core.errors import ChessMovesError
from chessmoves.core.service import MoveQueryService, format_squares
from chessmoves.settings import CliSettings

_LOGGER = logging.getLogger(__name__)
_PACKAGE_LOGGER = "chessmoves"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad options as :class:`InputError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise InputError(message)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="chessmoves",
        description="List the squares a lone pawn, king or queen can move to.",
        epilog=usage_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="ARG",
        help='piece type and position, e.g. "King D5" or "King, D5"',
    )
    parser.add_argument("--log-level", help="logging level (default: WARNING)")
    parser.add_argument("--separator", help='output separator (default: ", ")')
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="shorthand for --log-level DEBUG"
    )
    return parser


def _configure_logging(settings: CliSettings) -> None:
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(settings.log_level_number)


def _resolve_settings(
    namespace: argparse.Namespace, environ: Mapping[str, str] | None
) -> CliSettings:
    settings = CliSettings.from_env(environ)
    if namespace.verbose:
        settings = settings.with_log_level("DEBUG")
    elif namespace.log_level is not None:
        settings = settings.with_log_level(namespace.log_level)
    if namespace.separator is not None:
        settings = replace(settings, separator=namespace.separator)
    return settings


def _parse_inputs(inputs: Sequence[str]) -> ParsedInput:
    if len(inputs) == 1 and "," in inputs[0]:
        return parse_string(inputs[0])
    return parse_args(inputs)


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    service: MoveQueryService | None = None,
) -> int:
    """Run one query and return the process exit code."""
    parser = _build_arg_parser()
    try:
        namespace = parser.parse_args(argv)
    except InputError as exc:
        report_error(exc, "Input Processing")
        return EXIT_FAILURE
    settings = _resolve_settings(namespace, environ)
    _configure_logging(settings)

    if not namespace.inputs:
        parser.print_help()
        return EXIT_OK

    try:
        request = _parse_inputs(namespace.inputs)
    except InputError as exc:
        report_error(exc, "Input Processing")
        return EXIT_FAILURE
    _LOGGER.debug("Parsed request: %s on %s", request.piece_kind, request.square)

    service = service or MoveQueryService()
    try:
        moves = service.query_moves(request.piece_kind, request.square)
    except ChessMovesError as exc:
        report_error(exc, "Movement Calculation")
        return EXIT_FAILURE
    _LOGGER.debug("%s on %s has %d moves", request.piece_kind, request.square, len(moves))

    report_result(format_squares(moves, settings.separator))
    return EXIT_OK
