"""Turn command-line text into a ``(PieceKind, Square)`` request."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import ChessMovesError
from chessmoves.core.types import Square

_USAGE = "Usage: <PieceType> <Position>"


class InputError(ValueError):
    """Malformed command-line input."""


@dataclass(frozen=True, slots=True)
class ParsedInput:
    piece_kind: PieceKind
    square: Square


def parse_args(args: Sequence[str]) -> ParsedInput:
    """Parse ``["King", "D5"]``-style arguments."""
    _validate_args_length(args)
    piece_text, square_text = args
    try:
        return ParsedInput(PieceKind.parse(piece_text), Square.from_notation(square_text))
    except ChessMovesError as exc:
        raise InputError(f"Invalid input: {exc}") from exc


def parse_string(text: str) -> ParsedInput:
    """Parse the comma-joined form, e.g. ``"King, D5"``."""
    if not isinstance(text, str) or not text.strip():
        raise InputError("Input must be a non-empty string")
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise InputError(
            f'Invalid input format: "{text}". Expected format: "PieceType, Position"'
        )
    return parse_args(parts)


def _validate_args_length(args: Sequence[str]) -> None:
    if not args:
        raise InputError(f"No arguments provided. {_USAGE}")
    if len(args) != 2:
        raise InputError(
            f"Invalid number of arguments: {len(args)}. Expected: 2. {_USAGE}"
        )
    if any(not arg or not arg.strip() for arg in args):
        raise InputError(f"Arguments cannot be empty. {_USAGE}")


def usage_help(prog: str = "chessmoves") -> str:
    """Help text listing the supported piece kinds."""
    kinds = ", ".join(PieceKind.all_kinds())
    return (
        f"Usage: {prog} <PieceType> <Position>\n"
        "\n"
        "Arguments:\n"
        f"  PieceType    Type of chess piece ({kinds})\n"
        "  Position     Position on chessboard in algebraic notation (e.g., A1, H8)\n"
        "\n"
        "Examples:\n"
        f"  {prog} King D5\n"
        f"  {prog} Queen E4\n"
        f'  {prog} "Pawn, G1"\n'
    )
