"""Exceptions raised by the core domain layer."""

from __future__ import annotations

from collections.abc import Iterable


class ChessMovesError(ValueError):
    """Base class for every error raised on bad piece or square input."""


class InvalidCoordinate(ChessMovesError):
    """A file outside A-H or a rank outside 1-8."""

    def __init__(self, reason: str, value: object) -> None:
        if reason == "file":
            message = f"Invalid file: {value}. Must be A-H."
        else:
            message = f"Invalid rank: {value}. Must be 1-8."
        super().__init__(message)
        self.reason = reason
        self.value = value


class InvalidNotation(ChessMovesError):
    """Square text that is not a letter followed by a digit."""

    def __init__(self, text: object) -> None:
        super().__init__(
            f"Invalid notation: {text}. Expected format like 'A1' or 'H8'."
        )
        self.text = text


class UnsupportedPieceKind(ChessMovesError):
    """Piece text or value with no known kind or no registered rule."""

    def __init__(self, value: object, supported: Iterable[object]) -> None:
        self.supported = tuple(supported)
        names = ", ".join(str(kind) for kind in self.supported)
        super().__init__(f"Unsupported piece type: {value}. Supported types: {names}")
        self.value = value
