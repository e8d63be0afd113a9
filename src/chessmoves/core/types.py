"""Square value object and coordinate helpers.

Files are the letters A-H (``file_index`` 0-7), ranks the integers 1-8.
A :class:`Square` can only exist inside those bounds; stepping off the
board with :meth:`Square.offset` yields ``None`` instead of raising.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from chessmoves.core.errors import InvalidCoordinate, InvalidNotation

FILES = "ABCDEFGH"
RANKS: tuple[int, ...] = tuple(range(1, 9))


def _is_rank(rank: object) -> bool:
    return isinstance(rank, int) and not isinstance(rank, bool) and 1 <= rank <= 8


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board cell, e.g. ``Square("d", 5)`` -> D5.

    Field order doubles as the canonical sort order: file, then rank.
    """

    file: str
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, str) or len(self.file) != 1:
            raise InvalidCoordinate("file", self.file)
        file = self.file.upper()
        if file not in FILES:
            raise InvalidCoordinate("file", self.file)
        if not _is_rank(self.rank):
            raise InvalidCoordinate("rank", self.rank)
        object.__setattr__(self, "file", file)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_notation(cls, text: str) -> Square:
        """Parse algebraic notation, e.g. ``"e4"`` -> E4."""
        if (
            not isinstance(text, str)
            or len(text) != 2
            or not (text[0].isascii() and text[0].isalpha())
            or text[1] not in string.digits
        ):
            raise InvalidNotation(text)
        return cls(text[0], int(text[1]))

    @classmethod
    def from_coordinates(cls, file_index: int, rank: int) -> Square:
        """Create square from a 0-based file index (0=A) and a 1-based rank."""
        if (
            not isinstance(file_index, int)
            or isinstance(file_index, bool)
            or not 0 <= file_index < len(FILES)
        ):
            raise InvalidCoordinate("file", file_index)
        return cls(FILES[file_index], rank)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def file_index(self) -> int:
        return FILES.index(self.file)

    def to_notation(self) -> str:
        return f"{self.file}{self.rank}"

    def is_valid(self) -> bool:
        return self.file in FILES and _is_rank(self.rank)

    def offset(self, file_delta: int, rank_delta: int) -> Square | None:
        """Square shifted by the given deltas, or ``None`` if off the board."""
        file_index = self.file_index + file_delta
        rank = self.rank + rank_delta
        if not (0 <= file_index < 8 and 1 <= rank <= 8):
            return None
        return Square(FILES[file_index], rank)

    def __str__(self) -> str:
        return self.to_notation()


ALL_SQUARES: tuple[Square, ...] = tuple(Square(f, r) for f in FILES for r in RANKS)
