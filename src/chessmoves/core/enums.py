"""Piece-kind vocabulary."""

from __future__ import annotations

from enum import StrEnum

from chessmoves.core.errors import UnsupportedPieceKind


class PieceKind(StrEnum):
    """Piece kinds with a movement rule."""

    PAWN = "Pawn"
    KING = "King"
    QUEEN = "Queen"

    @classmethod
    def lookup(cls, text: str) -> PieceKind | None:
        """Case-insensitive match of *text* against the kind names, or ``None``."""
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            return None
        return _BY_FOLDED_NAME.get(text.strip().casefold())

    @classmethod
    def parse(cls, text: str) -> PieceKind:
        """Parse *text*, e.g. ``"queen"`` -> ``PieceKind.QUEEN``."""
        kind = cls.lookup(text)
        if kind is None:
            raise UnsupportedPieceKind(text, cls.all_kinds())
        return kind

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls.lookup(text) is not None

    @classmethod
    def all_kinds(cls) -> tuple[PieceKind, ...]:
        return tuple(cls)


_BY_FOLDED_NAME: dict[str, PieceKind] = {
    kind.value.casefold(): kind for kind in PieceKind
}
