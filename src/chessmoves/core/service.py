"""Move queries: resolve the rule, run it, and put the result in canonical order."""

from __future__ import annotations

from collections.abc import Iterable

from chessmoves.core.enums import PieceKind
from chessmoves.core.registry import DEFAULT_REGISTRY, RuleRegistry
from chessmoves.core.types import Square

DEFAULT_SEPARATOR = ", "


def sort_squares(squares: Iterable[Square]) -> list[Square]:
    """Ascending by file (A-H), then rank (1-8)."""
    return sorted(squares, key=lambda sq: (sq.file, sq.rank))


def sort_and_deduplicate(squares: Iterable[Square]) -> list[Square]:
    # dict keeps the first occurrence of each equal square
    return sort_squares(dict.fromkeys(squares))


def format_squares(squares: Iterable[Square], separator: str = DEFAULT_SEPARATOR) -> str:
    """Sorted notation joined by *separator*, e.g. ``"C4, C5, C6"``."""
    return separator.join(sq.to_notation() for sq in sort_squares(squares))


class MoveQueryService:
    """Stateless entry point used by the CLI and by library callers."""

    __slots__ = ("_registry",)

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self._registry = registry or DEFAULT_REGISTRY

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def query_moves(self, kind: PieceKind | str, origin: Square) -> list[Square]:
        """Destinations for *kind* standing on *origin*, sorted and unique."""
        rule = self._registry.resolve(kind)
        return sort_and_deduplicate(rule.calculate_valid_moves(origin))

    def query_move_names(self, piece_text: str, square_text: str) -> list[str]:
        """Text-in / text-out form, e.g. ``("King", "D5")`` -> ``["C4", ...]``."""
        kind = PieceKind.parse(piece_text)
        origin = Square.from_notation(square_text)
        return [sq.to_notation() for sq in self.query_moves(kind, origin)]

    def query_moves_as_string(
        self,
        kind: PieceKind | str,
        origin: Square,
        separator: str = DEFAULT_SEPARATOR,
    ) -> str:
        return format_squares(self.query_moves(kind, origin), separator)

    def is_supported(self, kind: PieceKind | str) -> bool:
        return self._registry.supports(kind)

    def supported_kinds(self) -> tuple[PieceKind, ...]:
        return self._registry.supported_kinds()


def query_moves(kind: PieceKind | str, origin: Square) -> list[Square]:
    """Shortcut for :meth:`MoveQueryService.query_moves` on the default rules."""
    return MoveQueryService().query_moves(kind, origin)
