"""Piece kind -> movement rule lookup.

New kinds are supported by adding an entry to the factory mapping; call
sites only ever go through :meth:`RuleRegistry.resolve`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import UnsupportedPieceKind
from chessmoves.core.movement import KingRule, MovementRule, PawnRule, QueenRule

RuleFactory = Callable[[], MovementRule]

DEFAULT_RULE_FACTORIES: Mapping[PieceKind, RuleFactory] = MappingProxyType(
    {
        PieceKind.PAWN: PawnRule,
        PieceKind.KING: KingRule,
        PieceKind.QUEEN: QueenRule,
    }
)


class RuleRegistry:
    """Read-only association of piece kinds with rule factories."""

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[PieceKind, RuleFactory] | None = None) -> None:
        source = DEFAULT_RULE_FACTORIES if factories is None else factories
        self._factories: Mapping[PieceKind, RuleFactory] = MappingProxyType(dict(source))

    def resolve(self, kind: PieceKind | str) -> MovementRule:
        """Rule for *kind*; raises :class:`UnsupportedPieceKind` when unknown."""
        piece_kind = PieceKind.lookup(kind)
        factory = self._factories.get(piece_kind) if piece_kind is not None else None
        if factory is None:
            raise UnsupportedPieceKind(kind, self.supported_kinds())
        return factory()

    def supports(self, kind: PieceKind | str) -> bool:
        piece_kind = PieceKind.lookup(kind)
        return piece_kind is not None and piece_kind in self._factories

    def supported_kinds(self) -> tuple[PieceKind, ...]:
        """Registered kinds in registration order."""
        return tuple(self._factories)

    def with_rule(self, kind: PieceKind, factory: RuleFactory) -> RuleRegistry:
        """Copy of this registry with *kind* (re)bound to *factory*."""
        factories = dict(self._factories)
        factories[kind] = factory
        return RuleRegistry(factories)


DEFAULT_REGISTRY = RuleRegistry()
