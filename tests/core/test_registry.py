"""Tests for RuleRegistry dispatch."""

import pytest

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import UnsupportedPieceKind
from chessmoves.core.movement import KingRule, PawnRule, QueenRule
from chessmoves.core.registry import (
    DEFAULT_REGISTRY,
    DEFAULT_RULE_FACTORIES,
    RuleRegistry,
)
from chessmoves.core.types import Square


class TestDefaultRegistry:
    @pytest.mark.parametrize(
        ("kind", "rule_type"),
        [
            (PieceKind.PAWN, PawnRule),
            (PieceKind.KING, KingRule),
            (PieceKind.QUEEN, QueenRule),
        ],
    )
    def test_resolve(self, kind: PieceKind, rule_type: type) -> None:
        assert isinstance(DEFAULT_REGISTRY.resolve(kind), rule_type)

    def test_resolve_text(self) -> None:
        assert isinstance(DEFAULT_REGISTRY.resolve("queen"), QueenRule)

    @pytest.mark.parametrize("text", ["Rook", "Bishop", "Knight", ""])
    def test_resolve_unsupported(self, text: str) -> None:
        with pytest.raises(UnsupportedPieceKind):
            DEFAULT_REGISTRY.resolve(text)

    def test_supports(self) -> None:
        assert DEFAULT_REGISTRY.supports(PieceKind.KING)
        assert DEFAULT_REGISTRY.supports("pawn")
        assert not DEFAULT_REGISTRY.supports("Rook")

    def test_supported_kinds_in_registration_order(self) -> None:
        assert DEFAULT_REGISTRY.supported_kinds() == (
            PieceKind.PAWN,
            PieceKind.KING,
            PieceKind.QUEEN,
        )

    def test_factories_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_RULE_FACTORIES[PieceKind.PAWN] = KingRule  # type: ignore[index]


class TestCustomRegistry:
    def test_missing_rule(self) -> None:
        registry = RuleRegistry({PieceKind.PAWN: PawnRule})
        assert not registry.supports(PieceKind.KING)
        with pytest.raises(UnsupportedPieceKind) as info:
            registry.resolve(PieceKind.KING)
        assert info.value.supported == (PieceKind.PAWN,)

    def test_with_rule_returns_copy(self) -> None:
        registry = RuleRegistry({PieceKind.PAWN: PawnRule})
        extended = registry.with_rule(PieceKind.KING, KingRule)
        assert extended.supported_kinds() == (PieceKind.PAWN, PieceKind.KING)
        assert registry.supported_kinds() == (PieceKind.PAWN,)

    def test_with_rule_replaces(self) -> None:
        registry = DEFAULT_REGISTRY.with_rule(PieceKind.PAWN, KingRule)
        moves = registry.resolve(PieceKind.PAWN).calculate_valid_moves(Square("D", 5))
        assert len(moves) == 8
        assert isinstance(DEFAULT_REGISTRY.resolve(PieceKind.PAWN), PawnRule)

    def test_source_mapping_not_shared(self) -> None:
        factories = {PieceKind.PAWN: PawnRule}
        registry = RuleRegistry(factories)
        factories[PieceKind.QUEEN] = QueenRule
        assert not registry.supports(PieceKind.QUEEN)
