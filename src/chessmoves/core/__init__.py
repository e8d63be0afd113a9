"""Core domain layer: squares, piece kinds and movement rules.

Pure functions over a single piece on an empty board; nothing here logs
or touches I/O.

Quick start::

    from chessmoves.core import PieceKind, Square, query_moves

    for sq in query_moves(PieceKind.KING, Square.from_notation("D5")):
        print(sq)
"""

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import (
    ChessMovesError,
    InvalidCoordinate,
    InvalidNotation,
    UnsupportedPieceKind,
)
from chessmoves.core.movement import (
    ALL_DIRS,
    DIAGONAL_DIRS,
    ORTHOGONAL_DIRS,
    KingRule,
    MovementRule,
    PawnRule,
    QueenRule,
    cast_all_directions,
    cast_ray,
)
from chessmoves.core.registry import DEFAULT_REGISTRY, RuleRegistry
from chessmoves.core.service import (
    MoveQueryService,
    format_squares,
    query_moves,
    sort_and_deduplicate,
    sort_squares,
)
from chessmoves.core.types import ALL_SQUARES, FILES, RANKS, Square

__all__ = [
    # Errors
    "ChessMovesError",
    "InvalidCoordinate",
    "InvalidNotation",
    "UnsupportedPieceKind",
    # Types
    "ALL_SQUARES",
    "FILES",
    "RANKS",
    "PieceKind",
    "Square",
    # Rules
    "ALL_DIRS",
    "DIAGONAL_DIRS",
    "ORTHOGONAL_DIRS",
    "KingRule",
    "MovementRule",
    "PawnRule",
    "QueenRule",
    "cast_all_directions",
    "cast_ray",
    # Dispatch / queries
    "DEFAULT_REGISTRY",
    "MoveQueryService",
    "RuleRegistry",
    "format_squares",
    "query_moves",
    "sort_and_deduplicate",
    "sort_squares",
]
