"""Movement rules for a single piece on an otherwise empty board."""

from __future__ import annotations

from typing import Protocol

from chessmoves.core.types import Square

DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
ALL_DIRS: tuple[tuple[int, int], ...] = ORTHOGONAL_DIRS + DIAGONAL_DIRS

_UNIT_STEPS = (-1, 0, 1)


class MovementRule(Protocol):
    """Anything that maps an origin square to its destination squares."""

    def calculate_valid_moves(self, origin: Square) -> list[Square]: ...


# -- Ray casting ------------------------------------------------------------


def cast_ray(
    origin: Square,
    file_dir: int,
    rank_dir: int,
    max_steps: int | None = None,
) -> list[Square]:
    """Squares along one direction, nearest first, stopping at the edge.

    ``max_steps=None`` walks until the board edge.
    """
    if file_dir not in _UNIT_STEPS or rank_dir not in _UNIT_STEPS:
        raise ValueError(f"Direction must be unit steps: {(file_dir, rank_dir)!r}")
    if file_dir == 0 and rank_dir == 0:
        raise ValueError("Direction (0, 0) never leaves the origin")
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be non-negative: {max_steps!r}")

    ray: list[Square] = []
    current = origin
    while max_steps is None or len(ray) < max_steps:
        nxt = current.offset(file_dir, rank_dir)
        if nxt is None:
            break
        ray.append(nxt)
        current = nxt
    return ray


def cast_all_directions(origin: Square, max_steps: int | None = None) -> list[Square]:
    """Concatenated rays over :data:`ALL_DIRS`."""
    squares: list[Square] = []
    for file_dir, rank_dir in ALL_DIRS:
        squares.extend(cast_ray(origin, file_dir, rank_dir, max_steps))
    return squares


# -- Per-piece rules --------------------------------------------------------


class PawnRule:
    """One step toward rank 8; nothing from the last rank."""

    __slots__ = ()

    def calculate_valid_moves(self, origin: Square) -> list[Square]:
        forward = origin.offset(0, 1)
        return [] if forward is None else [forward]


class KingRule:
    """One step in any of the eight directions."""

    __slots__ = ()

    def calculate_valid_moves(self, origin: Square) -> list[Square]:
        return cast_all_directions(origin, max_steps=1)


class QueenRule:
    """Any distance in any of the eight directions."""

    __slots__ = ()

    def calculate_valid_moves(self, origin: Square) -> list[Square]:
        return cast_all_directions(origin)
