"""Attack sets for every piece type, plus line and between lookups.

Sliding attacks use per-direction ray masks. On a ray that runs toward
higher square numbers, the first blocker is its least significant set bit.
On a ray that runs toward lower numbers, it is the most significant set
bit. The attack set is the part of the ray up to and including that blocker.
"""

from __future__ import annotations

from functools import lru_cache

from bitchess.geometry import (
    BB_MASK,
    EAST,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    Color,
    PieceType,
    distance,
    pawn_attacks_bb,
    square_bb,
)
from bitchess.magic import sliding_attack

# Directions whose rays run toward higher / lower square numbers.
_ASCENDING = (NORTH, EAST, NORTH_EAST, NORTH_WEST)
_DESCENDING = (SOUTH, WEST, SOUTH_WEST, SOUTH_EAST)

_RAYS = {
    direction: tuple(sliding_attack((direction,), s, 0) for s in range(64))
    for direction in _ASCENDING + _DESCENDING
}

_BISHOP_RAYS = ((NORTH_EAST, NORTH_WEST), (SOUTH_WEST, SOUTH_EAST))
_ROOK_RAYS = ((NORTH, EAST), (SOUTH, WEST))

_KNIGHT_STEPS = (6, 10, 15, 17)
_KING_STEPS = (1, 7, 8, 9)


def _check_square(square: int) -> int:
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")
    return square


def _step_attacks(steps: tuple[int, ...]) -> tuple[int, ...]:
    table = []
    for s in range(64):
        bb = 0
        for step in steps:
            for to in (s + step, s - step):
                if 0 <= to < 64 and distance(s, to) < 3:
                    bb |= 1 << to
        table.append(bb)
    return tuple(table)


_KNIGHT_ATTACKS = _step_attacks(_KNIGHT_STEPS)
_KING_ATTACKS = _step_attacks(_KING_STEPS)
_PAWN_ATTACKS = tuple(
    tuple(pawn_attacks_bb(1 << s, color) for s in range(64)) for color in Color
)


def _slide(rays: tuple[tuple[int, ...], tuple[int, ...]], square: int, occupied: int) -> int:
    ascending, descending = rays
    occupied &= BB_MASK
    result = 0
    for direction in ascending:
        ray = _RAYS[direction][square]
        blockers = occupied & ray
        # Bits up to and including the lowest blocker.
        result |= ray & (blockers ^ (blockers - 1)) if blockers else ray
    for direction in descending:
        ray = _RAYS[direction][square]
        blockers = occupied & ray
        if blockers:
            # Bits from the highest blocker upward.
            result |= ray & ~((1 << (blockers.bit_length() - 1)) - 1)
        else:
            result |= ray
    return result


def bishop_attacks(square: int, occupied: int) -> int:
    """Squares a bishop on ``square`` attacks, given the occupancy."""
    return _slide(_BISHOP_RAYS, _check_square(square), occupied)


def rook_attacks(square: int, occupied: int) -> int:
    """Squares a rook on ``square`` attacks, given the occupancy."""
    return _slide(_ROOK_RAYS, _check_square(square), occupied)


def queen_attacks(square: int, occupied: int) -> int:
    """Squares a queen on ``square`` attacks, given the occupancy."""
    return bishop_attacks(square, occupied) | rook_attacks(square, occupied)


def pseudo_attacks(piece_type: int, square: int) -> int:
    """Attacks of a non-pawn piece on an otherwise empty board."""
    _check_square(square)
    pt = PieceType(piece_type)
    if pt == PieceType.PAWN:
        raise ValueError("pawn attacks depend on color; use pawn_attacks")
    if pt == PieceType.KNIGHT:
        return _KNIGHT_ATTACKS[square]
    if pt == PieceType.KING:
        return _KING_ATTACKS[square]
    return attacks_bb(pt, square, 0)


def attacks_bb(piece_type: int, square: int, occupied: int) -> int:
    """Attacks of a non-pawn piece of ``piece_type`` on ``square``."""
    pt = PieceType(piece_type)
    if pt == PieceType.PAWN:
        raise ValueError("pawn attacks depend on color; use pawn_attacks")
    if pt == PieceType.BISHOP:
        return bishop_attacks(square, occupied)
    if pt == PieceType.ROOK:
        return rook_attacks(square, occupied)
    if pt == PieceType.QUEEN:
        return queen_attacks(square, occupied)
    return pseudo_attacks(pt, square)


def pawn_attacks(color: int, square: int) -> int:
    """Squares a pawn of ``color`` on ``square`` attacks."""
    return _PAWN_ATTACKS[Color(color)][_check_square(square)]


@lru_cache(maxsize=None)
def _line_and_between(s1: int, s2: int) -> tuple[int, int]:
    line = 0
    between = 1 << s2
    for pt in (PieceType.BISHOP, PieceType.ROOK):
        if not pseudo_attacks(pt, s1) & (1 << s2):
            continue
        line = (attacks_bb(pt, s1, 0) & attacks_bb(pt, s2, 0)) | (1 << s1) | (1 << s2)
        between |= attacks_bb(pt, s1, 1 << s2) & attacks_bb(pt, s2, 1 << s1)
    return line, between


def between_bb(s1: int, s2: int) -> int:
    """Squares strictly between ``s1`` and ``s2`` on a shared line, plus ``s2``.

    When the squares share no rank, file or diagonal, only ``s2`` is set.
    """
    return _line_and_between(_check_square(s1), _check_square(s2))[1]


def line_bb(s1: int, s2: int) -> int:
    """The full line through two aligned squares, or 0 if they are not aligned."""
    return _line_and_between(_check_square(s1), _check_square(s2))[0]


def aligned(s1: int, s2: int, s3: int) -> bool:
    """Whether ``s3`` lies on the line through ``s1`` and ``s2``."""
    return bool(line_bb(s1, s2) & square_bb(s3))