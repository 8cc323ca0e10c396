"""Board geometry and bitboard primitives.

Squares are numbered 0..63 from a1 to h8, file-major within a rank:
square = rank * 8 + file. A bitboard is a non-negative int below 2**64
with bit ``s`` set when square ``s`` is a member.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Color":
        return Color(self ^ 1)


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


BB_MASK = (1 << 64) - 1

NORTH = 8
EAST = 1
SOUTH = -NORTH
WEST = -EAST
NORTH_EAST = NORTH + EAST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST
NORTH_WEST = NORTH + WEST

ALL_SQUARES = BB_MASK
DARK_SQUARES = 0xAA55AA55AA55AA55
LIGHT_SQUARES = ALL_SQUARES ^ DARK_SQUARES

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << (8 * 1)
RANK_3_BB = RANK_1_BB << (8 * 2)
RANK_4_BB = RANK_1_BB << (8 * 3)
RANK_5_BB = RANK_1_BB << (8 * 4)
RANK_6_BB = RANK_1_BB << (8 * 5)
RANK_7_BB = RANK_1_BB << (8 * 6)
RANK_8_BB = RANK_1_BB << (8 * 7)

QUEEN_SIDE = FILE_A_BB | FILE_B_BB | FILE_C_BB | FILE_D_BB
CENTER_FILES = FILE_C_BB | FILE_D_BB | FILE_E_BB | FILE_F_BB
KING_SIDE = FILE_E_BB | FILE_F_BB | FILE_G_BB | FILE_H_BB
CENTER = (FILE_D_BB | FILE_E_BB) & (RANK_4_BB | RANK_5_BB)

_BORDER = "+---+---+---+---+---+---+---+---+"


def _check_square(square: int) -> int:
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")
    return square


def _check_line(value: int, what: str) -> int:
    if not 0 <= value < 8:
        raise ValueError(f"{what} out of range: {value}")
    return value


def make_square(file: int, rank: int) -> int:
    """Square index for a file and rank, each in 0..7."""
    return (_check_line(rank, "rank") << 3) + _check_line(file, "file")


def file_of(square: int) -> int:
    return _check_square(square) & 7


def rank_of(square: int) -> int:
    return _check_square(square) >> 3


def relative_square(color: int, square: int) -> int:
    """The square as seen from ``color``'s side (vertical flip for black)."""
    return _check_square(square) ^ (int(color) * 56)


def square_bb(square: int) -> int:
    return 1 << _check_square(square)


def popcount(b: int) -> int:
    return (b & BB_MASK).bit_count()


def lsb(b: int) -> int:
    """Index of the least significant set bit; raises on an empty board."""
    b &= BB_MASK
    if not b:
        raise ValueError("lsb of an empty bitboard")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Index of the most significant set bit; raises on an empty board."""
    b &= BB_MASK
    if not b:
        raise ValueError("msb of an empty bitboard")
    return b.bit_length() - 1


def iter_squares(b: int) -> Iterator[int]:
    """Yield the squares of a bitboard in ascending order."""
    b &= BB_MASK
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def more_than_one(b: int) -> bool:
    b &= BB_MASK
    return bool(b & (b - 1))


def shift(direction: int, b: int) -> int:
    """Move every square of ``b`` one step in ``direction``; unknown directions give 0."""
    b &= BB_MASK
    if direction == NORTH:
        r = b << 8
    elif direction == SOUTH:
        r = b >> 8
    elif direction == NORTH + NORTH:
        r = b << 16
    elif direction == SOUTH + SOUTH:
        r = b >> 16
    elif direction == EAST:
        r = (b & ~FILE_H_BB) << 1
    elif direction == WEST:
        r = (b & ~FILE_A_BB) >> 1
    elif direction == NORTH_EAST:
        r = (b & ~FILE_H_BB) << 9
    elif direction == SOUTH_EAST:
        r = (b & ~FILE_H_BB) >> 7
    elif direction == NORTH_WEST:
        r = (b & ~FILE_A_BB) << 7
    elif direction == SOUTH_WEST:
        r = (b & ~FILE_A_BB) >> 9
    else:
        r = 0
    return r & BB_MASK


def pawn_attacks_bb(b: int, color: int) -> int:
    """Squares attacked by pawns of ``color`` standing on ``b``."""
    if color == Color.WHITE:
        return shift(NORTH_WEST, b) | shift(NORTH_EAST, b)
    return shift(SOUTH_WEST, b) | shift(SOUTH_EAST, b)


def pawn_double_attacks_bb(b: int, color: int) -> int:
    """Squares attacked twice by pawns of ``color`` standing on ``b``."""
    if color == Color.WHITE:
        return shift(NORTH_WEST, b) & shift(NORTH_EAST, b)
    return shift(SOUTH_WEST, b) & shift(SOUTH_EAST, b)


def file_bb(file: int) -> int:
    return FILE_A_BB << _check_line(file, "file")


def rank_bb(rank: int) -> int:
    return RANK_1_BB << (8 * _check_line(rank, "rank"))


def adjacent_files_bb(file: int) -> int:
    f = file_bb(file)
    return shift(EAST, f) | shift(WEST, f)


def file_distance(a: int, b: int) -> int:
    return abs(file_of(a) - file_of(b))


def rank_distance(a: int, b: int) -> int:
    return abs(rank_of(a) - rank_of(b))


def distance(a: int, b: int) -> int:
    """King-step distance between two squares."""
    return max(file_distance(a, b), rank_distance(a, b))


def forward_ranks_bb(color: int, rank: int) -> int:
    """All squares on ranks strictly in front of ``rank`` for ``color``."""
    _check_line(rank, "rank")
    if color == Color.WHITE:
        return (BB_MASK << (8 * (rank + 1))) & BB_MASK
    return (1 << (8 * rank)) - 1


def forward_file_bb(color: int, square: int) -> int:
    return forward_ranks_bb(color, rank_of(square)) & file_bb(file_of(square))


def pawn_attack_span(color: int, square: int) -> int:
    return forward_ranks_bb(color, rank_of(square)) & adjacent_files_bb(file_of(square))


def passed_pawn_span(color: int, square: int) -> int:
    return forward_file_bb(color, square) | pawn_attack_span(color, square)


def distance_ring_bb(square: int, d: int) -> int:
    """Squares other than ``square`` at exactly king-distance ``d``."""
    _check_square(square)
    result = 0
    for other in range(64):
        if other != square and distance(square, other) == d:
            result |= 1 << other
    return result


def frontmost_sq(color: int, b: int) -> int:
    return msb(b) if color == Color.WHITE else lsb(b)


def backmost_sq(color: int, b: int) -> int:
    return lsb(b) if color == Color.WHITE else msb(b)


def pretty(b: int) -> str:
    """ASCII drawing of a bitboard, rank 8 at the top."""
    lines = [_BORDER]
    for r in range(7, -1, -1):
        cells = "".join(
            "| X " if b & (1 << (8 * r + f)) else "|   " for f in range(8)
        )
        lines.append(f"{cells}| {r + 1}")
        lines.append(_BORDER)
    lines.append("  a   b   c   d   e   f   g   h")
    return "\n".join(lines) + "\n"