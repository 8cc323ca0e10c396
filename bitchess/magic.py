"""Sliding-piece attacks and fancy magic bitboard tables."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from bitchess.geometry import (
    BB_MASK,
    EAST,
    FILE_A_BB,
    FILE_H_BB,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    RANK_1_BB,
    RANK_8_BB,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    file_bb,
    file_of,
    rank_bb,
    rank_of,
)
from bitchess.prng import PRNG

ROOK_DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
BISHOP_DIRECTIONS = (NORTH_EAST, SOUTH_EAST, SOUTH_WEST, NORTH_WEST)

# Per-rank seeds that make the magic search finish quickly.
SEEDS_64 = (728, 10316, 55013, 32803, 12281, 15100, 16645, 255)
SEEDS_32 = (8977, 44560, 54343, 38998, 5731, 95205, 104912, 17020)


def _check_square(square: int) -> int:
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")
    return square


@lru_cache(maxsize=None)
def _ray(square: int, direction: int) -> tuple[int, ...]:
    """Squares reached by stepping from ``square`` until the board edge."""
    squares = []
    prev = square
    s = square + direction
    while 0 <= s < 64 and max(
        abs((s & 7) - (prev & 7)), abs((s >> 3) - (prev >> 3))
    ) == 1:
        squares.append(s)
        prev = s
        s += direction
    return tuple(squares)


def sliding_attack(directions: Iterable[int], square: int, occupied: int) -> int:
    """Attacks along ``directions``, each ray stopping at the first occupied square."""
    _check_square(square)
    attack = 0
    for direction in directions:
        for s in _ray(square, direction):
            bit = 1 << s
            attack |= bit
            if occupied & bit:
                break
    return attack


def pext(b: int, mask: int) -> int:
    """Gather the bits of ``b`` selected by ``mask`` into the low bits."""
    result = 0
    out = 1
    mask &= BB_MASK
    while mask:
        low = mask & -mask
        if b & low:
            result |= out
        out <<= 1
        mask ^= low
    return result


def pdep(b: int, mask: int) -> int:
    """Scatter the low bits of ``b`` onto the set bits of ``mask``."""
    result = 0
    src = 1
    mask &= BB_MASK
    while mask:
        low = mask & -mask
        if b & src:
            result |= low
        src <<= 1
        mask ^= low
    return result


def _relevance_mask(directions: Sequence[int], square: int) -> int:
    edges = ((RANK_1_BB | RANK_8_BB) & ~rank_bb(rank_of(square))) | (
        (FILE_A_BB | FILE_H_BB) & ~file_bb(file_of(square))
    )
    return sliding_attack(directions, square, 0) & ~edges & BB_MASK


def _subsets(mask: int):
    """Every subset of ``mask``, starting with the empty set (carry-rippler)."""
    b = 0
    while True:
        yield b
        b = (b - mask) & mask
        if not b:
            return


class MagicTable:
    """Fancy magic lookup of sliding attacks for one set of directions."""

    def __init__(
        self, directions: Sequence[int], seeds: Sequence[int] = SEEDS_64
    ) -> None:
        if len(seeds) != 8:
            raise ValueError("one seed per rank is required")
        self.directions = tuple(directions)
        masks = []
        magics = []
        shifts = []
        tables = []
        for square in range(64):
            mask = _relevance_mask(self.directions, square)
            bits = mask.bit_count()
            shift_amount = 64 - bits
            pairs = [
                (occ, sliding_attack(self.directions, square, occ))
                for occ in _subsets(mask)
            ]
            rng = PRNG(seeds[rank_of(square)])
            while True:
                magic = rng.sparse_rand()
                if (((magic * mask) & BB_MASK) >> 56).bit_count() < 6:
                    continue
                used: dict[int, int] = {}
                for occ, ref in pairs:
                    idx = ((occ * magic) & BB_MASK) >> shift_amount
                    if used.setdefault(idx, ref) != ref:
                        break
                else:
                    break
            table = [0] * (1 << bits)
            for idx, ref in used.items():
                table[idx] = ref
            masks.append(mask)
            magics.append(magic)
            shifts.append(shift_amount)
            tables.append(tuple(table))
        self.masks = tuple(masks)
        self.magics = tuple(magics)
        self.shifts = tuple(shifts)
        self._tables = tuple(tables)

    def index(self, square: int, occupied: int) -> int:
        """Position of the attack set for ``occupied`` in the square's table."""
        _check_square(square)
        return (
            ((occupied & self.masks[square]) * self.magics[square]) & BB_MASK
        ) >> self.shifts[square]

    def attacks(self, square: int, occupied: int) -> int:
        """Attacked squares from ``square`` given the board occupancy."""
        return self._tables[square][self.index(square, occupied)]