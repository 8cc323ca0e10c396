"""Material imbalance evaluation.

Piece counts per color are rows of six entries, in this order: bishop pair
flag, pawns, knights, bishops, rooks, queens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bitchess.geometry import Color


@dataclass(frozen=True)
class Score:
    """A middlegame / endgame value pair."""

    mg: int = 0
    eg: int = 0

    def __add__(self, other: "Score") -> "Score":
        if not isinstance(other, Score):
            return NotImplemented
        return Score(self.mg + other.mg, self.eg + other.eg)

    def __sub__(self, other: "Score") -> "Score":
        if not isinstance(other, Score):
            return NotImplemented
        return Score(self.mg - other.mg, self.eg - other.eg)

    def __neg__(self) -> "Score":
        return Score(-self.mg, -self.eg)

    def __mul__(self, factor: int) -> "Score":
        if not isinstance(factor, int):
            return NotImplemented
        return Score(self.mg * factor, self.eg * factor)

    __rmul__ = __mul__


_S = Score
_ZERO = Score()

_QUADRATIC_OURS = (
    (_S(1419, 1455),),
    (_S(101, 28), _S(37, 39)),
    (_S(57, 64), _S(249, 187), _S(-49, -62)),
    (_S(0, 0), _S(118, 137), _S(10, 27), _S(0, 0)),
    (_S(-63, -68), _S(-5, 3), _S(100, 81), _S(132, 118), _S(-246, -244)),
    (_S(-210, -211), _S(37, 14), _S(147, 141), _S(161, 105), _S(-158, -174), _S(-9, -31)),
)

_QUADRATIC_THEIRS = (
    (_ZERO,),
    (_S(33, 30), _ZERO),
    (_S(46, 18), _S(106, 84), _ZERO),
    (_S(75, 35), _S(59, 44), _S(60, 15), _ZERO),
    (_S(26, 35), _S(6, 22), _S(38, 39), _S(-12, -2), _ZERO),
    (_S(97, 93), _S(100, 163), _S(-58, -91), _S(112, 192), _S(276, 225), _ZERO),
)

_ROW_LENGTH = 6


def _trunc_div(value: int, divisor: int) -> int:
    q = abs(value) // divisor
    return q if value >= 0 else -q


def piece_counts(
    bishops: int, pawns: int, knights: int, rooks: int, queens: int
) -> tuple[int, int, int, int, int, int]:
    """One color's imbalance row; the first entry flags the bishop pair."""
    for name, count in (
        ("bishops", bishops),
        ("pawns", pawns),
        ("knights", knights),
        ("rooks", rooks),
        ("queens", queens),
    ):
        if count < 0:
            raise ValueError(f"{name} must not be negative")
    return (int(bishops > 1), pawns, knights, bishops, rooks, queens)


def _check_rows(counts: Sequence[Sequence[int]]) -> None:
    if len(counts) != 2 or any(len(row) != _ROW_LENGTH for row in counts):
        raise ValueError("piece counts need two rows of six entries")


def imbalance(us: int, piece_counts: Sequence[Sequence[int]]) -> Score:
    """Second-degree polynomial imbalance bonus for side ``us``, unscaled."""
    _check_rows(piece_counts)
    us = Color(us)
    ours = piece_counts[us]
    theirs = piece_counts[us.opponent]
    bonus = _ZERO
    for pt1, count in enumerate(ours):
        if not count:
            continue
        v = _ZERO
        for pt2 in range(pt1 + 1):
            v = v + _QUADRATIC_OURS[pt1][pt2] * ours[pt2]
            v = v + _QUADRATIC_THEIRS[pt1][pt2] * theirs[pt2]
        bonus = bonus + v * count
    return bonus


def imbalance_score(piece_counts: Sequence[Sequence[int]]) -> Score:
    """White's imbalance minus black's, divided by 16 toward zero."""
    diff = imbalance(Color.WHITE, piece_counts) - imbalance(Color.BLACK, piece_counts)
    return Score(_trunc_div(diff.mg, 16), _trunc_div(diff.eg, 16))