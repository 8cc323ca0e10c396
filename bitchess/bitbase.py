"""King and pawn versus king bitbase.

The bitbase records whether a position with a white king, a white pawn on
files a-d (ranks 2-7) and a black king is a win for white. It is built by
retrograde iteration: positions are seeded as invalid, won, drawn or unknown,
then unknown positions are resolved from their successors until nothing
changes.
"""

from __future__ import annotations

from functools import lru_cache

from bitchess.attacks import pawn_attacks, pseudo_attacks
from bitchess.geometry import Color, PieceType, iter_squares

# 24 pawn squares (files a-d, ranks 2-7) x 64 x 64 king squares x 2 sides.
MAX_INDEX = 2 * 24 * 64 * 64

_INVALID = 0
_UNKNOWN = 1
_DRAW = 2
_WIN = 4

_RANK_2 = 1
_RANK_7 = 6
_NORTH = 8

_KING_BB = tuple(pseudo_attacks(PieceType.KING, s) for s in range(64))
_KING_MOVES = tuple(tuple(iter_squares(bb)) for bb in _KING_BB)
_WHITE_PAWN_BB = tuple(pawn_attacks(Color.WHITE, s) for s in range(64))
_DIST = tuple(
    tuple(max(abs((a & 7) - (b & 7)), abs((a >> 3) - (b >> 3))) for b in range(64))
    for a in range(64)
)


def _index(us: int, bksq: int, wksq: int, psq: int) -> int:
    """Pack a position; bits: wk 0-5, bk 6-11, side 12, pawn file 13-14, 7th-rank offset 15-17."""
    return (
        wksq
        | (bksq << 6)
        | (us << 12)
        | ((psq & 7) << 13)
        | ((_RANK_7 - (psq >> 3)) << 15)
    )


def _decode(idx: int) -> tuple[int, int, int, int]:
    wk = idx & 0x3F
    bk = (idx >> 6) & 0x3F
    us = (idx >> 12) & 1
    psq = ((_RANK_7 - ((idx >> 15) & 7)) << 3) | ((idx >> 13) & 3)
    return wk, bk, us, psq


def _initial(idx: int) -> int:
    wk, bk, us, psq = _decode(idx)

    # Two pieces on one square, or a king that could be captured.
    if (
        _DIST[wk][bk] <= 1
        or wk == psq
        or bk == psq
        or (us == Color.WHITE and _WHITE_PAWN_BB[psq] & (1 << bk))
    ):
        return _INVALID

    if us == Color.WHITE:
        # The pawn promotes without being captured.
        push = psq + _NORTH
        if (
            psq >> 3 == _RANK_7
            and wk != push
            and (_DIST[bk][push] > 1 or _KING_BB[wk] & (1 << push))
        ):
            return _WIN
        return _UNKNOWN

    # Black to move: stalemate, or the king takes an undefended pawn.
    black_moves = _KING_BB[bk]
    if not (black_moves & ~(_KING_BB[wk] | _WHITE_PAWN_BB[psq])) or (
        black_moves & (1 << psq) & ~_KING_BB[wk]
    ):
        return _DRAW
    return _UNKNOWN


def _classify(db: bytearray, idx: int) -> int:
    wk, bk, us, psq = _decode(idx)
    r = _INVALID

    if us == Color.WHITE:
        good, bad = _WIN, _DRAW
        for to in _KING_MOVES[wk]:
            r |= db[_index(Color.BLACK, bk, to, psq)]
        rank = psq >> 3
        if rank < _RANK_7:
            r |= db[_index(Color.BLACK, bk, wk, psq + _NORTH)]
        if rank == _RANK_2 and psq + _NORTH != wk and psq + _NORTH != bk:
            r |= db[_index(Color.BLACK, bk, wk, psq + 2 * _NORTH)]
    else:
        good, bad = _DRAW, _WIN
        for to in _KING_MOVES[bk]:
            r |= db[_index(Color.WHITE, to, wk, psq)]

    result = good if r & good else (_UNKNOWN if r & _UNKNOWN else bad)
    db[idx] = result
    return result


@lru_cache(maxsize=1)
def _build() -> bytes:
    db = bytearray(_initial(idx) for idx in range(MAX_INDEX))
    unknown = [idx for idx in range(MAX_INDEX) if db[idx] == _UNKNOWN]
    while True:
        remaining = [idx for idx in unknown if _classify(db, idx) == _UNKNOWN]
        if len(remaining) == len(unknown):
            break
        unknown = remaining
    return bytes(1 if v == _WIN else 0 for v in db)


class KPKBitbase:
    """Win/draw table for king and pawn against king, white to win.

    The table is computed once and shared by all instances.
    """

    def __init__(self) -> None:
        self._wins = _build()

    def probe(self, wksq: int, wpsq: int, bksq: int, us: int) -> bool:
        """Whether white wins with ``us`` to move.

        The pawn must stand on files a-d and ranks 2-7.
        """
        for name, sq in (("wksq", wksq), ("wpsq", wpsq), ("bksq", bksq)):
            if not 0 <= sq < 64:
                raise ValueError(f"{name} out of range: {sq}")
        if wpsq & 7 > 3:
            raise ValueError("pawn must be on files a-d")
        if not _RANK_2 <= wpsq >> 3 <= _RANK_7:
            raise ValueError("pawn must be on ranks 2-7")
        return bool(self._wins[_index(int(Color(us)), bksq, wksq, wpsq)])


def probe(wksq: int, wpsq: int, bksq: int, us: int) -> bool:
    """Probe the shared KPK bitbase; see :meth:`KPKBitbase.probe`."""
    return KPKBitbase().probe(wksq, wpsq, bksq, us)