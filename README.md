# bitchess

Building blocks for chess programs that hold a set of squares as a 64-bit
integer, called a *bitboard*. Squares are numbered 0 to 63 as
`rank * 8 + file`, so bit 0 is a1, bit 7 is h1 and bit 63 is h8.

## Modules

- **`bitchess.geometry`** covers board geometry and bit tools:
  - The `Color` enum (`WHITE`, `BLACK`, with `.opponent`) and the
    `PieceType` enum (`PAWN` … `KING`).
  - Square helpers: `make_square`, `file_of`, `rank_of`,
    `relative_square` and `square_bb`.
  - Bit tools: `popcount`, `lsb`, `msb`, `iter_squares` and
    `more_than_one`. `lsb` and `msb` raise `ValueError` on an empty board.
  - `shift`, `pawn_attacks_bb` and `pawn_double_attacks_bb`.
  - `file_bb`, `rank_bb` and `adjacent_files_bb`.
  - Distances: `distance` (king steps), `file_distance`, `rank_distance`
    and `distance_ring_bb`.
  - Forward spans: `forward_ranks_bb`, `forward_file_bb`,
    `pawn_attack_span` and `passed_pawn_span`.
  - `frontmost_sq` and `backmost_sq`.
  - `pretty()`, which returns an ASCII drawing of a bitboard.
  - Constants such as `FILE_A_BB`, `RANK_1_BB`, `DARK_SQUARES` and
    `CENTER`.
- **`bitchess.prng`** holds the xorshift64* generator `PRNG`, with
  `rand()`, `sparse_rand()` and iteration. It also has `mul_hi64` and the
  byte readers `read_le_u32`, `read_le_u16`, `read_be_u64`, `read_be_u32`
  and `read_be_u16`. The readers raise `ValueError` when the buffer is too
  short.
- **`bitchess.magic`** provides `sliding_attack`, plus `pext` and `pdep`,
  which are the bit-extract and bit-deposit operations. Its `MagicTable`
  searches for fancy magic numbers, using fixed per-rank seeds, for a set
  of directions (`ROOK_DIRECTIONS` or `BISHOP_DIRECTIONS`). It exposes
  `masks`, `magics`, `shifts`, `index()` and `attacks()`.
- **`bitchess.attacks`** has these functions:
  - `bishop_attacks`, `rook_attacks` and `queen_attacks` for a given
    occupancy.
  - `attacks_bb` and `pseudo_attacks` for non-pawn piece types.
  - `pawn_attacks`.
  - `between_bb`, `line_bb` and `aligned`.
- **`bitchess.bitbase`** is a complete KPK bitbase for king and pawn
  against king. Query it with `probe()` or through a `KPKBitbase`. The pawn
  must be white, on files a–d and ranks 2–7.
- **`bitchess.material`** computes the quadratic material imbalance. It
  provides `Score` (an mg/eg pair with `+`, `-` and integer `*`),
  `piece_counts`, `imbalance` and `imbalance_score`.

## Installing

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from bitchess.geometry import make_square, pretty, popcount
from bitchess.attacks import rook_attacks

d4 = make_square(3, 3)
blockers = 1 << make_square(3, 6)       # a piece on d7
attacked = rook_attacks(d4, blockers)
print(popcount(attacked))
print(pretty(attacked))
```

```python
from bitchess.geometry import Color, make_square
from bitchess.bitbase import probe

# White king d6, white pawn d5, black king d8, black to move
wk, wp, bk = make_square(3, 5), make_square(3, 4), make_square(3, 7)
print(probe(wk, wp, bk, Color.BLACK))   # True means white wins
```

```python
from bitchess.material import piece_counts, imbalance_score

white = piece_counts(bishops=2, pawns=8, knights=1, rooks=2, queens=1)
black = piece_counts(bishops=1, pawns=8, knights=2, rooks=2, queens=1)
print(imbalance_score((white, black)))
```

The bitbase is computed in pure Python the first time it is probed. This
can take a while. After that it is reused by every `KPKBitbase` and by
every call to `probe()`.

## What it does not do

This package contains no board or position type, and it does not read
FEN. It has no move generator and no search. Apart from the material
imbalance, it has no evaluation. It offers no command-line program and
no engine protocol. It supplies the lookup pieces that such a program
would build on.