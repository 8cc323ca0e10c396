import pytest

from bitchess.geometry import (
    ALL_SQUARES,
    DARK_SQUARES,
    EAST,
    FILE_A_BB,
    LIGHT_SQUARES,
    NORTH,
    RANK_1_BB,
    SOUTH,
    WEST,
    Color,
    PieceType,
    adjacent_files_bb,
    backmost_sq,
    distance,
    distance_ring_bb,
    file_bb,
    file_distance,
    file_of,
    forward_file_bb,
    forward_ranks_bb,
    frontmost_sq,
    iter_squares,
    lsb,
    make_square,
    more_than_one,
    msb,
    passed_pawn_span,
    pawn_attack_span,
    pawn_attacks_bb,
    pawn_double_attacks_bb,
    popcount,
    pretty,
    rank_bb,
    rank_distance,
    rank_of,
    relative_square,
    shift,
    square_bb,
)

ALL = list(range(64))


def test_make_square_round_trip():
    for s in ALL:
        assert make_square(file_of(s), rank_of(s)) == s


@pytest.mark.parametrize("file,rank", [(-1, 0), (8, 0), (0, 8), (0, -1)])
def test_make_square_rejects_bad_coordinates(file, rank):
    with pytest.raises(ValueError):
        make_square(file, rank)


def test_square_bb_rejects_out_of_range():
    with pytest.raises(ValueError):
        square_bb(64)


def test_relative_square_flips_rank_for_black():
    for s in ALL:
        assert relative_square(Color.WHITE, s) == s
        flipped = relative_square(Color.BLACK, s)
        assert rank_of(flipped) == 7 - rank_of(s)
        assert file_of(flipped) == file_of(s)
        assert relative_square(Color.BLACK, flipped) == s


def test_square_bb_single_bit():
    for s in ALL:
        b = square_bb(s)
        assert popcount(b) == 1
        assert lsb(b) == s == msb(b)
        assert not more_than_one(b)


def test_source_constants():
    assert file_bb(0) == 0x0101010101010101 == FILE_A_BB
    assert rank_bb(0) == 0xFF == RANK_1_BB
    assert LIGHT_SQUARES == ALL_SQUARES ^ 0xAA55AA55AA55AA55
    assert DARK_SQUARES & square_bb(make_square(0, 0))


def test_files_and_ranks_partition_board():
    files = 0
    ranks = 0
    for i in range(8):
        assert popcount(file_bb(i)) == popcount(rank_bb(i))
        assert popcount(file_bb(i) & rank_bb(i)) == 1
        files |= file_bb(i)
        ranks |= rank_bb(i)
    assert files == ALL_SQUARES == ranks


def test_lsb_msb_empty_raise():
    with pytest.raises(ValueError):
        lsb(0)
    with pytest.raises(ValueError):
        msb(0)


def test_iter_squares_reconstructs():
    b = file_bb(2) | rank_bb(5)
    squares = list(iter_squares(b))
    assert squares == sorted(squares)
    assert len(squares) == popcount(b)
    rebuilt = 0
    for s in squares:
        rebuilt |= square_bb(s)
    assert rebuilt == b
    assert squares[0] == lsb(b)
    assert squares[-1] == msb(b)


def test_more_than_one():
    assert not more_than_one(0)
    assert more_than_one(square_bb(3) | square_bb(40))


def test_shift_edges():
    assert shift(EAST, file_bb(7)) == 0
    assert shift(WEST, file_bb(0)) == 0
    assert shift(EAST, file_bb(0)) == file_bb(1)
    assert shift(WEST, file_bb(1)) == file_bb(0)
    assert shift(NORTH, rank_bb(7)) == 0
    assert shift(SOUTH, rank_bb(0)) == 0
    assert shift(NORTH, rank_bb(3)) == rank_bb(4)


def test_shift_unknown_direction_is_empty():
    assert shift(3, ALL_SQUARES) == 0


def test_shift_north_south_round_trip():
    b = rank_bb(2) | rank_bb(4)
    assert shift(SOUTH, shift(NORTH, b)) == b


def test_pawn_attacks():
    e2 = make_square(4, 1)
    expected = square_bb(make_square(3, 2)) | square_bb(make_square(5, 2))
    assert pawn_attacks_bb(square_bb(e2), Color.WHITE) == expected
    a7 = make_square(0, 6)
    assert pawn_attacks_bb(square_bb(a7), Color.BLACK) == square_bb(make_square(1, 5))


def test_pawn_double_attacks():
    pawns = square_bb(make_square(2, 1)) | square_bb(make_square(4, 1))
    assert pawn_double_attacks_bb(pawns, Color.WHITE) == square_bb(make_square(3, 2))
    assert pawn_double_attacks_bb(square_bb(make_square(2, 1)), Color.WHITE) == 0


def test_adjacent_files():
    assert adjacent_files_bb(0) == file_bb(1)
    assert adjacent_files_bb(7) == file_bb(6)
    assert adjacent_files_bb(3) == file_bb(2) | file_bb(4)


def test_distance_properties():
    for a in ALL:
        assert distance(a, a) == 0
        for b in (0, 27, 63):
            assert distance(a, b) == distance(b, a)
            assert distance(a, b) == max(file_distance(a, b), rank_distance(a, b))


def test_forward_ranks_partition():
    for r in range(8):
        w = forward_ranks_bb(Color.WHITE, r)
        bl = forward_ranks_bb(Color.BLACK, r)
        assert w & bl == 0
        assert w & rank_bb(r) == 0 and bl & rank_bb(r) == 0
        assert w | bl | rank_bb(r) == ALL_SQUARES
    assert forward_ranks_bb(Color.WHITE, 7) == 0
    assert forward_ranks_bb(Color.BLACK, 0) == 0


def test_forward_file_and_spans():
    e2 = make_square(4, 1)
    assert forward_file_bb(Color.WHITE, e2) == file_bb(4) & ~(rank_bb(0) | rank_bb(1))
    for c in Color:
        for s in ALL:
            assert passed_pawn_span(c, s) == forward_file_bb(c, s) | pawn_attack_span(c, s)
            assert pawn_attack_span(c, s) & file_bb(file_of(s)) == 0


def test_distance_ring():
    for s in (0, 27, 63):
        assert distance_ring_bb(s, 0) == 0
        union = square_bb(s)
        for d in range(1, 8):
            ring = distance_ring_bb(s, d)
            assert all(distance(s, t) == d for t in iter_squares(ring))
            assert union & ring == 0
            union |= ring
        assert union == ALL_SQUARES


def test_frontmost_backmost():
    b = square_bb(make_square(2, 1)) | square_bb(make_square(5, 6))
    assert frontmost_sq(Color.WHITE, b) == msb(b)
    assert frontmost_sq(Color.BLACK, b) == lsb(b)
    assert backmost_sq(Color.WHITE, b) == lsb(b)
    assert backmost_sq(Color.BLACK, b) == msb(b)


def test_pretty():
    b = square_bb(make_square(0, 0)) | square_bb(make_square(7, 7))
    text = pretty(b)
    lines = text.splitlines()
    assert lines[0] == "+---+---+---+---+---+---+---+---+"
    assert lines[-1] == "  a   b   c   d   e   f   g   h"
    assert text.count("X") == popcount(b)
    assert lines[1].startswith("|   ") and lines[1].endswith("| 8")
    assert lines[15].startswith("| X ") and lines[15].endswith("| 1")


def test_enums():
    assert Color.WHITE.opponent is Color.BLACK
    assert Color.BLACK.opponent is Color.WHITE
    assert [int(p) for p in PieceType] == list(range(1, 7))
    a1 = make_square(0, 0)
    assert relative_square(Color.WHITE.opponent, a1) == make_square(0, 7)
    assert relative_square(Color.BLACK.opponent, a1) == a1
    assert forward_ranks_bb(Color.BLACK.opponent, 6) == rank_bb(7)