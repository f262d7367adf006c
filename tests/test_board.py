import pytest

from mazechomp.board import (
    GHOST_STARTS,
    MAP_COLS,
    MAP_ROWS,
    PAC_START,
    Board,
    Pos,
)


@pytest.fixture
def board():
    return Board.standard()


def test_standard_dimensions(board):
    assert (board.rows, board.cols) == (25, 40)
    assert (board.rows, board.cols) == (MAP_ROWS, MAP_COLS)


def test_standard_pellet_count_is_tracked(board):
    assert board.pellets_remaining == board.count_pellets()
    assert board.pellets_remaining > 0


def test_corner_is_wall(board):
    assert board.is_wall(Pos(0, 0))
    assert not board.is_open(Pos(0, 0))


def test_first_corridor_has_pellet(board):
    assert board.has_pellet(Pos(1, 1))
    assert board.char_at(Pos(1, 1)) == "."


@pytest.mark.parametrize("pos", [Pos(-1, 0), Pos(0, -1), Pos(25, 0), Pos(0, 40)])
def test_out_of_bounds(board, pos):
    assert not board.in_bounds(pos)
    assert board.is_wall(pos)
    assert not board.is_open(pos)
    assert not board.has_pellet(pos)
    assert board.char_at(pos) == " "


def test_pac_start_is_open(board):
    assert board.is_open(PAC_START)
    assert PAC_START == Pos(12, 1)


def test_ghost_starts_are_on_board(board):
    assert len(GHOST_STARTS) == 4
    assert all(board.in_bounds(pos) for pos in GHOST_STARTS)


def test_remove_pellet(board):
    before = board.pellets_remaining
    board.remove_pellet(Pos(1, 1))
    assert board.char_at(Pos(1, 1)) == " "
    assert not board.has_pellet(Pos(1, 1))
    assert board.pellets_remaining == before - 1
    assert board.count_pellets() == before - 1


def test_remove_missing_pellet_raises(board):
    board.remove_pellet(Pos(1, 1))
    with pytest.raises(ValueError):
        board.remove_pellet(Pos(1, 1))


def test_remove_pellet_from_wall_raises(board):
    with pytest.raises(ValueError):
        board.remove_pellet(Pos(0, 0))


def test_standard_boards_are_independent():
    first = Board.standard()
    second = Board.standard()
    first.remove_pellet(Pos(1, 1))
    assert second.has_pellet(Pos(1, 1))


def test_custom_layout_counts_pellets():
    small = Board(["#..#", "# .#"])
    assert small.count_pellets() == 3
    assert small.pellets_remaining == 3


def test_short_rows_are_padded_with_filler():
    small = Board(["#", "###"])
    assert small.cols == 3
    assert small.char_at(Pos(0, 1)) == "\0"
    assert small.is_open(Pos(0, 1))


def test_space_is_open_but_no_pellet():
    small = Board(["# #"])
    assert small.is_open(Pos(0, 1))
    assert not small.has_pellet(Pos(0, 1))


def test_empty_layout_raises():
    with pytest.raises(ValueError):
        Board([])