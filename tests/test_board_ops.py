import pytest

from rockdrop.components.cell import EMPTY, Cell, CellKind
from rockdrop.factories.pieces import get_prototype
from rockdrop.systems.board_ops import (
    clear_full_rows,
    empty_board,
    full_rows,
    ghost_anchor,
    is_occupied,
    is_valid_position,
    lock_piece,
    render_snapshot,
    settle,
)
from tests.helpers import fill_row, piece_at

LINE = get_prototype("line")
CORNER = get_prototype("corner")


def test_empty_board_dimensions():
    board = empty_board(10, 20)
    assert board.width == 10 and board.height == 20
    assert len(board.cells) == 20
    assert all(len(row) == 10 for row in board.cells)
    assert board.locked_count() == 0


def test_empty_board_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        empty_board(0, 20)


def test_rows_above_board_are_never_occupied():
    board = empty_board(4, 4)
    fill_row(board, 0)
    assert is_occupied(board, 1, 0)
    assert not is_occupied(board, 1, -1)
    assert not is_occupied(board, 1, 1)


def test_position_invalid_outside_walls_and_floor():
    board = empty_board(10, 20)
    assert is_valid_position(LINE.blocks, (0, 0), board)
    assert is_valid_position(LINE.blocks, (6, 19), board)
    assert not is_valid_position(LINE.blocks, (-1, 0), board)
    assert not is_valid_position(LINE.blocks, (7, 0), board)
    assert not is_valid_position(LINE.blocks, (0, 20), board)


def test_position_allows_blocks_above_board():
    board = empty_board(10, 20)
    assert is_valid_position(CORNER.blocks, (3, -1), board)
    assert is_valid_position(CORNER.blocks, (3, -5), board)
    # The wall check still applies above the board.
    assert not is_valid_position(CORNER.blocks, (9, -3), board)


def test_position_invalid_on_locked_cell():
    board = empty_board(10, 20)
    board.cells[19][5] = Cell.locked("#fff")
    assert not is_valid_position(LINE.blocks, (4, 19), board)
    assert is_valid_position(LINE.blocks, (4, 18), board)
    assert is_valid_position(LINE.blocks, (0, 19), board)


def test_lock_piece_writes_each_block_once():
    board = empty_board(10, 20)
    locked, cells = lock_piece(board, LINE.blocks, (4, 19), LINE.color)
    assert sorted(cells) == [(4, 19), (5, 19), (6, 19), (7, 19)]
    assert locked.locked_count() == 4
    for x in range(4, 8):
        assert locked.cells[19][x] == Cell.locked(LINE.color)
    # Source board is left untouched.
    assert board.locked_count() == 0


def test_lock_piece_skips_rows_above_board():
    board = empty_board(10, 20)
    locked, cells = lock_piece(board, CORNER.blocks, (0, -1), CORNER.color)
    assert cells == [(0, 0)]
    assert locked.locked_count() == 1


def test_clear_full_rows_compacts_and_preserves_order():
    board = empty_board(3, 5)
    fill_row(board, 4)
    board.cells[3][0] = Cell.locked("#a")
    fill_row(board, 2)
    board.cells[1][2] = Cell.locked("#b")
    assert full_rows(board) == [2, 4]

    cleared_board, cleared = clear_full_rows(board)

    assert cleared == 2
    assert len(cleared_board.cells) == 5
    assert cleared_board.cells[0] == [EMPTY] * 3
    assert cleared_board.cells[1] == [EMPTY] * 3
    assert cleared_board.cells[2] == [EMPTY] * 3
    assert cleared_board.cells[3] == [EMPTY, EMPTY, Cell.locked("#b")]
    assert cleared_board.cells[4] == [Cell.locked("#a"), EMPTY, EMPTY]


def test_clear_full_rows_without_full_rows_is_identity():
    board = empty_board(3, 3)
    board.cells[2][1] = Cell.locked("#a")
    cleared_board, cleared = clear_full_rows(board)
    assert cleared == 0
    assert cleared_board.cells == board.cells


def test_settle_locks_then_clears():
    board = empty_board(10, 20)
    fill_row(board, 19, skip=range(4, 8))
    board.cells[18][0] = Cell.locked("#keep")

    result = settle(LINE.blocks, (4, 19), LINE.color, board)

    assert result.cleared_count == 1
    assert result.board.cells[19][0] == Cell.locked("#keep")
    assert result.board.cells[0] == [EMPTY] * 10
    assert result.board.locked_count() == 1


def test_ghost_anchor_drops_to_floor_or_stack():
    board = empty_board(10, 20)
    assert ghost_anchor(LINE.blocks, (4, 0), board) == (4, 19)
    fill_row(board, 15)
    assert ghost_anchor(LINE.blocks, (4, 0), board) == (4, 14)


def test_snapshot_overlays_piece_and_ghost_without_touching_board():
    board = empty_board(10, 20)
    piece = piece_at("line", 4, 0)

    snapshot = render_snapshot(board, piece)

    assert snapshot[0][4] == Cell.active(LINE.color)
    assert snapshot[19][4].kind is CellKind.GHOST
    assert snapshot[19][4].color == LINE.color
    assert board.locked_count() == 0


def test_snapshot_has_no_ghost_when_piece_has_landed():
    board = empty_board(10, 20)
    piece = piece_at("line", 4, 19)
    snapshot = render_snapshot(board, piece)
    ghosts = [cell for row in snapshot for cell in row if cell.kind is CellKind.GHOST]
    assert ghosts == []


def test_ghost_never_overwrites_active_piece():
    board = empty_board(10, 20)
    # Vertical tri: ghost one row lower overlaps the piece itself.
    piece = piece_at("tri", 0, 16)
    piece.blocks = ((0, 0), (0, 1), (0, 2))
    snapshot = render_snapshot(board, piece)
    assert [snapshot[y][0].kind for y in range(16, 20)] == [
        CellKind.ACTIVE,
        CellKind.ACTIVE,
        CellKind.ACTIVE,
        CellKind.GHOST,
    ]


def test_only_locked_cells_make_a_row_full():
    board = empty_board(4, 3)
    fill_row(board, 2)
    board.cells[1] = [Cell.active("#a"), Cell.ghost("#a"), Cell.locked("#a"), Cell.locked("#a")]
    assert full_rows(board) == [2]
    cleared_board, cleared = clear_full_rows(board)
    assert cleared == len(full_rows(board)) == 1
    assert cleared_board.cells[2] == board.cells[1]
