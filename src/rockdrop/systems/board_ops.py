from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from esper import World

from rockdrop.components.board import Board
from rockdrop.components.cell import EMPTY, Cell
from rockdrop.components.piece import ActivePiece, Blocks, Offset

Position = Tuple[int, int]
Snapshot = Tuple[Tuple[Cell, ...], ...]


@dataclass(slots=True)
class SettleResult:
    board: Board
    cleared_count: int
    cells: List[Position]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def empty_board(width: int, height: int) -> Board:
    if width <= 0 or height <= 0:
        raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
    return Board(width=width, height=height, cells=[_empty_row(width) for _ in range(height)])


def _empty_row(width: int) -> List[Cell]:
    return [EMPTY] * width


def copy_board(board: Board) -> Board:
    return Board(width=board.width, height=board.height, cells=[list(row) for row in board.cells])


def is_occupied(board: Board, x: int, y: int) -> bool:
    """Rows above the board (y < 0) are the spawn buffer and never occupied."""
    if y < 0:
        return False
    return board.cells[y][x].is_locked


def is_valid_position(blocks: Blocks, anchor: Offset, board: Board) -> bool:
    ax, ay = anchor
    for c, r in blocks:
        x = ax + c
        y = ay + r
        if x < 0 or x >= board.width or y >= board.height:
            return False
        if y >= 0 and board.cells[y][x].is_locked:
            return False
    return True


def lock_piece(board: Board, blocks: Blocks, anchor: Offset, color: str) -> Tuple[Board, List[Position]]:
    """Return a new board with the piece written in, plus the (x, y) cells written.

    Blocks above the board or outside it are skipped.
    """
    locked = copy_board(board)
    ax, ay = anchor
    written: List[Position] = []
    cell = Cell.locked(color)
    for c, r in blocks:
        x = ax + c
        y = ay + r
        if y >= 0 and locked.in_bounds(x, y):
            locked.cells[y][x] = cell
            written.append((x, y))
    return locked, written


def full_rows(board: Board) -> List[int]:
    return [y for y, row in enumerate(board.cells) if all(cell.is_locked for cell in row)]


def clear_full_rows(board: Board) -> Tuple[Board, int]:
    """Drop every full row, compact the rest downward, and pad the top with empty rows."""
    full = set(full_rows(board))
    kept = [list(row) for y, row in enumerate(board.cells) if y not in full]
    cleared = len(full)
    cells = [_empty_row(board.width) for _ in range(cleared)] + kept
    return Board(width=board.width, height=board.height, cells=cells), cleared


def settle(blocks: Blocks, anchor: Offset, color: str, board: Board) -> SettleResult:
    locked, written = lock_piece(board, blocks, anchor, color)
    cleared_board, cleared = clear_full_rows(locked)
    return SettleResult(board=cleared_board, cleared_count=cleared, cells=written)


def ghost_anchor(blocks: Blocks, anchor: Offset, board: Board) -> Offset:
    """Lowest anchor reachable by moving straight down from ``anchor``."""
    x, y = anchor
    while is_valid_position(blocks, (x, y + 1), board):
        y += 1
    return (x, y)


def render_snapshot(board: Board, piece: ActivePiece | None) -> Snapshot:
    """Read-only view of the board with the active piece and its ghost overlaid.

    The ghost is drawn only when it sits below the piece and only into cells
    that are still empty after the piece itself is drawn.
    """
    display = [list(row) for row in board.cells]
    if piece is not None:
        piece_cell = Cell.active(piece.color)
        for x, y in _visible_cells(board, piece.blocks, piece.anchor):
            display[y][x] = piece_cell
        ghost = ghost_anchor(piece.blocks, piece.anchor, board)
        if ghost != piece.anchor:
            ghost_cell = Cell.ghost(piece.color)
            for x, y in _visible_cells(board, piece.blocks, ghost):
                if display[y][x].is_empty:
                    display[y][x] = ghost_cell
    return tuple(tuple(row) for row in display)


def _visible_cells(board: Board, blocks: Sequence[Offset], anchor: Offset) -> List[Position]:
    ax, ay = anchor
    return [(ax + c, ay + r) for c, r in blocks if board.in_bounds(ax + c, ay + r)]
