from rockdrop.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    SIDE_GAP,
    SIDE_PANEL_WIDTH,
)

MIN_CELL_SIZE = 8


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (cell_size, start_x, start_y) for a board of ``cols`` x ``rows``.

    ``start_x``/``start_y`` are the bottom-left corner of the board in window
    coordinates. The board and the side panel are centred together.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_by_w = max_board_w / cols
    cell_by_h = max_board_h / rows
    cell_size = int(min(cell_by_w, cell_by_h))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    total_width = cols * cell_size + SIDE_GAP + SIDE_PANEL_WIDTH
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return cell_size, start_x, start_y


def cell_origin(cell_size: int, start_x: float, start_y: float, rows: int, x: int, y: int):
    """Bottom-left window coordinate of board cell (x, y); board row 0 is the top row."""
    left = start_x + x * cell_size
    bottom = start_y + (rows - 1 - y) * cell_size
    return left, bottom


def side_panel_left(cell_size: int, start_x: float, cols: int) -> float:
    return start_x + cols * cell_size + SIDE_GAP
