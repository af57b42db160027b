from typing import Tuple

from esper import World

from rockdrop.components.cell import Cell, CellKind
from rockdrop.components.game_state import GameState, GameStatus
from rockdrop.constants import GHOST_ALPHA, PREVIEW_COLS, PREVIEW_ROWS, SIDE_PANEL_WIDTH
from rockdrop.events.bus import EventBus
from rockdrop.factories.pieces import preview_grid
from rockdrop.systems.game_session import GameSession
from rockdrop.ui.layout import cell_origin, compute_board_geometry, side_panel_left
from rockdrop.utils.scoring import level_name

RGBA = Tuple[int, int, int, int]

EMPTY_FILL: RGBA = (26, 26, 26, 255)
GRID_OUTLINE: RGBA = (34, 34, 34, 255)
PANEL_FILL: RGBA = (0, 0, 0, 110)
ACCENT: RGBA = (220, 38, 38, 255)
MUTED: RGBA = (136, 136, 136, 255)
OVERLAY: RGBA = (0, 0, 0, 204)
PADDING = 1


def hex_to_rgba(value: str, alpha: int = 255) -> RGBA:
    text = value.lstrip("#")
    if len(text) != 6:
        raise ValueError(f"Expected #rrggbb colour, got {value!r}")
    r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
    return (r, g, b, alpha)


def cell_fill(cell: Cell) -> RGBA:
    if cell.kind in (CellKind.LOCKED, CellKind.ACTIVE) and cell.color:
        return hex_to_rgba(cell.color)
    if cell.kind is CellKind.GHOST and cell.color:
        return hex_to_rgba(cell.color, GHOST_ALPHA)
    return EMPTY_FILL


def combo_label(combo: int) -> str | None:
    """Streak text for the side panel; a single clear is not a combo."""
    return f"{combo}x COMBO!" if combo > 1 else None


class RenderSystem:
    """Draws the session snapshot, the side panel and status overlays."""

    def __init__(self, world: World, event_bus: EventBus, window, session: GameSession):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.session = session

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        board = self.session.board
        state = self._state()
        cell_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.width, board.height
        )
        snapshot = self.session.snapshot()
        for y, row in enumerate(snapshot):
            for x, cell in enumerate(row):
                left, bottom = cell_origin(cell_size, start_x, start_y, board.height, x, y)
                size = cell_size - 2 * PADDING
                arcade.draw_lbwh_rectangle_filled(left + PADDING, bottom + PADDING, size, size, cell_fill(cell))
                if cell.kind is CellKind.GHOST and cell.color:
                    arcade.draw_lbwh_rectangle_outline(
                        left + PADDING, bottom + PADDING, size, size, hex_to_rgba(cell.color, 128), border_width=1
                    )
                elif cell.is_empty:
                    arcade.draw_lbwh_rectangle_outline(
                        left + PADDING, bottom + PADDING, size, size, GRID_OUTLINE, border_width=1
                    )
        self._draw_panel(arcade, state, cell_size, start_x, start_y, board.width, board.height)
        self._draw_overlay(arcade, state, cell_size, start_x, start_y, board.width, board.height)

    def _draw_panel(self, arcade, state: GameState, cell_size, start_x, start_y, cols, rows):
        left = side_panel_left(cell_size, start_x, cols)
        top = start_y + rows * cell_size
        arcade.draw_lbwh_rectangle_filled(left, start_y, SIDE_PANEL_WIDTH, rows * cell_size, PANEL_FILL)
        lines = [
            ("SCORE", f"{state.score:,}"),
            ("LINES", str(state.lines)),
            ("LEVEL", f"{state.level}  {level_name(state.level)}"),
            ("HIGH SCORE", f"{state.high_score:,}"),
        ]
        y = top - 28
        for label, value in lines:
            arcade.draw_text(label, left + 12, y, MUTED, 11)
            arcade.draw_text(value, left + 12, y - 22, ACCENT, 18, bold=True)
            y -= 58
        combo = combo_label(state.combo)
        if combo:
            arcade.draw_text(combo, left + 12, y, (249, 115, 22, 255), 12, bold=True)
        y -= 36
        arcade.draw_text("NEXT", left + 12, y, MUTED, 11)
        self._draw_preview(arcade, left + 12, y - 12)
        controls = ["<- -> Move", "Up Rotate", "Down Soft Drop", "SPACE Hard Drop", "P / ESC Pause"]
        cy = start_y + 12 + 16 * (len(controls) - 1)
        for text in controls:
            arcade.draw_text(text, left + 12, cy, MUTED, 10)
            cy -= 16

    def _draw_preview(self, arcade, left: float, top: float):
        prototype = self.session.next_piece
        mask = preview_grid(prototype)
        size = 16
        for r in range(PREVIEW_ROWS):
            for c in range(PREVIEW_COLS):
                if not mask[r][c] or prototype is None:
                    continue
                arcade.draw_lbwh_rectangle_filled(
                    left + c * (size + 2), top - (r + 1) * (size + 2), size, size, hex_to_rgba(prototype.color)
                )

    def _draw_overlay(self, arcade, state: GameState, cell_size, start_x, start_y, cols, rows):
        if state.status == GameStatus.PLAYING:
            return
        width = cols * cell_size
        height = rows * cell_size
        cx = start_x + width / 2
        cy = start_y + height / 2
        arcade.draw_lbwh_rectangle_filled(start_x, start_y, width, height, OVERLAY)
        if state.status == GameStatus.PAUSED:
            arcade.draw_text("PAUSED", cx, cy, ACCENT, 28, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text("Press P or ESC to resume", cx, cy - 32, MUTED, 12, anchor_x="center")
            return
        if state.status == GameStatus.GAME_OVER:
            arcade.draw_text("GAME OVER", cx, cy + 20, ACCENT, 28, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text(f"Final Score: {state.score:,}", cx, cy - 14, MUTED, 14, anchor_x="center")
        else:
            arcade.draw_text("Ready to Rock?", cx, cy + 10, (255, 255, 255, 255), 22, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Press SPACE or ENTER to start", cx, cy - 44, MUTED, 11, anchor_x="center")

    def _state(self) -> GameState:
        for _, state in self.world.get_component(GameState):
            return state
        raise RuntimeError("GameState not found")
