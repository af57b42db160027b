"""Control loop that owns the Rock Drop game state and drives it per frame."""
from __future__ import annotations

import random
from typing import Any

from esper import World

from rockdrop.components.board import Board
from rockdrop.components.command_queue import Command, CommandQueue
from rockdrop.components.drop_timer import DropTimer
from rockdrop.components.game_state import GameState, GameStatus
from rockdrop.components.piece import ActivePiece, PiecePrototype
from rockdrop.constants import WALL_KICK_OFFSETS
from rockdrop.events.bus import (
    EVENT_COMMAND,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_GAME_STATUS_CHANGED,
    EVENT_LEVEL_UP,
    EVENT_LINES_CLEARED,
    EVENT_PIECE_LOCKED,
    EVENT_PIECE_SPAWNED,
    EVENT_SCORE_CHANGED,
    EVENT_TICK,
    EventBus,
)
from rockdrop.factories.pieces import draw_prototype, rotate_clockwise, spawn_piece
from rockdrop.systems.board_ops import (
    Snapshot,
    empty_board,
    ghost_anchor,
    is_valid_position,
    render_snapshot,
    settle,
)
from rockdrop.utils.scoring import (
    level_for_lines,
    level_name,
    next_combo,
    points_for_clear,
    speed_for_level,
)
from rockdrop.world import session_entity


class GameSession:
    """Single mutator of the session entity (GameState, Board, DropTimer, CommandQueue).

    Player commands can be applied directly (``move_left()``, ``rotate()``...)
    or queued with ``enqueue``; queued commands are drained in order at the
    start of every frame, before the gravity tick for that frame.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self._entity = session_entity(world)
        self._handlers = {
            Command.START: self.start,
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.ROTATE: self.rotate,
            Command.SOFT_DROP: self.soft_drop,
            Command.HARD_DROP: self.hard_drop,
            Command.PAUSE: self.pause,
            Command.RESUME: self.resume,
            Command.TOGGLE_PAUSE: self.toggle_pause,
        }

        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_COMMAND, self._on_command)

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self.world.component_for_entity(self._entity, GameState)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self._entity, Board)

    @property
    def timer(self) -> DropTimer:
        return self.world.component_for_entity(self._entity, DropTimer)

    @property
    def queue(self) -> CommandQueue:
        return self.world.component_for_entity(self._entity, CommandQueue)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt")
        if dt is None:
            return
        try:
            seconds = float(dt)
        except (TypeError, ValueError):
            return
        self.update(seconds)

    def _on_command(self, sender, **payload) -> None:
        self.enqueue(payload.get("command"))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh game; a running or paused game is left alone."""
        state = self.state
        if state.status not in (GameStatus.NOT_STARTED, GameStatus.GAME_OVER):
            return
        board = self.board
        fresh = empty_board(board.width, board.height)
        board.cells = fresh.cells
        state.score = 0
        state.lines = 0
        state.level = 1
        state.combo = 0
        state.active = spawn_piece(self._draw(), board.width)
        state.next_piece = self._draw()
        self.queue.clear()
        timer = self.timer
        timer.configure(speed_for_level(state.level))
        timer.start()
        self.event_bus.emit(EVENT_GAME_STARTED, width=board.width, height=board.height)
        self._set_status(GameStatus.PLAYING)
        self._emit_spawned(state.active)

    def stop(self) -> None:
        """Halt the drop timer and abandon a running game; the board stays visible."""
        self.timer.stop()
        self.queue.clear()
        if self.state.status in (GameStatus.PLAYING, GameStatus.PAUSED):
            self._set_status(GameStatus.NOT_STARTED)

    def pause(self) -> None:
        if self.state.status != GameStatus.PLAYING:
            return
        self.timer.stop()
        self._set_status(GameStatus.PAUSED)

    def resume(self) -> None:
        if self.state.status != GameStatus.PAUSED:
            return
        self.timer.start()
        self._set_status(GameStatus.PLAYING)

    def toggle_pause(self) -> None:
        status = self.state.status
        if status == GameStatus.PLAYING:
            self.pause()
        elif status == GameStatus.PAUSED:
            self.resume()

    # ------------------------------------------------------------------
    # Frame driving
    # ------------------------------------------------------------------

    def enqueue(self, command: Any) -> None:
        if not isinstance(command, Command):
            return
        self.queue.push(command)

    def update(self, dt: float) -> None:
        """Drain queued commands, then let the drop timer fire at most one tick."""
        for command in self.queue.drain():
            self.dispatch(command)
        if self.timer.advance(dt * 1000.0):
            self.tick()

    def dispatch(self, command: Any) -> None:
        handler = self._handlers.get(command) if isinstance(command, Command) else None
        if handler is not None:
            handler()

    # ------------------------------------------------------------------
    # Piece control
    # ------------------------------------------------------------------

    def tick(self) -> None:
        piece = self._playing_piece()
        if piece is None:
            return
        if self._try_move(piece, 0, 1):
            return
        self._lock_and_spawn(piece)

    def soft_drop(self) -> None:
        self.tick()

    def hard_drop(self) -> None:
        piece = self._playing_piece()
        if piece is None:
            return
        piece.x, piece.y = ghost_anchor(piece.blocks, piece.anchor, self.board)
        self._lock_and_spawn(piece)

    def move_left(self) -> bool:
        piece = self._playing_piece()
        return piece is not None and self._try_move(piece, -1, 0)

    def move_right(self) -> bool:
        piece = self._playing_piece()
        return piece is not None and self._try_move(piece, 1, 0)

    def rotate(self) -> bool:
        """Rotate clockwise in place, else with the first wall kick that fits."""
        piece = self._playing_piece()
        if piece is None:
            return False
        rotated = rotate_clockwise(piece.blocks)
        board = self.board
        for dx in (0,) + tuple(WALL_KICK_OFFSETS):
            anchor = (piece.x + dx, piece.y)
            if is_valid_position(rotated, anchor, board):
                piece.blocks = rotated
                piece.x = anchor[0]
                return True
        return False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        state = self.state
        overlay = state.active if state.status in (GameStatus.PLAYING, GameStatus.PAUSED) else None
        return render_snapshot(self.board, overlay)

    @property
    def next_piece(self) -> PiecePrototype | None:
        return self.state.next_piece

    @property
    def status(self) -> GameStatus:
        return self.state.status

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _draw(self) -> PiecePrototype:
        return draw_prototype(self._rng)

    def _playing_piece(self) -> ActivePiece | None:
        state = self.state
        if state.status != GameStatus.PLAYING:
            return None
        return state.active

    def _try_move(self, piece: ActivePiece, dx: int, dy: int) -> bool:
        target = (piece.x + dx, piece.y + dy)
        if not is_valid_position(piece.blocks, target, self.board):
            return False
        piece.x, piece.y = target
        return True

    def _lock_and_spawn(self, piece: ActivePiece) -> None:
        state = self.state
        board = self.board
        result = settle(piece.blocks, piece.anchor, piece.color, board)
        board.cells = result.board.cells
        self.event_bus.emit(EVENT_PIECE_LOCKED, piece=piece.name, cells=list(result.cells))
        self._apply_clear(result.cleared_count)

        upcoming = state.next_piece or self._draw()
        state.active = spawn_piece(upcoming, board.width)
        state.next_piece = self._draw()
        if not is_valid_position(state.active.blocks, state.active.anchor, board):
            self._game_over()
            return
        self._emit_spawned(state.active)

    def _apply_clear(self, cleared: int) -> None:
        state = self.state
        state.combo = next_combo(state.combo, cleared)
        if cleared <= 0:
            return
        points = points_for_clear(cleared, state.level, state.combo)
        state.score += points
        state.lines += cleared
        self.event_bus.emit(
            EVENT_LINES_CLEARED,
            count=cleared,
            combo=state.combo,
            points=points,
            total_lines=state.lines,
        )
        if points:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=points)
        new_level = level_for_lines(state.lines)
        if new_level > state.level:
            state.level = new_level
            interval = speed_for_level(new_level)
            self.timer.configure(interval)
            self.event_bus.emit(
                EVENT_LEVEL_UP,
                level=new_level,
                level_name=level_name(new_level),
                interval_ms=interval,
            )

    def _game_over(self) -> None:
        state = self.state
        self.timer.stop()
        self.queue.clear()
        if state.score > state.high_score:
            state.high_score = state.score
        self._set_status(GameStatus.GAME_OVER)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            final_score=state.score,
            high_score=state.high_score,
            level=state.level,
            lines=state.lines,
        )

    def _set_status(self, status: GameStatus) -> None:
        state = self.state
        previous = state.status
        if previous == status:
            return
        state.status = status
        self.event_bus.emit(EVENT_GAME_STATUS_CHANGED, previous=previous, status=status)

    def _emit_spawned(self, piece: ActivePiece) -> None:
        self.event_bus.emit(EVENT_PIECE_SPAWNED, piece=piece.name, x=piece.x, y=piece.y)
