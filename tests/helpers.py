from __future__ import annotations

import random
from typing import Iterable

from rockdrop.components.board import Board
from rockdrop.components.cell import Cell
from rockdrop.components.piece import ActivePiece
from rockdrop.events.bus import EventBus
from rockdrop.factories.pieces import get_prototype
from rockdrop.systems.game_session import GameSession
from rockdrop.world import create_world


def make_session(seed: int = 0, *, width: int = 10, height: int = 20) -> tuple[GameSession, EventBus]:
    """Build a world plus a session driven by a seeded RNG."""

    bus = EventBus()
    world = create_world(bus, width=width, height=height, rng=random.Random(seed))
    return GameSession(world, bus), bus


def fill_row(board: Board, y: int, *, skip: Iterable[int] = (), color: str = "#999999") -> None:
    """Lock every cell of row ``y`` except the columns in ``skip``."""

    skipped = set(skip)
    for x in range(board.width):
        if x not in skipped:
            board.cells[y][x] = Cell.locked(color)


def piece_at(name: str, x: int, y: int) -> ActivePiece:
    proto = get_prototype(name)
    return ActivePiece(name=proto.name, blocks=proto.blocks, color=proto.color, x=x, y=y)
