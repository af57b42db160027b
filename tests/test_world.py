import random

import pytest
from esper import World

from rockdrop.components.board import Board
from rockdrop.components.command_queue import CommandQueue
from rockdrop.components.drop_timer import DropTimer
from rockdrop.components.game_state import GameState, GameStatus
from rockdrop.events.bus import EventBus
from rockdrop.systems.board_ops import get_board
from rockdrop.world import create_world, session_entity


def test_create_world_builds_single_session_entity():
    world = create_world(EventBus(), width=6, height=12, rng=random.Random(1))
    entity = session_entity(world)
    assert world.component_for_entity(entity, GameState).status == GameStatus.NOT_STARTED
    board = world.component_for_entity(entity, Board)
    assert (board.width, board.height) == (6, 12)
    assert get_board(world) is board
    assert world.component_for_entity(entity, DropTimer).interval_ms == 800
    assert len(world.component_for_entity(entity, CommandQueue)) == 0


def test_missing_session_entity_raises():
    with pytest.raises(RuntimeError):
        session_entity(World())
    with pytest.raises(RuntimeError):
        get_board(World())
