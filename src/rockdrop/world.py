import random

from esper import World
from .events.bus import EventBus
from rockdrop.components.board import Board
from rockdrop.components.command_queue import CommandQueue
from rockdrop.components.drop_timer import DropTimer
from rockdrop.components.game_state import GameState, GameStatus
from rockdrop.constants import BOARD_HEIGHT, BOARD_WIDTH
from rockdrop.systems.board_ops import empty_board
from rockdrop.utils.scoring import speed_for_level


def create_world(
    event_bus: EventBus,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    # Single session entity carrying every piece of mutable game state.
    world.create_entity(
        GameState(status=GameStatus.NOT_STARTED),
        empty_board(width, height),
        DropTimer(interval_ms=speed_for_level(1)),
        CommandQueue(),
    )
    return world


def session_entity(world: World) -> int:
    for entity, _ in world.get_components(GameState, Board):
        return entity
    raise RuntimeError("Rock Drop session entity not found")
