from typing import Dict

from esper import World

from rockdrop.components.command_queue import Command
from rockdrop.components.game_state import GameState, GameStatus
from rockdrop.constants import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_P,
    KEY_RIGHT,
    KEY_S,
    KEY_SPACE,
    KEY_UP,
    KEY_W,
)
from rockdrop.events.bus import EVENT_COMMAND, EVENT_KEY_PRESS, EventBus

PLAY_BINDINGS: Dict[int, Command] = {
    KEY_LEFT: Command.MOVE_LEFT,
    KEY_A: Command.MOVE_LEFT,
    KEY_RIGHT: Command.MOVE_RIGHT,
    KEY_D: Command.MOVE_RIGHT,
    KEY_DOWN: Command.SOFT_DROP,
    KEY_S: Command.SOFT_DROP,
    KEY_UP: Command.ROTATE,
    KEY_W: Command.ROTATE,
    KEY_SPACE: Command.HARD_DROP,
    KEY_P: Command.TOGGLE_PAUSE,
    KEY_ESCAPE: Command.TOGGLE_PAUSE,
}

START_KEYS = frozenset({KEY_SPACE, KEY_ENTER})


class InputSystem:
    """Translates raw key presses into queued session commands."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        try:
            symbol = int(symbol)
        except (TypeError, ValueError):
            return
        command = self.command_for_key(symbol)
        if command is not None:
            self.event_bus.emit(EVENT_COMMAND, command=command)

    def command_for_key(self, symbol: int) -> Command | None:
        status = self._status()
        if status in (GameStatus.NOT_STARTED, GameStatus.GAME_OVER):
            # Only the start keys are live outside a game.
            return Command.START if symbol in START_KEYS else None
        return PLAY_BINDINGS.get(symbol)

    def _status(self) -> GameStatus:
        for _, state in self.world.get_component(GameState):
            return state.status
        return GameStatus.NOT_STARTED
