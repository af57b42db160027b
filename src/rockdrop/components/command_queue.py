from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List


class Command(Enum):
    START = "start"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    PAUSE = "pause"
    RESUME = "resume"
    TOGGLE_PAUSE = "toggle_pause"


@dataclass(slots=True)
class CommandQueue:
    """FIFO of player commands, drained once per frame before gravity runs."""
    pending: Deque[Command] = field(default_factory=deque)

    def push(self, command: Command) -> None:
        self.pending.append(command)

    def drain(self) -> List[Command]:
        drained = list(self.pending)
        self.pending.clear()
        return drained

    def clear(self) -> None:
        self.pending.clear()

    def __len__(self) -> int:
        return len(self.pending)
