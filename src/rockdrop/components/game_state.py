"""Game state resource describing the running Rock Drop session."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from rockdrop.components.piece import ActivePiece, PiecePrototype


class GameStatus(Enum):
    """Session lifecycle; GAME_OVER is left only through a fresh start."""
    NOT_STARTED = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component holding counters and the active/next pieces."""
    status: GameStatus = GameStatus.NOT_STARTED
    score: int = 0
    lines: int = 0
    level: int = 1
    combo: int = 0
    high_score: int = 0
    active: Optional[ActivePiece] = None
    next_piece: Optional[PiecePrototype] = None
