from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                            # payload: dt=float (seconds)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                  # payload: symbol=int, modifiers=int
EVENT_COMMAND = "command"                      # payload: command=Command


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"                    # payload: width=int, height=int
EVENT_GAME_STATUS_CHANGED = "game_status_changed"      # payload: previous=GameStatus, status=GameStatus
EVENT_GAME_OVER = "game_over"                          # payload: final_score=int, high_score=int, level=int, lines=int


# ============================================================================
# PIECES & BOARD
# ============================================================================
EVENT_PIECE_SPAWNED = "piece_spawned"          # payload: piece=str, x=int, y=int
EVENT_PIECE_LOCKED = "piece_locked"            # payload: piece=str, cells=list[(x,y)]
EVENT_LINES_CLEARED = "lines_cleared"          # payload: count=int, combo=int, points=int, total_lines=int


# ============================================================================
# SCORE & PROGRESSION
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"          # payload: score=int, delta=int
EVENT_LEVEL_UP = "level_up"                    # payload: level=int, level_name=str, interval_ms=int
