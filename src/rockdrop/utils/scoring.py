from __future__ import annotations

import math

from rockdrop.constants import (
    BASE_POINTS,
    COMBO_STEP,
    INITIAL_SPEED_MS,
    LEVEL_NAMES,
    LINES_PER_LEVEL,
    MIN_SPEED_MS,
    SPEED_STEP_MS,
)


def points_for_clear(cleared_count: int, level: int, combo: int) -> int:
    """Score awarded for one lock; counts outside the table are worth nothing."""
    if cleared_count < 0:
        raise ValueError(f"cleared_count cannot be negative: {cleared_count}")
    if cleared_count >= len(BASE_POINTS):
        return 0
    base = BASE_POINTS[cleared_count]
    multiplier = 1 + combo * COMBO_STEP
    return math.floor(base * level * multiplier)


def next_combo(combo: int, cleared_count: int) -> int:
    return combo + 1 if cleared_count > 0 else 0


def level_for_lines(total_lines: int) -> int:
    return total_lines // LINES_PER_LEVEL + 1


def speed_for_level(level: int) -> int:
    return max(MIN_SPEED_MS, INITIAL_SPEED_MS - (level - 1) * SPEED_STEP_MS)


def level_name(level: int) -> str:
    index = min(max(level, 1) - 1, len(LEVEL_NAMES) - 1)
    return LEVEL_NAMES[index]
