"""Static piece catalog and the rotation rule shared by every shape."""
from __future__ import annotations

import random
from typing import Dict, Iterable, List, Tuple

from rockdrop.components.piece import ActivePiece, Blocks, Offset, PiecePrototype
from rockdrop.constants import BOARD_WIDTH, PREVIEW_COLS, PREVIEW_ROWS


def _prototype(name: str, blocks: Iterable[Offset], color: str) -> PiecePrototype:
    return PiecePrototype(name=name, blocks=tuple((int(c), int(r)) for c, r in blocks), color=color)


PIECE_CATALOG: Tuple[PiecePrototype, ...] = (
    # 3 blocks
    _prototype("tri", [(0, 0), (1, 0), (2, 0)], "#dc2626"),
    _prototype("corner", [(0, 0), (1, 0), (0, 1)], "#f97316"),
    # 4 blocks
    _prototype("line", [(0, 0), (1, 0), (2, 0), (3, 0)], "#22c55e"),
    _prototype("tee", [(0, 0), (1, 0), (2, 0), (1, 1)], "#06b6d4"),
    _prototype("snake", [(0, 0), (1, 0), (1, 1), (2, 1)], "#8b5cf6"),
    _prototype("bolt", [(1, 0), (2, 0), (0, 1), (1, 1)], "#ec4899"),
    _prototype("elbow", [(0, 0), (0, 1), (1, 1), (2, 1)], "#eab308"),
    _prototype("hook", [(2, 0), (0, 1), (1, 1), (2, 1)], "#84cc16"),
    # 5 blocks
    _prototype("utah", [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)], "#14b8a6"),
    _prototype("stairs", [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)], "#f43f5e"),
)

_BY_NAME: Dict[str, PiecePrototype] = {proto.name: proto for proto in PIECE_CATALOG}


def get_prototype(name: str) -> PiecePrototype:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown piece: {name}") from None


def piece_names() -> List[str]:
    return [proto.name for proto in PIECE_CATALOG]


def rotate_clockwise(blocks: Blocks) -> Blocks:
    """Rotate offsets a quarter turn clockwise inside the shape's own bounding box.

    Each ``(c, r)`` maps to ``(max_row - r, c)``. The pivot is the bounding box,
    so asymmetric shapes may change footprint between rotations.
    """
    if not blocks:
        return ()
    max_row = max(r for _, r in blocks)
    return tuple((max_row - r, c) for c, r in blocks)


def normalized(blocks: Blocks) -> frozenset[Offset]:
    """Block set shifted so its bounding box starts at (0, 0)."""
    if not blocks:
        return frozenset()
    min_c = min(c for c, _ in blocks)
    min_r = min(r for _, r in blocks)
    return frozenset((c - min_c, r - min_r) for c, r in blocks)


def spawn_anchor(width: int = BOARD_WIDTH) -> Offset:
    return ((width - 2) // 2, 0)


def draw_prototype(rng: random.Random) -> PiecePrototype:
    """Uniform, independent pick from the catalog (repeats allowed)."""
    return rng.choice(PIECE_CATALOG)


def spawn_piece(prototype: PiecePrototype, width: int = BOARD_WIDTH) -> ActivePiece:
    x, y = spawn_anchor(width)
    return ActivePiece(
        name=prototype.name,
        blocks=prototype.blocks,
        color=prototype.color,
        x=x,
        y=y,
    )


def preview_grid(prototype: PiecePrototype | None) -> List[List[bool]]:
    """Boolean PREVIEW_ROWS x PREVIEW_COLS mask for the next-piece box."""
    grid = [[False] * PREVIEW_COLS for _ in range(PREVIEW_ROWS)]
    if prototype is None:
        return grid
    for c, r in prototype.blocks:
        if 0 <= c < PREVIEW_COLS and 0 <= r < PREVIEW_ROWS:
            grid[r][c] = True
    return grid
