from dataclasses import dataclass
from typing import Tuple

Offset = Tuple[int, int]
Blocks = Tuple[Offset, ...]


@dataclass(frozen=True, slots=True)
class PiecePrototype:
    """Named catalog shape: (column, row) offsets from a local origin plus a color."""
    name: str
    blocks: Blocks
    color: str


@dataclass(slots=True)
class ActivePiece:
    """The falling piece: its current (possibly rotated) blocks and board anchor."""
    name: str
    blocks: Blocks
    color: str
    x: int
    y: int

    @property
    def anchor(self) -> Offset:
        return (self.x, self.y)

    def cells(self) -> list[Offset]:
        return [(self.x + c, self.y + r) for c, r in self.blocks]
