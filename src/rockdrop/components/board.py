from dataclasses import dataclass, field
from typing import List

from rockdrop.components.cell import Cell

Row = List[Cell]


@dataclass(slots=True)
class Board:
    """Fixed-size playfield; ``cells[y][x]`` with row 0 at the top."""
    width: int
    height: int
    cells: List[Row] = field(default_factory=list)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def locked_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_locked)
