from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CellKind(Enum):
    EMPTY = auto()
    LOCKED = auto()
    ACTIVE = auto()
    GHOST = auto()


@dataclass(frozen=True, slots=True)
class Cell:
    """One board square: empty, a locked block, the falling piece, or a ghost preview.

    Active and ghost cells only ever appear in display snapshots, never in the real board.
    """
    kind: CellKind = CellKind.EMPTY
    color: Optional[str] = None

    @classmethod
    def locked(cls, color: str) -> "Cell":
        return cls(CellKind.LOCKED, color)

    @classmethod
    def active(cls, color: str) -> "Cell":
        return cls(CellKind.ACTIVE, color)

    @classmethod
    def ghost(cls, color: str) -> "Cell":
        return cls(CellKind.GHOST, color)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_locked(self) -> bool:
        return self.kind is CellKind.LOCKED


EMPTY = Cell()
