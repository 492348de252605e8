from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple


class CellKind(IntEnum):
    # Values double as the rendered markers
    PASSAGE = 0
    WALL = 1


class Position(NamedTuple):
    """Signed (x, y) coordinate. May point off-grid until bounds-checked."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Neighbors:
    """In-bounds orthogonal neighbor positions. Missing sides are None."""
    top: Optional[Position] = None
    bottom: Optional[Position] = None
    left: Optional[Position] = None
    right: Optional[Position] = None

    def axes(self) -> Iterator[Tuple[Position, Position]]:
        """
        Yields the (side, opposite) pairs this cell can bridge.
        Vertical first (top -> bottom), then horizontal (left -> right).
        An axis is only yielded when both ends are on the grid.
        """
        if self.top is not None and self.bottom is not None:
            yield (self.top, self.bottom)
        if self.left is not None and self.right is not None:
            yield (self.left, self.right)

    def __iter__(self) -> Iterator[Position]:
        for pos in (self.top, self.bottom, self.left, self.right):
            if pos is not None:
                yield pos


@dataclass
class Cell:
    position: Position
    kind: CellKind = CellKind.PASSAGE
    set_id: int = 0
    neighbors: Neighbors = field(default_factory=Neighbors)

    @property
    def is_wall(self) -> bool:
        return self.kind == CellKind.WALL

    def __str__(self) -> str:
        return str(int(self.kind))
