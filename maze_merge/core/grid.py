from typing import Iterator, List, Tuple

import numpy as np

from maze_merge.core.cell import Cell, CellKind, Neighbors, Position


class Grid:
    """
    Square matrix of maze cells.

    Cell state lives in two numpy matrices indexed [y, x]:
    - kinds: CellKind value per cell (uint8)
    - ids:   set-id per cell (0 = structural wall not yet opened)

    Neighbor positions are derived once at construction, edges omitted.
    """

    # Direction Helpers (dx, dy)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    __slots__ = ('size', 'kinds', 'ids', 'neighbors')

    def __init__(self, size: int):
        self.size = size
        # Everything starts as an unlabelled passage; the wall collector
        # stamps the structural layout.
        self.kinds = np.full((size, size), CellKind.PASSAGE, dtype=np.uint8)
        self.ids = np.zeros((size, size), dtype=np.int64)
        self.neighbors: List[Neighbors] = [
            self._derive_neighbors(Position(x, y))
            for y in range(size)
            for x in range(size)
        ]

    def _derive_neighbors(self, pos: Position) -> Neighbors:
        found = {}
        for name, (dx, dy) in (("top", self.UP), ("bottom", self.DOWN),
                               ("left", self.LEFT), ("right", self.RIGHT)):
            n_pos = pos.offset(dx, dy)
            if self.in_bounds(n_pos):
                found[name] = n_pos
        return Neighbors(**found)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.size and 0 <= y < self.size:
            return y * self.size + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get(self, pos: Position) -> Cell:
        """Returns a snapshot of the cell at pos. Mutating it does not touch the grid."""
        idx = self.get_index(pos.x, pos.y)
        return Cell(
            position=Position(pos.x, pos.y),
            kind=CellKind(int(self.kinds[pos.y, pos.x])),
            set_id=int(self.ids[pos.y, pos.x]),
            neighbors=self.neighbors[idx],
        )

    def set(self, pos: Position, kind: CellKind, set_id: int):
        self.get_index(pos.x, pos.y)
        self.kinds[pos.y, pos.x] = kind
        self.ids[pos.y, pos.x] = set_id

    def relabel(self, old_id: int, new_id: int) -> int:
        """
        Full scan: every cell carrying old_id now carries new_id.
        Returns the number of cells rewritten.
        """
        mask = self.ids == old_id
        self.ids[mask] = new_id
        return int(np.count_nonzero(mask))

    def cells(self) -> Iterator[Cell]:
        """Row-major iteration over cell snapshots."""
        for y in range(self.size):
            for x in range(self.size):
                yield self.get(Position(x, y))

    def passage_ids(self) -> np.ndarray:
        return self.ids[self.kinds == CellKind.PASSAGE]

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self.kinds == kind))

    def open_neighbors(self, pos: Position) -> Iterator[Tuple[int, int]]:
        """Yields (nx, ny) for in-bounds neighbors that are passages."""
        for n_pos in self.neighbors[pos.y * self.size + pos.x]:
            if self.kinds[n_pos.y, n_pos.x] == CellKind.PASSAGE:
                yield (n_pos.x, n_pos.y)
