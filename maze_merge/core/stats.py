from collections import deque

import numpy as np

from maze_merge.core.cell import CellKind, Position
from maze_merge.core.grid import Grid


class MazeStats:
    @staticmethod
    def calculate(grid: Grid):
        """
        Counts passage cells by how many open orthogonal neighbors they have.
        dead end = 1 exit, corridor = 2, junction = 3 or more.
        """
        open_ = (grid.kinds == CellKind.PASSAGE)

        # Exits per cell via shifted copies of the open mask
        exits = np.zeros(open_.shape, dtype=np.int8)
        exits[1:, :] += open_[:-1, :]   # up
        exits[:-1, :] += open_[1:, :]   # down
        exits[:, 1:] += open_[:, :-1]   # left
        exits[:, :-1] += open_[:, 1:]   # right
        exits[~open_] = 0

        passages = int(np.count_nonzero(open_))
        dead_ends = int(np.count_nonzero(open_ & (exits == 1)))
        corridors = int(np.count_nonzero(open_ & (exits == 2)))
        junctions = int(np.count_nonzero(open_ & (exits >= 3)))
        total = grid.size * grid.size
        return {
            "passages": passages,
            "walls": total - passages,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / passages) * 100 if passages > 0 else 0
        }

    @staticmethod
    def component_count(grid: Grid) -> int:
        """Distinct set-ids among passage cells."""
        return int(np.unique(grid.passage_ids()).size)

    @staticmethod
    def open_edges(grid: Grid) -> int:
        """Number of adjacent passage/passage pairs."""
        open_ = (grid.kinds == CellKind.PASSAGE)
        vertical = np.count_nonzero(open_[:-1, :] & open_[1:, :])
        horizontal = np.count_nonzero(open_[:, :-1] & open_[:, 1:])
        return int(vertical + horizontal)

    @staticmethod
    def reachable(grid: Grid, start: Position) -> int:
        """BFS over open cells from start. Returns the number of cells reached."""
        seen = {(start.x, start.y)}
        queue = deque([start])
        while queue:
            cur = queue.popleft()
            for nx, ny in grid.open_neighbors(cur):
                if (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append(Position(nx, ny))
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True when the open cells form a tree: every passage is reachable
        from (0, 0) and there is exactly one fewer open edge than passages.
        """
        passages = grid.count(CellKind.PASSAGE)
        if passages == 0 or grid.kinds[0, 0] != CellKind.PASSAGE:
            return False
        if MazeStats.reachable(grid, Position(0, 0)) != passages:
            return False
        return MazeStats.open_edges(grid) == passages - 1
