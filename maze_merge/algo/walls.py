from typing import List, Tuple

from maze_merge.core.cell import Cell, CellKind, Position
from maze_merge.core.grid import Grid


def collect_walls(grid: Grid) -> List[Cell]:
    """
    Single row-major pass over the grid.
    Cells with both coordinates even become passages carrying a unique id
    (row-major counter starting at 1); every other cell becomes a wall with
    id 0 and is appended to the returned worklist as a snapshot.
    """
    walls: List[Cell] = []
    counter = 1
    for y in range(grid.size):
        for x in range(grid.size):
            pos = Position(x, y)
            if x & 1 == 1 or y & 1 == 1:
                grid.set(pos, CellKind.WALL, 0)
                walls.append(grid.get(pos))
            else:
                grid.set(pos, CellKind.PASSAGE, counter)
            counter += 1
    return walls


def expected_counts(size: int) -> Tuple[int, int]:
    """(passages, walls) for a freshly collected grid of this size."""
    passages = ((size + 1) // 2) ** 2
    return passages, size * size - passages


def prepare(size: int) -> Tuple[Grid, List[Cell]]:
    grid = Grid(size)
    return grid, collect_walls(grid)
