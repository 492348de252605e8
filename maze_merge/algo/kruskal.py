from typing import Iterator, List, Optional, Tuple

from maze_merge.core.cell import Cell, CellKind, Position
from maze_merge.algo.base import Generator, MergeAttempt


class RandomizedKruskal(Generator):
    """
    Randomized Kruskal over the wall worklist.

    Every iteration reshuffles the whole remaining worklist and pops one wall.
    For each axis the wall bridges (top/bottom, left/right) the two neighbor
    passages are joined when their set-ids differ. Joining opens the wall,
    copies the side id onto the opposite cell and rewrites the opposite id
    across the entire grid.
    """

    def run(self) -> Iterator[MergeAttempt]:
        while self.walls:
            self.rng.shuffle(self.walls)
            wall = self.walls.pop()
            joined = self.join_cells(wall)

            self.step_count += 1
            self.merge_count += len(joined)
            yield MergeAttempt(wall.position, tuple(joined), len(self.walls))
        self.finish()

    def join_cells(self, wall: Cell) -> List[Tuple[int, int]]:
        joined = []
        for side_pos, opposite_pos in wall.neighbors.axes():
            pair = self.join_sides(side_pos, wall.position, opposite_pos)
            if pair is not None:
                joined.append(pair)
        return joined

    def join_sides(self, side_pos: Position, center_pos: Position,
                   opposite_pos: Position) -> Optional[Tuple[int, int]]:
        #  side | center | opposite   (left -> right, or top -> bottom)
        side = self.grid.get(side_pos)
        opposite = self.grid.get(opposite_pos)
        if side.is_wall or opposite.is_wall:
            return None

        side_id = self.label(side.set_id)
        opposite_id = self.label(opposite.set_id)
        if side_id == opposite_id:
            return None

        self.grid.set(center_pos, CellKind.PASSAGE, side_id)
        self.grid.set(opposite_pos, side.kind, side_id)
        self.union(opposite_id, side_id)
        return (side_id, opposite_id)

    def label(self, set_id: int) -> int:
        """Current component label for a stored set-id."""
        return set_id

    def union(self, old_id: int, new_id: int):
        self.grid.relabel(old_id, new_id)

    def finish(self):
        pass
