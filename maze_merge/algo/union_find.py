from typing import List

import numpy as np

from maze_merge.core.cell import CellKind
from maze_merge.algo.kruskal import RandomizedKruskal


class UnionFindKruskal(RandomizedKruskal):
    """
    Same draws and merge decisions as RandomizedKruskal, but components are
    tracked in a parent table with path halving instead of a full relabel
    scan per merge. Grid ids are brought up to date once the worklist is
    exhausted, so the finished grid matches the scan variant id for id.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # ids run 1..size*size; slot 0 is the wall id
        self.parent: List[int] = list(range(self.grid.size * self.grid.size + 1))

    def label(self, set_id: int) -> int:
        parent = self.parent
        while parent[set_id] != set_id:
            parent[set_id] = parent[parent[set_id]]
            set_id = parent[set_id]
        return set_id

    def union(self, old_id: int, new_id: int):
        # the side root survives, as with the relabel scan
        self.parent[old_id] = new_id

    def finish(self):
        roots = np.array([self.label(i) for i in range(len(self.parent))], dtype=np.int64)
        passages = self.grid.kinds == CellKind.PASSAGE
        self.grid.ids[passages] = roots[self.grid.ids[passages]]
