import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from maze_merge.core.cell import Cell, Position
from maze_merge.core.grid import Grid


@dataclass(frozen=True)
class MergeAttempt:
    """Outcome of processing one wall from the worklist."""
    wall: Position
    # (side_id, opposite_id) per merged axis, read before the merge
    joined: Tuple[Tuple[int, int], ...]
    remaining: int    # worklist length after the pop

    @property
    def merges(self) -> int:
        return len(self.joined)

    @property
    def merged(self) -> bool:
        return bool(self.joined)


class Generator(ABC):
    def __init__(self, grid: Grid, walls: List[Cell], seed: int = None,
                 rng: Optional[random.Random] = None):
        self.grid = grid
        self.walls = walls
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.merge_count = 0

    @abstractmethod
    def run(self) -> Iterator[MergeAttempt]:
        """
        Yields one MergeAttempt per wall consumed.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
