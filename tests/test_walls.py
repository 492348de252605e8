import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_merge.core.cell import CellKind, Position
from maze_merge.algo.walls import collect_walls, expected_counts, prepare
from maze_merge.core.grid import Grid


class TestWallCollector(unittest.TestCase):
    def test_counts(self):
        for size in (5, 7, 9, 21):
            grid, walls = prepare(size)
            passages, wall_count = expected_counts(size)
            self.assertEqual(passages, ((size + 1) // 2) ** 2)
            self.assertEqual(len(walls), size * size - passages)
            self.assertEqual(len(walls), wall_count)
            self.assertEqual(grid.count(CellKind.PASSAGE), passages)
            self.assertEqual(grid.count(CellKind.WALL), wall_count)

    def test_size_five_layout(self):
        grid, walls = prepare(5)
        self.assertEqual(len(walls), 16)
        self.assertEqual(grid.count(CellKind.PASSAGE), 9)

    def test_kind_invariant(self):
        grid, _ = prepare(9)
        for cell in grid.cells():
            even = cell.position.x % 2 == 0 and cell.position.y % 2 == 0
            if even:
                self.assertEqual(cell.kind, CellKind.PASSAGE)
                self.assertNotEqual(cell.set_id, 0)
            else:
                self.assertEqual(cell.kind, CellKind.WALL)
                self.assertEqual(cell.set_id, 0)

    def test_unique_ids(self):
        grid, _ = prepare(11)
        ids = list(grid.passage_ids())
        self.assertEqual(len(ids), len(set(ids)))
        # Row-major counter starting at 1
        self.assertEqual(grid.get(Position(0, 0)).set_id, 1)
        self.assertEqual(grid.get(Position(2, 0)).set_id, 3)
        self.assertEqual(grid.get(Position(0, 2)).set_id, 23)

    def test_worklist_is_snapshot(self):
        grid, walls = prepare(5)
        first = walls[0]
        self.assertEqual(first.position, Position(1, 0))
        grid.set(first.position, CellKind.PASSAGE, 42)
        self.assertEqual(first.kind, CellKind.WALL)
        self.assertEqual(first.set_id, 0)

    def test_row_major_order(self):
        grid = Grid(5)
        walls = collect_walls(grid)
        order = [(w.position.y, w.position.x) for w in walls]
        self.assertEqual(order, sorted(order))

    def test_every_wall_bridges_an_axis(self):
        _, walls = prepare(7)
        for wall in walls:
            self.assertGreaterEqual(len(list(wall.neighbors.axes())), 1)


if __name__ == '__main__':
    unittest.main()
