import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_merge.core.cell import CellKind, Position
from maze_merge.algo.kruskal import RandomizedKruskal
from maze_merge.algo.walls import prepare
from maze_merge.io.text import MazeLogWriter, render_compact, render_rows, render_verbose


class TestRender(unittest.TestCase):
    def setUp(self):
        self.grid, _ = prepare(5)

    def test_rows(self):
        rows = render_rows(self.grid)
        self.assertEqual(rows, ["01010", "11111", "01010", "11111", "01010"])

    def test_verbose(self):
        text = render_verbose(self.grid)
        self.assertEqual(text, "01010\n11111\n01010\n11111\n01010\n")

    def test_compact(self):
        text = render_compact(self.grid)
        self.assertEqual(text, "0101011111010101111101010\n")
        self.assertEqual(len(text.rstrip("\n")), 25)

    def test_finished_maze(self):
        grid, walls = prepare(5)
        RandomizedKruskal(grid, walls, seed=8).run_all()
        line = render_compact(grid).rstrip("\n")
        self.assertEqual(len(line), 25)
        self.assertTrue(set(line) <= {"0", "1"})
        self.assertEqual(line.count("0"), grid.count(CellKind.PASSAGE))
        # Verbose and compact carry the same stream
        self.assertEqual(render_verbose(grid).replace("\n", ""), line)

    def test_render_is_idempotent(self):
        grid, walls = prepare(9)
        RandomizedKruskal(grid, walls, seed=2).run_all()
        self.assertEqual(render_compact(grid), render_compact(grid))
        self.assertEqual(render_verbose(grid), render_verbose(grid))

    def test_render_does_not_mutate(self):
        before = self.grid.kinds.tobytes(), self.grid.ids.tobytes()
        render_verbose(self.grid)
        render_compact(self.grid)
        self.assertEqual((self.grid.kinds.tobytes(), self.grid.ids.tobytes()), before)


class TestLogWriter(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_lines_per_maze(self):
        path = "test_out/mazes.txt"
        with MazeLogWriter(path) as writer:
            for seed in range(3):
                grid, walls = prepare(7)
                RandomizedKruskal(grid, walls, seed=seed).run_all()
                writer.write(grid)
        self.assertIsNone(writer.file)
        self.assertEqual(writer.count, 3)

        with open(path) as f:
            lines = f.read().splitlines()
        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertEqual(len(line), 49)

    def test_truncates_existing(self):
        path = "test_out/mazes.txt"
        with open(path, "w") as f:
            f.write("stale\nstale\n")
        with MazeLogWriter(path) as writer:
            grid, _ = prepare(5)
            writer.write(grid)
        with open(path) as f:
            self.assertEqual(f.read(), "0101011111010101111101010\n")

    def test_write_after_close(self):
        writer = MazeLogWriter("test_out/closed.txt")
        writer.close()
        grid, _ = prepare(5)
        with self.assertRaises(ValueError):
            writer.write(grid)

    def test_closed_on_error(self):
        path = "test_out/partial.txt"
        with self.assertRaises(RuntimeError):
            with MazeLogWriter(path) as writer:
                grid, _ = prepare(5)
                writer.write(grid)
                raise RuntimeError("boom")
        self.assertIsNone(writer.file)
        with open(path) as f:
            self.assertEqual(len(f.read().splitlines()), 1)

    def test_unwritable_path(self):
        with self.assertRaises(OSError):
            MazeLogWriter("test_out/missing_dir/mazes.txt")


if __name__ == '__main__':
    unittest.main()
