import logging
import random
import sys
import time
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from maze_merge.algo.base import Generator
from maze_merge.algo.kruskal import RandomizedKruskal
from maze_merge.algo.union_find import UnionFindKruskal
from maze_merge.algo.walls import prepare
from maze_merge.config import MazeConfig, Mode
from maze_merge.core.grid import Grid
from maze_merge.core.stats import MazeStats
from maze_merge.io.text import MazeLogWriter, render_compact, render_verbose

logger = logging.getLogger(__name__)

GENERATORS = {
    "scan": RandomizedKruskal,
    "union-find": UnionFindKruskal,
}

PAUSE_PROMPT = "Press any key to continue..."


@dataclass
class BatchReport:
    count: int
    elapsed_ms: int

    def lines(self):
        return [
            f"Mazes generated: {self.count}",
            f"Total time run: {self.elapsed_ms}ms",
        ]


class OperatorPause:
    """
    Blocks after each stepped frame.

    With a delay it sleeps instead of reading input. Without one it waits for
    a single byte on stdin, unless stdin is not interactive, where it returns
    straight away.
    """

    def __init__(self, delay: Optional[float] = None, stdin: TextIO = None, stdout: TextIO = None):
        self.delay = delay
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def interactive(self) -> bool:
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def __call__(self):
        if self.delay is not None:
            if self.delay > 0:
                time.sleep(self.delay)
            return
        if not self.interactive():
            return
        self.stdout.write(PAUSE_PROMPT)
        self.stdout.flush()
        self.stdin.read(1)


def make_generator(algo: str, grid: Grid, walls, rng: random.Random) -> Generator:
    return GENERATORS[algo](grid, walls, rng=rng)


class BatchDriver:
    """Builds, runs and renders config.count mazes, timing the whole batch."""

    def __init__(self, config: MazeConfig, stdout: TextIO = None,
                 pause: Callable[[], None] = None):
        self.config = config.validate()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.pause = pause if pause is not None else OperatorPause(config.delay, stdout=self.stdout)
        self.rng = random.Random(config.seed)
        self.generated = 0

    def run(self) -> BatchReport:
        mode = self.config.mode
        logger.info(f"Generating {self.config.count} maze(s) of {self.config.size}x{self.config.size} "
                    f"in {mode.value} mode ({self.config.algo})")

        with ExitStack() as stack:
            writer = None
            if mode == Mode.LOG_TO_FILE:
                writer = stack.enter_context(MazeLogWriter(self.config.out))
                logger.info(f"Writing mazes to {self.config.out}")

            start_time = time.time()
            for _ in range(self.config.count):
                grid = self.generate_one()
                self.emit(grid, writer)
            elapsed_ms = int((time.time() - start_time) * 1000)

        report = BatchReport(self.generated, elapsed_ms)
        logger.info(f"Batch complete: {report.count} maze(s) in {report.elapsed_ms}ms")
        return report

    def generate_one(self) -> Grid:
        grid, walls = prepare(self.config.size)
        generator = make_generator(self.config.algo, grid, walls, self.rng)

        if self.config.mode == Mode.COMPACT_STEPPED:
            for _ in generator.run():
                self.stdout.write(render_verbose(grid))
                self.stdout.flush()
                self.pause()
        else:
            generator.run_all()

        self.generated += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Maze {self.generated}: {generator.step_count} walls tested, "
                         f"{generator.merge_count} merges, stats {MazeStats.calculate(grid)}")
        return grid

    def emit(self, grid: Grid, writer: Optional[MazeLogWriter]):
        mode = self.config.mode
        if mode == Mode.VERBOSE:
            self.stdout.write(render_verbose(grid))
        elif mode == Mode.COMPACT:
            self.stdout.write(render_compact(grid))
        elif mode == Mode.LOG_TO_FILE:
            writer.write(grid)
        # stepped mode already printed every intermediate state


def run_batch(config: MazeConfig, stdout: TextIO = None) -> BatchReport:
    return BatchDriver(config, stdout=stdout).run()
