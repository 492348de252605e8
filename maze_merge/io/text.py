from typing import List, Optional, TextIO

import numpy as np

from maze_merge.core.grid import Grid

# CellKind values are 0/1, shifting by ord('0') gives the ASCII markers
_MARKER_BASE = ord("0")


def render_rows(grid: Grid) -> List[str]:
    """One string per grid row, one kind marker per cell."""
    markers = (grid.kinds + _MARKER_BASE).astype(np.uint8)
    return [row.tobytes().decode("ascii") for row in markers]


def render_verbose(grid: Grid) -> str:
    """Human readable form: a line per row."""
    return "".join(row + "\n" for row in render_rows(grid))


def render_compact(grid: Grid) -> str:
    """All rows on one line, single trailing newline."""
    return "".join(render_rows(grid)) + "\n"


class MazeLogWriter:
    """
    Appends one line per maze to a text file.

    The file is truncated (or created) once when the writer opens and the
    same handle is reused for the whole batch.
    """

    def __init__(self, filename: str):
        self.filename = filename
        self.file: Optional[TextIO] = open(filename, "w", encoding="ascii")
        self.count = 0

    def write(self, grid: Grid):
        if self.file is None:
            raise ValueError(f"Log file {self.filename} is closed")
        self.file.write(render_compact(grid))
        self.count += 1

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
