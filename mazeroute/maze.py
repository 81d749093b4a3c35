"""Maze grids read from text, with wall and bounds checks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MAX_SIZE = 100
WALL = "#"
START = "S"
END = "E"

Cell = tuple[int, int]


class MazeError(Exception):
    """Raised when a maze cannot be read or lacks a start or an end."""


@dataclass(frozen=True)
class Maze:
    """A rectangular maze of characters; coordinates are (x, y) = (column, row)."""

    rows: tuple[str, ...]
    width: int

    @property
    def height(self) -> int:
        return len(self.rows)

    @classmethod
    def parse(cls, text: str) -> Maze:
        """Build a maze from text, one row per line.

        The width is taken from the last row, as the grid is assumed to be
        rectangular.
        """
        rows = tuple(text.splitlines())
        if len(rows) > MAX_SIZE:
            raise MazeError(f"maze has more than {MAX_SIZE} rows")
        if any(len(row) >= MAX_SIZE for row in rows):
            raise MazeError(f"maze rows must be shorter than {MAX_SIZE} characters")
        width = len(rows[-1]) if rows else 0
        return cls(rows=rows, width=width)

    @classmethod
    def load(cls, path: str | Path) -> Maze:
        """Read a maze from a text file."""
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise MazeError(f"Unable to open file: {exc}") from exc
        return cls.parse(text)

    def _cell(self, x: int, y: int) -> str:
        row = self.rows[y]
        return row[x] if x < len(row) else ""

    def find(self, target: str) -> Cell | None:
        """Return the first (x, y) holding ``target`` in row order, or None."""
        for y, row in enumerate(self.rows):
            x = row.find(target)
            if x != -1:
                return (x, y)
        return None

    def is_open(self, x: int, y: int) -> bool:
        """True if (x, y) lies inside the maze and is not a wall."""
        return (
            0 <= y < self.height
            and 0 <= x < self.width
            and self._cell(x, y) != WALL
        )

    def endpoints(self) -> tuple[Cell, Cell]:
        """Return the start and end cells; the last occurrence of each wins."""
        start: Cell | None = None
        end: Cell | None = None
        for y in range(self.height):
            for x in range(self.width):
                char = self._cell(x, y)
                if char == START:
                    start = (x, y)
                elif char == END:
                    end = (x, y)
        if start is None or end is None:
            raise MazeError("Start or end not found in the maze.")
        return start, end