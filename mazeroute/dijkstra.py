"""Shortest paths by Dijkstra's algorithm and longest paths by exhaustive search.

Only cells holding ``.`` or ``E`` can be entered; the source cell itself may
hold anything. Cells are (x, y) = (column, row) as in :mod:`mazeroute.maze`,
but :func:`format_cells` prints them row first, one based.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .maze import Cell, Maze
from .search import Path, summarize

OPEN_CELLS = frozenset(".E")

# Up, down, left, right.
_MOVES: tuple[Cell, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class LongestPathResult:
    """Number of paths found and the first of the longest of them."""

    total: int
    longest: Path


class _SelectionQueue:
    """Priority list whose front always holds a smallest distance.

    Popping takes the front, moves the last entry to the front and then
    swaps any strictly smaller entry forward, which fixes how ties are
    broken between paths of equal length.
    """

    def __init__(self, first: tuple[int, Cell]) -> None:
        self._items = [first]

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: tuple[int, Cell]) -> None:
        self._items.append(item)

    def pop(self) -> tuple[int, Cell]:
        items = self._items
        head = items[0]
        last = items.pop()
        if items:
            items[0] = last
            for i, item in enumerate(items):
                if item[0] < items[0][0]:
                    items[0], items[i] = item, items[0]
        return head


def _neighbours(cell: Cell) -> Iterator[Cell]:
    x, y = cell
    return ((x + dx, y + dy) for dx, dy in _MOVES)


def _passable(maze: Maze, cell: Cell) -> bool:
    x, y = cell
    if not (0 <= y < maze.height and 0 <= x < maze.width):
        return False
    row = maze.rows[y]
    return x < len(row) and row[x] in OPEN_CELLS


def shortest_path(maze: Maze, source: Cell, destination: Cell) -> Path | None:
    """Return a shortest path from source to destination, or None if there is none."""
    distance: dict[Cell, int] = {source: 0}
    parent: dict[Cell, Cell] = {}
    settled: set[Cell] = set()
    queue = _SelectionQueue((0, source))

    while queue:
        _, cell = queue.pop()
        if cell in settled:
            continue
        settled.add(cell)
        for nxt in _neighbours(cell):
            if nxt in settled or not _passable(maze, nxt):
                continue
            candidate = distance[cell] + 1
            if candidate < distance.get(nxt, math.inf):
                distance[nxt] = candidate
                parent[nxt] = cell
                queue.push((candidate, nxt))

    if destination not in distance:
        return None
    path = [destination]
    while path[-1] in parent:
        path.append(parent[path[-1]])
    return tuple(reversed(path))


def enumerate_paths(maze: Maze, source: Cell, destination: Cell) -> Iterator[Path]:
    """Yield every simple path from source to destination, depth first."""
    if source == destination:
        yield (source,)
        return
    path = [source]
    visited = {source}
    stack = [_neighbours(source)]
    while stack:
        for nxt in stack[-1]:
            if nxt in visited or not _passable(maze, nxt):
                continue
            if nxt == destination:
                yield (*path, nxt)
            else:
                path.append(nxt)
                visited.add(nxt)
                stack.append(_neighbours(nxt))
                break
        else:
            stack.pop()
            visited.discard(path.pop())


def longest_path(maze: Maze, source: Cell, destination: Cell) -> LongestPathResult:
    """Count every path and keep the first longest one."""
    summary = summarize(enumerate_paths(maze, source, destination))
    return LongestPathResult(total=summary.total, longest=summary.longest)


def format_cells(path: Iterable[Cell]) -> str:
    """Render cells as one-based (row,column) pairs joined by arrows."""
    return " -> ".join(f"({y + 1},{x + 1})" for x, y in path)