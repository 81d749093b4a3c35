"""Enumeration of every simple path through a maze, and path summaries."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .maze import Cell, Maze

Path = tuple[Cell, ...]

_AXIS_ORDER: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_GREEDY_ORDER: tuple[Cell, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class Algorithm(Enum):
    DFS = "dfs"
    BACKTRACKING = "backtracking"
    GREEDY = "greedy"


@dataclass(frozen=True)
class PathSummary:
    """Count of paths found, with the first shortest and first longest."""

    total: int
    shortest: Path
    longest: Path


def _walk(
    maze: Maze,
    start: Cell,
    end: Cell,
    neighbours: Callable[[Cell], Iterable[Cell]],
) -> Iterator[Path]:
    path = [start]
    visited = {start}
    if start == end:
        yield tuple(path)
        return
    stack = [iter(neighbours(start))]
    while stack:
        for nxt in stack[-1]:
            if nxt in visited or not maze.is_open(*nxt):
                continue
            path.append(nxt)
            if nxt == end:
                yield tuple(path)
                path.pop()
            else:
                visited.add(nxt)
                stack.append(iter(neighbours(nxt)))
            break
        else:
            stack.pop()
            visited.discard(path.pop())


def _fixed_order(cell: Cell) -> Iterator[Cell]:
    x, y = cell
    return ((x + dx, y + dy) for dx, dy in _AXIS_ORDER)


def dfs_paths(maze: Maze, start: Cell, end: Cell) -> Iterator[Path]:
    """Yield every simple path from start to end, depth first."""
    return _walk(maze, start, end, _fixed_order)


def backtracking_paths(maze: Maze, start: Cell, end: Cell) -> Iterator[Path]:
    """Yield every simple path from start to end by backtracking."""
    return _walk(maze, start, end, _fixed_order)


def greedy_paths(maze: Maze, start: Cell, end: Cell) -> Iterator[Path]:
    """Yield every simple path, trying the moves nearest the end first."""
    if not maze.is_open(*start):
        return iter(())
    end_x, end_y = end

    def closest_first(cell: Cell) -> list[Cell]:
        x, y = cell
        moves = [(x + dx, y + dy) for dx, dy in _GREEDY_ORDER]
        return sorted(moves, key=lambda c: abs(end_x - c[0]) + abs(end_y - c[1]))

    return _walk(maze, start, end, closest_first)


_SEARCHES = {
    Algorithm.DFS: dfs_paths,
    Algorithm.BACKTRACKING: backtracking_paths,
    Algorithm.GREEDY: greedy_paths,
}


def find_paths(
    maze: Maze,
    algorithm: Algorithm | str,
    start: Cell | None = None,
    end: Cell | None = None,
) -> Iterator[Path]:
    """Yield paths with the named algorithm; endpoints default to S and E."""
    search = _SEARCHES[Algorithm(algorithm)]
    if start is None or end is None:
        default_start, default_end = maze.endpoints()
        start = default_start if start is None else start
        end = default_end if end is None else end
    return search(maze, start, end)


def summarize(paths: Iterable[Path]) -> PathSummary:
    """Count paths and keep the first shortest and first longest seen."""
    total = 0
    shortest: Path = ()
    longest: Path = ()
    for path in paths:
        total += 1
        if not shortest or len(path) < len(shortest):
            shortest = tuple(path)
        if len(path) > len(longest):
            longest = tuple(path)
    return PathSummary(total=total, shortest=shortest, longest=longest)


def format_path(path: Iterable[Cell]) -> str:
    """Render a path as one-based (x,y) pairs joined by arrows."""
    return " -> ".join(f"({x + 1},{y + 1})" for x, y in path)