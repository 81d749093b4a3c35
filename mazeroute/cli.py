"""Command line: solve a maze, compare search methods, or show a maze file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path as FilePath

from .dijkstra import enumerate_paths, format_cells, shortest_path
from .maze import Maze, MazeError
from .search import Algorithm, Path, find_paths, format_path, summarize


def _ask(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _load(name: str) -> Maze | None:
    try:
        return Maze.load(name)
    except MazeError as exc:
        print(exc, file=sys.stderr)
        return None


def _announce(paths: Iterable[Path], label: Callable[[int, Path], str]) -> Iterator[Path]:
    for number, path in enumerate(paths, start=1):
        print(label(number, path))
        yield path


def _solve(maze_name: str | None, algorithm_name: str | None) -> int:
    maze = _load(maze_name or _ask("Enter the maze file name: "))
    if maze is None:
        return 1

    if algorithm_name is None:
        print("What algorithm methods do you want to use? (dfs/backtracking/greedy)")
        algorithm_name = _ask("Algorithm : ")

    try:
        start, end = maze.endpoints()
    except MazeError as exc:
        print(exc)
        return 1

    try:
        algorithm = Algorithm(algorithm_name)
    except ValueError:
        paths: Iterator[Path] = iter(())
    else:
        paths = find_paths(maze, algorithm, start, end)

    started = time.process_time()
    summary = summarize(_announce(paths, lambda _, path: f"Path: {format_path(path)}"))
    elapsed = time.process_time() - started

    print(f"Time spent: {elapsed:f} seconds")
    print(f"Total paths found: {summary.total}")
    print(f"Shortest Path: {format_path(summary.shortest)}")
    print(f"Longest Path: {format_path(summary.longest)}")
    return 0


def _compare(maze_name: str | None) -> int:
    maze = _load(maze_name or _ask("Enter the maze file name: "))
    if maze is None:
        return 1
    try:
        source, destination = maze.endpoints()
    except MazeError as exc:
        print(exc)
        return 1

    started = time.process_time()
    summary = summarize(
        _announce(
            enumerate_paths(maze, source, destination),
            lambda number, path: f"Path-{number}: {format_cells(path)}",
        )
    )
    if not summary.longest:
        print("\nNo longest path found")
    else:
        print(f"\nTotal number of possible paths: {summary.total}")
        print()
        print(f"Longest Path: {format_cells(summary.longest)}")
    dfs_time = time.process_time() - started

    started = time.process_time()
    shortest = shortest_path(maze, source, destination)
    if shortest is None:
        print("No shortest path found")
    else:
        print()
        print(f"Shortest Path: {format_cells(shortest)}")
    dijkstra_time = time.process_time() - started

    print(f"\nTime spent in DFS: {dfs_time:f} seconds")
    print(f"Time spent in Dijkstra: {dijkstra_time:f} seconds")
    print(f"Total Time spent: {dfs_time + dijkstra_time:f} seconds")
    return 0


def _show(file_name: str | None) -> int:
    print("\n\n Read the file and store the lines into an array :")
    print("------------------------------------------------------")
    name = file_name or _ask(" Input the filename to be opened : ")
    try:
        lines = FilePath(name).read_text().splitlines()
    except OSError as exc:
        print(f"Unable to open file: {exc}", file=sys.stderr)
        return 1
    print(f"\n The content of the file {name}  are : ")
    for line in lines:
        print(f" {line}")
    print()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazeroute",
        description="Find every path through a maze, with the shortest and longest.",
    )
    commands = parser.add_subparsers(dest="command")

    solve = commands.add_parser("solve", help="list all paths with one search method")
    solve.add_argument("maze", nargs="?", help="maze text file")
    solve.add_argument(
        "-a", "--algorithm", help="dfs, backtracking or greedy (asked for if omitted)"
    )

    compare = commands.add_parser(
        "compare", help="longest path by search, shortest path by Dijkstra"
    )
    compare.add_argument("maze", nargs="?", help="maze text file")

    show = commands.add_parser("show", help="print the lines of a file")
    show.add_argument("file", nargs="?", help="file to print")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; with no command, solve a maze asking for its inputs."""
    args = _build_parser().parse_args(argv)
    if args.command == "compare":
        return _compare(args.maze)
    if args.command == "show":
        return _show(args.file)
    return _solve(getattr(args, "maze", None), getattr(args, "algorithm", None))


if __name__ == "__main__":
    sys.exit(main())