# mazeroute

Find every route from `S` to `E` through a maze written as plain text, and
report the shortest and longest of them.

## Maze files

A maze is a text file with one row per line:

```
S..#
.#..
...E
```

- `S` is the start, `E` is the end
- `#` is a wall
- for the `solve` command, any other character is open floor; for the
  `compare` command, only `.` and `E` cells can be entered

A maze may have at most 100 rows, each shorter than 100 characters;
otherwise `Maze.parse` and `Maze.load` raise `MazeError`. The width of the
maze is taken from its last row.

## Command line

```
mazeroute
mazeroute solve maze.txt --algorithm dfs
mazeroute compare maze.txt
mazeroute show maze.txt
```

- `mazeroute` with no command, or `mazeroute solve`, asks for the maze file
  name if none is given and for a search method (`dfs`, `backtracking` or
  `greedy`) if `-a/--algorithm` is not given. It prints every path it finds,
  the processor time spent, the total number of paths, and the shortest and
  longest path. Points are printed as 1-based `(column,row)` pairs. An
  unknown method name finds no paths.
- `mazeroute compare` lists every path found by depth-first search, the
  total number of paths and the longest path, then the shortest path found
  by Dijkstra's algorithm, and the time spent in each. Here points are
  printed as 1-based `(row,column)` pairs.
- `mazeroute show` prints the lines of a file.

The command exits with status 1 when the maze file cannot be read or has no
`S` or no `E`.

## Library use

Cells are `(x, y)` tuples: column first, then row, both 0-based.

```python
from mazeroute.maze import Maze
from mazeroute.search import Algorithm, find_paths, summarize, format_path

maze = Maze.parse("S..\n.#.\n..E\n")
start, end = maze.endpoints()
paths = list(find_paths(maze, Algorithm.DFS, start, end))
summary = summarize(paths)
print(summary.total)
print(format_path(summary.shortest))
print(format_path(summary.longest))
```

`find_paths` takes an `Algorithm` or its name (`"dfs"`, `"backtracking"`,
`"greedy"`); when `start` or `end` is left out it uses the maze's `S` and
`E`. The functions `dfs_paths`, `backtracking_paths` and `greedy_paths` can
also be called directly. Each yields simple paths as tuples of cells; the
greedy search tries the moves closest to the end first. `summarize` counts
the paths and keeps the first shortest and first longest.

Dijkstra's algorithm gives a single shortest path, and an exhaustive search
gives the longest. Only `.` and `E` cells can be entered:

```python
from mazeroute.dijkstra import shortest_path, longest_path, format_cells

source, destination = maze.find("S"), maze.find("E")
print(format_cells(shortest_path(maze, source, destination)))
result = longest_path(maze, source, destination)
print(result.total, format_cells(result.longest))
```

`shortest_path` returns `None` when there is no path; `enumerate_paths`
yields every simple path. `format_cells` prints cells row first.

`Maze.load(path)` reads a maze from a file and raises `MazeError` when the
file cannot be read. `Maze.find(char)` returns the first cell holding a
character, or `None`. `Maze.endpoints()` returns the last `S` and last `E`
found, and raises `MazeError` when the maze has no `S` or no `E`.
`Maze.is_open(x, y)` tells whether a cell is inside the maze and not a wall.