import pytest

from mazeroute.maze import Maze, MazeError
from mazeroute.search import (
    Algorithm,
    PathSummary,
    backtracking_paths,
    dfs_paths,
    find_paths,
    format_path,
    greedy_paths,
    summarize,
)

RING = Maze.parse("S..\n.#.\n..E")
OPEN = Maze.parse("S...\n....\n....\n...E")
SEARCHES = [dfs_paths, backtracking_paths, greedy_paths]


def _check_path(maze, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for cell in path:
        assert maze.is_open(*cell)
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1


@pytest.mark.parametrize("search", SEARCHES)
def test_ring_has_two_paths(search):
    start, end = RING.endpoints()
    paths = list(search(RING, start, end))
    assert len(paths) == 2
    for path in paths:
        _check_path(RING, path, start, end)


@pytest.mark.parametrize("search", SEARCHES)
def test_paths_are_valid_and_distinct(search):
    start, end = OPEN.endpoints()
    paths = list(search(OPEN, start, end))
    assert len(set(paths)) == len(paths)
    for path in paths:
        _check_path(OPEN, path, start, end)


def test_algorithms_find_same_paths():
    start, end = OPEN.endpoints()
    found = [set(search(OPEN, start, end)) for search in SEARCHES]
    assert found[0] == found[1] == found[2]


def test_dfs_tries_x_plus_first():
    start, end = RING.endpoints()
    first = next(dfs_paths(RING, start, end))
    assert first[1] == (start[0] + 1, start[1])


def test_greedy_first_path_is_shortest():
    start, end = OPEN.endpoints()
    first = next(greedy_paths(OPEN, start, end))
    manhattan = abs(end[0] - start[0]) + abs(end[1] - start[1])
    assert len(first) == manhattan + 1


def test_greedy_wall_start_yields_nothing():
    maze = Maze.parse("#.E")
    assert list(greedy_paths(maze, (0, 0), (2, 0))) == []


def test_start_equals_end():
    assert list(dfs_paths(OPEN, (1, 1), (1, 1))) == [((1, 1),)]


def test_unreachable_end():
    maze = Maze.parse("S#E")
    assert list(dfs_paths(maze, (0, 0), (2, 0))) == []


def test_find_paths_defaults_to_endpoints():
    by_name = list(find_paths(RING, "dfs"))
    direct = list(dfs_paths(RING, (0, 0), (2, 2)))
    assert by_name == direct
    assert list(find_paths(RING, Algorithm.GREEDY)) == list(
        greedy_paths(RING, (0, 0), (2, 2))
    )


def test_find_paths_unknown_algorithm():
    with pytest.raises(ValueError):
        find_paths(RING, "astar")


def test_find_paths_missing_endpoints():
    with pytest.raises(MazeError):
        find_paths(Maze.parse("..."), "dfs")


def test_summarize_keeps_first_extremes():
    a = ((0, 0), (1, 0), (2, 0))
    b = ((0, 0), (1, 0))
    c = ((0, 0), (0, 1))
    d = ((0, 0), (1, 0), (2, 0), (3, 0))
    e = ((0, 0), (0, 1), (0, 2), (0, 3))
    summary = summarize([a, b, c, d, e])
    assert summary == PathSummary(total=5, shortest=b, longest=d)


def test_summarize_empty():
    assert summarize([]) == PathSummary(total=0, shortest=(), longest=())


def test_summarize_search_results():
    paths = list(find_paths(OPEN, "backtracking"))
    summary = summarize(paths)
    assert summary.total == len(paths)
    assert len(summary.shortest) == min(len(p) for p in paths)
    assert len(summary.longest) == max(len(p) for p in paths)


def test_format_path_is_one_based():
    assert format_path(((0, 0), (1, 0))) == "(1,1) -> (2,1)"


def test_format_path_empty():
    assert format_path(()) == ""