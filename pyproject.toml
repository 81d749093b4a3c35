[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeroute"
version = "0.1.0"
description = "Find every route through a text maze, with shortest and longest paths, by depth-first, backtracking, greedy search or Dijkstra."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "pathfinding", "dfs", "backtracking", "dijkstra", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazeroute = "mazeroute.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
