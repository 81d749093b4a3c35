"""Route finding through text mazes: all paths, shortest and longest, and a command line."""

__version__ = "0.1.0"