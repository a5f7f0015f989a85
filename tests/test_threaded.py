from mazewalk.maze import parse_maze
from mazewalk.threaded import ThreadedWalker

SOLVABLE = """3 4
e x x #
# # x #
# # x s
"""

BLOCKED = """3 3
e x #
x # #
# # s
"""


def test_run_finds_exit():
    maze, start = parse_maze(SOLVABLE)
    walker = ThreadedWalker(maze, delay=0)
    assert walker.run(start) is True
    assert walker.found is True
    assert walker.count_open() == 0


def test_run_without_exit():
    maze, start = parse_maze(BLOCKED)
    walker = ThreadedWalker(maze, delay=0)
    assert walker.run(start) is False
    assert maze.render() == "..#\n.##\n##s\n"


def test_frames_are_delivered():
    maze, start = parse_maze(SOLVABLE)
    frames = []
    ThreadedWalker(maze, delay=0).run(start, frames.append)
    assert len(frames) > 0
    assert all(len(frame.splitlines()) == maze.rows for frame in frames)


def test_exit_cell_is_kept():
    maze, start = parse_maze(SOLVABLE)
    ThreadedWalker(maze, delay=0).run(start)
    assert maze.grid[2][3] == "s"
    assert maze[start] == "."


def test_no_open_cells_after_run():
    maze, start = parse_maze(BLOCKED)
    walker = ThreadedWalker(maze, delay=0)
    walker.run(start)
    assert walker.count_open() == 0
    assert "x" not in maze.render()