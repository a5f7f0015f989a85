"""Maze exploration with one thread per branch."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from .maze import EXIT, PATH, VISITED, Maze, Position

ACTIVE = "o"

# Right, left, down, up: the order in which neighbours are examined.
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class ThreadedWalker:
    """Explores a maze, starting a new thread at every open neighbour.

    Cells being explored are shown as ``o``; finished cells as ``.``.
    """

    def __init__(self, maze: Maze, delay: float = 0.25) -> None:
        self.maze = maze
        self.delay = delay
        self.found = False
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    def count_open(self) -> int:
        """Number of cells currently being explored."""
        return sum(row.count(ACTIVE) for row in self.maze.grid)

    def _spawn(self, pos: Position) -> None:
        # Called with the lock held.
        self.maze[pos] = ACTIVE
        thread = threading.Thread(target=self._explore, args=(pos,), daemon=True)
        self._threads.append(thread)
        thread.start()

    def _explore(self, pos: Position) -> None:
        time.sleep(self.delay)
        with self._lock:
            if not self.found:
                for d_row, d_col in _DIRECTIONS:
                    row, col = pos.row + d_row, pos.col + d_col
                    if not (0 <= row < self.maze.rows and 0 <= col < self.maze.cols):
                        continue
                    cell = self.maze.grid[row][col]
                    if cell == EXIT:
                        self.found = True
                    elif cell == PATH:
                        self._spawn(Position(row, col))
            self.maze[pos] = VISITED

    def _join_all(self) -> None:
        while True:
            with self._lock:
                pending = [t for t in self._threads if t.is_alive()]
            if not pending:
                return
            for thread in pending:
                thread.join()

    def run(
        self,
        start: Position,
        on_frame: Callable[[str], None] | None = None,
    ) -> bool:
        """Explore from ``start``; return whether the exit was found.

        ``on_frame`` receives a rendering of the maze at every interval
        until the exit is found or no cell is left being explored.
        """
        with self._lock:
            self._spawn(start)
        while True:
            with self._lock:
                frame = self.maze.render()
                remaining = self.count_open()
                found = self.found
            if on_frame is not None:
                on_frame(frame)
            if found or remaining == 0:
                break
            time.sleep(self.delay)
        self._join_all()
        return self.found