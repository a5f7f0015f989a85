"""Maze grid, file loading and the depth-first walk."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

START = "e"
EXIT = "s"
PATH = "x"
VISITED = "."

# Up, down, left, right: the order in which neighbours are pushed.
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class MazeError(Exception):
    """Raised when a maze cannot be read or has no starting cell."""


@dataclass(frozen=True)
class Position:
    """A cell in the maze, by row and column."""

    row: int
    col: int


class Maze:
    """A rectangular grid of single-character cells."""

    def __init__(self, grid: list[list[str]]) -> None:
        self.grid = grid

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, pos: Position) -> str:
        return self.grid[pos.row][pos.col]

    def __setitem__(self, pos: Position, value: str) -> None:
        self.grid[pos.row][pos.col] = value

    def is_valid_position(self, row: int, col: int) -> bool:
        """True if the cell is inside the maze and is open path or the exit."""
        return (
            0 <= row < self.rows
            and 0 <= col < self.cols
            and self.grid[row][col] in (PATH, EXIT)
        )

    def render(self) -> str:
        """The maze as text, one line per row."""
        return "".join("".join(row) + "\n" for row in self.grid)

    def __str__(self) -> str:
        return self.render()

    def walk(
        self,
        start: Position,
        on_step: Callable[[Position], None] | None = None,
    ) -> bool:
        """Explore from ``start`` until the exit is reached.

        Each visited cell other than the exit is marked as visited, and
        ``on_step`` is called after every visit.  Returns whether the exit
        was found.
        """
        pending: list[Position] = []
        pos = start
        while True:
            if self[pos] != EXIT:
                self[pos] = VISITED
            if on_step is not None:
                on_step(pos)
            if self[pos] == EXIT:
                return True
            for d_row, d_col in _DIRECTIONS:
                row, col = pos.row + d_row, pos.col + d_col
                if self.is_valid_position(row, col):
                    pending.append(Position(row, col))
            if not pending:
                return False
            pos = pending.pop()


def parse_maze(text: str) -> tuple[Maze, Position]:
    """Parse a maze: a row and column count, then the cells.

    Whitespace between cells is ignored.  Returns the maze and the
    position of its starting cell (the last one, if there are several).
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise MazeError("Cabeçalho do labirinto ausente.")
    try:
        num_rows, num_cols = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise MazeError("Cabeçalho do labirinto inválido.") from exc
    if num_rows < 0 or num_cols < 0:
        raise MazeError("Dimensões do labirinto inválidas.")

    cells = "".join(tokens[2:])
    if len(cells) < num_rows * num_cols:
        raise MazeError("Conteúdo do labirinto incompleto.")

    grid = [
        list(cells[r * num_cols:(r + 1) * num_cols]) for r in range(num_rows)
    ]
    start = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == START:
                start = Position(r, c)
    if start is None:
        raise MazeError("Posição inicial não encontrada no labirinto.")
    return Maze(grid), start


def load_maze(path: str | Path) -> tuple[Maze, Position]:
    """Read and parse a maze file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise MazeError("Erro ao abrir o arquivo!") from exc
    return parse_maze(text)