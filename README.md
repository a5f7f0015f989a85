# mazewalk

Load a maze from a text file and watch the search for its exit in the terminal.
There are two walkers. The default one explores depth-first and marks each
visited cell with `.`. The threaded one starts a new thread for each open
neighbour. It shows the cells being explored as `o` and the finished cells
as `.`.

## Maze files

The first line gives the number of rows and the number of columns. The grid
follows. Whitespace is ignored, so the cells may be separated by spaces or
written together.

```
4 5
#e###
#xx##
##xx#
###s#
```

| Character | Meaning                   |
|-----------|---------------------------|
| `e`       | entrance (start position) |
| `s`       | exit                      |
| `x`       | open path                 |
| any other | wall                      |

If there is more than one `e`, the last one is the start.

## Command line

```
mazewalk path/to/maze.txt
mazewalk --threaded path/to/maze.txt
mazewalk --delay 0.1 path/to/maze.txt
```

- Without options, the terminal is cleared and the maze is redrawn after
  each step. The pause between steps is 0.05 s. The command ends with
  `Saída encontrada!` or `Não foi possível encontrar a saída.`.
- `--threaded` uses the threaded walker. It redraws the maze every 0.25 s and
  ends with `A saida foi encontrada` or `A saida NÃO foi encontrada`.
- `--delay SECONDS` replaces the default pause in either mode.

The exit status is 0 when the walk ran, whether or not the exit was found.
It is 1 when the arguments are wrong, the file cannot be read, or the maze is
malformed or has no entrance. In those cases the reason is printed to
standard error, for example `Posição inicial não encontrada no labirinto.`.

## Library use

```python
from mazewalk.maze import load_maze, parse_maze

maze, start = load_maze("maze.txt")
found = maze.walk(start, on_step=lambda pos: print(maze.render()))
```

- `parse_maze(text)` reads the same format from a string.
- Both functions return a `(Maze, Position)` pair.
- Both raise `MazeError` when the header is missing or invalid, the grid is
  incomplete, or there is no `e`. `load_maze` also raises it when the file
  cannot be opened.
- `Maze.walk(start, on_step=None)` changes the grid in place. It calls
  `on_step` with the `Position` of each visited cell and returns whether the
  exit was reached.
- `Maze.is_valid_position(row, col)` tells whether a cell is inside the grid
  and is open path or the exit.
- `Maze.render()` returns the grid as text, one line per row.

For the threaded exploration:

```python
from mazewalk.threaded import ThreadedWalker

walker = ThreadedWalker(maze, delay=0.05)
found = walker.run(start, on_frame=print)
```

`run` passes a rendering of the maze to `on_frame` at every interval. It stops
when the exit is seen or when no cell is left being explored, then waits for
all worker threads to finish. `count_open()` returns the number of cells
currently marked `o`. After a run, `walker.found` holds the result.

## Development

```
pip install -e .[test]
pytest
```