"""Command line entry point: animate a walk through a maze file."""

from __future__ import annotations

import argparse
import sys
import time

from .maze import MazeError, Position, load_maze
from .threaded import ThreadedWalker

_CLEAR = "\033[H\033[2J"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazewalk", description="Procura a saída de um labirinto."
    )
    parser.add_argument("arquivo_labirinto", help="arquivo do labirinto")
    parser.add_argument(
        "--threaded",
        action="store_true",
        help="explora cada ramo em uma thread",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="intervalo entre quadros em segundos",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the maze walker; return the process exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code == 0 else 1

    try:
        maze, start = load_maze(args.arquivo_labirinto)
    except MazeError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.threaded:
        delay = 0.25 if args.delay is None else args.delay

        def show_frame(frame: str) -> None:
            sys.stdout.write(_CLEAR + frame)
            sys.stdout.flush()

        found = ThreadedWalker(maze, delay).run(start, show_frame)
        if found:
            print("\n\nA saida foi encontrada\n")
        else:
            print("\n\nA saida NÃO foi encontrada\n")
        return 0

    delay = 0.05 if args.delay is None else args.delay

    def show_step(_pos: Position) -> None:
        sys.stdout.write(_CLEAR + maze.render())
        sys.stdout.flush()
        time.sleep(delay)

    if maze.walk(start, show_step):
        print("Saída encontrada!")
    else:
        print("Não foi possível encontrar a saída.")
    return 0