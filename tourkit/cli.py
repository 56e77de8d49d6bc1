"""Command line: solve a knight's tour and print the numbered board."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

from tourkit.board import BOARD_SIZE, Arrow, Board, Point
from tourkit.solver import (
    DEFAULT_PATH_COUNT,
    Algorithm,
    CannotMoveError,
    solve,
    solve_heuristic_enhancer,
)

__all__ = ["main"]


def _replay(path: Iterable[Arrow], start: Point, size: int) -> Board:
    board = Board(size)
    board[start] = 1
    step = 1
    for arrow in path:
        if arrow.step_next:
            if arrow.start == arrow.end:
                continue
            step += 1
            board[arrow.end] = step
        else:
            board[arrow.start] = 0
            step -= 1
    return board


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourkit", description="Find knight's tours and print the numbered board."
    )
    parser.add_argument("x", type=int, help="start row")
    parser.add_argument("y", type=int, help="start column")
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.HEURISTIC_ENHANCER.value,
    )
    parser.add_argument("-s", "--size", type=int, default=BOARD_SIZE, help="board size")
    parser.add_argument(
        "-n",
        "--paths",
        type=int,
        default=DEFAULT_PATH_COUNT,
        help="tours to collect with heuristic_enhancer",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    algorithm = Algorithm(args.algorithm)
    start = Point(args.x, args.y)
    try:
        if algorithm is Algorithm.HEURISTIC_ENHANCER:
            paths = solve_heuristic_enhancer(start, args.size, args.paths)
        else:
            paths = solve(algorithm, start, args.size)
    except CannotMoveError as exc:
        print(f"tourkit: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"tourkit: {exc}", file=sys.stderr)
        return 2

    if not paths:
        print("tourkit: No tour found", file=sys.stderr)
        return 1

    for number, path in enumerate(paths, start=1):
        backs = sum(1 for arrow in path if not arrow.step_next)
        print(f"Tour {number} ({len(path)} moves, {backs} step-backs):")
        _replay(path, start, args.size).print_board()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())