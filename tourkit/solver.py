"""Knight's tour search: plain backtracking, Warnsdorff's rule, and both combined."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from tourkit.board import BOARD_SIZE, Arrow, Board, Point

Path = list[Arrow]

DEFAULT_PATH_COUNT = 2

MOVES: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)


class Algorithm(Enum):
    BRUTE_FORCE = "brute_force"
    HEURISTIC = "heuristic"
    HEURISTIC_ENHANCER = "heuristic_enhancer"


class CannotMoveError(RuntimeError):
    """The greedy search reached a square with no unvisited neighbour."""


def _free_targets(board: Board, x: int, y: int) -> Iterator[tuple[int, Point]]:
    for direction, (dx, dy) in enumerate(MOVES):
        nx, ny = x + dx, y + dy
        if board.in_bounds(nx, ny) and board[nx, ny] == 0:
            yield direction, Point(nx, ny)


def count_onward_moves(board: Board, x: int, y: int) -> int:
    """Number of unvisited squares a knight on (x, y) could jump to."""
    return sum(1 for _ in _free_targets(board, x, y))


def _checked_start(start: Iterable[int], size: int) -> Point:
    point = Point(*start)
    if not (0 <= point.x < size and 0 <= point.y < size):
        raise ValueError(f"start {tuple(point)} is off a {size}x{size} board")
    return point


@dataclass
class _Frame:
    pos: Point
    move_index: int = 0
    sorted_dirs: Optional[list[int]] = None


def solve(algorithm: Algorithm, start: Iterable[int], size: int = BOARD_SIZE) -> list[Path]:
    """Run the chosen search from ``start``."""
    if algorithm is Algorithm.BRUTE_FORCE:
        return solve_brute_force(start, size)
    if algorithm is Algorithm.HEURISTIC:
        return solve_heuristic(start, size)
    if algorithm is Algorithm.HEURISTIC_ENHANCER:
        return solve_heuristic_enhancer(start, size)
    raise ValueError(f"Unknown algorithm type: {algorithm!r}")


def solve_brute_force(start: Iterable[int], size: int = BOARD_SIZE) -> list[Path]:
    """Depth-first search trying directions in fixed order.

    Returns one path (forward moves and recorded step-backs) when a tour is
    found, or an empty list when none exists.
    """
    board = Board(size)
    origin = _checked_start(start, size)
    step = 1
    board[origin] = step
    stack = [_Frame(origin)]
    history: Path = []

    while stack:
        if step == size * size:
            return [list(history)]

        frame = stack[-1]
        moved = False
        while frame.move_index < len(MOVES):
            dx, dy = MOVES[frame.move_index]
            frame.move_index += 1  # resume after this direction on return
            target = Point(frame.pos.x + dx, frame.pos.y + dy)
            if board.in_bounds(*target) and board[target] == 0:
                step += 1
                board[target] = step
                stack.append(_Frame(target))
                history.append(Arrow(frame.pos, target, True))
                moved = True
                break

        if not moved:
            end = stack.pop().pos
            step -= 1
            back_to = stack[-1].pos if stack else end
            board[end] = 0
            history.append(Arrow(end, back_to, False))

    return []


def solve_heuristic(start: Iterable[int], size: int = BOARD_SIZE) -> list[Path]:
    """Warnsdorff's rule: always jump to the square with the fewest onward moves.

    Raises CannotMoveError when the walk gets stuck before covering the board.
    """
    board = Board(size)
    current = _checked_start(start, size)
    step = 1
    board[current] = step
    history: Path = []

    while step < size * size:
        options = sorted(
            (
                (count_onward_moves(board, target.x, target.y), target)
                for _, target in _free_targets(board, current.x, current.y)
            ),
            key=lambda option: option[0],
        )
        if not options:
            raise CannotMoveError(f"Cannot move from {tuple(current)} at step {step}")
        target = options[0][1]
        history.append(Arrow(current, target, True))
        current = target
        step += 1
        board[current] = step

    return [history]


def solve_heuristic_enhancer(
    start: Iterable[int], size: int = BOARD_SIZE, max_paths: int = DEFAULT_PATH_COUNT
) -> list[Path]:
    """Backtracking search with directions ordered by Warnsdorff's rule.

    Collects up to ``max_paths`` tours. Each complete tour ends with an arrow
    from the last square to itself. The history is shared, so every later
    path extends the ones before it.
    """
    if max_paths < 1:
        raise ValueError(f"max_paths must be at least 1, got {max_paths}")
    board = Board(size)
    origin = _checked_start(start, size)
    step = 1
    board[origin] = step
    stack = [_Frame(origin)]
    history: Path = []
    result: list[Path] = []

    while stack:
        if step == size * size:
            last = stack[-1].pos
            history.append(Arrow(last, last, True))
            result.append(list(history))
            if len(result) == max_paths:
                break
            end = stack.pop().pos
            step -= 1
            board[end] = 0
            back_to = stack[-1].pos if stack else end
            history.append(Arrow(end, back_to, False))
            continue

        frame = stack[-1]
        pos = frame.pos
        if frame.sorted_dirs is None:
            options = sorted(
                (
                    (count_onward_moves(board, target.x, target.y), direction)
                    for direction, target in _free_targets(board, pos.x, pos.y)
                ),
                key=lambda option: option[0],
            )
            frame.sorted_dirs = [direction for _, direction in options]

        moved = False
        while frame.move_index < len(frame.sorted_dirs):
            dx, dy = MOVES[frame.sorted_dirs[frame.move_index]]
            frame.move_index += 1
            target = Point(pos.x + dx, pos.y + dy)
            if board.in_bounds(*target) and board[target] == 0:
                step += 1
                board[target] = step
                stack.append(_Frame(target))
                history.append(Arrow(pos, target, True))
                moved = True
                break

        if not moved:
            stack.pop()
            step -= 1
            board[pos] = 0
            back_to = stack[-1].pos if stack else pos
            history.append(Arrow(pos, back_to, False))

    return result