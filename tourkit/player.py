"""Step-by-step playback of knight's tour solutions on a board."""

from __future__ import annotations

from itertools import product
from typing import Iterator

from tourkit.board import BOARD_SIZE, Board, Point
from tourkit.solver import Algorithm, Path, solve

__all__ = ["TourPlayer"]

Vec2 = tuple[float, float]


class TourPlayer:
    """Replays the arrows of a solved tour, tracking board numbers and animation."""

    def __init__(
        self,
        size: int = BOARD_SIZE,
        cell_size: float = 60.0,
        board_offset: tuple[float, float] = (50.0, 50.0),
    ) -> None:
        self.size = size
        self.cell_size = float(cell_size)
        self.board_offset = (float(board_offset[0]), float(board_offset[1]))
        self.board = Board(size)
        self.start_position = Point(0, 0)
        self.knight_position = self.start_position
        self.solutions: list[Path] = []
        self.current_solution = 0
        self.current_step = 0
        self.running = False
        self.paused = False
        self.completed = False
        self.animation_speed = 1.0
        self.animation_time = 0.0
        self.step_duration = 1.0
        self.anim_start = self.start_position
        self.anim_end = self.start_position
        self.anim_progress = 0.0
        self.status_message = ""

    def _squares(self) -> Iterator[tuple[int, int]]:
        return product(range(self.size), repeat=2)

    def _center(self, point: Point) -> Vec2:
        ox, oy = self.board_offset
        half = self.cell_size / 2.0
        return (ox + point.y * self.cell_size + half, oy + point.x * self.cell_size + half)

    def set_start_position(self, x: int, y: int) -> None:
        """Move the start square and reset; squares off the board are ignored."""
        if self.board.in_bounds(x, y):
            self.start_position = Point(x, y)
            self.reset()

    def reset(self) -> None:
        """Clear the board, put the knight on the start square and stop playback."""
        self.board = Board(self.size)
        self.knight_position = self.start_position
        self.board[self.start_position] = 1
        self.current_step = 0
        self.current_solution = 0
        self.anim_progress = 0.0
        self.animation_time = 0.0
        self.running = False
        self.paused = False
        self.completed = False
        self.status_message = ""

    def run_algorithm(self, algorithm: Algorithm) -> None:
        """Solve from the start square and begin playback; ignored while running."""
        if self.running:
            return
        self.reset()
        self.solutions = solve(algorithm, self.start_position, self.size)
        if not self.solutions:
            self.status_message = "No solution found!"
            return
        self.running = True
        self.paused = False
        self.current_step = 0
        self.current_solution = 0
        self.anim_start = self.start_position
        first = self.solutions[0]
        self.anim_end = first[1].end if len(first) > 1 else self.start_position
        self.status_message = "Running..."

    def update(self, delta_time: float) -> None:
        """Advance the animation clock, taking a step once a step's time has passed."""
        if not self.running or self.paused or self.completed:
            return
        self.animation_time += delta_time * self.animation_speed
        if self.animation_time >= self.step_duration:
            self.animation_time = 0.0
            self._advance()
        else:
            self.anim_progress = self.animation_time / self.step_duration

    def _advance(self) -> None:
        if self.current_solution >= len(self.solutions):
            self.completed = True
            self.status_message = "All solutions completed!"
            return

        path = self.solutions[self.current_solution]
        if self.current_step >= len(path):
            if self.current_solution + 1 < len(self.solutions):
                self.current_solution += 1
                self.current_step = 0
                self.reset()
                self.status_message = (
                    f"Solution {self.current_solution + 1} of {len(self.solutions)}"
                )
            else:
                self.completed = True
                self.status_message = "All solutions completed!"
            return

        arrow = path[self.current_step]
        self.knight_position = arrow.end
        if arrow.step_next:
            highest = max(self.board[square] for square in self._squares())
            self.board[self.knight_position] = highest + 1
        else:
            self.board[arrow.start] = 0

        self.current_step += 1
        self.anim_start = self.knight_position
        if self.current_step < len(path):
            self.anim_end = path[self.current_step].end
        self.anim_progress = 0.0

        if all(self.board[square] != 0 for square in self._squares()):
            self.paused = True
            self.status_message = f"Solution found! Step: {self.current_step}"

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        self.status_message = "Paused" if self.paused else "Running..."

    def set_speed(self, speed: float) -> None:
        self.animation_speed = speed

    def next_step(self) -> None:
        """Take the next step at once, whether paused or not."""
        if not self.running:
            return
        self.animation_time = 0.0
        self.anim_progress = 0.0
        self._advance()

    def path_segments(self) -> list[tuple[Vec2, Vec2]]:
        """Screen-space line segments of the forward moves played so far."""
        if not self.running or not self.solutions:
            return []
        path = self.solutions[self.current_solution]
        return [
            (self._center(arrow.start), self._center(arrow.end))
            for arrow in path[: self.current_step]
            if arrow.step_next
        ]

    def knight_screen_position(self) -> Vec2:
        """Where the knight is drawn, interpolated while a move is animating."""
        if self.running and not self.paused and not self.completed and self.anim_progress < 1.0:
            sx, sy = self._center(self.anim_start)
            shift_x = (self.anim_end.y - self.anim_start.y) * self.cell_size * self.anim_progress
            shift_y = (self.anim_end.x - self.anim_start.x) * self.cell_size * self.anim_progress
            return (sx + shift_x, sy + shift_y)
        return self._center(self.knight_position)