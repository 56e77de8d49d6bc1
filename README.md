# tourkit

Solvers for the knight's tour puzzle, a player that replays a solver's moves
one step at a time (backtracking included), and a few small geometry and
formatting helpers for showing such things.

## Modules

- `tourkit.board`: `Point` (row, column), `Arrow` (one recorded move with
  `start`, `end` and `step_next`, which is false for a step back) and `Board`,
  a square grid of step numbers indexed as `board[x, y]`. Zero marks an
  unvisited square. Indexing off the board raises `IndexError`.
  `Board.print_board(file=None)` writes the grid row by row, and `str(board)`
  gives the same text.
- `tourkit.solver`: the searches, selected by `Algorithm`:
  - `Algorithm.BRUTE_FORCE` (`solve_brute_force`) runs a depth-first search
    that tries the eight directions in a fixed order. It records every forward
    move and every step back, and returns one path or an empty list. It is
    exhaustive and can take a very long time on a full 8x8 board.
  - `Algorithm.HEURISTIC` (`solve_heuristic`) follows Warnsdorff's rule and
    always jumps to the square with the fewest onward moves. It never
    backtracks, and it raises `CannotMoveError` if it gets stuck.
  - `Algorithm.HEURISTIC_ENHANCER` (`solve_heuristic_enhancer`) runs a
    depth-first search that tries moves in Warnsdorff order and collects up to
    `max_paths` tours (2 by default). Each complete tour ends with an arrow from
    the last square to itself. The move history is shared between tours, so
    each later path extends the ones before it.
  - `solve(algorithm, start, size=8)` dispatches to these.
    `count_onward_moves(board, x, y)` counts the free squares a knight could
    jump to. A start square off the board raises `ValueError`.
- `tourkit.player`: `TourPlayer` replays a solution over time.
  `run_algorithm` solves the tour and starts playback. `update(delta_time)`
  advances the clock. `toggle_pause`, `set_speed`, `next_step`, `reset` and
  `set_start_position` control playback. `path_segments()` and
  `knight_screen_position()` give screen-space coordinates for drawing.
  Playback pauses by itself once every square is numbered.
- `tourkit.events`: `EventType`, `Event` and `EventTarget`. `on()` registers a
  listener for one event type, and `dispatch_event()` calls the listeners for
  that type in the order they were registered. You can pass event types to
  `dispatch_event()` to limit which events get through.
- `tourkit.tree_layout`: `TreeRenderer` holds nodes (`TreeNode`) and edges
  (`TreeEdge`). It gives their bounding `Rect`, the edge segments, and the
  colours of the nodes over time. `feathered_line_strip` builds the vertices of
  an anti-aliased line.
- `tourkit.viewport`: `View` and `CanvasView` cover zoom, pan, fit-to-content
  and the mapping from window pixels to content coordinates.
- `tourkit.fitting`: `fit_k(times, ns, f)` is a least-squares fit of a single
  scale factor, with `times[i]` taken as roughly `k * f(ns[i])`.
- `tourkit.debugfmt`: `serialize`, `serialize_fields` and helpers that turn
  values and records into indented text for debugging. Short results are
  collapsed onto one line.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from tourkit.board import Point
from tourkit.solver import Algorithm, solve

paths = solve(Algorithm.HEURISTIC_ENHANCER, Point(0, 0), 8)
for path in paths:
    forward = [arrow for arrow in path if arrow.step_next]
    print(len(path), "arrows,", len(forward), "forward")
```

`solve` returns a list of paths. Each path is a list of `Arrow` moves in the
order the search made them.

## Command line

```
tourkit 0 0
tourkit 3 4 --algorithm heuristic
tourkit 0 0 -a heuristic_enhancer -n 3 -s 6
```

The two positional arguments are the start row and the start column. The
options are:

- `-a/--algorithm`: one of `brute_force`, `heuristic` or
  `heuristic_enhancer`. The default is `heuristic_enhancer`.
- `-s/--size`: the board size. The default is 8.
- `-n/--paths`: how many tours `heuristic_enhancer` collects. The default is 2.

For each tour found, the command prints a line of the form
`Tour N (M moves, K step-backs):` followed by the numbered board. It exits
with status 1 when no tour is found or the heuristic gets stuck. It exits with
status 2 on invalid input, such as a start square off the board.

## What it does not do

tourkit opens no window and draws nothing itself. `TourPlayer`,
`TreeRenderer` and the views only work out positions, segments, colours and
status text, and it is up to you to show them with whatever graphics library
you use. There is also no built-in benchmark runner. `fit_k` only fits timings
that you supply.