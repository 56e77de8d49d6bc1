"""Knight's tour solvers and playback, with tree-layout, viewport, event and debug-text helpers."""

__version__ = "0.1.0"