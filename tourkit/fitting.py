"""Least-squares fitting of a single scale factor to timing data."""

from __future__ import annotations

from typing import Callable, Sequence

__all__ = ["fit_k"]


def fit_k(
    times: Sequence[float],
    ns: Sequence[int],
    f: Callable[[int], float],
) -> float:
    """Fit ``k`` so that ``times[i]`` is closest to ``k * f(ns[i])``.

    This is the least-squares slope through the origin:
    ``sum(t * f(n)) / sum(f(n) ** 2)``.

    Raises ValueError when the sequences differ in length or when every
    ``f(n)`` is zero, leaving nothing to fit.
    """
    if len(times) != len(ns):
        raise ValueError(f"got {len(times)} times for {len(ns)} sizes")
    sum_xy = 0.0
    sum_xx = 0.0
    for t, n in zip(times, ns):
        x = f(n)
        sum_xy += t * x
        sum_xx += x * x
    if sum_xx == 0:
        raise ValueError("cannot fit k: the model is zero at every size")
    return sum_xy / sum_xx