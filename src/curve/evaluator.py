from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from src.curve.binomial import build_binomial_cache
from src.curve.errors import InvalidDegree


def as_control_points(control_points: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    try:
        points = np.asarray(control_points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidDegree(f"control_points must be (x, y) number pairs: {exc}") from exc
    if points.size == 0:
        raise InvalidDegree("At least one control point is required.")
    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidDegree("control_points must have shape (n_ctrl, 2)")
    return points


def _coefficients(degree: int, cache: Optional[List[List[int]]]) -> List[int]:
    if cache is None:
        cache = build_binomial_cache(degree)
    if len(cache) <= degree:
        raise InvalidDegree(
            f"Binomial cache covers degree {len(cache) - 1}, curve needs {degree}."
        )
    return cache[degree]


def bernstein_weights(coefficients: Sequence[int], t: np.ndarray) -> np.ndarray:
    """Weights of shape ``(t.size, n + 1)``; row k holds ``B_{i,n}(t[k])``."""
    degree = len(coefficients) - 1
    t = np.asarray(t, dtype=float).reshape(-1)
    weights = np.empty((t.size, degree + 1), dtype=float)
    for i, coefficient in enumerate(coefficients):
        weights[:, i] = coefficient * np.power(1.0 - t, degree - i) * np.power(t, i)
    return weights


def evaluate_points(
    control_points: Sequence[Sequence[float]] | np.ndarray,
    t_values: Sequence[float] | np.ndarray,
    cache: Optional[List[List[int]]] = None,
) -> np.ndarray:
    points = as_control_points(control_points)
    degree = points.shape[0] - 1
    weights = bernstein_weights(_coefficients(degree, cache), np.asarray(t_values))
    return weights @ points


def evaluate_point(
    control_points: Sequence[Sequence[float]] | np.ndarray,
    t: float,
    cache: Optional[List[List[int]]] = None,
) -> np.ndarray:
    return evaluate_points(control_points, np.array([t], dtype=float), cache)[0]
