from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from src.curve.binomial import build_binomial_cache
from src.curve.config import CurveConfig, validate_step
from src.curve.evaluator import as_control_points, evaluate_points
from src.curve.models import BoundingBox, CurveResult

logger = logging.getLogger(__name__)


def parameter_values(step: float) -> np.ndarray:
    """``t = i * step`` up to 1.0, then an explicit ``t = 1.0``.

    The endpoint is appended even when the last regular sample already sits
    on 1.0, so ``step = 0.01`` yields 102 values.
    """
    return _parameter_values(validate_step(step))


def _parameter_values(step: float) -> np.ndarray:
    n_steps = int(math.floor(1.0 / step))
    t = np.arange(n_steps + 1, dtype=float) * step
    return np.append(t, 1.0)


def compute_curve(
    control_points: Sequence[Sequence[float]] | np.ndarray,
    step: float,
) -> CurveResult:
    points = as_control_points(control_points)
    step = validate_step(step)
    t = _parameter_values(step)
    degree = points.shape[0] - 1
    cache = build_binomial_cache(degree)

    path = evaluate_points(points, t, cache)
    bounds = BoundingBox.from_points(points, path)
    logger.debug("Sampled degree-%d curve: %d points, bounds %s", degree, path.shape[0], bounds)

    return CurveResult(
        control_points=points,
        step=step,
        binomial_row=cache[degree],
        path=path,
        bounds=bounds,
    )


def compute_curve_from_config(config: CurveConfig) -> CurveResult:
    return compute_curve(config.control_points, config.step_size)
