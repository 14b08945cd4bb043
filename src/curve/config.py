from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from src.curve.defaults import default_curve
from src.curve.errors import InvalidDegree, InvalidStep

MIN_CONTROL_POINTS = 2


def validate_step(step: float) -> float:
    try:
        step = float(step)
    except (TypeError, ValueError) as exc:
        raise InvalidStep(f"Step size must be a number, got {step!r}.") from exc
    if not math.isfinite(step) or step <= 0.0 or step > 1.0:
        raise InvalidStep(f"Step size must be in (0, 1], got {step}.")
    return step


def _parse_point(raw: Any, index: int) -> Tuple[float, float]:
    try:
        x, y = raw
        return float(x), float(y)
    except (TypeError, ValueError) as exc:
        raise InvalidDegree(
            f"control_points[{index}] must be an (x, y) pair, got {raw!r}."
        ) from exc


@dataclass(frozen=True)
class CurveConfig:
    control_points: Tuple[Tuple[float, float], ...]
    step_size: float

    def __post_init__(self) -> None:
        try:
            raw_points = tuple(self.control_points)
        except TypeError as exc:
            raise InvalidDegree(
                f"control_points must be a list of (x, y) pairs, got {self.control_points!r}."
            ) from exc
        points = tuple(_parse_point(point, i) for i, point in enumerate(raw_points))
        if len(points) < MIN_CONTROL_POINTS:
            raise InvalidDegree(
                f"A curve needs at least {MIN_CONTROL_POINTS} control points, got {len(points)}."
            )
        object.__setattr__(self, "control_points", points)
        object.__setattr__(self, "step_size", validate_step(self.step_size))

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "CurveConfig":
        defaults = default_curve()
        data = data or {}
        control_points = data.get("control_points", defaults["control_points"])
        step_size = data.get("step_size", defaults["step_size"])
        if control_points is None:
            raise InvalidDegree("control_points must not be null.")
        if step_size is None:
            raise InvalidStep("step_size must not be null.")
        if not isinstance(control_points, (list, tuple)):
            raise InvalidDegree(
                f"control_points must be a list of (x, y) pairs, got {control_points!r}."
            )
        return cls(control_points=tuple(control_points), step_size=step_size)

    @classmethod
    def default(cls) -> "CurveConfig":
        return cls.from_dict(None)

    def to_dict(self) -> Dict[str, Any]:
        points: List[List[float]] = [list(point) for point in self.control_points]
        return {"control_points": points, "step_size": self.step_size}
