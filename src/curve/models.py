from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np


def _readonly(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=float)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, *point_sets: np.ndarray) -> "BoundingBox":
        stacked = np.vstack([np.asarray(points, dtype=float).reshape(-1, 2) for points in point_sets])
        lower = stacked.min(axis=0)
        upper = stacked.max(axis=0)
        return cls(
            min_x=float(lower[0]),
            min_y=float(lower[1]),
            max_x=float(upper[0]),
            max_y=float(upper[1]),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self) -> Dict[str, float]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }


@dataclass(frozen=True, eq=False)
class CurveResult:
    control_points: np.ndarray
    step: float
    binomial_row: Tuple[int, ...]
    path: np.ndarray
    bounds: BoundingBox

    def __post_init__(self) -> None:
        object.__setattr__(self, "control_points", _readonly(self.control_points))
        object.__setattr__(self, "path", _readonly(self.path))
        object.__setattr__(self, "binomial_row", tuple(int(c) for c in self.binomial_row))

    @property
    def degree(self) -> int:
        return self.control_points.shape[0] - 1

    @property
    def n_samples(self) -> int:
        return self.path.shape[0]

    def path_as_list(self) -> List[List[float]]:
        return self.path.tolist()
