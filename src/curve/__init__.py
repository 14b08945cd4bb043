from src.curve.binomial import binomial_row, build_binomial_cache
from src.curve.config import CurveConfig
from src.curve.errors import CurveError, InvalidDegree, InvalidStep
from src.curve.evaluator import evaluate_point, evaluate_points
from src.curve.models import BoundingBox, CurveResult
from src.curve.sampler import compute_curve, compute_curve_from_config, parameter_values

__all__ = [
    "BoundingBox",
    "CurveConfig",
    "CurveError",
    "CurveResult",
    "InvalidDegree",
    "InvalidStep",
    "binomial_row",
    "build_binomial_cache",
    "compute_curve",
    "compute_curve_from_config",
    "evaluate_point",
    "evaluate_points",
    "parameter_values",
]
