from unittest import mock

import numpy as np
import pytest

from src.curve.config import CurveConfig, validate_step
from src.curve.errors import CurveError, InvalidDegree, InvalidStep
from src.curve.models import BoundingBox
from src.curve.sampler import compute_curve, compute_curve_from_config, parameter_values

CUBIC = [(100.0, 100.0), (200.0, 33.0), (-200.0, -33.0), (0.0, -500.0)]


def test_default_step_yields_102_samples():
    result = compute_curve(CUBIC, 0.01)
    assert result.n_samples == 102
    assert result.degree == 3
    assert result.binomial_row == (1, 3, 3, 1)


def test_parameter_values_use_integer_multiples_and_force_endpoint():
    t = parameter_values(0.25)
    assert t.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0, 1.0]

    uneven = parameter_values(0.3)
    assert uneven[-1] == 1.0
    assert uneven[-2] == pytest.approx(0.9)
    assert len(uneven) == 5


def test_unit_step_samples_both_ends():
    assert parameter_values(1.0).tolist() == [0.0, 1.0, 1.0]


def test_path_starts_and_ends_on_control_points():
    result = compute_curve(CUBIC, 0.01)
    assert result.path[0] == pytest.approx(np.array(CUBIC[0]))
    assert result.path[-1] == pytest.approx(np.array(CUBIC[-1]))


def test_bounding_box_contains_every_point():
    result = compute_curve(CUBIC, 0.01)
    bounds = result.bounds
    for x, y in np.vstack([result.control_points, result.path]):
        assert bounds.contains(x, y)
    assert bounds == BoundingBox(min_x=-200.0, min_y=-500.0, max_x=200.0, max_y=100.0)


def test_bounding_box_grows_past_control_points_for_extrapolated_samples():
    bounds = BoundingBox.from_points(np.array([[0.0, 0.0], [1.0, 1.0]]), np.array([[2.0, -1.0]]))
    assert bounds.to_dict() == {"min_x": 0.0, "min_y": -1.0, "max_x": 2.0, "max_y": 1.0}
    assert bounds.width == 2.0
    assert bounds.height == 2.0


def test_single_control_point_repeats_point():
    result = compute_curve([(7.0, -2.0)], 0.1)
    assert result.degree == 0
    assert np.all(result.path == np.array([7.0, -2.0]))
    assert result.bounds == BoundingBox(7.0, -2.0, 7.0, -2.0)


def test_result_is_immutable():
    result = compute_curve(CUBIC, 0.1)
    with pytest.raises(ValueError):
        result.path[0, 0] = 1.0
    with pytest.raises(ValueError):
        result.control_points[0, 0] = 1.0


def test_computation_is_idempotent():
    first = compute_curve(CUBIC, 0.05)
    second = compute_curve(CUBIC, 0.05)
    assert np.array_equal(first.path, second.path)
    assert first.bounds == second.bounds


@pytest.mark.parametrize("step", [0.0, -0.01, 1.5, float("nan"), float("inf"), "abc", None])
def test_invalid_steps_rejected(step):
    with pytest.raises(InvalidStep):
        compute_curve(CUBIC, step)


def test_empty_control_points_rejected():
    with pytest.raises(InvalidDegree):
        compute_curve([], 0.1)


def test_errors_are_value_errors():
    assert issubclass(CurveError, ValueError)
    assert issubclass(InvalidDegree, CurveError)
    assert issubclass(InvalidStep, CurveError)


def test_compute_from_default_config():
    result = compute_curve_from_config(CurveConfig.default())
    assert result.n_samples == 102
    assert result.step == 0.01


def test_step_is_validated_once_per_computation():
    with mock.patch("src.curve.sampler.validate_step", wraps=validate_step) as checked:
        result = compute_curve(CUBIC, "0.5")
    assert checked.call_count == 1
    assert result.step == 0.5
    assert result.n_samples == 4
