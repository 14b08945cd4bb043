import numpy as np
import pytest

from src.curve.binomial import build_binomial_cache
from src.curve.errors import InvalidDegree
from src.curve.evaluator import bernstein_weights, evaluate_point, evaluate_points

CUBIC = [(100.0, 100.0), (200.0, 33.0), (-200.0, -33.0), (0.0, -500.0)]


def test_cubic_midpoint_golden_value():
    point = evaluate_point(CUBIC, 0.5, build_binomial_cache(3))
    # 1/8 P0 + 3/8 P1 + 3/8 P2 + 1/8 P3
    assert point[0] == pytest.approx(12.5)
    assert point[1] == pytest.approx(-50.0)


def test_endpoints_hit_first_and_last_control_points():
    start = evaluate_point(CUBIC, 0.0)
    end = evaluate_point(CUBIC, 1.0)
    assert start == pytest.approx(np.array(CUBIC[0]))
    assert end == pytest.approx(np.array(CUBIC[-1]))


@pytest.mark.parametrize("t", [0.0, 0.5, 1.0])
def test_linear_curve_is_linear_interpolation(t):
    p0 = np.array([-3.0, 8.0])
    p1 = np.array([5.0, -2.0])
    point = evaluate_point([p0, p1], t)
    assert point == pytest.approx((1.0 - t) * p0 + t * p1)


def test_out_of_range_t_extrapolates():
    point = evaluate_point([(0.0, 0.0), (10.0, 20.0)], 2.0)
    assert point == pytest.approx(np.array([20.0, 40.0]))


def test_single_point_curve_is_constant():
    points = evaluate_points([(3.0, 4.0)], np.linspace(0.0, 1.0, 5))
    assert points.shape == (5, 2)
    assert np.all(points == np.array([3.0, 4.0]))


def test_bernstein_weights_partition_unity():
    weights = bernstein_weights([1, 4, 6, 4, 1], np.linspace(0.0, 1.0, 11))
    assert weights.sum(axis=1) == pytest.approx(np.ones(11))


def test_vectorized_matches_scalar_evaluation():
    t = np.array([0.1, 0.35, 0.8])
    batch = evaluate_points(CUBIC, t)
    for k, value in enumerate(t):
        assert batch[k] == pytest.approx(evaluate_point(CUBIC, value))


def test_cache_too_small_rejected():
    with pytest.raises(InvalidDegree):
        evaluate_point(CUBIC, 0.5, build_binomial_cache(2))


@pytest.mark.parametrize("bad", [[], [1.0, 2.0], [(1.0, 2.0, 3.0)]])
def test_malformed_control_points_rejected(bad):
    with pytest.raises(InvalidDegree):
        evaluate_point(bad, 0.5)
