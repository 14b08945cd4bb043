from copy import deepcopy

DEFAULT_CURVE = {
    "control_points": [
        [100.0, 100.0],
        [200.0, 33.0],
        [-200.0, -33.0],
        [0.0, -500.0],
    ],
    "step_size": 0.01,
}


def default_curve() -> dict:
    return deepcopy(DEFAULT_CURVE)
