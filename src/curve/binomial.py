from __future__ import annotations

from typing import List

from src.curve.errors import InvalidDegree


def build_binomial_cache(degree: int) -> List[List[int]]:
    """Pascal's triangle up to ``degree``; ``cache[i][j]`` is ``C(i, j)``."""
    if degree < 0:
        raise InvalidDegree(f"Degree must be non-negative, got {degree}.")

    cache: List[List[int]] = []
    for i in range(degree + 1):
        row = [1] * (i + 1)
        for j in range(1, i):
            row[j] = cache[i - 1][j - 1] + cache[i - 1][j]
        cache.append(row)
    return cache


def binomial_row(degree: int) -> List[int]:
    return build_binomial_cache(degree)[degree]
