from __future__ import annotations

"""Descriptive statistics with streaming and pooled updates.

Variances are population variances.
"""

import math
from typing import Sequence

import numpy as np


class EmptyDataError(ValueError):
    """Raised when a statistic is requested over an empty list."""


def _as_array(values: Sequence[float], name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.size == 0:
        raise EmptyDataError(f"{name}: the given list is empty.")
    return array


def total(values: Sequence[float]) -> float:
    return float(np.sum(np.asarray(values, dtype=float)))


def mean(values: Sequence[float]) -> float:
    return float(np.mean(_as_array(values, "mean")))


def add_to_mean(previous_mean: float, n: int, value: float) -> float:
    """Mean of *n* values once *value* is appended."""

    return previous_mean + (value - previous_mean) / (n + 1)


def subtract_from_mean(previous_mean: float, n: int, value: float) -> float:
    """Mean of *n* values once *value* is removed."""

    if n <= 1:
        raise EmptyDataError("subtract_from_mean: removing the value would leave an empty list.")
    return (previous_mean * n - value) / (n - 1)


def combine_means(mean_a: float, n_a: int, mean_b: float, n_b: int) -> float:
    if n_a + n_b <= 0:
        raise EmptyDataError("combine_means: both samples are empty.")
    return (n_a * mean_a + n_b * mean_b) / (n_a + n_b)


def variance(values: Sequence[float]) -> float:
    return float(np.var(_as_array(values, "variance")))


def stdev(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))


def combine_variances(
    mean_a: float,
    variance_a: float,
    n_a: int,
    mean_b: float,
    variance_b: float,
    n_b: int,
) -> float:
    """Population variance of the union of two samples described by their moments."""

    if n_a + n_b <= 0:
        raise EmptyDataError("combine_variances: both samples are empty.")
    combined = combine_means(mean_a, n_a, mean_b, n_b)
    spread_a = n_a * (variance_a + (mean_a - combined) ** 2)
    spread_b = n_b * (variance_b + (mean_b - combined) ** 2)
    return (spread_a + spread_b) / (n_a + n_b)
