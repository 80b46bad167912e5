from __future__ import annotations

"""Metric registry."""

from typing import Any, Callable, Dict

from .damerau_levenshtein import damerau_levenshtein
from .tversky import InvalidParameterError, tversky

Metric = Callable[..., float]


class UnknownMetricError(ValueError):
    """Raised when a metric name is not registered."""


_METRICS: Dict[str, Metric] = {
    "damerau_levenshtein": damerau_levenshtein,
    "tversky": tversky,
}


def get_metric(name: str) -> Metric:
    try:
        return _METRICS[name]
    except KeyError as exc:
        raise UnknownMetricError(f"Unknown metric '{name}'") from exc


def register_metric(name: str, func: Callable[..., Any]) -> None:
    """Register *func* under *name*, replacing any previous entry."""

    if not name:
        raise ValueError("Metric name must be a non-empty string")
    _METRICS[name] = func


def available_metrics() -> Dict[str, Metric]:
    """Return the currently registered metric mapping."""

    return dict(_METRICS)


__all__ = [
    "InvalidParameterError",
    "Metric",
    "UnknownMetricError",
    "available_metrics",
    "damerau_levenshtein",
    "get_metric",
    "register_metric",
    "tversky",
]
