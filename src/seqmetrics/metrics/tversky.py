from __future__ import annotations

"""Tversky index between the symbol sets of two sequences.

Tversky, Amos (1977). "Features of Similarity". Psychological Review 84 (4).
"""

from typing import Any, Sequence, Set, Union

from ..utils.helpers import seq


class InvalidParameterError(ValueError):
    """Raised when a metric receives parameters outside their domain."""


def _asymmetric(x: Set[Any], y: Set[Any], alpha: float, beta: float) -> float:
    common = len(x & y)
    denominator = common + alpha * len(x - y) + beta * len(y - x)
    return common / denominator if denominator else 0.0


def _symmetric(x: Set[Any], y: Set[Any], alpha: float, beta: float) -> float:
    common = len(x & y)
    x_only = len(x - y)
    y_only = len(y - x)
    a = min(x_only, y_only)
    b = max(x_only, y_only)
    denominator = common + beta * (alpha * a + (1 - alpha) * b)
    return common / denominator if denominator else 0.0


def tversky(
    x: Union[str, Sequence[Any]],
    y: Union[str, Sequence[Any]],
    *,
    alpha: float = 1.0,
    beta: float = 1.0,
    symmetric: bool = False,
) -> float:
    """Return the Tversky index of *x* and *y*.

    ``alpha = beta = 1`` gives the Jaccard index and ``alpha = beta = 0.5`` the
    Sørensen-Dice coefficient. Two empty operands are identical and score 1.0.
    """

    if alpha < 0 or beta < 0:
        raise InvalidParameterError(
            f"tversky: alpha and beta must be >= 0 (got alpha={alpha}, beta={beta})"
        )

    x_set = set(seq(x))
    y_set = set(seq(y))
    if not x_set and not y_set:
        return 1.0

    if symmetric:
        return _symmetric(x_set, y_set, alpha, beta)
    return _asymmetric(x_set, y_set, alpha, beta)
