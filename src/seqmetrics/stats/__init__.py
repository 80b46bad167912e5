from .descriptive import (
    EmptyDataError,
    add_to_mean,
    combine_means,
    combine_variances,
    mean,
    stdev,
    subtract_from_mean,
    total,
    variance,
)

__all__ = [
    "EmptyDataError",
    "add_to_mean",
    "combine_means",
    "combine_variances",
    "mean",
    "stdev",
    "subtract_from_mean",
    "total",
    "variance",
]
