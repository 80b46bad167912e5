from __future__ import annotations

import math

import pytest

from seqmetrics.stats import (
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

DATA = [13, 14, 15, 8, 20]
EXTENDED = [13, 14, 15, 8, 20, 54]


def test_total() -> None:
    assert total(DATA) == 70
    assert total([]) == 0


def test_mean() -> None:
    assert mean(DATA) == pytest.approx(14)


@pytest.mark.parametrize("func", [mean, variance, stdev])
def test_empty_list_raises(func) -> None:
    with pytest.raises(EmptyDataError, match="empty"):
        func([])


def test_streaming_mean_updates() -> None:
    assert add_to_mean(mean(DATA), len(DATA), 54) == pytest.approx(mean(EXTENDED))
    assert subtract_from_mean(mean(EXTENDED), len(EXTENDED), 54) == pytest.approx(
        mean(DATA)
    )


def test_subtract_last_value_raises() -> None:
    with pytest.raises(ValueError):
        subtract_from_mean(3.0, 1, 3.0)


def test_combine_means() -> None:
    combined = combine_means(mean(DATA), len(DATA), mean(EXTENDED), len(EXTENDED))
    assert combined == pytest.approx(mean(DATA + EXTENDED))


def test_variance_and_stdev() -> None:
    assert variance(DATA) == pytest.approx(14.8)
    assert stdev(DATA) == pytest.approx(math.sqrt(14.8))


def test_combine_variances() -> None:
    combined = combine_variances(
        mean(DATA),
        variance(DATA),
        len(DATA),
        mean(EXTENDED),
        variance(EXTENDED),
        len(EXTENDED),
    )
    assert combined == pytest.approx(variance(DATA + EXTENDED))


def test_combining_two_empty_samples_raises() -> None:
    with pytest.raises(EmptyDataError):
        combine_means(0.0, 0, 0.0, 0)
    with pytest.raises(EmptyDataError):
        combine_variances(0.0, 0.0, 0, 0.0, 0.0, 0)
