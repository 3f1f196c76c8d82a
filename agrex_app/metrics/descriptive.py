"""Descriptive statistics over numeric sequences"""

import math
from typing import Iterable, Optional

from ..errors import InvalidArgumentError
from ..models.statistics import DescriptiveStats


def _require_values(values: Optional[Iterable[float]], operation: str) -> list[float]:
    """Materialize values, rejecting None or empty input."""
    if values is None:
        raise InvalidArgumentError(f"Values cannot be None for {operation}", argument="values")

    materialized = list(values)
    if not materialized:
        raise InvalidArgumentError(f"Values cannot be empty for {operation}", argument="values")

    return materialized


def mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean

    Raises:
        InvalidArgumentError: values is None or empty
    """
    data = _require_values(values, "mean")
    return math.fsum(data) / len(data)


def total(values: Optional[Iterable[float]]) -> float:
    """Sum of values, 0.0 for None or empty input"""
    if values is None:
        return 0.0
    return math.fsum(values)


def minimum(values: Iterable[float]) -> float:
    """Smallest value, raises InvalidArgumentError on empty input"""
    return min(_require_values(values, "minimum"))


def maximum(values: Iterable[float]) -> float:
    """Largest value, raises InvalidArgumentError on empty input"""
    return max(_require_values(values, "maximum"))


def median(values: Iterable[float]) -> float:
    """
    Median of values

    Even length averages the two central elements, odd length returns the
    central element.

    Raises:
        InvalidArgumentError: values is None or empty
    """
    ordered = sorted(_require_values(values, "median"))
    size = len(ordered)
    middle = size // 2

    if size % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def variance(values: Optional[Iterable[float]]) -> float:
    """
    Population variance (divides by N)

    Returns 0.0 for None or empty input instead of raising.
    """
    if values is None:
        return 0.0

    data = list(values)
    if not data:
        return 0.0

    average = mean(data)
    return math.fsum((value - average) ** 2 for value in data) / len(data)


def std_dev(values: Optional[Iterable[float]]) -> float:
    """Population standard deviation, 0.0 for None or empty input"""
    return math.sqrt(variance(values))


def percentile(values: Iterable[float], p: float) -> float:
    """
    Nearest-rank percentile

    index = ceil(p / 100 * N) - 1, clamped to [0, N - 1]. Always returns an
    element of the input; for even-length input percentile(xs, 50) can
    differ from median(xs).

    Args:
        values: Numeric sequence
        p: Percentile in [0, 100]

    Raises:
        InvalidArgumentError: p outside [0, 100] or values empty
    """
    if p < 0 or p > 100:
        raise InvalidArgumentError("Percentile must be between 0 and 100", argument="p", value=p)

    ordered = sorted(_require_values(values, "percentile"))
    index = math.ceil(p / 100.0 * len(ordered)) - 1
    index = max(0, min(index, len(ordered) - 1))
    return ordered[index]


def describe(values: Optional[Iterable[float]]) -> DescriptiveStats:
    """
    Full descriptive snapshot of a numeric sequence

    Returns DescriptiveStats.empty() for None or empty input.
    """
    data = list(values) if values is not None else []
    if not data:
        return DescriptiveStats.empty()

    low = minimum(data)
    high = maximum(data)

    return DescriptiveStats(
        count=len(data),
        sum=total(data),
        mean=mean(data),
        median=median(data),
        min=low,
        max=high,
        range=high - low,
        variance=variance(data),
        std_dev=std_dev(data),
        q1=percentile(data, 25),
        q3=percentile(data, 75),
    )
