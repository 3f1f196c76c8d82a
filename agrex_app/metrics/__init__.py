"""Statistics engine for export records and numeric sequences"""

from .aggregation import (
    average_by_category,
    count_by_category,
    group_by,
    range_by_category,
    sum_by_category,
)
from .calculator import MarketStatisticsCalculator, price_statistics
from .descriptive import (
    describe,
    maximum,
    mean,
    median,
    minimum,
    percentile,
    std_dev,
    total,
    variance,
)

__all__ = [
    "MarketStatisticsCalculator",
    "price_statistics",
    "describe",
    "mean",
    "total",
    "minimum",
    "maximum",
    "median",
    "variance",
    "std_dev",
    "percentile",
    "group_by",
    "average_by_category",
    "sum_by_category",
    "count_by_category",
    "range_by_category",
]
