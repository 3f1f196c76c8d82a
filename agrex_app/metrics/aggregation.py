"""Category aggregations over record sequences"""

from typing import Callable, Hashable, Iterable, Optional, TypeVar

from ..data.models import ExportRecord, ProductType
from .descriptive import maximum, mean, minimum, total

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Optional[Iterable[T]], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group items by a key, keeping first-seen key order and item order per group

    Args:
        items: Sequence to group (None is treated as empty)
        key: Key extraction function

    Returns:
        Mapping of key to the items that produced it
    """
    groups: dict[K, list[T]] = {}
    if items is None:
        return groups

    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def average_by_category(items: Optional[Iterable[T]], key: Callable[[T], K],
                        value: Callable[[T], float]) -> dict[K, float]:
    """Mean of value per key, empty mapping for empty input"""
    return {
        category: mean(value(item) for item in members)
        for category, members in group_by(items, key).items()
    }


def sum_by_category(items: Optional[Iterable[T]], key: Callable[[T], K],
                    value: Callable[[T], float]) -> dict[K, float]:
    """Sum of value per key, empty mapping for empty input"""
    return {
        category: total(value(item) for item in members)
        for category, members in group_by(items, key).items()
    }


def count_by_category(items: Optional[Iterable[T]], key: Callable[[T], K]) -> dict[K, int]:
    """Number of items per key, empty mapping for empty input"""
    return {category: len(members) for category, members in group_by(items, key).items()}


def range_by_category(items: Optional[Iterable[T]], key: Callable[[T], K],
                      value: Callable[[T], float]) -> dict[K, float]:
    """Max minus min of value per key, empty mapping for empty input"""
    result = {}
    for category, members in group_by(items, key).items():
        values = [value(item) for item in members]
        result[category] = maximum(values) - minimum(values)
    return result


# Record-level breakdowns

def _product(record: ExportRecord) -> ProductType:
    return record.product


def _price(record: ExportRecord) -> float:
    return record.price_per_ton


def _volume(record: ExportRecord) -> float:
    return record.volume


def average_price_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, float]:
    return average_by_category(records, _product, _price)


def average_volume_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, float]:
    return average_by_category(records, _product, _volume)


def total_volume_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, float]:
    return sum_by_category(records, _product, _volume)


def total_volume_by_country(records: Optional[Iterable[ExportRecord]]) -> dict[str, float]:
    return sum_by_category(records, lambda record: record.destination_country, _volume)


def total_revenue_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, float]:
    return sum_by_category(records, _product, lambda record: record.revenue)


def export_count_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, int]:
    return count_by_category(records, _product)


def price_range_by_product(records: Optional[Iterable[ExportRecord]]) -> dict[ProductType, float]:
    return range_by_category(records, _product, _price)


def most_expensive_product(records: Optional[Iterable[ExportRecord]]) -> Optional[ProductType]:
    """Product with the highest average price, None for empty input"""
    averages = average_price_by_product(records)
    if not averages:
        return None
    return max(averages, key=averages.__getitem__)


def cheapest_product(records: Optional[Iterable[ExportRecord]]) -> Optional[ProductType]:
    """Product with the lowest average price, None for empty input"""
    averages = average_price_by_product(records)
    if not averages:
        return None
    return min(averages, key=averages.__getitem__)
