"""Composite statistics over export record sets"""

from typing import Any, Iterable, Optional

import structlog

from ..data.models import ExportRecord
from ..models.statistics import DescriptiveStats, PriceStatistics
from . import aggregation
from .descriptive import describe, maximum, mean, median, minimum, std_dev

logger = structlog.get_logger(__name__)


def price_statistics(records: Optional[Iterable[ExportRecord]]) -> PriceStatistics:
    """
    Price-per-ton statistics for a record set

    Args:
        records: Export records (None is treated as empty)

    Returns:
        PriceStatistics, all zero for empty input
    """
    prices = [record.price_per_ton for record in records] if records is not None else []
    if not prices:
        return PriceStatistics.empty()

    return PriceStatistics(
        mean=mean(prices),
        min=minimum(prices),
        max=maximum(prices),
        median=median(prices),
        std_dev=std_dev(prices),
        count=len(prices),
    )


class MarketStatisticsCalculator:
    """
    Builds a market overview for a record set: price and volume snapshots
    plus the per-product and per-country breakdowns used in reports
    """

    def __init__(self):
        self.logger = logger
        self.last_overview: Optional[dict[str, Any]] = None

    def price_statistics(self, records: Iterable[ExportRecord]) -> PriceStatistics:
        return price_statistics(records)

    def volume_statistics(self, records: Iterable[ExportRecord]) -> DescriptiveStats:
        return describe(record.volume for record in records)

    def market_overview(self, records: Optional[Iterable[ExportRecord]]) -> dict[str, Any]:
        """
        Calculate the full market overview

        Returns:
            Dictionary with price/volume snapshots and category breakdowns,
            every breakdown empty for empty input
        """
        data = list(records) if records is not None else []

        overview = {
            "record_count": len(data),
            "price": price_statistics(data),
            "volume": self.volume_statistics(data),
            "average_price_by_product": aggregation.average_price_by_product(data),
            "average_volume_by_product": aggregation.average_volume_by_product(data),
            "total_volume_by_product": aggregation.total_volume_by_product(data),
            "total_volume_by_country": aggregation.total_volume_by_country(data),
            "total_revenue_by_product": aggregation.total_revenue_by_product(data),
            "export_count_by_product": aggregation.export_count_by_product(data),
            "price_range_by_product": aggregation.price_range_by_product(data),
            "most_expensive_product": aggregation.most_expensive_product(data),
            "cheapest_product": aggregation.cheapest_product(data),
        }

        self.logger.info(
            "Market overview calculated",
            record_count=len(data),
            products=len(overview["export_count_by_product"]),
            countries=len(overview["total_volume_by_country"]),
        )

        self.last_overview = overview
        return overview

    def get_last_overview(self) -> Optional[dict[str, Any]]:
        """Get the last calculated overview"""
        return self.last_overview

    def reset(self):
        self.last_overview = None
