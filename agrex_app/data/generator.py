"""
Synthetic Tunisian export record generator.

Produces realistic-looking shipments: per-product price and volume bands,
a fixed set of destination countries, and a market indicator derived from
how far the sampled price sits from the product's average.
"""

import random
from datetime import date, timedelta
from typing import Optional

import structlog

from ..errors import InvalidArgumentError
from ..utils.numbers import round_half_up
from ..utils.time import Today, days_between, iter_days, system_today, years_back
from .models import ExportRecord, MarketIndicator, ProductType

logger = structlog.get_logger(__name__)

DESTINATION_COUNTRIES = (
    "France",
    "Italy",
    "Germany",
    "Spain",
    "Libya",
    "Belgium",
    "Netherlands",
    "United Kingdom",
    "Russia",
    "USA",
)

# TND per ton, (low, width)
PRICE_BANDS: dict[ProductType, tuple[float, float]] = {
    ProductType.OLIVE_OIL: (3000.0, 1500.0),
    ProductType.DATES: (2000.0, 1500.0),
    ProductType.CITRUS_FRUITS: (1500.0, 1000.0),
    ProductType.WHEAT: (800.0, 400.0),
    ProductType.TOMATOES: (800.0, 700.0),
    ProductType.PEPPERS: (1000.0, 800.0),
}

# Tons per shipment, (low, width)
VOLUME_BANDS: dict[ProductType, tuple[float, float]] = {
    ProductType.OLIVE_OIL: (50.0, 250.0),
    ProductType.DATES: (30.0, 120.0),
    ProductType.CITRUS_FRUITS: (100.0, 400.0),
    ProductType.WHEAT: (500.0, 1500.0),
    ProductType.TOMATOES: (150.0, 450.0),
    ProductType.PEPPERS: (50.0, 200.0),
}

AVERAGE_PRICES: dict[ProductType, float] = {
    ProductType.OLIVE_OIL: 3750.0,
    ProductType.DATES: 2750.0,
    ProductType.CITRUS_FRUITS: 2000.0,
    ProductType.WHEAT: 1000.0,
    ProductType.TOMATOES: 1150.0,
    ProductType.PEPPERS: 1400.0,
}

# Products whose mid-range prices flip between STABLE and VOLATILE
VOLATILE_PRODUCTS = frozenset({ProductType.CITRUS_FRUITS, ProductType.TOMATOES})

PRICE_VARIATION = 0.30
RISING_DEVIATION = 0.10
STABLE_DEVIATION = 0.05


class ExportDataGenerator:
    """Random export record source with an injectable generator and calendar."""

    def __init__(self, rng: Optional[random.Random] = None, today: Optional[Today] = None,
                 history_years: int = 2):
        self.rng = rng if rng is not None else random.Random()
        self.today = today or system_today
        self.history_years = history_years
        self.logger = logger

    def generate_exports(self, count: int) -> list[ExportRecord]:
        """
        Generate records with random dates over the last `history_years` years.

        Raises:
            InvalidArgumentError: count < 1
        """
        self._require_count(count)
        self.logger.info("Generating synthetic export records", count=count)

        exports = [self.generate_single_export(self._random_history_date()) for _ in range(count)]

        self.logger.info("Generated export records", count=len(exports))
        return exports

    def generate_exports_by_date_range(self, start_date: date, end_date: date,
                                       records_per_day: int) -> list[ExportRecord]:
        """
        Generate roughly `records_per_day` records (±50%) for each day in range.

        Raises:
            InvalidArgumentError: start_date after end_date
        """
        if start_date > end_date:
            raise InvalidArgumentError(
                "Start date must be before or equal to end date",
                argument="start_date",
                value=start_date,
            )

        exports = []
        for day in iter_days(start_date, end_date):
            records_today = int(records_per_day * (0.5 + self.rng.random()))
            exports.extend(self.generate_single_export(day) for _ in range(records_today))

        self.logger.info(
            "Generated export records for date range",
            count=len(exports),
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
        )
        return exports

    def generate_exports_by_product(self, count: int,
                                    product: Optional[ProductType] = None) -> list[ExportRecord]:
        """
        Generate records for one product, or random products when product is None.

        Raises:
            InvalidArgumentError: count < 1
        """
        self._require_count(count)

        exports = [
            self.generate_single_export(self._random_history_date(), product)
            for _ in range(count)
        ]

        self.logger.info(
            "Generated export records by product",
            count=count,
            product=product.value if product else None,
        )
        return exports

    def generate_single_export(self, day: date, product: Optional[ProductType] = None) -> ExportRecord:
        if product is None:
            product = self.rng.choice(list(ProductType))

        price = self._realistic_price(product)
        price *= 1 + (self.rng.random() - 0.5) * PRICE_VARIATION
        price = round_half_up(price, 2)

        return ExportRecord(
            date=day,
            product=product,
            price_per_ton=price,
            volume=self._realistic_volume(product),
            destination_country=self.rng.choice(DESTINATION_COUNTRIES),
            indicator=self.market_indicator(product, price),
        )

    def market_indicator(self, product: ProductType, price: float) -> MarketIndicator:
        """Indicator from the deviation between price and the product's average price."""
        average = AVERAGE_PRICES[product]
        deviation = (price - average) / average

        if deviation > RISING_DEVIATION:
            return MarketIndicator.RISING
        if deviation < -RISING_DEVIATION:
            return MarketIndicator.FALLING
        if abs(deviation) < STABLE_DEVIATION:
            return MarketIndicator.STABLE
        if product in VOLATILE_PRODUCTS and self.rng.random() < 0.5:
            return MarketIndicator.VOLATILE
        return MarketIndicator.STABLE

    def _realistic_price(self, product: ProductType) -> float:
        low, width = PRICE_BANDS[product]
        return low + self.rng.random() * width

    def _realistic_volume(self, product: ProductType) -> float:
        low, width = VOLUME_BANDS[product]
        return round_half_up(low + self.rng.random() * width, 1)

    def _random_history_date(self) -> date:
        end_date = self.today()
        start_date = years_back(end_date, self.history_years)
        offset = int(self.rng.random() * days_between(start_date, end_date))
        return start_date + timedelta(days=offset)

    def _require_count(self, count: int) -> None:
        if count < 1:
            raise InvalidArgumentError("Count must be at least 1", argument="count", value=count)
