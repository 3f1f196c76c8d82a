"""
Canonical data models for export records and price predictions.

This module defines immutable data structures that represent validated
export records and the predictions produced from them. Enum values equal
their names so they serialize as the upper-case tokens used in CSV files.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..errors import InvalidArgumentError


class ProductType(str, Enum):
    """Tunisian agricultural export categories."""
    OLIVE_OIL = "OLIVE_OIL"
    DATES = "DATES"
    CITRUS_FRUITS = "CITRUS_FRUITS"
    WHEAT = "WHEAT"
    TOMATOES = "TOMATOES"
    PEPPERS = "PEPPERS"

    @property
    def french_name(self) -> str:
        """Display name used in reports."""
        return _FRENCH_NAMES[self]


_FRENCH_NAMES = {
    ProductType.OLIVE_OIL: "Huile d'olive",
    ProductType.DATES: "Dattes",
    ProductType.CITRUS_FRUITS: "Agrumes",
    ProductType.WHEAT: "Blé",
    ProductType.TOMATOES: "Tomates",
    ProductType.PEPPERS: "Piments",
}


class MarketIndicator(str, Enum):
    """Market direction tag attached to an export record."""
    STABLE = "STABLE"
    RISING = "RISING"
    FALLING = "FALLING"
    VOLATILE = "VOLATILE"
    UNPREDICTABLE = "UNPREDICTABLE"


class PredictionStatus(str, Enum):
    """Outcome of a single price prediction."""
    COMPLETED = "COMPLETED"
    LOW_CONFIDENCE = "LOW_CONFIDENCE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class ExportRecord:
    """One export shipment observation."""
    date: date
    product: ProductType
    price_per_ton: float         # TND per ton
    volume: float                # Tons shipped
    destination_country: str
    indicator: MarketIndicator

    def __post_init__(self):
        if not math.isfinite(self.price_per_ton):
            raise InvalidArgumentError(
                "Price must be a finite number", argument="price_per_ton", value=self.price_per_ton
            )
        if not math.isfinite(self.volume):
            raise InvalidArgumentError(
                "Volume must be a finite number", argument="volume", value=self.volume
            )
        if self.price_per_ton < 0:
            raise InvalidArgumentError(
                "Price cannot be negative", argument="price_per_ton", value=self.price_per_ton
            )
        if self.volume < 0:
            raise InvalidArgumentError(
                "Volume cannot be negative", argument="volume", value=self.volume
            )

    @property
    def revenue(self) -> float:
        """Shipment value in TND."""
        return self.price_per_ton * self.volume


@dataclass(frozen=True)
class PricePrediction:
    """Predicted price for a product at a future date."""
    prediction_date: date
    product: ProductType
    predicted_price: float
    confidence: float            # 0.0 - 1.0
    strategy_name: str
    status: PredictionStatus

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise InvalidArgumentError(
                "Confidence must be between 0.0 and 1.0",
                argument="confidence",
                value=self.confidence,
            )

    @property
    def confidence_percentage(self) -> float:
        return self.confidence * 100

    def is_reliable(self, threshold: float = 0.7) -> bool:
        """Check whether confidence reaches the given threshold."""
        return self.confidence >= threshold
