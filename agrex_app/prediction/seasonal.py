"""Seasonal strategy: volume and calendar-month adjustments on top of market direction"""

import math

from ..data.models import ExportRecord, MarketIndicator, PricePrediction
from .base import Band, PredictionStrategy

LARGE_SHIPMENT_TONS = 100.0
LARGE_SHIPMENT_FACTOR = 0.98
SMALL_SHIPMENT_FACTOR = 1.02
SEASONAL_AMPLITUDE = 0.05

MARKET_ADJUSTMENTS: dict[MarketIndicator, Band] = {
    MarketIndicator.STABLE: (1.0, 1.0),
    MarketIndicator.RISING: (1.08, 1.08),
    MarketIndicator.FALLING: (0.92, 0.92),
    MarketIndicator.VOLATILE: (0.95, 1.05),
    MarketIndicator.UNPREDICTABLE: (0.90, 1.10),
}

CONFIDENCE_BANDS: dict[MarketIndicator, Band] = {
    MarketIndicator.STABLE: (0.88, 0.96),
    MarketIndicator.RISING: (0.78, 0.90),
    MarketIndicator.FALLING: (0.78, 0.90),
    MarketIndicator.VOLATILE: (0.65, 0.80),
    MarketIndicator.UNPREDICTABLE: (0.55, 0.70),
}


def volume_factor(volume: float) -> float:
    """Large shipments pull the price down, small ones push it up."""
    return LARGE_SHIPMENT_FACTOR if volume > LARGE_SHIPMENT_TONS else SMALL_SHIPMENT_FACTOR


def seasonal_factor(month: int) -> float:
    """Sinusoidal yearly cycle peaking in March, trough in September."""
    return 1.0 + math.sin(month * math.pi / 6) * SEASONAL_AMPLITUDE


class SeasonalVolumePredictor(PredictionStrategy):
    """Predictor combining shipment volume, season and market direction."""

    name = "Seasonal-Price-Predictor"
    accuracy = 0.80

    min_confidence = 0.55
    max_confidence = 0.95
    completed_threshold = 0.75

    def _predict(self, record: ExportRecord) -> PricePrediction:
        price = record.price_per_ton * volume_factor(record.volume)
        price *= seasonal_factor(self.today().month)
        price *= self._draw(MARKET_ADJUSTMENTS[record.indicator])

        confidence = self._draw(CONFIDENCE_BANDS[record.indicator])
        return self._build_prediction(record, price, confidence)
