"""Momentum strategy: random drift around the current price plus a direction multiplier"""

from ..data.models import ExportRecord, MarketIndicator, PricePrediction
from .base import Band, PredictionStrategy

# Relative variation applied to the current price
PRICE_VARIATION: Band = (-0.10, 0.10)

INDICATOR_MULTIPLIERS: dict[MarketIndicator, Band] = {
    MarketIndicator.STABLE: (1.0, 1.0),
    MarketIndicator.RISING: (1.05, 1.05),
    MarketIndicator.FALLING: (0.95, 0.95),
    MarketIndicator.VOLATILE: (0.90, 1.10),
    MarketIndicator.UNPREDICTABLE: (1.0, 1.0),
}

CONFIDENCE_BANDS: dict[MarketIndicator, Band] = {
    MarketIndicator.STABLE: (0.85, 0.95),
    MarketIndicator.RISING: (0.75, 0.90),
    MarketIndicator.FALLING: (0.75, 0.90),
    MarketIndicator.VOLATILE: (0.60, 0.80),
    MarketIndicator.UNPREDICTABLE: (0.50, 0.70),
}


class MomentumPredictor(PredictionStrategy):
    """Fast predictor driven only by price and market indicator."""

    name = "Momentum-Price-Predictor"
    accuracy = 0.78

    min_confidence = 0.50
    max_confidence = 0.95
    completed_threshold = 0.70

    def _predict(self, record: ExportRecord) -> PricePrediction:
        variation = self._draw(PRICE_VARIATION)
        price = record.price_per_ton * (1 + variation)
        price *= self._draw(INDICATOR_MULTIPLIERS[record.indicator])

        confidence = self._draw(CONFIDENCE_BANDS[record.indicator])
        return self._build_prediction(record, price, confidence)
