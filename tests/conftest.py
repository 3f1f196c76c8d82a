"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from typing import Callable, Optional, Sequence

from agrex_app.data.models import (
    ExportRecord,
    MarketIndicator,
    PricePrediction,
    PredictionStatus,
    ProductType,
)
from agrex_app.prediction.momentum import MomentumPredictor
from agrex_app.prediction.seasonal import SeasonalVolumePredictor

FIXED_TODAY = date(2025, 3, 15)


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value

    def choice(self, seq: Sequence):
        return seq[min(int(self.value * len(seq)), len(seq) - 1)]


class ExplodingRandom:
    """Random source that fails on every draw."""

    def random(self) -> float:
        raise RuntimeError("entropy pool exhausted")


@pytest.fixture
def today() -> Callable[[], date]:
    """Calendar pinned to 2025-03-15."""
    return lambda: FIXED_TODAY


@pytest.fixture
def fixed_random() -> Callable[[float], FixedRandom]:
    """Factory for deterministic random sources."""
    return FixedRandom


@pytest.fixture
def make_record() -> Callable[..., ExportRecord]:
    """Factory for export records with sensible defaults."""
    def _make(
        product: ProductType = ProductType.OLIVE_OIL,
        price: float = 100.0,
        volume: float = 50.0,
        indicator: MarketIndicator = MarketIndicator.STABLE,
        country: str = "France",
        day: date = date(2025, 1, 10),
    ) -> ExportRecord:
        return ExportRecord(
            date=day,
            product=product,
            price_per_ton=price,
            volume=volume,
            destination_country=country,
            indicator=indicator,
        )
    return _make


@pytest.fixture
def make_prediction() -> Callable[..., PricePrediction]:
    """Factory for price predictions with sensible defaults."""
    def _make(
        product: ProductType = ProductType.OLIVE_OIL,
        price: float = 100.0,
        confidence: float = 0.8,
        status: PredictionStatus = PredictionStatus.COMPLETED,
        strategy_name: str = "Test-Predictor",
        day: date = date(2025, 4, 14),
    ) -> PricePrediction:
        return PricePrediction(
            prediction_date=day,
            product=product,
            predicted_price=price,
            confidence=confidence,
            strategy_name=strategy_name,
            status=status,
        )
    return _make


@pytest.fixture
def loaded_momentum(today) -> Callable[[Optional[object]], MomentumPredictor]:
    """Factory for a loaded momentum predictor with the given random source."""
    def _make(rng=None) -> MomentumPredictor:
        strategy = MomentumPredictor(rng=rng, today=today, load_delay_seconds=0.0)
        strategy.load_model()
        return strategy
    return _make


@pytest.fixture
def loaded_seasonal(today) -> Callable[[Optional[object]], SeasonalVolumePredictor]:
    """Factory for a loaded seasonal predictor with the given random source."""
    def _make(rng=None) -> SeasonalVolumePredictor:
        strategy = SeasonalVolumePredictor(rng=rng, today=today, load_delay_seconds=0.0)
        strategy.load_model()
        return strategy
    return _make


@pytest.fixture
def exploding_random() -> ExplodingRandom:
    """Random source whose every draw raises."""
    return ExplodingRandom()
