"""
Base class for price prediction strategies.

A strategy owns a simulated model that must be loaded before use, a source
of randomness, and a provider for the current date. Subclasses supply the
formula in `_predict`; the base class enforces the load lifecycle, input
validation and the rule that a single record never aborts a batch.
"""

import random
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from ..data.models import ExportRecord, PricePrediction, PredictionStatus
from ..errors import IllegalStateError, InvalidArgumentError, ModelError
from ..logging.config import get_prediction_logger, log_model_lifecycle, log_prediction
from ..utils.numbers import clamp, round_half_up
from ..utils.time import Today, horizon_date, system_today

Band = tuple[float, float]

UNLOADED = "UNLOADED"
LOADED = "LOADED"


class PredictionStrategy(ABC):
    """Interchangeable price prediction algorithm with a load/unload lifecycle."""

    name: str = "Base-Price-Predictor"
    accuracy: float = 0.75

    # Confidence clamp and the COMPLETED threshold, overridden per strategy
    min_confidence: float = 0.5
    max_confidence: float = 0.95
    completed_threshold: float = 0.7

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Optional[Today] = None,
        load_delay_seconds: float = 0.0,
        horizon_days: int = 30,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.today = today or system_today
        self.load_delay_seconds = load_delay_seconds
        self.horizon_days = horizon_days
        self._sleep = sleep
        self._loaded = False
        self.logger = get_prediction_logger(__name__)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_model(self) -> None:
        """
        Load the simulated model.

        Raises:
            ModelError: the load step failed; the strategy stays unloaded
        """
        if self._loaded:
            return

        self.logger.info("Loading model", strategy=self.name, delay_seconds=self.load_delay_seconds)
        try:
            self._sleep(self.load_delay_seconds)
        except Exception as e:
            self._loaded = False
            raise ModelError(
                f"Failed to load {self.name}: {e}",
                model_name=self.name,
            ) from e

        self._loaded = True
        log_model_lifecycle(self.logger, self.name, UNLOADED, LOADED)

    def unload_model(self) -> None:
        """Release the simulated model."""
        previous = LOADED if self._loaded else UNLOADED
        self._loaded = False
        log_model_lifecycle(self.logger, self.name, previous, UNLOADED)

    def accuracy_estimate(self) -> float:
        """Self-reported accuracy of the strategy."""
        return self.accuracy

    def predict_price(self, record: ExportRecord) -> PricePrediction:
        """
        Predict the price of one export record.

        Raises:
            InvalidArgumentError: record is None
            IllegalStateError: model not loaded

        Returns:
            Prediction; FAILED status with price and confidence 0 when the
            formula itself errors
        """
        self._validate_input(record)

        try:
            prediction = self._predict(record)
        except Exception as e:
            self.logger.error(
                "Prediction formula raised, degrading to FAILED",
                strategy=self.name,
                product=record.product.value,
                error=str(e),
            )
            prediction = self._failed_prediction(record)

        log_prediction(
            self.logger,
            strategy=self.name,
            product=prediction.product.value,
            price=prediction.predicted_price,
            confidence=prediction.confidence,
            status=prediction.status.value,
        )
        return prediction

    def predict_batch(self, records: Sequence[ExportRecord]) -> list[PricePrediction]:
        """Predict every record, output aligned index-for-index with input."""
        if records is None:
            raise InvalidArgumentError("Records cannot be None", argument="records")

        self.logger.info("Starting batch prediction", strategy=self.name, batch_size=len(records))
        return [self.predict_price(record) for record in records]

    @abstractmethod
    def _predict(self, record: ExportRecord) -> PricePrediction:
        """Strategy-specific formula."""

    def _validate_input(self, record: Optional[ExportRecord]) -> None:
        if record is None:
            raise InvalidArgumentError("Input cannot be None", argument="record")
        if not self._loaded:
            raise IllegalStateError(
                "Model not loaded. Call load_model() first.",
                current_state=UNLOADED,
                attempted_operation="predict_price",
            )

    def _draw(self, band: Band) -> float:
        """Uniform draw from [low, high]; fixed bands consume no randomness."""
        low, high = band
        if low == high:
            return low
        return low + self.rng.random() * (high - low)

    def _build_prediction(self, record: ExportRecord, price: float, confidence: float) -> PricePrediction:
        confidence = clamp(confidence, self.min_confidence, self.max_confidence)
        status = (PredictionStatus.COMPLETED if confidence >= self.completed_threshold
                  else PredictionStatus.LOW_CONFIDENCE)

        return PricePrediction(
            prediction_date=horizon_date(self.horizon_days, self.today),
            product=record.product,
            predicted_price=round_half_up(price, 2),
            confidence=confidence,
            strategy_name=self.name,
            status=status,
        )

    def _failed_prediction(self, record: ExportRecord) -> PricePrediction:
        return PricePrediction(
            prediction_date=self.today(),
            product=record.product,
            predicted_price=0.0,
            confidence=0.0,
            strategy_name=self.name,
            status=PredictionStatus.FAILED,
        )
