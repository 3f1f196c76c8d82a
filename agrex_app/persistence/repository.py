"""In-memory storage for export records and predictions."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

import structlog

from ..data.models import ExportRecord, MarketIndicator, PricePrediction, ProductType

logger = structlog.get_logger(__name__)


@dataclass
class RepositoryStats:
    """Repository size snapshot."""
    total_exports: int
    total_predictions: int
    unique_products: int
    unique_countries: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_exports": self.total_exports,
            "total_predictions": self.total_predictions,
            "unique_products": self.unique_products,
            "unique_countries": self.unique_countries,
        }


class InMemoryExportRepository:
    """List-backed repository; every read returns a fresh list."""

    def __init__(self):
        self._exports: list[ExportRecord] = []
        self._predictions: list[PricePrediction] = []
        self.logger = logger

    # Export records

    def save_export(self, record: Optional[ExportRecord]) -> bool:
        if record is None:
            return False
        self._exports.append(record)
        return True

    def save_all_exports(self, records: Optional[Iterable[ExportRecord]]) -> int:
        """Save records, returning how many were stored."""
        if not records:
            return 0
        saved = sum(1 for record in records if self.save_export(record))
        self.logger.debug("Saved export records", count=saved)
        return saved

    def get_all_exports(self) -> list[ExportRecord]:
        return list(self._exports)

    def find_exports_by_date_range(self, start_date: Optional[date],
                                   end_date: Optional[date]) -> list[ExportRecord]:
        if start_date is None or end_date is None:
            return []
        return [r for r in self._exports if start_date <= r.date <= end_date]

    def find_by_product(self, product: Optional[ProductType]) -> list[ExportRecord]:
        if product is None:
            return []
        return [r for r in self._exports if r.product == product]

    def find_by_country(self, country: Optional[str]) -> list[ExportRecord]:
        """Case-insensitive destination match."""
        if not country:
            return []
        wanted = country.casefold()
        return [r for r in self._exports if r.destination_country.casefold() == wanted]

    def find_by_indicator(self, indicator: Optional[MarketIndicator]) -> list[ExportRecord]:
        if indicator is None:
            return []
        return [r for r in self._exports if r.indicator == indicator]

    def find_by_price_range(self, min_price: float, max_price: float) -> list[ExportRecord]:
        return [r for r in self._exports if min_price <= r.price_per_ton <= max_price]

    def find_by_volume_range(self, min_volume: float, max_volume: float) -> list[ExportRecord]:
        return [r for r in self._exports if min_volume <= r.volume <= max_volume]

    def find_by_date(self, day: Optional[date]) -> list[ExportRecord]:
        if day is None:
            return []
        return [r for r in self._exports if r.date == day]

    # Predictions

    def save_prediction(self, prediction: Optional[PricePrediction]) -> bool:
        if prediction is None:
            return False
        self._predictions.append(prediction)
        return True

    def save_all_predictions(self, predictions: Optional[Iterable[PricePrediction]]) -> int:
        if not predictions:
            return 0
        saved = sum(1 for prediction in predictions if self.save_prediction(prediction))
        self.logger.debug("Saved predictions", count=saved)
        return saved

    def get_all_predictions(self) -> list[PricePrediction]:
        return list(self._predictions)

    def find_predictions_by_product(self, product: Optional[ProductType]) -> list[PricePrediction]:
        if product is None:
            return []
        return [p for p in self._predictions if p.product == product]

    def find_predictions_by_confidence(self, min_confidence: float) -> list[PricePrediction]:
        return [p for p in self._predictions if p.confidence >= min_confidence]

    def find_predictions_by_date_range(self, start_date: Optional[date],
                                       end_date: Optional[date]) -> list[PricePrediction]:
        if start_date is None or end_date is None:
            return []
        return [p for p in self._predictions if start_date <= p.prediction_date <= end_date]

    # Housekeeping

    def clear_all(self) -> None:
        self._exports.clear()
        self._predictions.clear()

    def clear_exports(self) -> None:
        self._exports.clear()

    def clear_predictions(self) -> None:
        self._predictions.clear()

    @property
    def export_count(self) -> int:
        return len(self._exports)

    @property
    def prediction_count(self) -> int:
        return len(self._predictions)

    def is_empty(self) -> bool:
        return not self._exports and not self._predictions

    def stats(self) -> RepositoryStats:
        return RepositoryStats(
            total_exports=len(self._exports),
            total_predictions=len(self._predictions),
            unique_products=len({r.product for r in self._exports}),
            unique_countries=len({r.destination_country for r in self._exports}),
        )
