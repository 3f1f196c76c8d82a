"""
Export intelligence engine.

Orchestrates the prediction pipeline: filters raw export records, runs the
configured prediction strategy over them, keeps the high-confidence results
and exposes grouping, aggregation and report entry points over predictions.
"""

from typing import Any, Optional, Sequence

import structlog

from .data.models import ExportRecord, PricePrediction, PredictionStatus, ProductType
from .errors import PredictionError
from .metrics.aggregation import average_by_category, group_by
from .metrics.descriptive import mean
from .models.statistics import PredictionSummary
from .prediction.base import PredictionStrategy
from .reporting.base import ReportGenerator

logger = structlog.get_logger(__name__)

# Predictions must be strictly above this to survive analyze_exports
MIN_CONFIDENCE = 0.70

NO_REPORT_MESSAGE = "No predictions available to generate report."
NO_SUMMARY_MESSAGE = "No predictions available for summary."


def is_valid_export(record: Optional[ExportRecord]) -> bool:
    """Records with a positive price and a positive volume; None is never valid."""
    return record is not None and record.price_per_ton > 0 and record.volume > 0


class IntelligenceEngine:
    """
    Main coordinator for export price intelligence.

    Manages the analysis pipeline:
    Export Records → Validity Filter → Strategy Batch → Confidence Filter → Aggregates / Reports
    """

    def __init__(self, strategy: PredictionStrategy, report_generator: ReportGenerator) -> None:
        self.logger = logger
        self.strategy = strategy
        self.report_generator = report_generator

    def analyze_exports(self, records: Optional[Sequence[ExportRecord]]) -> list[PricePrediction]:
        """
        Predict prices for the valid records and keep the confident results.

        Args:
            records: Export records to analyze

        Returns:
            Predictions with confidence strictly above 0.70, in input order;
            may be empty

        Raises:
            PredictionError: input is None or empty, no record passes the
                validity filter, or the strategy refused the batch
        """
        if not records:
            raise PredictionError("Export data list cannot be None or empty", input_count=0)

        self.logger.info("Analyzing export records", record_count=len(records))

        valid_records = [record for record in records if is_valid_export(record)]
        self.logger.info(
            "Filtered valid exports",
            record_count=len(records),
            valid_count=len(valid_records),
        )

        if not valid_records:
            raise PredictionError(
                "No valid export data found after filtering",
                input_count=len(records),
                valid_count=0,
            )

        try:
            predictions = self.strategy.predict_batch(valid_records)
        except Exception as e:
            self.logger.error("Batch prediction failed", strategy=self.strategy.name, error=str(e))
            raise PredictionError(
                f"Failed to analyze exports: {e}",
                input_count=len(records),
                valid_count=len(valid_records),
            ) from e

        confident = [p for p in predictions if p.confidence > MIN_CONFIDENCE]
        self.logger.info(
            "High-confidence predictions selected",
            prediction_count=len(predictions),
            high_confidence_count=len(confident),
        )
        return confident

    def group_by_product(self, predictions: Sequence[PricePrediction]) -> dict[ProductType, list[PricePrediction]]:
        """Group predictions by product, preserving encounter order."""
        return group_by(predictions, lambda p: p.product)

    def average_price_by_product(self, predictions: Sequence[PricePrediction]) -> dict[ProductType, float]:
        """Mean predicted price per product."""
        return average_by_category(predictions, lambda p: p.product, lambda p: p.predicted_price)

    def find_best_prediction(self, predictions: Sequence[PricePrediction]) -> Optional[PricePrediction]:
        """Highest-confidence prediction, first one on ties, None when empty."""
        best: Optional[PricePrediction] = None
        for prediction in predictions or []:
            if best is None or prediction.confidence > best.confidence:
                best = prediction
        return best

    def filter_by_product(self, predictions: Sequence[PricePrediction],
                          product: ProductType) -> list[PricePrediction]:
        return [p for p in predictions if p.product == product]

    def filter_by_confidence_at_least(self, predictions: Sequence[PricePrediction],
                                      minimum: float) -> list[PricePrediction]:
        return [p for p in predictions if p.confidence >= minimum]

    def prediction_statistics(self, predictions: Optional[Sequence[PricePrediction]]) -> PredictionSummary:
        """
        Summarize a prediction set.

        Returns:
            PredictionSummary; the no-data sentinel for empty input
        """
        if not predictions:
            return PredictionSummary.no_data(self.strategy.name, self.strategy.accuracy_estimate())

        return PredictionSummary(
            total=len(predictions),
            completed=sum(1 for p in predictions if p.status == PredictionStatus.COMPLETED),
            mean_confidence=mean(p.confidence for p in predictions),
            mean_predicted_price=mean(p.predicted_price for p in predictions),
            strategy_name=self.strategy.name,
            strategy_accuracy=self.strategy.accuracy_estimate(),
        )

    def generate_intelligence_report(self, predictions: Optional[Sequence[PricePrediction]]) -> str:
        """Full market report from the report generator, verbatim."""
        if not predictions:
            self.logger.warning("No predictions provided for report generation")
            return NO_REPORT_MESSAGE

        self.logger.info("Generating intelligence report", prediction_count=len(predictions))
        return self.report_generator.generate_market_report(predictions)

    def generate_summary(self, predictions: Optional[Sequence[PricePrediction]]) -> str:
        """Executive summary from the report generator, verbatim."""
        if not predictions:
            return NO_SUMMARY_MESSAGE

        self.logger.info("Generating executive summary", prediction_count=len(predictions))
        return self.report_generator.generate_summary_report(predictions)

    def is_model_ready(self) -> bool:
        return self.strategy.is_loaded

    def service_info(self) -> dict[str, Any]:
        """Current strategy and report backend status."""
        return {
            "strategy": self.strategy.name,
            "strategy_status": "Ready" if self.strategy.is_loaded else "Not Loaded",
            "strategy_accuracy": self.strategy.accuracy_estimate(),
            "report_generator": self.report_generator.model_info(),
            "report_status": "Ready" if self.report_generator.is_ready() else "Using Fallback",
        }
