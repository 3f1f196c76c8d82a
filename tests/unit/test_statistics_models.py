"""Tests for statistics snapshot models."""

import pytest

from agrex_app.errors import InvalidArgumentError
from agrex_app.models.statistics import DescriptiveStats, PredictionSummary, PriceStatistics


class TestSnapshots:
    """Test snapshot invariants and rendering."""

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidArgumentError):
            DescriptiveStats(-1, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def test_price_statistics_derived_values(self):
        stats = PriceStatistics(mean=200.0, min=100.0, max=300.0, median=200.0, std_dev=50.0, count=3)
        assert stats.range == pytest.approx(200.0)
        assert stats.coefficient_of_variation == pytest.approx(25.0)
        assert PriceStatistics.empty().coefficient_of_variation == 0.0

    def test_prediction_summary_text(self):
        summary = PredictionSummary(
            total=4, completed=3, mean_confidence=0.82, mean_predicted_price=2450.0,
            strategy_name="Seasonal-Price-Predictor", strategy_accuracy=0.80,
        )
        text = summary.to_text()

        assert summary.has_data()
        assert "Total Predictions: 4" in text
        assert "Successful: 3" in text
        assert "Average Confidence: 82.00%" in text
        assert "Model Accuracy: 80.00%" in text

    def test_no_data_sentinel(self):
        summary = PredictionSummary.no_data("Momentum-Price-Predictor", 0.78)
        assert summary.total == 0
        assert summary.to_text() == "No predictions available."
