"""Unit tests for the intelligence engine."""

import random
import pytest
from unittest.mock import Mock

from agrex_app.data.models import MarketIndicator, PredictionStatus, ProductType
from agrex_app.engine import (
    NO_REPORT_MESSAGE,
    NO_SUMMARY_MESSAGE,
    IntelligenceEngine,
    is_valid_export,
)
from agrex_app.errors import IllegalStateError, PredictionError
from agrex_app.prediction.base import PredictionStrategy
from agrex_app.reporting.base import ReportGenerator


@pytest.fixture
def report_generator():
    generator = Mock(spec=ReportGenerator)
    generator.generate_market_report.return_value = "market report"
    generator.generate_summary_report.return_value = "summary"
    generator.model_info.return_value = "Stub Backend"
    generator.is_ready.return_value = True
    return generator


@pytest.fixture
def stub_strategy():
    strategy = Mock(spec=PredictionStrategy)
    strategy.name = "Stub-Predictor"
    strategy.is_loaded = True
    strategy.accuracy_estimate.return_value = 0.75
    return strategy


class TestValidityFilter:
    """Test the record validity predicate."""

    def test_positive_price_and_volume(self, make_record):
        assert is_valid_export(make_record(price=1.0, volume=1.0))

    @pytest.mark.parametrize("price,volume", [(0.0, 10.0), (10.0, 0.0), (0.0, 0.0)])
    def test_zero_values_invalid(self, make_record, price, volume):
        assert not is_valid_export(make_record(price=price, volume=volume))

    def test_none_invalid(self):
        assert not is_valid_export(None)


class TestAnalyzeExports:
    """Test the analysis pipeline."""

    def test_empty_input(self, stub_strategy, report_generator):
        engine = IntelligenceEngine(stub_strategy, report_generator)

        with pytest.raises(PredictionError):
            engine.analyze_exports([])
        with pytest.raises(PredictionError):
            engine.analyze_exports(None)
        stub_strategy.predict_batch.assert_not_called()

    def test_no_valid_records(self, stub_strategy, report_generator, make_record):
        engine = IntelligenceEngine(stub_strategy, report_generator)

        with pytest.raises(PredictionError) as exc_info:
            engine.analyze_exports([make_record(price=0.0), make_record(volume=0.0)])

        assert exc_info.value.input_count == 2
        assert exc_info.value.valid_count == 0
        stub_strategy.predict_batch.assert_not_called()

    def test_only_valid_records_reach_strategy(self, stub_strategy, report_generator, make_record):
        valid = make_record(ProductType.DATES)
        stub_strategy.predict_batch.return_value = []
        engine = IntelligenceEngine(stub_strategy, report_generator)

        engine.analyze_exports([make_record(price=0.0), valid, make_record(volume=0.0)])

        stub_strategy.predict_batch.assert_called_once_with([valid])

    def test_none_entries_skipped(self, stub_strategy, report_generator, make_record):
        valid = make_record(ProductType.WHEAT)
        stub_strategy.predict_batch.return_value = []
        engine = IntelligenceEngine(stub_strategy, report_generator)

        engine.analyze_exports([None, valid, None])

        stub_strategy.predict_batch.assert_called_once_with([valid])

    def test_only_none_entries(self, stub_strategy, report_generator):
        engine = IntelligenceEngine(stub_strategy, report_generator)

        with pytest.raises(PredictionError) as exc_info:
            engine.analyze_exports([None, None])

        assert exc_info.value.input_count == 2
        assert exc_info.value.valid_count == 0
        stub_strategy.predict_batch.assert_not_called()

    def test_confidence_filter_is_strict(self, stub_strategy, report_generator, make_record, make_prediction):
        kept = make_prediction(confidence=0.71)
        stub_strategy.predict_batch.return_value = [
            make_prediction(confidence=0.70),
            kept,
            make_prediction(confidence=0.5, status=PredictionStatus.LOW_CONFIDENCE),
            make_prediction(confidence=0.0, price=0.0, status=PredictionStatus.FAILED),
        ]
        engine = IntelligenceEngine(stub_strategy, report_generator)

        result = engine.analyze_exports([make_record()])

        assert result == [kept]

    def test_strategy_failure_wrapped(self, stub_strategy, report_generator, make_record):
        stub_strategy.predict_batch.side_effect = IllegalStateError("not loaded")
        engine = IntelligenceEngine(stub_strategy, report_generator)

        with pytest.raises(PredictionError) as exc_info:
            engine.analyze_exports([make_record()])

        assert isinstance(exc_info.value.__cause__, IllegalStateError)

    def test_stable_records_with_momentum(self, loaded_momentum, report_generator, make_record):
        """Stable confidence never drops below 0.85, so every record survives."""
        engine = IntelligenceEngine(loaded_momentum(random.Random(1)), report_generator)
        records = [make_record(price=100.0, volume=50.0) for _ in range(10)]

        predictions = engine.analyze_exports(records)

        assert len(predictions) == 10
        for prediction in predictions:
            assert 90.0 <= prediction.predicted_price <= 110.0
            assert prediction.confidence > 0.70

    def test_survivors_keep_input_order(self, loaded_seasonal, report_generator, make_record):
        engine = IntelligenceEngine(loaded_seasonal(random.Random(2)), report_generator)
        products = [ProductType.WHEAT, ProductType.DATES, ProductType.TOMATOES]

        predictions = engine.analyze_exports([make_record(product) for product in products])

        assert [p.product for p in predictions] == products

    def test_unpredictable_momentum_never_survives(self, loaded_momentum, report_generator, make_record):
        engine = IntelligenceEngine(loaded_momentum(random.Random(4)), report_generator)
        records = [make_record(indicator=MarketIndicator.UNPREDICTABLE) for _ in range(20)]

        assert engine.analyze_exports(records) == []


class TestPredictionQueries:
    """Test grouping, filtering and aggregation over predictions."""

    @pytest.fixture
    def engine(self, stub_strategy, report_generator):
        return IntelligenceEngine(stub_strategy, report_generator)

    @pytest.fixture
    def predictions(self, make_prediction):
        return [
            make_prediction(ProductType.OLIVE_OIL, price=3600.0, confidence=0.80),
            make_prediction(ProductType.DATES, price=2500.0, confidence=0.90),
            make_prediction(ProductType.OLIVE_OIL, price=3800.0, confidence=0.90),
        ]

    def test_group_by_product(self, engine, predictions):
        groups = engine.group_by_product(predictions)
        assert list(groups) == [ProductType.OLIVE_OIL, ProductType.DATES]
        assert groups[ProductType.OLIVE_OIL] == [predictions[0], predictions[2]]

    def test_average_price_by_product(self, engine, predictions):
        averages = engine.average_price_by_product(predictions)
        assert averages[ProductType.OLIVE_OIL] == pytest.approx(3700.0)
        assert engine.average_price_by_product([]) == {}

    def test_best_prediction_first_on_ties(self, engine, predictions):
        assert engine.find_best_prediction(predictions) is predictions[1]

    def test_best_prediction_empty(self, engine):
        assert engine.find_best_prediction([]) is None

    def test_best_prediction_single(self, engine, make_prediction):
        only = make_prediction(ProductType.CITRUS_FRUITS, confidence=0.55)
        assert engine.find_best_prediction([only]) is only

    def test_filters(self, engine, predictions):
        assert engine.filter_by_product(predictions, ProductType.DATES) == [predictions[1]]
        assert engine.filter_by_product(predictions, ProductType.WHEAT) == []
        assert engine.filter_by_confidence_at_least(predictions, 0.9) == predictions[1:]

    def test_prediction_statistics(self, engine, predictions):
        summary = engine.prediction_statistics(predictions)

        assert summary.total == 3
        assert summary.completed == 3
        assert summary.mean_confidence == pytest.approx(0.8666666)
        assert summary.mean_predicted_price == pytest.approx(3300.0)
        assert summary.strategy_name == "Stub-Predictor"
        assert "=== PREDICTION STATISTICS ===" in summary.to_text()

    def test_prediction_statistics_empty(self, engine):
        summary = engine.prediction_statistics([])

        assert not summary.has_data()
        assert summary.strategy_accuracy == 0.75
        assert summary.to_text() == "No predictions available."


class TestReports:
    """Test report delegation."""

    def test_reports_delegate_verbatim(self, stub_strategy, report_generator, make_prediction):
        engine = IntelligenceEngine(stub_strategy, report_generator)
        predictions = [make_prediction()]

        assert engine.generate_intelligence_report(predictions) == "market report"
        assert engine.generate_summary(predictions) == "summary"
        report_generator.generate_market_report.assert_called_once_with(predictions)
        report_generator.generate_summary_report.assert_called_once_with(predictions)

    def test_empty_predictions_skip_generator(self, stub_strategy, report_generator):
        engine = IntelligenceEngine(stub_strategy, report_generator)

        assert engine.generate_intelligence_report([]) == NO_REPORT_MESSAGE
        assert engine.generate_summary(None) == NO_SUMMARY_MESSAGE
        report_generator.generate_market_report.assert_not_called()
        report_generator.generate_summary_report.assert_not_called()


class TestServiceInfo:
    """Test engine status reporting."""

    def test_ready(self, stub_strategy, report_generator):
        engine = IntelligenceEngine(stub_strategy, report_generator)
        info = engine.service_info()

        assert engine.is_model_ready()
        assert info == {
            "strategy": "Stub-Predictor",
            "strategy_status": "Ready",
            "strategy_accuracy": 0.75,
            "report_generator": "Stub Backend",
            "report_status": "Ready",
        }

    def test_not_ready(self, loaded_seasonal, report_generator):
        strategy = loaded_seasonal()
        strategy.unload_model()
        report_generator.is_ready.return_value = False
        engine = IntelligenceEngine(strategy, report_generator)

        info = engine.service_info()

        assert not engine.is_model_ready()
        assert info["strategy_status"] == "Not Loaded"
        assert info["report_status"] == "Using Fallback"
        assert info["strategy_accuracy"] == pytest.approx(0.80)
