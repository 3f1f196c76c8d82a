"""Snapshot models for statistics and prediction summaries"""

from dataclasses import dataclass

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class DescriptiveStats:
    """Descriptive statistics over one numeric sequence"""
    count: int
    sum: float
    mean: float
    median: float
    min: float
    max: float
    range: float
    variance: float
    std_dev: float
    q1: float
    q3: float

    def __post_init__(self):
        if self.count < 0:
            raise InvalidArgumentError("Count cannot be negative", argument="count", value=self.count)

    @classmethod
    def empty(cls) -> "DescriptiveStats":
        return cls(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def coefficient_of_variation(self) -> float:
        """Standard deviation as a percentage of the mean (0 when mean is 0)"""
        if self.mean == 0:
            return 0.0
        return (self.std_dev / self.mean) * 100.0

    @property
    def interquartile_range(self) -> float:
        return self.q3 - self.q1

    def to_text(self) -> str:
        return (
            "=== STATISTICS SUMMARY ===\n"
            f"Count:              {self.count}\n"
            f"Sum:                {self.sum:.2f}\n"
            f"Mean (Average):     {self.mean:.2f}\n"
            f"Median:             {self.median:.2f}\n"
            f"Min:                {self.min:.2f}\n"
            f"Max:                {self.max:.2f}\n"
            f"Range:              {self.range:.2f}\n"
            f"Std Deviation:      {self.std_dev:.2f}\n"
            f"Variance:           {self.variance:.2f}\n"
            f"Q1 (25th %ile):     {self.q1:.2f}\n"
            f"Q3 (75th %ile):     {self.q3:.2f}\n"
            "==========================\n"
        )


@dataclass(frozen=True)
class PriceStatistics:
    """Price-per-ton statistics over a set of export records"""
    mean: float
    min: float
    max: float
    median: float
    std_dev: float
    count: int

    @classmethod
    def empty(cls) -> "PriceStatistics":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0)

    @property
    def range(self) -> float:
        return self.max - self.min

    @property
    def coefficient_of_variation(self) -> float:
        if self.mean == 0:
            return 0.0
        return (self.std_dev / self.mean) * 100.0

    def to_text(self) -> str:
        return (
            "=== PRICE STATISTICS ===\n"
            f"Count: {self.count}\n"
            f"Average: {self.mean:.2f} TND\n"
            f"Minimum: {self.min:.2f} TND\n"
            f"Maximum: {self.max:.2f} TND\n"
            f"Median: {self.median:.2f} TND\n"
            f"Standard Deviation: {self.std_dev:.2f} TND\n"
            f"Range: {self.range:.2f} TND\n"
        )


@dataclass(frozen=True)
class PredictionSummary:
    """Aggregate view of a prediction set and the strategy behind it"""
    total: int
    completed: int
    mean_confidence: float
    mean_predicted_price: float
    strategy_name: str
    strategy_accuracy: float

    @classmethod
    def no_data(cls, strategy_name: str, strategy_accuracy: float) -> "PredictionSummary":
        """Sentinel returned when there are no predictions to summarize"""
        return cls(0, 0, 0.0, 0.0, strategy_name, strategy_accuracy)

    def has_data(self) -> bool:
        return self.total > 0

    def to_text(self) -> str:
        if not self.has_data():
            return "No predictions available."

        return (
            "=== PREDICTION STATISTICS ===\n"
            f"Total Predictions: {self.total}\n"
            f"Successful: {self.completed}\n"
            f"Average Confidence: {self.mean_confidence * 100:.2f}%\n"
            f"Average Predicted Price: {self.mean_predicted_price:.2f} TND\n"
            f"Model: {self.strategy_name}\n"
            f"Model Accuracy: {self.strategy_accuracy * 100:.2f}%\n"
        )
