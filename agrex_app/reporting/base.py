"""Base class for report generators."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..data.models import PricePrediction


class ReportGenerator(ABC):
    """Turns a non-empty prediction set into prose."""

    @abstractmethod
    def generate_market_report(self, predictions: Sequence[PricePrediction]) -> str:
        """
        Generate a detailed market report.

        Args:
            predictions: Non-empty list of predictions

        Returns:
            Report text
        """

    @abstractmethod
    def generate_summary_report(self, predictions: Sequence[PricePrediction]) -> str:
        """Generate a short executive summary."""

    @abstractmethod
    def is_ready(self) -> bool:
        """Check if the text-generation backend is available."""

    @abstractmethod
    def model_info(self) -> str:
        """Human-readable backend description."""
