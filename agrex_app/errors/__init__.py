"""
Error classification system for the export intelligence pipeline.

This module provides a structured exception hierarchy separating data quality
problems (bad or missing input) from system failures (lifecycle violations,
model loading and orchestration errors).
"""

from .data_quality import (
    DataQualityError,
    InvalidArgumentError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    IllegalStateError,
    ModelError,
    PredictionError,
    ReportGenerationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidArgumentError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "IllegalStateError",
    "ModelError",
    "PredictionError",
    "ReportGenerationError",
]
