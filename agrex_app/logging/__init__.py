"""
Structured logging for the export intelligence system.

Call `configure_logging` (or `configure_from_params` with the loaded
LoggingParams) once at startup, then obtain loggers with `get_logger`.
"""
from .config import (
    configure_from_params,
    configure_logging,
    get_logger,
    get_prediction_logger,
    get_report_logger,
)

__all__ = [
    "configure_logging",
    "configure_from_params",
    "get_logger",
    "get_prediction_logger",
    "get_report_logger",
]
