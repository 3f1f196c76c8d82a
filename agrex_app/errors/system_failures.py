"""
System failure error classifications.

These exceptions represent failures of the prediction machinery itself:
operations invoked in the wrong lifecycle state, model loading failures
and orchestration runs that have nothing valid to work on.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IllegalStateError(SystemFailureError):
    """Operation invoked while the component is in the wrong lifecycle state."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_operation = attempted_operation


class ModelError(SystemFailureError):
    """Prediction model could not be loaded."""

    def __init__(self, message: str, model_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.model_name = model_name


class PredictionError(SystemFailureError):
    """Export analysis failed as a whole (empty or fully invalid input)."""

    def __init__(self, message: str, input_count: Optional[int] = None,
                 valid_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.input_count = input_count
        self.valid_count = valid_count


class ReportGenerationError(SystemFailureError):
    """Text-generation backend call failed."""

    def __init__(self, message: str, provider: Optional[str] = None,
                 status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.provider = provider
        self.status_code = status_code
