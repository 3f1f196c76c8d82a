"""
Centralized logging configuration for the export intelligence system.

Every module logs through structlog with key-value events. The stdlib
`logging` root handler only routes the rendered lines, so third-party
loggers end up on the same stream. Strategies and the report service use
the subsystem-bound loggers below so their events can be filtered apart.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor

from ..config.defaults import LoggingParams


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    colors: bool = True,
) -> list[Processor]:
    """Processor chain ending in either a JSON or a console renderer."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    processors += extra_processors or []

    renderer: Processor = (structlog.processors.JSONRenderer(ensure_ascii=False) if format_json
                           else structlog.dev.ConsoleRenderer(colors=colors))
    processors.append(renderer)
    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog and the stdlib root logger for the application.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case
        format_json: Render one JSON object per line instead of console output
        include_timestamp: Add an ISO-8601 UTC timestamp to every event
        include_caller: Add the emitting module and line number
        extra_processors: Processors inserted just before rendering
        stream: Output stream, stdout by default

    Raises:
        ValueError: unknown level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    output = stream or sys.stdout
    logging.basicConfig(level=log_level, stream=output, format="%(message)s", force=True)

    structlog.configure(
        processors=build_processors(
            format_json=format_json,
            include_timestamp=include_timestamp,
            include_caller=include_caller,
            extra_processors=extra_processors,
            colors=output.isatty(),
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: LoggingParams, **kwargs: Any) -> None:
    """Apply the `logging` section of the loaded configuration."""
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_prediction_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the prediction subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for prediction strategies
    """
    return get_logger(name).bind(subsystem="prediction")


def get_report_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the reporting subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for report generation
    """
    return get_logger(name).bind(subsystem="reporting")


def log_prediction(
    logger: FilteringBoundLogger,
    strategy: str,
    product: str,
    price: float,
    confidence: float,
    status: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single price prediction with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Name of the strategy that produced the prediction
        product: Product the prediction is for
        price: Predicted price in TND per ton
        confidence: Confidence score in [0, 1]
        status: Prediction status name
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy,
        product=product,
        predicted_price=price,
        confidence=round(confidence, 4),
        status=status,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if status == "FAILED":
        bound_logger.error("Prediction failed")
    elif status == "LOW_CONFIDENCE":
        bound_logger.info("Low confidence prediction")
    else:
        bound_logger.debug("Prediction completed")


def log_model_lifecycle(
    logger: FilteringBoundLogger,
    strategy: str,
    from_state: str,
    to_state: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a model load/unload transition with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Name of the strategy changing state
        from_state: Current state
        to_state: Target state
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy,
        from_state=from_state,
        to_state=to_state,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Model state transition")
