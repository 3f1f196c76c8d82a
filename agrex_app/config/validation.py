"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

STRATEGY_KINDS = ("momentum", "seasonal")
REPORT_PROVIDERS = ("ollama", "openai", "none")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_strategy_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate prediction strategy parameters."""
        errors = []

        if "kind" in params:
            value = params["kind"]
            if value not in STRATEGY_KINDS:
                errors.append(ValidationError(
                    field="kind",
                    message=f"Must be one of {', '.join(STRATEGY_KINDS)}",
                    value=value
                ))

        for delay_field in ("momentum_load_delay_seconds", "seasonal_load_delay_seconds"):
            if delay_field in params:
                value = params[delay_field]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=delay_field,
                        message="Must be a non-negative number",
                        value=value
                    ))

        if "horizon_days" in params:
            value = params["horizon_days"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="horizon_days",
                    message="Must be a positive integer",
                    value=value
                ))

        if "seed" in params:
            value = params["seed"]
            if not isinstance(value, int) or isinstance(value, bool) or value < -1:
                errors.append(ValidationError(
                    field="seed",
                    message="Must be -1 or a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report generation parameters."""
        errors = []

        if "provider" in params:
            value = params["provider"]
            if value not in REPORT_PROVIDERS:
                errors.append(ValidationError(
                    field="provider",
                    message=f"Must be one of {', '.join(REPORT_PROVIDERS)}",
                    value=value
                ))

        if "base_url" in params:
            value = params["base_url"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="base_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "temperature" in params:
            value = params["temperature"]
            if not _is_number(value) or value < 0 or value > 2:
                errors.append(ValidationError(
                    field="temperature",
                    message="Must be a number between 0 and 2",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_generator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate synthetic data generator parameters."""
        errors = []

        for count_field in ("record_count", "history_years"):
            if count_field in params:
                value = params[count_field]
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    errors.append(ValidationError(
                        field=count_field,
                        message="Must be an integer of at least 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if config.get("strategy"):
            errors.extend(ConfigValidator.validate_strategy_params(config["strategy"]))

        if config.get("report"):
            errors.extend(ConfigValidator.validate_report_params(config["report"]))

        if config.get("generator"):
            errors.extend(ConfigValidator.validate_generator_params(config["generator"]))

        if config.get("logging"):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
