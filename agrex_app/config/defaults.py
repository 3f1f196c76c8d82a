"""Default configuration parameters for the export intelligence system."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrategyParams:
    """Prediction strategy selection and simulated model parameters."""
    kind: str = "momentum"                       # momentum | seasonal
    momentum_load_delay_seconds: float = 0.5     # Simulated model load time
    seasonal_load_delay_seconds: float = 0.6
    horizon_days: int = 30                       # Prediction date offset
    seed: int = -1                               # -1 draws from system entropy


@dataclass(frozen=True)
class ReportParams:
    """Text-generation backend parameters."""
    provider: str = "ollama"                     # ollama | openai | none
    base_url: str = "http://localhost:11434"
    model_name: str = "llama2"
    temperature: float = 0.7
    timeout_seconds: int = 60
    api_key_env: str = "OPENAI_API_KEY"


@dataclass(frozen=True)
class GeneratorParams:
    """Synthetic export data parameters."""
    record_count: int = 100
    history_years: int = 2


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    strategy: StrategyParams
    report: ReportParams
    generator: GeneratorParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        strategy=StrategyParams(),
        report=ReportParams(),
        generator=GeneratorParams(),
        logging=LoggingParams(),
    )
