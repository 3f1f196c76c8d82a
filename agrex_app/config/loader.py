"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from .defaults import (
    DefaultConfig,
    GeneratorParams,
    LoggingParams,
    ReportParams,
    StrategyParams,
    get_default_config,
)

logger = structlog.get_logger(__name__)

SETTINGS_FILE = "settings.yaml"

SECTIONS: dict[str, type] = {
    "strategy": StrategyParams,
    "report": ReportParams,
    "generator": GeneratorParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader, reading from the repository `config/` directory by default."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings_file(self) -> dict[str, Any]:
        """Load overrides from settings.yaml, empty when the file is absent."""
        settings_file = self.config_dir / SETTINGS_FILE

        if not settings_file.exists():
            return {}

        with open(settings_file, encoding="utf-8") as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-run overrides (highest priority)
        2. settings.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        for layer in (self.load_settings_file(), overrides or {}):
            config = self._deep_merge(config, layer)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration and rebuild the frozen dataclass tree.

        Keys a section does not define are dropped with a warning.
        """
        merged = self.merge_config(overrides)
        sections = {
            name: self._build_section(name, params_type, merged.get(name) or {})
            for name, params_type in SECTIONS.items()
        }
        return DefaultConfig(**sections)

    def _build_section(self, name: str, params_type: type, values: dict[str, Any]) -> Any:
        known = {f.name for f in fields(params_type)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys", section=name, keys=unknown)
        return params_type(**{key: value for key, value in values.items() if key in known})

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
