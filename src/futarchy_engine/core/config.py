"""Configuration management for the futarchy engine."""

import os
import re
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, cast

import yaml
from dotenv import load_dotenv

from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import (
    ARBITRAGE_TOLERANCE,
    DEFAULT_SPREAD,
    ONE,
    ZERO,
    to_decimal,
)


class ConfigError(Exception):
    """Raise when configuration loading or validation fails."""


@dataclass(frozen=True)
class PricingConfig:
    """Pricing defaults used when a caller does not pass explicit values.

    Args:
        spread: Fraction added to the NO side, half of it per token.
        arbitrage_tolerance: Half-width of the balanced band around 1.

    """

    spread: Decimal = DEFAULT_SPREAD
    arbitrage_tolerance: Decimal = ARBITRAGE_TOLERANCE


class ConfigLoader:
    """Load and manage configuration from YAML files with environment variable substitution."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config loader.

        Load environment variables from a ``.env`` file (if present) and
        then read YAML configuration from the given directory.

        Args:
            config_dir: Directory containing config files. Defaults to src/futarchy_engine/config.

        """
        load_dotenv()
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)
        self._config: dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML files."""
        settings_file = self.config_dir / "settings.yaml"
        if settings_file.exists():
            with settings_file.open() as f:
                self._config = yaml.safe_load(f) or {}

        # Override with local settings if exists
        local_settings = self.config_dir / "settings.local.yaml"
        if local_settings.exists():
            with local_settings.open() as f:
                local_config = cast("dict[str, Any]", yaml.safe_load(f) or {})
                self._deep_merge(self._config, local_config)

        self._config = self._substitute_env_vars(self._config)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> None:
        """Deep merge override dict into base dict.

        Args:
            base: Base dictionary to merge into (modified in place).
            override: Dictionary with values to override.

        """
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], cast("dict[str, Any]", value))
            else:
                base[key] = value

    def _substitute_env_vars(self, config: Any) -> Any:
        """Recursively substitute environment variables in config.

        Supports format: ${VAR_NAME:default_value} or ${VAR_NAME}

        Args:
            config: Configuration value (dict, list, or str).

        Returns:
            Configuration with environment variables substituted.

        """
        if isinstance(config, dict):
            return {
                k: self._substitute_env_vars(v)
                for k, v in config.items()  # pyright: ignore[reportUnknownVariableType]
            }
        if isinstance(config, list):
            return [
                self._substitute_env_vars(item)
                for item in config  # pyright: ignore[reportUnknownVariableType]
            ]
        if isinstance(config, str) and config.startswith("${") and config.endswith("}"):
            var_expr = config[2:-1]
            if ":" in var_expr:
                var_name, default = var_expr.split(":", 1)
            else:
                var_name, default = var_expr, None

            value = os.getenv(var_name, default)
            if value is None:
                msg = f"Required environment variable ${{{var_name}}} is not set and has no default"
                raise ConfigError(msg)
            return value

        if isinstance(config, str) and re.search(r"\$\{[^}]+\}", config):
            msg = f"Unresolved environment variable reference in: {config}"
            raise ConfigError(msg)

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Args:
            key: Configuration key in dot notation (e.g., 'pricing.spread').
            default: Default value if key not found.

        Returns:
            Configuration value.

        """
        keys = key.split(".")
        current: Any = self._config
        for k in keys:
            if isinstance(current, dict):
                current = cast("dict[str, Any]", current).get(k)
                if current is None:
                    return default
            else:
                return default
        return current  # pyright: ignore[reportReturnType]

    def get_pricing_config(self) -> PricingConfig:
        """Get the pricing defaults.

        Returns:
            ``PricingConfig`` built from the ``pricing`` section, falling
            back to the engine defaults for missing keys.

        Raises:
            ConfigError: If a value is not a number or is out of range.

        """
        spread = self._get_fraction("pricing.spread", DEFAULT_SPREAD)
        tolerance = self._get_fraction("pricing.arbitrage_tolerance", ARBITRAGE_TOLERANCE)
        return PricingConfig(spread=spread, arbitrage_tolerance=tolerance)

    def _get_fraction(self, key: str, default: Decimal) -> Decimal:
        """Read a config value as a ``Decimal`` in ``[0, 1]``."""
        raw: Any = self.get(key, default)
        try:
            value = to_decimal(raw, field_name=key)
        except FutarchyError as exc:
            raise ConfigError(str(exc)) from exc
        if not (ZERO <= value <= ONE):
            msg = f"{key} must be between 0 and 1, got {value}"
            raise ConfigError(msg)
        return value


_config: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Return the global ``ConfigLoader`` singleton, creating it on first use.

    Lazy initialisation avoids side effects (file I/O, ``load_dotenv``)
    at import time and makes testing easier.

    Returns:
        The shared ``ConfigLoader`` instance.

    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ConfigLoader()
    return _config
