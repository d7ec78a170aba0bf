"""Configuration loader for YAML files.

This module provides configuration loading with nested access and defaults,
plus helpers that turn configuration sections into calculator settings.

Typical usage example:
    from navcharge.core.config import ConfigLoader, load_charge_bands

    config = ConfigLoader.load("config/settings.yaml")
    waypoints_csv = config.get("data.waypoints", default="data/waypoints.csv")
    bands = load_charge_bands(config)

Example ``charges`` section:

    charges:
      bands:
        - {below: 1, charge: 60}
        - {below: 2, charge: 90}
        - {charge: 400}
"""

import logging
import math
from pathlib import Path
from typing import Any

import yaml

from navcharge.charges.classifier import (
    DEFAULT_CHARGE_BANDS,
    ChargeBand,
    ChargeScheduleError,
    validate_bands,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> config.get("data.aircraft", default="data/aircraft-data.csv")
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "data.waypoints".
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


def load_charge_bands(config: ConfigLoader) -> tuple[ChargeBand, ...]:
    """Build the charge schedule from the ``charges.bands`` section.

    Each entry needs a ``charge``; every entry except the last needs a
    ``below`` threshold. A missing ``below`` means no upper bound.

    Args:
        config: Loaded configuration.

    Returns:
        Validated charge bands, or the default schedule when none is configured.

    Raises:
        ConfigError: If the section is malformed or the schedule is invalid.
    """
    raw_bands = config.get("charges.bands")
    if raw_bands is None:
        return DEFAULT_CHARGE_BANDS

    if not isinstance(raw_bands, list):
        raise ConfigError("charges.bands must be a list")

    bands = []
    for entry in raw_bands:
        if not isinstance(entry, dict) or "charge" not in entry:
            raise ConfigError(f"Invalid charge band entry: {entry!r}")
        try:
            upper_bound = float(entry.get("below", math.inf))
            charge = float(entry["charge"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid charge band entry {entry!r}: {e}") from e
        bands.append(ChargeBand(upper_bound=upper_bound, charge=charge))

    try:
        return validate_bands(bands)
    except ChargeScheduleError as e:
        raise ConfigError(f"Invalid charge schedule: {e}") from e
