import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Union

from .constants import DEFAULT_CONFIG, ENV_VARS
from .helpers import merge_dicts

logger = logging.getLogger(__name__)


class Config:
    """Runtime settings for loganizer.

    Values are layered: built-in defaults, then an optional JSON settings
    file, then ``LOGANIZER_*`` environment variables.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration.

        Args:
            config_path: Optional path to settings file
        """
        self._config = deepcopy(DEFAULT_CONFIG)

        if config_path:
            self.load_file(config_path)

        self.load_environment()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key (dot notation supported)
            value: Value to set
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def load_file(self, config_path: Union[str, Path]) -> None:
        """Load settings from a JSON file.

        Args:
            config_path: Path to settings file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path) as f:
            try:
                file_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid settings file: {e}") from e

        if not isinstance(file_config, dict):
            raise ValueError(f"Invalid settings file: expected a JSON object in {path}")
        self._config = merge_dicts(self._config, file_config)

    def load_environment(self) -> None:
        """Load configuration from environment variables"""
        for env_var, (config_key, type_func) in ENV_VARS.items():
            value = os.getenv(env_var)
            if value is not None:
                try:
                    self.set(config_key, type_func(value))
                except (ValueError, TypeError):
                    logger.warning(f"Invalid environment variable {env_var}: {value}")

    def validate(self) -> bool:
        """Validate configuration.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        numeric_fields = [
            ("analysis.min_delay_ms", 0, None),
            ("analysis.max_delay_ms", 0, None),
            ("analysis.failure_rate", 0, 1),
            ("processing.max_workers", 1, None),
            ("output.indent", 0, None),
        ]

        for field, min_val, max_val in numeric_fields:
            value = self.get(field)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid type for {field}: expected number")
            if min_val is not None and value < min_val:
                raise ValueError(f"Invalid value for {field}: must be >= {min_val}")
            if max_val is not None and value > max_val:
                raise ValueError(f"Invalid value for {field}: must be <= {max_val}")

        if self.get("analysis.min_delay_ms", 0) > self.get("analysis.max_delay_ms", 0):
            raise ValueError(
                "Invalid value for analysis.min_delay_ms: must be <= analysis.max_delay_ms"
            )

        for field in ("analysis.seed", "processing.max_workers", "output.indent"):
            value = self.get(field)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"Invalid type for {field}: expected integer")

        return True

    def __repr__(self) -> str:
        return f"Config({self._config})"

