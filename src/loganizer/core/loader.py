import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from ..utils.helpers import ConfigError
from .records import LogConfig

logger = logging.getLogger(__name__)

_CONFIG_LIST = TypeAdapter(List[LogConfig])


def read_configs(config_path: Union[str, Path]) -> List[LogConfig]:
    """Load the list of log files to analyze.

    The file holds a JSON array of ``{"id", "path", "type"}`` objects.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        Parsed log configurations, in file order

    Raises:
        ConfigError: If the file cannot be read or its content is invalid
    """
    path = Path(config_path)

    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"could not read config file: {e}") from e

    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"could not parse config JSON: {e}") from e

    try:
        configs = _CONFIG_LIST.validate_python(raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config in {path}: {e}") from e

    logger.debug(f"Loaded {len(configs)} log configurations from {path}")
    return configs
