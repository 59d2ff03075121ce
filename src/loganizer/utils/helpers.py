from typing import Dict


class LoganizerError(Exception):
    """Base exception for loganizer errors"""

    pass


class ConfigError(LoganizerError):
    """Raised when the log configuration list cannot be loaded"""

    pass


class ExportError(LoganizerError):
    """Raised when an analysis report cannot be written"""

    pass


def merge_dicts(dict1: Dict, dict2: Dict) -> Dict:
    """Deep merge two dictionaries.

    Args:
        dict1: First dictionary
        dict2: Second dictionary

    Returns:
        Merged dictionary
    """
    merged = dict1.copy()

    for key, value in dict2.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value

    return merged


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as a short human readable string.

    Sub-second values are rendered in milliseconds ("123.456ms"), longer
    ones in seconds ("1.250s"), minutes only above one minute ("2m5.000s").

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string
    """
    if seconds < 0:
        raise ValueError(f"Duration must not be negative: {seconds}")
    if seconds < 1:
        return f"{seconds * 1000:.3f}ms"
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, remainder = divmod(seconds, 60)
    return f"{int(minutes)}m{remainder:.3f}s"
