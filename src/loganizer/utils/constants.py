from typing import Dict

# Simulated processing settings
DEFAULT_MIN_DELAY_MS = 50
DEFAULT_MAX_DELAY_MS = 200
DEFAULT_FAILURE_RATE = 0.1

# Output settings
DEFAULT_INDENT = 2

# Failure labels stored in LogResult.message
FAILURE_MESSAGES = {
    "access": "File access failed",
    "read": "File read failed",
    "empty": "Parsing failed",
    "injected": "Random parsing error occurred",
    "internal": "Analysis failed",
}

# Parsing error details
EMPTY_CONTENT_DETAILS = "empty log file, no content to parse"
INJECTED_FAILURE_DETAILS = "simulated random parsing failure"

# Success messages per declared log type, formatted with the line count
MESSAGE_TEMPLATES: Dict[str, str] = {
    "nginx-access": "Nginx access log analyzed: {count} entries processed",
    "mysql-error": "MySQL error log analyzed: {count} error entries found",
    "custom-app": "Custom application log analyzed: {count} log entries processed",
}
GENERIC_MESSAGE_TEMPLATE = "Generic log analyzed: {count} lines processed"

# Default configuration
DEFAULT_CONFIG = {
    "analysis": {
        "min_delay_ms": DEFAULT_MIN_DELAY_MS,
        "max_delay_ms": DEFAULT_MAX_DELAY_MS,
        "failure_rate": DEFAULT_FAILURE_RATE,
        "seed": None,
    },
    "processing": {
        # None runs one worker per configured log
        "max_workers": None,
    },
    "output": {
        "indent": DEFAULT_INDENT,
    },
}

# Environment variable mapping
ENV_VARS = {
    "LOGANIZER_MIN_DELAY_MS": ("analysis.min_delay_ms", int),
    "LOGANIZER_MAX_DELAY_MS": ("analysis.max_delay_ms", int),
    "LOGANIZER_FAILURE_RATE": ("analysis.failure_rate", float),
    "LOGANIZER_SEED": ("analysis.seed", int),
    "LOGANIZER_MAX_WORKERS": ("processing.max_workers", int),
    "LOGANIZER_INDENT": ("output.indent", int),
}
