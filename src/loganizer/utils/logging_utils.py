import json
import logging
import logging.handlers
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(
        self,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f",
        **kwargs
    ):
        """Initialize formatter.

        Args:
            timestamp_format: Timestamp format string
            **kwargs: Additional fields to include
        """
        super().__init__()
        self.timestamp_format = timestamp_format
        self.additional_fields = kwargs

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted string
        """
        data = {
            'timestamp': datetime.fromtimestamp(record.created).strftime(
                self.timestamp_format
            ),
            'level': record.levelname,
            'logger': record.name,
            'thread': record.threadName,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno
        }

        if record.exc_info:
            data['exception'] = self.formatException(record.exc_info)

        data.update(self.additional_fields)

        return json.dumps(data)


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    console: Optional[Console] = None,
    **kwargs
) -> None:
    """Set up logging configuration.

    Console records go through rich; the optional log file receives one
    JSON document per record.

    Args:
        level: Log level
        log_file: Optional log file path
        console: Rich console for the console handler
        **kwargs: Additional fields for JSON formatter
    """
    handlers = [
        RichHandler(console=console, rich_tracebacks=True, show_path=False)
    ]
    handlers[0].setFormatter(logging.Formatter("%(message)s"))

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(JsonFormatter(**kwargs))
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)


@contextmanager
def log_duration(
    logger: Union[str, logging.Logger],
    message: str,
    level: int = logging.INFO
):
    """Log duration of code block.

    Args:
        logger: Logger name or instance
        message: Message template with {duration}
        level: Log level
    """
    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        logger.log(level, message.format(duration=f"{duration:.3f}s"))
