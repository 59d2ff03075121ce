import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ..utils.config import Config
from ..utils.constants import (
    EMPTY_CONTENT_DETAILS,
    FAILURE_MESSAGES,
    GENERIC_MESSAGE_TEMPLATE,
    INJECTED_FAILURE_DETAILS,
    MESSAGE_TEMPLATES,
)
from ..utils.file_utils import count_segments
from .errors import AnalysisError
from .randomness import RandomSource, SeededRandomSource
from .records import LogConfig, LogResult


def describe_content(log_type: str, line_count: int) -> str:
    """Build the success message for a log of the given declared type"""
    template = MESSAGE_TEMPLATES.get(log_type, GENERIC_MESSAGE_TEMPLATE)
    return template.format(count=line_count)


class LogAnalyzer:
    """Analyzes configured log files concurrently, one result per file"""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        max_workers: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the log analyzer

        Args:
            random_source: Source of simulated delays and injected failures
            max_workers: Cap on concurrent workers, None for one per file
            sleep: Function used to wait out the simulated delay
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.random_source = random_source or SeededRandomSource()
        self.max_workers = max_workers
        self._sleep = sleep
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Config) -> "LogAnalyzer":
        """Create an analyzer from runtime settings

        Raises:
            ValueError: If the settings are invalid
        """
        config.validate()
        random_source = SeededRandomSource(
            seed=config.get("analysis.seed"),
            min_delay=config.get("analysis.min_delay_ms", 0) / 1000,
            max_delay=config.get("analysis.max_delay_ms", 0) / 1000,
            failure_rate=config.get("analysis.failure_rate", 0.0),
        )
        return cls(
            random_source=random_source,
            max_workers=config.get("processing.max_workers"),
        )

    def analyze_file(self, config: LogConfig) -> LogResult:
        """Analyze a single configured log file

        Checks run in order and the first failing one decides the outcome:
        missing file, unreadable file, empty content, injected failure.
        Failures are returned as FAILED results, never raised.

        Args:
            config: Log file description

        Returns:
            Analysis result for the file
        """
        start_time = time.perf_counter()

        def elapsed() -> float:
            return time.perf_counter() - start_time

        self._sleep(self.random_source.processing_delay())
        self.logger.debug(f"Analyzing {config.id} ({config.path})")

        path = Path(config.path)
        try:
            path.stat()
        except FileNotFoundError:
            return self._failed(
                config, FAILURE_MESSAGES["access"],
                AnalysisError.missing_file(config.path), elapsed(),
            )
        except (OSError, ValueError) as e:
            return self._failed(
                config, FAILURE_MESSAGES["access"],
                AnalysisError.io(f"could not access file: {e}"), elapsed(),
            )

        try:
            content = path.read_bytes()
        except OSError as e:
            return self._failed(
                config, FAILURE_MESSAGES["read"], AnalysisError.io(str(e)), elapsed()
            )

        if not content:
            return self._failed(
                config, FAILURE_MESSAGES["empty"],
                AnalysisError.parsing(EMPTY_CONTENT_DETAILS), elapsed(),
            )

        if self.random_source.should_inject_failure():
            return self._failed(
                config, FAILURE_MESSAGES["injected"],
                AnalysisError.parsing(INJECTED_FAILURE_DETAILS), elapsed(),
            )

        message = describe_content(config.type, count_segments(content))
        self.logger.debug(f"{config.id}: {message}")
        return LogResult.success(config, message, elapsed())

    def analyze_all(self, configs: Sequence[LogConfig]) -> List[LogResult]:
        """Analyze all configured log files concurrently

        Every file gets its own worker unless ``max_workers`` caps the pool.
        A failure in one file never affects the others. The call returns
        once every file has a result; results are in completion order.

        Args:
            configs: Log file descriptions

        Returns:
            One result per config
        """
        if not configs:
            self.logger.info("No log files configured, nothing to analyze")
            return []

        workers = self.max_workers or len(configs)
        self.logger.info(f"Analyzing {len(configs)} log files with {workers} workers")

        results: List[LogResult] = []
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="loganizer") as executor:
            future_to_config = {
                executor.submit(self.analyze_file, config): config
                for config in configs
            }

            for future in as_completed(future_to_config):
                config = future_to_config[future]
                try:
                    results.append(future.result())
                except Exception as e:
                    self.logger.error(f"Unexpected error analyzing {config.id}: {e}", exc_info=True)
                    results.append(
                        LogResult.failure(
                            config, FAILURE_MESSAGES["internal"],
                            AnalysisError.internal(str(e)), 0.0,
                        )
                    )

        failed = sum(1 for result in results if not result.succeeded)
        self.logger.info(
            f"Batch analysis complete: {len(results) - failed} successful, {failed} failed"
        )
        return results

    def _failed(
        self,
        config: LogConfig,
        message: str,
        error: AnalysisError,
        process_time: float,
    ) -> LogResult:
        self.logger.warning(f"{config.id}: {message} ({error.render()})")
        return LogResult.failure(config, message, error, process_time)
