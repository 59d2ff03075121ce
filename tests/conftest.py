from typing import Optional

import pytest

from loganizer.core.analyzer import LogAnalyzer
from loganizer.core.randomness import SeededRandomSource
from loganizer.core.records import LogConfig


@pytest.fixture
def quiet_random():
    """Random source with no delay and no injected failures"""
    return SeededRandomSource(min_delay=0, max_delay=0, failure_rate=0)


@pytest.fixture
def analyzer(quiet_random):
    """Deterministic analyzer instance"""
    return LogAnalyzer(random_source=quiet_random)


@pytest.fixture
def make_config(tmp_path):
    """Create a log config, writing the log file unless content is None"""

    def _make(
        log_id: str,
        content: Optional[str] = "line1\nline2\nline3",
        log_type: str = "custom-app",
    ) -> LogConfig:
        path = tmp_path / f"{log_id}.log"
        if content is not None:
            path.write_text(content)
        return LogConfig(id=log_id, path=str(path), type=log_type)

    return _make
