import pytest
from pydantic import ValidationError

from loganizer.core.errors import AnalysisError
from loganizer.core.records import AnalysisStatus, LogConfig, LogResult


@pytest.fixture
def config():
    return LogConfig(id="web-1", path="/var/log/nginx/access.log", type="nginx-access")


class TestLogConfig:
    """Test configuration records"""

    def test_fields(self, config):
        assert config.id == "web-1"
        assert config.path == "/var/log/nginx/access.log"
        assert config.type == "nginx-access"

    def test_immutable(self, config):
        with pytest.raises(ValidationError):
            config.path = "/tmp/other.log"

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            LogConfig.model_validate({"id": "a", "path": "/tmp/a.log"})

    def test_extra_fields_ignored(self):
        config = LogConfig.model_validate(
            {"id": "a", "path": "/tmp/a.log", "type": "custom-app", "owner": "ops"}
        )

        assert config.type == "custom-app"


class TestLogResult:
    """Test result records"""

    def test_success(self, config):
        result = LogResult.success(config, "Nginx access log analyzed: 2 entries processed", 0.1)

        assert result.status is AnalysisStatus.SUCCESS
        assert result.succeeded
        assert result.log_id == "web-1"
        assert result.file_path == config.path
        assert result.error_details == ""

    def test_failure(self, config):
        error = AnalysisError.missing_file(config.path)

        result = LogResult.failure(config, "File access failed", error, 0.1)

        assert result.status is AnalysisStatus.FAILED
        assert not result.succeeded
        assert result.error is error
        assert result.error_details == error.render()

    def test_failed_status_requires_error(self, config):
        with pytest.raises(ValueError):
            LogResult(
                log_id=config.id,
                file_path=config.path,
                status=AnalysisStatus.FAILED,
                message="File access failed",
                process_time=0.0,
            )

    def test_success_status_forbids_error(self, config):
        with pytest.raises(ValueError):
            LogResult(
                log_id=config.id,
                file_path=config.path,
                status=AnalysisStatus.SUCCESS,
                message="ok",
                process_time=0.0,
                error=AnalysisError.parsing("bad"),
            )

    def test_to_dict(self, config):
        result = LogResult.failure(
            config, "Parsing failed", AnalysisError.parsing("empty log file, no content to parse"), 0.1234
        )

        assert result.to_dict() == {
            "log_id": "web-1",
            "file_path": "/var/log/nginx/access.log",
            "status": "FAILED",
            "message": "Parsing failed",
            "error_details": "parsing error: empty log file, no content to parse",
            "process_time": "123.400ms",
        }

    def test_failure_with_empty_io_details(self, config):
        result = LogResult.failure(config, "File read failed", AnalysisError.io(""), 0.0)

        assert result.error_details == "unspecified I/O error"
