from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..utils.helpers import format_duration
from .errors import AnalysisError


class LogConfig(BaseModel):
    """One log file to analyze, as declared in the configuration list"""

    model_config = ConfigDict(frozen=True)

    id: str
    path: str
    type: str


class AnalysisStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass(frozen=True)
class LogResult:
    """Outcome of analyzing one configured log file"""

    log_id: str
    file_path: str
    status: AnalysisStatus
    message: str
    process_time: float
    error: Optional[AnalysisError] = field(default=None)

    def __post_init__(self):
        failed = self.status is AnalysisStatus.FAILED
        if failed != (self.error is not None):
            raise ValueError(
                f"Result {self.log_id}: status {self.status.value} "
                f"{'requires' if failed else 'forbids'} an error"
            )

    @classmethod
    def success(cls, config: LogConfig, message: str, process_time: float) -> "LogResult":
        return cls(
            log_id=config.id,
            file_path=config.path,
            status=AnalysisStatus.SUCCESS,
            message=message,
            process_time=process_time,
        )

    @classmethod
    def failure(
        cls,
        config: LogConfig,
        message: str,
        error: AnalysisError,
        process_time: float,
    ) -> "LogResult":
        return cls(
            log_id=config.id,
            file_path=config.path,
            status=AnalysisStatus.FAILED,
            message=message,
            process_time=process_time,
            error=error,
        )

    @property
    def error_details(self) -> str:
        return self.error.render() if self.error else ""

    @property
    def succeeded(self) -> bool:
        return self.status is AnalysisStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view with the exported report keys"""
        return {
            "log_id": self.log_id,
            "file_path": self.file_path,
            "status": self.status.value,
            "message": self.message,
            "error_details": self.error_details,
            "process_time": format_duration(self.process_time),
        }
