from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories an item analysis can end with"""

    MISSING_FILE = "missing_file"
    PARSING = "parsing"
    IO = "io"
    INTERNAL = "internal"


@dataclass(frozen=True)
class AnalysisError:
    """A classified analysis failure.

    The ``kind`` tag is what callers branch on; ``render()`` produces the
    stable one-line text stored in ``LogResult.error_details``.
    """

    kind: ErrorKind
    detail: str = ""
    path: Optional[str] = None

    @classmethod
    def missing_file(cls, path: str) -> "AnalysisError":
        return cls(ErrorKind.MISSING_FILE, path=path)

    @classmethod
    def parsing(cls, details: str) -> "AnalysisError":
        return cls(ErrorKind.PARSING, detail=details)

    @classmethod
    def io(cls, details: str) -> "AnalysisError":
        return cls(ErrorKind.IO, detail=details)

    @classmethod
    def internal(cls, details: str) -> "AnalysisError":
        return cls(ErrorKind.INTERNAL, detail=details)

    def render(self) -> str:
        if self.kind is ErrorKind.MISSING_FILE:
            return f"file not found or inaccessible: {self.path}"
        if self.kind is ErrorKind.PARSING:
            return f"parsing error: {self.detail}"
        if self.kind is ErrorKind.IO:
            return self.detail or "unspecified I/O error"
        if self.kind is ErrorKind.INTERNAL:
            return f"internal error: {self.detail}"
        raise ValueError(f"Unknown error kind: {self.kind}")

    def describe(self) -> str:
        """Describe the failure with its category, for diagnostics output"""
        labels = {
            ErrorKind.MISSING_FILE: "File not found error",
            ErrorKind.PARSING: "Parsing error",
            ErrorKind.IO: "I/O error",
            ErrorKind.INTERNAL: "Internal error",
        }
        payload = self.path if self.kind is ErrorKind.MISSING_FILE else self.detail
        return f"{labels[self.kind]}: {payload}"

    def __str__(self) -> str:
        return self.render()
