import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Union

from ..utils.constants import DEFAULT_INDENT
from ..utils.file_utils import atomic_write, ensure_directory
from ..utils.helpers import ExportError
from .records import LogResult

logger = logging.getLogger(__name__)


def results_to_json(results: Iterable[LogResult], indent: int = DEFAULT_INDENT) -> str:
    """Serialize results as a JSON array in their given order"""
    return json.dumps([result.to_dict() for result in results], indent=indent)


def export_report(
    output_path: Union[str, Path],
    results: Sequence[LogResult],
    indent: int = DEFAULT_INDENT,
) -> Path:
    """Write analysis results to a JSON file.

    Missing parent directories are created.

    Args:
        output_path: Destination file
        results: Results to export
        indent: JSON indentation

    Returns:
        Path of the written report

    Raises:
        ExportError: If the directory or the file cannot be written
    """
    path = Path(output_path)
    data = results_to_json(results, indent=indent)

    try:
        ensure_directory(path.parent)
    except OSError as e:
        raise ExportError(f"could not create directory {str(path.parent)!r}: {e}") from e

    try:
        with atomic_write(path) as f:
            f.write(data)
    except OSError as e:
        raise ExportError(f"could not write results to file {str(path)!r}: {e}") from e

    logger.info(f"Exported {len(results)} results to {path}")
    return path


def summarize(results: Iterable[LogResult]) -> Dict[str, Any]:
    """Count successful and failed results, with failures grouped by kind"""
    total = 0
    successful = 0
    by_kind: Counter = Counter()

    for result in results:
        total += 1
        if result.succeeded:
            successful += 1
        else:
            by_kind[result.error.kind.value] += 1

    return {
        "total": total,
        "successful": successful,
        "failed": total - successful,
        "by_kind": dict(by_kind),
    }
