import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union


@contextmanager
def atomic_write(
    path: Union[str, Path],
    mode: str = 'w',
    encoding: Optional[str] = 'utf-8',
    **kwargs
) -> Iterator[TextIO]:
    """Atomically write to file.

    The content goes to a sibling ``.tmp`` file which replaces the target
    only once it has been fully written and flushed.

    Args:
        path: Path to file
        mode: File mode
        encoding: File encoding
        **kwargs: Additional arguments for open()

    Yields:
        File object for writing
    """
    path = Path(path)
    temp_path = path.with_suffix(path.suffix + '.tmp')

    try:
        with open(temp_path, mode, encoding=encoding, **kwargs) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())

        temp_path.replace(path)
    finally:
        try:
            temp_path.unlink()
        except OSError:
            pass


def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists.

    Args:
        path: Directory path

    Returns:
        Path object

    Raises:
        OSError: If directory cannot be created
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def count_segments(content: bytes) -> int:
    """Count newline separated segments of raw content.

    A trailing newline yields one extra (empty) segment, so ``b"a\\nb\\n"``
    counts as 3.
    """
    return content.count(b"\n") + 1
