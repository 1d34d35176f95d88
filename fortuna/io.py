"""Output file handling for the command line tool."""

import contextlib
import os
import pathlib
import sys
from collections.abc import Generator

__all__ = ["open_fd", "write_all"]


def _open_output(output_path: str) -> int:
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    return os.open(str(pathlib.Path(output_path)), flags, 0o644)


@contextlib.contextmanager
def open_fd(output_path: str | None, dry: bool = False) -> Generator[int]:
    """Context manager for output file descriptor.

    Args:
        output_path: Path to output file, or None for stdout
        dry: If True, yield -1 and skip opening anything

    Yields:
        Integer file descriptor
    """
    if dry:
        yield -1
        return
    if not output_path:
        if sys.stdout.isatty():
            raise ValueError("Refusing to write binary data to terminal. Use -o to specify a file.")
        sys.stdout.flush()
        yield sys.stdout.fileno()
        return
    fd = _open_output(output_path)
    try:
        yield fd
    finally:
        with contextlib.suppress(OSError):
            os.close(fd)


def write_all(fd: int, data: bytes | memoryview):
    """Write the whole buffer, retrying short writes."""
    view = memoryview(data)
    while view:
        n = os.write(fd, view)
        view = view[n:]
