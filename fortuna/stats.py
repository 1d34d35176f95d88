"""Timing and summary formatting for the command line tool."""

import re
import sys
import time
from dataclasses import dataclass

__all__ = [
    "RunResult",
    "format_size",
    "format_time",
    "stopwatch",
]


def stopwatch():
    """Generator that yields elapsed time since last yield."""
    t = time.perf_counter()
    while True:
        now = time.perf_counter()
        yield now - t
        t = now


def format_size(size: float) -> str:
    """Format bytes as human-readable size."""
    for unit in ["B", "kB", "MB", "GB", "TB"]:
        if abs(size) < 1000:
            return f"{size:.0f} {unit}"
        size /= 1000
    return f"{size:.0f} PB"


def format_time(seconds: float) -> str:
    """Format seconds as human-readable time."""
    if seconds < 0:
        return "--"
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 120:
        return f"{int(seconds)}s"
    elif seconds < 3600:
        m = int(seconds // 60)
        s = int(seconds % 60)
        if s == 0:
            return f"{m}m"
        return f"{m}m{s}s"
    elif seconds < 172800:  # 48 hours
        h = int(seconds // 3600)
        m = int((seconds % 3600) // 60)
        if m == 0:
            return f"{h}h"
        return f"{h}h{m}m"
    else:
        d = int(seconds // 86400)
        h = int((seconds % 86400) // 3600)
        if h == 0:
            return f"{d}d"
        return f"{d}d{h}h"


@dataclass
class RunResult:
    """Result of one generator run."""

    written: int
    elapsed: float
    interrupted: bool = False
    action: str = "wrote"
    crypto_time: float = 0.0
    write_time: float = 0.0
    # Shown when the stream was seeded from a fixed value
    seed: int | None = None

    def _format_io_stats(self) -> str | None:
        tt = self.crypto_time + self.write_time
        if tt <= 0:
            return None
        return f"crypto {self.crypto_time / tt:.0%} - write {self.write_time / tt:.0%}"

    def format_summary(self, verbose: int = 0) -> str:
        speed_mbs = (self.written / 1_000_000) / self.elapsed if self.elapsed > 0 else 0
        size_str = format_size(self.written)
        time_str = format_time(self.elapsed)

        io_stats = self._format_io_stats() if verbose >= 1 else None
        stats_fmt = f"\033[0;32m • {io_stats}" if io_stats else ""
        seed_fmt = f"\033[0;32m • seed {self.seed}" if self.seed is not None else ""
        status_fmt = " \033[31m(interrupted)\033[0m" if self.interrupted else ""

        return (
            f"\033[36m[Fortuna]\033[32m {self.action} \033[1m{size_str}\033[0;32m in "
            f"\033[1m{time_str}\033[0;32m @ \033[1;32m{speed_mbs:.1f} MB/s{seed_fmt}{stats_fmt}\033[0m"
            f"{status_fmt}"
        )

    def print_summary(self, verbose: int = 0):
        """Print a nice one-liner summary with optional colors."""
        msg = f"\n{self.format_summary(verbose)}\n"
        if not sys.stderr.isatty():
            msg = re.sub(r"\033\[[0-9;]*m", "", msg)
        sys.stderr.write(msg)
        sys.stderr.flush()
