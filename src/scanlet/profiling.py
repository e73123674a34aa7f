"""Scanlet ScanAccumulator: opt-in profiling for scanning.

This module provides accumulated metrics during scanning:
- Total elapsed time
- Source length
- Tokens matched and error callbacks issued

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from scanlet.profiling import profiled_scan

    with profiled_scan() as metrics:
        lexer.analyze(source, on_match, raise_scan_error)

    print(metrics.summary())
    # {"total_ms": 0.4, "scan_calls": 1, "source_length": 26, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans started.
        source_length: Total length of sources scanned.
        token_count: Number of tokens delivered.
        error_count: Number of unmatched-position reports.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0

    def record_scan(self, source_length: int) -> None:
        """Record the start of a scan."""
        self.scan_calls += 1
        self.source_length += source_length

    def record_token(self) -> None:
        self.token_count += 1

    def record_error(self) -> None:
        self.error_count += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
