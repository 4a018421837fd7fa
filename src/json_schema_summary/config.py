"""SummaryConfig: tuning knobs for scanning and summarization.

SummaryConfig is a frozen (immutable) dataclass.  One instance is shared by
the scanner (depth limit, read buffer) and the summarizer (bucket and top-K
sizes) for a single summarize() call.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SummaryConfig"]


@dataclass(frozen=True, slots=True)
class SummaryConfig:
    """Immutable configuration for a summarization run.

    Attributes:
        bucket_count: Target number of histogram buckets per numeric leaf.
            Values <= 1 disable the distribution entirely.  The target is
            clamped to the number of distinct values at each leaf.
        top_count: Maximum number of string samples kept per string leaf.
            0 keeps none (frequency and length stats are still reported).
        max_depth: Maximum nesting depth accepted by the scanner.  Deeper
            input aborts the run with ``DepthLimitError``.
        buffer_size: Number of bytes the scanner reads per refill.
    """

    bucket_count: int = 10
    top_count: int = 5
    max_depth: int = 99
    buffer_size: int = 64 * 1024

    def __post_init__(self) -> None:
        if self.bucket_count < 0:
            msg = f"bucket_count must be >= 0, got {self.bucket_count}"
            raise ValueError(msg)
        if self.top_count < 0:
            msg = f"top_count must be >= 0, got {self.top_count}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.buffer_size < 1:
            msg = f"buffer_size must be >= 1, got {self.buffer_size}"
            raise ValueError(msg)
