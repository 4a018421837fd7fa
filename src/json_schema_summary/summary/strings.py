"""String digest: length range and a bounded top-K of frequent values.

Ranking of a distinct value is the tuple ``(frequency, byte length, value)``;
a greater tuple ranks higher.  Among equally frequent values the longer one
wins, and among equal lengths the lexicographically greater one wins.

Selection keeps a working set of at most ``top_count`` values.  It is seeded
with the first distinct values in first-seen order; every later value evicts
the single lowest-ranked member of the set if it ranks strictly higher.  The
retained values are emitted highest rank first.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from json_schema_summary.summary.digest import StringSample, StringSummary

__all__ = ["byte_length", "rank", "select_top", "summarize_strings"]


def byte_length(value: str) -> int:
    return len(value.encode("utf-8", errors="surrogatepass"))


def rank(sample: StringSample) -> tuple[int, int, str]:
    """Sort key for ``sample``; compare with ``<`` / ``>``, greater ranks higher."""
    return (sample.frequency, byte_length(sample.value), sample.value)


def select_top(counts: dict[str, int], top_count: int) -> tuple[StringSample, ...]:
    """Pick at most ``top_count`` samples from ``counts`` (insertion-ordered).

    Args:
        counts:    Distinct value -> exact occurrence count, in first-seen order.
        top_count: Size of the working set.  0 selects nothing.

    Returns:
        Retained samples, highest rank first.
    """
    if top_count <= 0:
        return ()

    working: list[StringSample] = []
    for value, freq in counts.items():
        candidate = StringSample(value=value, frequency=freq)
        if len(working) < top_count:
            working.append(candidate)
            continue

        lowest = min(range(len(working)), key=lambda i: rank(working[i]))
        if rank(candidate) > rank(working[lowest]):
            working[lowest] = candidate

    working.sort(key=rank, reverse=True)
    return tuple(working)


def summarize_strings(samples: Sequence[str], top_count: int) -> StringSummary:
    """Digest a non-empty sequence of string samples.

    Raises:
        ValueError: If ``samples`` is empty.
    """
    if len(samples) == 0:
        msg = "cannot summarize an empty string sample"
        raise ValueError(msg)

    counts = Counter(samples)
    lengths = [byte_length(value) for value in counts]

    return StringSummary(
        frequency=len(samples),
        unique=len(counts),
        min_length=min(lengths),
        max_length=max(lengths),
        top=select_top(counts, top_count),
    )
