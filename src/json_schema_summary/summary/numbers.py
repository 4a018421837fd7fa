"""Numeric digest: range, integrality and an equal-rank bucket histogram.

Buckets are cut over the *distinct* sorted values, not over the raw samples
and not over the value axis.  With ``unique`` distinct values and a target of
``k`` buckets (clamped to ``unique``), each bucket spans ``unique // k``
consecutive distinct values and the last bucket also takes the remainder.
Skewed data with few distinct values therefore degrades to one bucket per
value, e.g. samples ``[1, 2, 3, 1, 2, 3, 1, 2, 9]`` with ``k = 10``::

    [1, 1] x3   [2, 2] x3   [3, 3] x2   [9, 9] x1
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from json_schema_summary.summary.digest import BucketRange, NumberSummary

__all__ = ["bucketize", "summarize_numbers"]


def bucketize(
    values: np.ndarray, counts: np.ndarray, bucket_count: int
) -> tuple[BucketRange, ...]:
    """Split sorted distinct ``values`` (with ``counts``) into equal-rank buckets.

    Args:
        values:       Sorted, distinct sample values.
        counts:       Occurrence count of each value, same length as ``values``.
        bucket_count: Target number of buckets.  ``<= 1`` returns no buckets.

    Returns:
        Buckets ordered by ``start``; frequencies sum to ``counts.sum()``.
    """
    unique = int(values.size)
    if bucket_count <= 1 or unique == 0:
        return ()

    target = min(bucket_count, unique)
    step = unique // target
    buckets: list[BucketRange] = []
    for b in range(target):
        lo = b * step
        hi = unique if b == target - 1 else lo + step
        buckets.append(
            BucketRange(
                start=float(values[lo]),
                end=float(values[hi - 1]),
                frequency=int(counts[lo:hi].sum()),
            )
        )
    return tuple(buckets)


def summarize_numbers(samples: Sequence[float], bucket_count: int) -> NumberSummary:
    """Digest a non-empty sequence of numeric samples.

    Raises:
        ValueError: If ``samples`` is empty.
    """
    if len(samples) == 0:
        msg = "cannot summarize an empty number sample"
        raise ValueError(msg)

    arr = np.asarray(samples, dtype=np.float64)
    values, counts = np.unique(arr, return_counts=True)

    return NumberSummary(
        frequency=int(arr.size),
        unique=int(values.size),
        all_integers=bool(np.all(arr == np.trunc(arr))),
        minimum=float(values[0]),
        maximum=float(values[-1]),
        distribution=bucketize(values, counts, bucket_count),
    )
