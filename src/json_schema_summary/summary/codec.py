"""JSON encoding of a ``Summary``.

Python's ``json`` writes floats with ``repr``, which round-trips every finite
float64 exactly, so min/max and bucket bounds survive ``loads(dumps(s))``.
"""

from __future__ import annotations

import json

from json_schema_summary.summary.digest import Summary

__all__ = ["dumps", "loads"]


def dumps(summary: Summary, indent: int | None = None) -> str:
    return json.dumps(summary.to_dict(), indent=indent, ensure_ascii=False)


def loads(text: str | bytes) -> Summary:
    return Summary.from_dict(json.loads(text))
