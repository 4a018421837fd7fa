"""summary subpackage: digest types and the algorithms that produce them.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.
"""

from __future__ import annotations

from json_schema_summary.summary.codec import dumps, loads
from json_schema_summary.summary.digest import (
    ArraySummary,
    BoolSummary,
    BucketRange,
    Digest,
    KeyFrequency,
    NullSummary,
    NumberSummary,
    ObjectSummary,
    StringSample,
    StringSummary,
    Summary,
    SummaryNode,
)
from json_schema_summary.summary.numbers import summarize_numbers
from json_schema_summary.summary.strings import summarize_strings
from json_schema_summary.summary.summarizer import Summarizer

__all__ = [
    "ArraySummary",
    "BoolSummary",
    "BucketRange",
    "Digest",
    "KeyFrequency",
    "NullSummary",
    "NumberSummary",
    "ObjectSummary",
    "StringSample",
    "StringSummary",
    "Summarizer",
    "Summary",
    "SummaryNode",
    "dumps",
    "loads",
    "summarize_numbers",
    "summarize_strings",
]
