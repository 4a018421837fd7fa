"""json-schema-summary - statistical schema summaries for streams of JSON objects."""

from __future__ import annotations

from json_schema_summary.api import (
    summarize,
    summarize_documents,
    summarize_file,
    summarize_stream,
)
from json_schema_summary.config import SummaryConfig
from json_schema_summary.errors import (
    DepthLimitError,
    ScanError,
    SummaryError,
    UnsupportedValueError,
)
from json_schema_summary.reporter import LoggingReporter, NullReporter
from json_schema_summary.summary import Summary, SummaryNode, dumps, loads

__version__: str = "0.1.0"
__all__: list[str] = [
    "DepthLimitError",
    "LoggingReporter",
    "NullReporter",
    "ScanError",
    "Summary",
    "SummaryConfig",
    "SummaryError",
    "SummaryNode",
    "UnsupportedValueError",
    "dumps",
    "loads",
    "summarize",
    "summarize_documents",
    "summarize_file",
    "summarize_stream",
]
