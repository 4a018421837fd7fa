"""Public API functions for json-schema-summary.

Each call builds a fresh Tree, TreeBuilder, Scanner and Summarizer, so calls
never share state.  A scan error aborts the whole call; no partial summary is
returned.
"""

from __future__ import annotations

import io
import json
import logging
import os
from collections.abc import Iterable
from typing import IO, Any

from json_schema_summary.config import SummaryConfig
from json_schema_summary.protocols import Reporter
from json_schema_summary.reporter import NullReporter
from json_schema_summary.scanner import Scanner
from json_schema_summary.summary.digest import Summary
from json_schema_summary.summary.summarizer import Summarizer
from json_schema_summary.tree.builder import TreeBuilder

__all__ = ["summarize", "summarize_documents", "summarize_file", "summarize_stream"]

logger = logging.getLogger(__name__)


def summarize_stream(
    stream: IO[bytes],
    total: int | None = None,
    config: SummaryConfig | None = None,
    reporter: Reporter | None = None,
) -> Summary:
    """Summarize concatenated JSON objects read from a binary stream.

    Args:
        stream:   Binary file-like object positioned at the first object.
        total:    Input size in bytes, forwarded to the reporter; None if unknown.
        config:   Scanner and summarizer settings. Defaults to ``SummaryConfig()``.
        reporter: Progress listener. Defaults to a no-op.

    Returns:
        The ``Summary``; ``summary.root.frequency`` is the number of objects read.

    Raises:
        ScanError: The input is malformed, nests too deep, or is not a
            sequence of objects.
    """
    config = config if config is not None else SummaryConfig()
    reporter = reporter if reporter is not None else NullReporter()

    builder = TreeBuilder()
    for span in Scanner(config).scan(stream, builder):
        builder.count_document()
        reporter.object_read(span.start, span.end, total)

    logger.debug(
        "read %d objects into %d nodes",
        builder.tree.root.frequency,
        len(builder.tree),
    )
    return Summarizer(config, reporter).summarize(builder.tree)


def summarize(
    data: bytes | str,
    config: SummaryConfig | None = None,
    reporter: Reporter | None = None,
) -> Summary:
    """Summarize an in-memory buffer of concatenated JSON objects.

    Example::

        summary = summarize(b'{"a": 1} {"a": 2}')
        summary.root.frequency                          # 2
        summary.root.child("a").digest.number.maximum   # 2.0
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return summarize_stream(
        io.BytesIO(data), total=len(data), config=config, reporter=reporter
    )


def summarize_file(
    path: str | os.PathLike[str],
    config: SummaryConfig | None = None,
    reporter: Reporter | None = None,
) -> Summary:
    """Summarize the JSON objects stored in the file at ``path``."""
    total = os.path.getsize(path)
    logger.debug("summarizing %s (%d bytes)", path, total)
    with open(path, "rb") as fh:
        return summarize_stream(fh, total=total, config=config, reporter=reporter)


def summarize_documents(
    docs: Iterable[dict[str, Any]],
    config: SummaryConfig | None = None,
) -> Summary:
    """Summarize already-decoded JSON objects.

    The documents are re-encoded and scanned, so the result is identical to
    summarizing their serialized form.

    Raises:
        ValueError: If a document holds NaN or an infinity, which have no
            JSON encoding.
        ScanError: If a document cannot be summarized.
    """
    data = "\n".join(json.dumps(doc, allow_nan=False) for doc in docs)
    return summarize(data, config=config)
