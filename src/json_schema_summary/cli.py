"""Command-line interface: summarize JSON objects from files or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from json_schema_summary.api import summarize
from json_schema_summary.config import SummaryConfig
from json_schema_summary.errors import ScanError
from json_schema_summary.log import configure_logging, level_for
from json_schema_summary.reporter import LoggingReporter
from json_schema_summary.summary.codec import dumps
from json_schema_summary.summary.digest import Summary

logger = logging.getLogger("json_schema_summary")


def build_parser() -> argparse.ArgumentParser:
    defaults = SummaryConfig()
    parser = argparse.ArgumentParser(
        prog="json-schema-summary",
        description=(
            "Read concatenated JSON objects and print a per-path statistical "
            "summary as JSON"
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="JSON files to read, '-' for stdin (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the summary to this file instead of stdout",
    )
    parser.add_argument(
        "--buckets",
        type=int,
        default=defaults.bucket_count,
        help=f"Histogram buckets per numeric path (default: {defaults.bucket_count})",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=defaults.top_count,
        help=f"Most frequent strings kept per path (default: {defaults.top_count})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=defaults.max_depth,
        help=f"Maximum nesting depth (default: {defaults.max_depth})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the output with this indent",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def _read_inputs(files: list[str]) -> bytes:
    """Concatenate ``files`` (``-`` is stdin) into one buffer, newline-separated."""
    chunks: list[bytes] = []
    for name in files or ["-"]:
        if name == "-":
            logger.debug("reading objects from stdin")
            chunks.append(sys.stdin.buffer.read())
        else:
            chunks.append(Path(name).read_bytes())
    return b"\n".join(chunks)


def _run(args: argparse.Namespace, config: SummaryConfig) -> Summary:
    data = _read_inputs(args.files)
    logger.info("read %d bytes, summarizing it", len(data))
    return summarize(data, config=config, reporter=LoggingReporter(logger))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from json_schema_summary import __version__

        print(f"json-schema-summary version {__version__}")
        return 0

    configure_logging(level_for(args.verbose, args.quiet))

    try:
        config = SummaryConfig(
            bucket_count=args.buckets,
            top_count=args.top,
            max_depth=args.max_depth,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        summary = _run(args, config)
    except ScanError as exc:
        logger.error("reading data: %s", exc)
        return 1
    except OSError as exc:
        logger.error("opening input: %s", exc)
        return 1

    text = dumps(summary, indent=args.indent)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info(
            "wrote summary of %d objects to %s", summary.root.frequency, args.output
        )
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
