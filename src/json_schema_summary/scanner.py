"""Scanner: streams concatenated JSON objects into scalar-leaf events.

Wraps ``ijson.basic_parse`` (with ``multiple_values=True``) and turns its flat
event stream into one handler call per scalar leaf, each tagged with the full
path from the document root.  Containers themselves never produce events, so
an empty object or array leaves no trace.

Paths are tuples of ``ObjectKey`` / ``ArrayIndex`` steps, e.g.
``{"a": [null, {"b": 1}]}`` yields ``on_number((ObjectKey("a"), ArrayIndex(1),
ObjectKey("b")), 1.0)``.

Byte offsets reported in ``DocumentSpan`` count the bytes handed to the
parser.  ijson reads ahead in ``buffer_size`` chunks, so offsets are accurate
to one buffer; they are used for progress reporting only.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any

import ijson

from json_schema_summary.config import SummaryConfig
from json_schema_summary.errors import (
    DepthLimitError,
    ScanError,
    UnsupportedValueError,
)

if TYPE_CHECKING:
    from json_schema_summary.protocols import EventHandler

__all__ = ["ArrayIndex", "DocumentSpan", "ObjectKey", "Path", "PathStep", "Scanner"]

logger = logging.getLogger(__name__)

# RFC 8259 insignificant whitespace, narrower than bytes.isspace()
_JSON_WHITESPACE = b" \t\r\n"


@dataclass(frozen=True, slots=True)
class ObjectKey:
    """Path step into an object member."""

    name: str


@dataclass(frozen=True, slots=True)
class ArrayIndex:
    """Path step into an array slot."""

    index: int


PathStep = ObjectKey | ArrayIndex
Path = tuple[PathStep, ...]


@dataclass(frozen=True, slots=True)
class DocumentSpan:
    """Byte range of one top-level object, as seen by the parser."""

    start: int
    end: int


@dataclass(slots=True)
class _Frame:
    """One open container on the scanner stack."""

    is_array: bool
    step: PathStep | None = None
    next_index: int = 0

    def begin_value(self) -> None:
        # Objects get their step from the preceding map_key event.
        if self.is_array:
            self.step = ArrayIndex(self.next_index)
            self.next_index += 1


class _CountingReader:
    """Read-only proxy that counts the bytes pulled from a binary stream.

    ``skip_whitespace`` lets the scanner detect input that holds no value at
    all, which ijson would otherwise reject as incomplete.
    """

    def __init__(self, stream: IO[bytes], peek_size: int) -> None:
        self._stream = stream
        self._peek_size = peek_size
        self._pending = b""
        self.consumed = 0

    def skip_whitespace(self) -> bool:
        """Drop leading whitespace; return False if nothing else is left."""
        while True:
            chunk = self._stream.read(self._peek_size)
            if not chunk:
                return False
            stripped = chunk.lstrip(_JSON_WHITESPACE)
            self.consumed += len(chunk) - len(stripped)
            if stripped:
                self._pending = stripped
                return True

    def read(self, size: int = -1) -> bytes:
        if size == 0:
            return b""
        if self._pending:
            if size < 0 or size >= len(self._pending):
                chunk, self._pending = self._pending, b""
            else:
                chunk, self._pending = self._pending[:size], self._pending[size:]
        else:
            chunk = self._stream.read(size)
        self.consumed += len(chunk)
        return chunk


class Scanner:
    """Turns a byte stream of concatenated JSON objects into handler calls.

    Example::

        scanner = Scanner(SummaryConfig(max_depth=10))
        with open("dump.json", "rb") as fh:
            for span in scanner.scan(fh, builder):
                builder.count_document()
    """

    def __init__(self, config: SummaryConfig | None = None) -> None:
        self._config = config if config is not None else SummaryConfig()

    def scan(self, stream: IO[bytes], handler: EventHandler) -> Iterator[DocumentSpan]:
        """Scan ``stream`` and yield a span after each complete top-level object.

        Handler callbacks for a document are all delivered before its span is
        yielded.  The generator ends at clean end of input.

        Raises:
            ScanError: Malformed JSON, including truncated input.
            DepthLimitError: Nesting deeper than ``config.max_depth``.
            UnsupportedValueError: A top-level value that is not an object,
                or a number outside the float range.
        """
        reader = _CountingReader(stream, self._config.buffer_size)
        if not reader.skip_whitespace():
            logger.debug("input holds no JSON values")
            return

        events = ijson.basic_parse(
            reader,
            buf_size=self._config.buffer_size,
            multiple_values=True,
            use_float=True,
        )
        frames: list[_Frame] = []
        start = 0
        try:
            for event, value in events:
                if event == "map_key":
                    frames[-1].step = ObjectKey(value)
                elif event in ("start_map", "start_array"):
                    self._open(frames, event == "start_array", reader.consumed)
                elif event in ("end_map", "end_array"):
                    frames.pop()
                    if not frames:
                        span = DocumentSpan(start=start, end=reader.consumed)
                        start = span.end
                        yield span
                else:
                    self._emit(frames, event, value, handler, reader.consumed)
        except ijson.JSONError as exc:
            raise ScanError(f"malformed JSON: {exc}", reader.consumed) from exc

        logger.debug("scan finished after %d bytes", reader.consumed)

    def _open(self, frames: list[_Frame], is_array: bool, offset: int) -> None:
        if not frames and is_array:
            msg = "top-level value must be an object, got an array"
            raise UnsupportedValueError(msg, offset)
        depth = len(frames) + 1
        if depth > self._config.max_depth:
            raise DepthLimitError(depth, self._config.max_depth, offset)
        if frames:
            frames[-1].begin_value()
        frames.append(_Frame(is_array=is_array))

    @staticmethod
    def _emit(
        frames: list[_Frame],
        event: str,
        value: Any,
        handler: EventHandler,
        offset: int,
    ) -> None:
        if not frames:
            msg = f"top-level value must be an object, got a {event}"
            raise UnsupportedValueError(msg, offset)
        frames[-1].begin_value()
        path: Path = tuple(frame.step for frame in frames)  # type: ignore[misc]

        if event == "number":
            try:
                number = float(value)
            except OverflowError:
                number = math.inf
            if not math.isfinite(number):
                msg = f"number {value} does not fit in a float"
                raise UnsupportedValueError(msg, offset)
            handler.on_number(path, number)
        elif event == "string":
            handler.on_string(path, value)
        elif event == "boolean":
            handler.on_bool(path, bool(value))
        elif event == "null":
            handler.on_null(path)
        else:
            msg = f"unexpected parser event {event!r}"
            raise ScanError(msg, offset)
