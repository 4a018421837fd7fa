"""Tests for Scanner: ijson event stream -> scalar-leaf handler calls.

Covers path construction for objects and arrays, scalar type delivery,
empty containers, concatenated documents, document spans, depth limits,
and every error class the scanner raises.
"""

from __future__ import annotations

import io
from typing import Any

import pytest

from json_schema_summary.config import SummaryConfig
from json_schema_summary.errors import (
    DepthLimitError,
    ScanError,
    UnsupportedValueError,
)
from json_schema_summary.scanner import ArrayIndex, DocumentSpan, ObjectKey, Scanner

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingHandler:
    """EventHandler that records every call as (kind, path, value)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple[Any, ...], Any]] = []

    def on_number(self, path: Any, value: float) -> None:
        self.events.append(("number", path, value))

    def on_string(self, path: Any, value: str) -> None:
        self.events.append(("string", path, value))

    def on_bool(self, path: Any, value: bool) -> None:
        self.events.append(("bool", path, value))

    def on_null(self, path: Any) -> None:
        self.events.append(("null", path, None))


def scan(
    data: bytes, config: SummaryConfig | None = None
) -> tuple[RecordingHandler, list[DocumentSpan]]:
    handler = RecordingHandler()
    spans = list(Scanner(config).scan(io.BytesIO(data), handler))
    return handler, spans


# ---------------------------------------------------------------------------
# Paths and values
# ---------------------------------------------------------------------------


class TestPaths:
    def test_flat_object(self) -> None:
        handler, _ = scan(b'{"a": 1, "b": "x"}')
        assert handler.events == [
            ("number", (ObjectKey("a"),), 1.0),
            ("string", (ObjectKey("b"),), "x"),
        ]

    def test_nested_object(self) -> None:
        handler, _ = scan(b'{"o": {"i": true}}')
        assert handler.events == [("bool", (ObjectKey("o"), ObjectKey("i")), True)]

    def test_array_elements_are_indexed(self) -> None:
        handler, _ = scan(b'{"arr": [10, 20, 30]}')
        assert [e[1] for e in handler.events] == [
            (ObjectKey("arr"), ArrayIndex(0)),
            (ObjectKey("arr"), ArrayIndex(1)),
            (ObjectKey("arr"), ArrayIndex(2)),
        ]

    def test_containers_inside_arrays_consume_an_index(self) -> None:
        handler, _ = scan(b'{"a": [{}, [], {"k": null}, 5]}')
        assert handler.events == [
            ("null", (ObjectKey("a"), ArrayIndex(2), ObjectKey("k")), None),
            ("number", (ObjectKey("a"), ArrayIndex(3)), 5.0),
        ]

    def test_nested_arrays(self) -> None:
        handler, _ = scan(b'{"m": [[1], [2, 3]]}')
        assert [e[1] for e in handler.events] == [
            (ObjectKey("m"), ArrayIndex(0), ArrayIndex(0)),
            (ObjectKey("m"), ArrayIndex(1), ArrayIndex(0)),
            (ObjectKey("m"), ArrayIndex(1), ArrayIndex(1)),
        ]

    def test_key_after_nested_container(self) -> None:
        handler, _ = scan(b'{"a": {"b": 1}, "c": 2}')
        assert [e[1] for e in handler.events] == [
            (ObjectKey("a"), ObjectKey("b")),
            (ObjectKey("c"),),
        ]

    def test_empty_containers_produce_no_events(self) -> None:
        handler, spans = scan(b'{"a": {}, "b": []}')
        assert handler.events == []
        assert len(spans) == 1


class TestValues:
    def test_integers_arrive_as_float(self) -> None:
        handler, _ = scan(b'{"a": 7}')
        value = handler.events[0][2]
        assert isinstance(value, float)
        assert value == 7.0

    def test_fractions_and_exponents(self) -> None:
        handler, _ = scan(b'{"a": -1.25, "b": 2e3}')
        assert [e[2] for e in handler.events] == [-1.25, 2000.0]

    def test_escaped_and_unicode_strings(self) -> None:
        handler, _ = scan('{"s": "caf\\u00e9 \\"q\\""}'.encode())
        assert handler.events[0][2] == 'café "q"'

    def test_bools_and_null(self) -> None:
        handler, _ = scan(b'{"t": true, "f": false, "n": null}')
        assert [(e[0], e[2]) for e in handler.events] == [
            ("bool", True),
            ("bool", False),
            ("null", None),
        ]


# ---------------------------------------------------------------------------
# Documents and spans
# ---------------------------------------------------------------------------


class TestDocuments:
    def test_concatenated_objects(self) -> None:
        handler, spans = scan(b'{"a": 1}{"a": 2}\n{"a": 3}')
        assert len(spans) == 3
        assert [e[2] for e in handler.events] == [1.0, 2.0, 3.0]

    def test_empty_input_has_no_documents(self) -> None:
        handler, spans = scan(b"")
        assert spans == []
        assert handler.events == []

    def test_whitespace_only_input_has_no_documents(self) -> None:
        _, spans = scan(b"  \n\t \r\n")
        assert spans == []

    def test_trailing_whitespace_is_accepted(self) -> None:
        _, spans = scan(b'{"a": 1}\n\n')
        assert len(spans) == 1

    def test_spans_are_contiguous_and_bounded(self) -> None:
        data = b'{"a": 1} {"b": 2} {"c": 3}'
        _, spans = scan(data, SummaryConfig(buffer_size=4))
        assert spans[0].start == 0
        for prev, cur in zip(spans, spans[1:], strict=False):
            assert cur.start == prev.end
        assert all(s.start <= s.end <= len(data) for s in spans)

    def test_small_buffer_gives_same_events(self) -> None:
        data = b'{"key": "a long string value", "n": [1, 2, 3]} {"key": "b"}'
        big, _ = scan(data)
        small, _ = scan(data, SummaryConfig(buffer_size=1))
        assert big.events == small.events

    def test_events_delivered_before_span(self) -> None:
        handler = RecordingHandler()
        gen = Scanner().scan(io.BytesIO(b'{"a": 1}{"b": 2}'), handler)
        next(gen)
        assert len(handler.events) == 1


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_malformed_json(self) -> None:
        with pytest.raises(ScanError, match="malformed JSON"):
            scan(b'{"a": }')

    @pytest.mark.parametrize("data", [b"\x0b", b"\x0c\n", b" \x0b\x0c "])
    def test_non_json_whitespace_is_not_empty_input(self, data: bytes) -> None:
        with pytest.raises(ScanError):
            scan(data)

    def test_truncated_document(self) -> None:
        with pytest.raises(ScanError):
            scan(b'{"a": 1}{"b": [1, 2')

    def test_top_level_array_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedValueError, match="array"):
            scan(b"[1, 2]")

    def test_top_level_scalar_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedValueError, match="number"):
            scan(b'{"a": 1} 42')

    def test_depth_limit(self) -> None:
        config = SummaryConfig(max_depth=2)
        scan(b'{"a": {"b": 1}}', config)
        with pytest.raises(DepthLimitError) as excinfo:
            scan(b'{"a": {"b": {"c": 1}}}', config)
        assert excinfo.value.depth == 3
        assert excinfo.value.max_depth == 2

    def test_depth_limit_counts_arrays(self) -> None:
        with pytest.raises(DepthLimitError):
            scan(b'{"a": [[1]]}', SummaryConfig(max_depth=2))

    def test_depth_error_is_scan_error(self) -> None:
        with pytest.raises(ScanError):
            scan(b'{"a": {"b": 1}}', SummaryConfig(max_depth=1))

    def test_number_out_of_float_range(self) -> None:
        with pytest.raises(UnsupportedValueError, match="does not fit"):
            scan(b'{"a": 1e400}')

    def test_scan_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            scan(b"{")
