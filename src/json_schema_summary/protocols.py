"""Protocols for the two extension points of json-schema-summary.

``EventHandler`` is what the scanner drives: one call per scalar leaf, with
the leaf's full path.  ``TreeBuilder`` is the only handler shipped, but any
object with the four methods works (useful for tests and for tools that want
the raw event stream).

``Reporter`` receives progress notifications.  Reporters are observers only:
results never depend on which reporter (if any) is attached.

Example::

    from json_schema_summary.protocols import Reporter

    class PrintReporter:
        def object_read(self, start: int, end: int, total: int | None) -> None:
            print(f"read {end} of {total} bytes")

        def nodes_summarized(self, done: int, total: int) -> None:
            pass

    assert isinstance(PrintReporter(), Reporter)  # structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_schema_summary.scanner import Path

__all__ = ["EventHandler", "Reporter"]


@runtime_checkable
class EventHandler(Protocol):
    """Receiver of scalar-leaf events from ``Scanner.scan``."""

    def on_number(self, path: Path, value: float) -> None: ...

    def on_string(self, path: Path, value: str) -> None: ...

    def on_bool(self, path: Path, value: bool) -> None: ...

    def on_null(self, path: Path) -> None: ...


@runtime_checkable
class Reporter(Protocol):
    """Progress listener for a summarization run.

    ``object_read`` fires after every top-level object: ``start`` and ``end``
    are byte offsets bracketing the object, ``total`` is the input size or
    None when the input is an unsized stream.

    ``nodes_summarized`` fires after each tree node is digested.
    """

    def object_read(self, start: int, end: int, total: int | None) -> None: ...

    def nodes_summarized(self, done: int, total: int) -> None: ...
