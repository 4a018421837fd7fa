"""Exception hierarchy for json-schema-summary.

Only scan failures escape a summarize() call.  Anything else raised from the
tree or summarizer is a bug, not an input problem.
"""

from __future__ import annotations

__all__ = ["DepthLimitError", "ScanError", "SummaryError", "UnsupportedValueError"]


class SummaryError(Exception):
    """Base class for errors raised deliberately by this package."""


class ScanError(SummaryError, ValueError):
    """The input is not a sequence of well-formed JSON objects.

    Attributes:
        offset: Bytes handed to the parser when the problem was detected, or
            None when unknown.  Accurate to one read buffer.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset

    def __str__(self) -> str:
        base = super().__str__()
        if self.offset is None:
            return base
        return f"{base} (near byte {self.offset})"


class DepthLimitError(ScanError):
    """A document nests deeper than ``SummaryConfig.max_depth``."""

    def __init__(self, depth: int, max_depth: int, offset: int | None = None) -> None:
        super().__init__(
            f"nesting depth {depth} exceeds maximum of {max_depth}", offset
        )
        self.depth = depth
        self.max_depth = max_depth


class UnsupportedValueError(ScanError):
    """The input is valid JSON but uses a construct this tool does not summarize."""
