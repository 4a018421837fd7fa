"""Reporter implementations: a no-op and a percent-milestone logger."""

from __future__ import annotations

import logging

__all__ = ["LoggingReporter", "NullReporter"]


class NullReporter:
    """Reporter that ignores every notification."""

    def object_read(self, start: int, end: int, total: int | None) -> None:
        pass

    def nodes_summarized(self, done: int, total: int) -> None:
        pass


def _crossed_percent(before: int, after: int, total: int) -> int | None:
    """Return the percent reached if ``before -> after`` crosses a whole percent."""
    if total <= 0 or after <= before:
        return None
    before_pct = 100 * before // total
    after_pct = 100 * after // total
    if after_pct > before_pct:
        return min(after_pct, 100)
    return None


class LoggingReporter:
    """Logs an INFO line each time reading or summarizing passes a whole percent.

    Args:
        logger: Destination logger.  Defaults to this module's logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def object_read(self, start: int, end: int, total: int | None) -> None:
        if total is None:
            return
        percent = _crossed_percent(start, end, total)
        if percent is not None:
            self._logger.info("%d percent read (%d/%d bytes)", percent, end, total)

    def nodes_summarized(self, done: int, total: int) -> None:
        percent = _crossed_percent(done - 1, done, total)
        if percent is not None:
            self._logger.info(
                "%d percent summarized (%d/%d nodes)", percent, done, total
            )
