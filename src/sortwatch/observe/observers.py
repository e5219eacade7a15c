"""
Mutation observers.

An observer is any callable with the signature

    observer(seq, span: Range) -> None

Algorithms call it whenever `seq[span.first:span.last]` holds a complete,
consistent new state. Observers run inline on the sorting thread, must not
resize or reorder `seq`, and their return value is ignored. An exception
raised by an observer aborts the sort in progress; the sequence is then left
as a permutation of its input.

Public API (stable):
    Observer                         # typing protocol
    null_observer(seq, span)
    CountingObserver
    RecordingObserver
    LoggingObserver
    every_nth(observer, n) -> Observer
    broadcast(*observers) -> Observer
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol, Tuple

from sortwatch.handle import Range

__all__ = [
    "Observer",
    "null_observer",
    "CountingObserver",
    "RecordingObserver",
    "LoggingObserver",
    "every_nth",
    "broadcast",
]


class Observer(Protocol):
    def __call__(self, seq: Any, span: Range) -> None: ...


def null_observer(seq: Any, span: Range) -> None:
    """Ignore the notification (used when benchmarking without visualization)."""


class CountingObserver:
    """Count notifications and remember the last reported range."""

    def __init__(self) -> None:
        self.count = 0
        self.last_span: Optional[Range] = None

    def __call__(self, seq: Any, span: Range) -> None:
        self.count += 1
        self.last_span = span

    def reset(self) -> None:
        self.count = 0
        self.last_span = None


class RecordingObserver:
    """
    Keep a snapshot of every notified state.

    Each frame is (span, values) where `values` is a tuple copy of
    seq[span.first:span.last]. With `limit` set, frames beyond the limit are
    counted in `dropped` but not stored.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must be nonnegative")
        self.limit = limit
        self.frames: List[Tuple[Range, Tuple[Any, ...]]] = []
        self.dropped = 0

    def __call__(self, seq: Any, span: Range) -> None:
        if self.limit is not None and len(self.frames) >= self.limit:
            self.dropped += 1
            return
        values = tuple(seq[i] for i in range(span.first, span.last))
        self.frames.append((span, values))

    @property
    def spans(self) -> List[Range]:
        return [span for span, _ in self.frames]

    @property
    def states(self) -> List[Tuple[Any, ...]]:
        return [values for _, values in self.frames]


class LoggingObserver:
    """Write each notification to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.step = 0

    def __call__(self, seq: Any, span: Range) -> None:
        self.step += 1
        if self.logger.isEnabledFor(logging.DEBUG):
            values = [seq[i] for i in range(span.first, span.last)]
            self.logger.debug(
                "step %d [%d, %d): %s", self.step, span.first, span.last, values
            )


def every_nth(observer: Observer, n: int) -> Observer:
    """
    Forward only every n-th notification to `observer`.

    Keeps an expensive observer (a renderer) from dominating the cost of a sort
    on large inputs. n == 1 forwards everything.
    """
    if not isinstance(n, int) or n < 1:
        raise ValueError(f"n must be an integer >= 1; got {n!r}")
    if n == 1:
        return observer

    calls = 0

    def _decimated(seq: Any, span: Range) -> None:
        nonlocal calls
        calls += 1
        if calls % n == 0:
            observer(seq, span)

    return _decimated


def broadcast(*observers: Observer) -> Observer:
    """Fan one notification out to several observers, in the given order."""
    targets = tuple(observers)

    def _broadcast(seq: Any, span: Range) -> None:
        for target in targets:
            target(seq, span)

    return _broadcast
