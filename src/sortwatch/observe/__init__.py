"""
Observers package public API.

Re-export the observer contract and bundled observers so callers can write:
    from sortwatch.observe import CountingObserver, RecordingObserver
"""

from .observers import (
    CountingObserver,
    LoggingObserver,
    Observer,
    RecordingObserver,
    broadcast,
    every_nth,
    null_observer,
)
from .render import BarRenderer

__all__ = [
    "Observer",
    "null_observer",
    "CountingObserver",
    "RecordingObserver",
    "LoggingObserver",
    "every_nth",
    "broadcast",
    "BarRenderer",
]
