"""Observability — structured events for generation passes.

All events are frozen dataclasses with nanosecond timestamps, recorded into
a bounded, thread-safe EventLog.

Quick Start:
    >>> from burrow.observability import EventLog
    >>> log = EventLog()
    >>> # generate_routes(config, log=log) records one event per pass
    >>> log.counts()
    {}

"""

from burrow.observability.events import (
    BurrowEvent,
    GenerationFailed,
    PagesChanged,
    RoutesGenerated,
    now_ns,
)
from burrow.observability.log import EventLog

__all__ = [
    "BurrowEvent",
    "EventLog",
    "GenerationFailed",
    "PagesChanged",
    "RoutesGenerated",
    "now_ns",
]
