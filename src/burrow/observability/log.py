"""Event log — the record of one watch session.

``watch()`` appends a ``PagesChanged`` per batch and ``generate_routes``
appends a ``RoutesGenerated`` or ``GenerationFailed`` per pass.  When the
watcher stops, the session summary reads the counts and the latest
failures back out.

Only the newest ``max_events`` events are retained; the per-type counts
cover the whole session.
"""

import threading
from collections import Counter, deque

from burrow.observability.events import BurrowEvent


class EventLog:
    """Bounded, lock-protected store of generation and watch events.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_counts", "_events", "_lock")

    def __init__(self, max_events: int = 1_000) -> None:
        self._events: deque[BurrowEvent] = deque(maxlen=max_events)
        self._counts: Counter[str] = Counter()
        self._lock = threading.Lock()

    def append(self, event: BurrowEvent) -> None:
        with self._lock:
            self._events.append(event)
            self._counts[type(event).__name__] += 1

    def query(
        self,
        *,
        event_type: type | None = None,
        limit: int = 100,
    ) -> list[BurrowEvent]:
        """Return retained events, most recent first.

        Args:
            event_type: Only return events of this type.
            limit: Maximum number of events to return.

        """
        with self._lock:
            matches = (
                event for event in reversed(self._events)
                if event_type is None or isinstance(event, event_type)
            )
            return [event for _, event in zip(range(limit), matches)]

    def counts(self) -> dict[str, int]:
        """Return how many events of each type were appended this session."""
        with self._lock:
            return dict(self._counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
