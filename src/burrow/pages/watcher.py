"""Pages watcher — regenerate routes when page files come and go.

Only additions and deletions under the pages root matter: editing a page
never changes the route tree, so modifications are ignored.  watchfiles
debounces raw filesystem events into batches, and each batch triggers at
most one regeneration.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change, watch

if TYPE_CHECKING:
    from collections.abc import Iterator

    from burrow.config import BurrowConfig


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A page file added to or removed from the pages root.

    Attributes:
        path: Absolute path to the changed file or directory.
        kind: Type of filesystem change.

    """

    path: Path
    kind: Literal["created", "deleted"]


# Mapping from watchfiles Change enum to our kind literals.
_CHANGE_KIND_MAP: dict[Change, Literal["created", "deleted"]] = {
    Change.added: "created",
    Change.deleted: "deleted",
}


def classify_change(path: Path, change: Change, config: BurrowConfig) -> ChangeEvent | None:
    """Turn a raw watchfiles change into a ChangeEvent.

    Returns None for modifications and for paths outside the pages root.
    """
    kind = _CHANGE_KIND_MAP.get(change)
    if kind is None:
        return None
    try:
        path.relative_to(config.pages_path)
    except ValueError:
        return None
    return ChangeEvent(path=path, kind=kind)


class PagesWatcher:
    """Watches the pages root and yields batches of relevant changes.

    ``batches()`` blocks in the calling thread; ``stop()`` may be called from
    any other thread (or a signal handler) to end the iteration.

    """

    def __init__(self, config: BurrowConfig, *, debounce_ms: int = 300) -> None:
        self._config = config
        self._debounce_ms = debounce_ms
        self._stop_event = threading.Event()

    @property
    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Signal the watch loop to finish after the current batch."""
        self._stop_event.set()

    def batches(self) -> Iterator[tuple[ChangeEvent, ...]]:
        """Yield one tuple of ChangeEvents per debounced filesystem batch.

        Batches holding only irrelevant changes are skipped.

        """
        for raw_changes in watch(
            self._config.pages_path,
            stop_event=self._stop_event,
            debounce=self._debounce_ms,
            step=100,
        ):
            events = self.filter_changes(raw_changes)
            if events:
                yield events

    def filter_changes(self, raw_changes: set[tuple[Change, str]]) -> tuple[ChangeEvent, ...]:
        """Classify a raw watchfiles batch, dropping irrelevant changes."""
        events = (
            classify_change(Path(path_str), change_type, self._config)
            for change_type, path_str in raw_changes
        )
        return tuple(sorted(
            (event for event in events if event is not None),
            key=lambda event: str(event.path),
        ))
