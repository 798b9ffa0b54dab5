"""Event model for generation passes and watch activity.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias


# ---------------------------------------------------------------------------
# Generation events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesGenerated:
    """A generation pass completed and its output was written.

    Attributes:
        pages_dir: Absolute path to the pages root that was scanned.
        output_file: Absolute path to the written module.
        file_count: Number of page and layout files discovered.
        bytes_written: Size of the written module in bytes.
        duration_ms: Wall-clock time for the whole pass.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    pages_dir: str
    output_file: str
    file_count: int
    bytes_written: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    """A generation pass aborted before writing anything.

    Attributes:
        pages_dir: Absolute path to the pages root.
        stage: Which collaborator failed.
        error: The error message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    pages_dir: str
    stage: Literal["discover", "write"]
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Watch events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PagesChanged:
    """A batch of page additions/removals triggered a regeneration.

    Attributes:
        path: First changed path in the batch.
        created: Number of added paths.
        deleted: Number of removed paths.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    created: int
    deleted: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

BurrowEvent: TypeAlias = RoutesGenerated | GenerationFailed | PagesChanged


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
