"""Page layer — the filesystem around the route compiler.

Enumerates page files, writes the generated module, and watches the pages
root for files being added or removed.
"""

from burrow.pages.discovery import discover_pages
from burrow.pages.watcher import ChangeEvent, PagesWatcher, classify_change
from burrow.pages.writer import write_module

__all__ = [
    "ChangeEvent",
    "PagesWatcher",
    "classify_change",
    "discover_pages",
    "write_module",
]
