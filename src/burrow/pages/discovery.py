"""Page discovery — enumerate page files under the pages root.

    src/pages/index.tsx            -> discovered
    src/pages/posts/[id].jsx       -> discovered
    src/pages/styles.css           -> skipped (not a page extension)
    src/pages/node_modules/...     -> skipped

Files are returned in lexical order of their path relative to the pages
root, so identifier assignment is reproducible across runs and machines.
Any directory that cannot be listed aborts the scan: a partial page list
would silently drop routes from the generated module.
"""

import os
from pathlib import Path

from burrow._errors import DiscoveryError
from burrow.routes.segments import is_page_file

# Directory names never scanned for pages
_SKIPPED_DIRS: frozenset[str] = frozenset({"node_modules", "__pycache__"})


def discover_pages(pages_dir: Path) -> tuple[Path, ...]:
    """Return the absolute paths of every page file under *pages_dir*.

    Raises:
        DiscoveryError: If *pages_dir* does not exist, is not a directory,
            or it (or any directory below it) cannot be read.

    """
    if not pages_dir.is_dir():
        msg = f"Pages directory not found: {pages_dir}"
        raise DiscoveryError(msg)

    candidates: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(pages_dir, onerror=_raise_scan_error):
        dirnames[:] = [name for name in dirnames if name not in _SKIPPED_DIRS]
        base = Path(dirpath)
        candidates.extend(base / name for name in filenames if is_page_file(name))

    candidates.sort(key=lambda path: path.relative_to(pages_dir).as_posix())
    return tuple(path.absolute() for path in candidates)


def _raise_scan_error(exc: OSError) -> None:
    msg = f"Failed to scan pages directory {exc.filename}: {exc}"
    raise DiscoveryError(msg) from exc
