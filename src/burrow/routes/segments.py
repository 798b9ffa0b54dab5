"""Path classifier — file-naming conventions to route-path tokens.

    about.tsx             -> about
    index.tsx             -> ""       (index route)
    [id].tsx              -> :id      (dynamic)
    [...slug].tsx         -> *        (catch-all)
    blog/[id]             -> blog/:id
    layout.tsx            -> never routed; attached to its directory

Every function here is pure and total: names that match no convention pass
through unchanged.
"""

import re

from burrow._types import Rank, RouteToken

# Recognised page-file extensions
PAGE_EXTENSIONS: tuple[str, ...] = (".tsx", ".jsx")

_EXTENSION_RE = re.compile(r"\.(tsx|jsx)$")
_TRAILING_INDEX_RE = re.compile(r"/index$")
_CATCH_ALL_RE = re.compile(r"\[\.\.\.([^\]]+)\]")
_DYNAMIC_RE = re.compile(r"\[([^\]]+)\]")

INDEX_RANK: Rank = 0
STATIC_RANK: Rank = 1
DYNAMIC_RANK: Rank = 2
CATCH_ALL_RANK: Rank = 3


def format_route_path(raw: str) -> RouteToken:
    """Canonicalize a relative path, directory segment, or filename.

    ``posts\\[id].tsx`` -> ``posts/:id``, ``docs/[...slug]`` -> ``docs/*``,
    ``index.jsx`` -> ``""``.

    """
    token = raw.replace("\\", "/")
    token = _EXTENSION_RE.sub("", token)
    token = _TRAILING_INDEX_RE.sub("", token)
    if token == "index":
        token = ""
    token = _CATCH_ALL_RE.sub("*", token)
    return _DYNAMIC_RE.sub(r":\1", token)


def path_priority(name: str) -> Rank:
    """Rank a single file or segment name; lower ranks are emitted first."""
    if "[..." in name:
        return CATCH_ALL_RANK
    if "[" in name:
        return DYNAMIC_RANK
    if name.startswith("index."):
        return INDEX_RANK
    return STATIC_RANK


def is_index_file(name: str) -> bool:
    """Whether *name* renders at its parent's own path."""
    return name.startswith("index.")


def is_layout_file(name: str) -> bool:
    """Whether *name* is the wrapping layout of its directory."""
    return name.startswith("layout.")


def is_page_file(name: str) -> bool:
    return name.endswith(PAGE_EXTENSIONS)
