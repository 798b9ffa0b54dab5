"""Tree emitter — serialize a route tree into nested ``<Route>`` declarations.

For every node, its own pages are emitted first and its subdirectories after
them.  A node that owns a layout wraps all of that in a route rendering the
layout::

    <Route path="dashboard" element={<Page1 />}>
      <Route index element={<Page2 />} />
      <Route path="settings" element={<Page3 />} />
    </Route>

A subdirectory without a layout is wrapped in a path-only route instead, and
the root without a layout is not wrapped at all.  Subtrees that produce no
routes produce no output, layout or not.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from burrow.routes.ordering import SpecificityCache, sorted_children, sorted_pages
from burrow.routes.segments import format_route_path

if TYPE_CHECKING:
    from burrow.routes.tree import PageFile, RouteNode

_INDENT = "  "


def emit_routes(root: RouteNode) -> list[str]:
    """Emit the top-level route declarations for the tree under *root*."""
    return _emit_node(root, is_root=True, cache=SpecificityCache())


def emit_page(page: PageFile) -> str:
    """Emit the leaf declaration for one page file."""
    element = f"element={{<{page.component} />}}"
    if page.is_index:
        return f"<Route index {element} />"
    return f'<Route path="{format_route_path(page.name)}" {element} />'


def _emit_node(node: RouteNode, *, is_root: bool, cache: SpecificityCache) -> list[str]:
    fragments = [emit_page(page) for page in sorted_pages(node)]
    for child in sorted_children(node, cache):
        fragments.extend(_emit_node(child, is_root=False, cache=cache))

    if not fragments:
        return []

    if node.layout is not None:
        path = "/" if is_root else node.segment
        return [_wrap(f'<Route path="{path}" element={{<{node.layout.component} />}}>', fragments)]

    if not is_root:
        return [_wrap(f'<Route path="{node.segment}">', fragments)]

    return fragments


def _wrap(opening: str, fragments: list[str]) -> str:
    body = [textwrap.indent(fragment, _INDENT) for fragment in fragments]
    return "\n".join([opening, *body, "</Route>"])
