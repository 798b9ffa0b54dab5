"""Route tree — one node per directory under the pages root.

Each node owns at most one layout file, any number of page files, and one
child node per canonical directory segment.  Every file in a directory lands
on the same node, so no subtree is ever duplicated.

The tree is built fresh for every generation pass and is never mutated once
``build_route_tree`` returns.
"""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from burrow.routes.segments import format_route_path, is_index_file, is_layout_file

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from burrow._types import ComponentName, RouteToken

ROOT_SEGMENT = "/"


@dataclass(frozen=True, slots=True)
class PageFile:
    """A discovered page or layout file.

    Attributes:
        source: Absolute path to the file.
        component: Synthetic component identifier (``Page0``, ``Page1``, ...).

    """

    source: Path
    component: ComponentName

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def is_layout(self) -> bool:
        return is_layout_file(self.source.name)

    @property
    def is_index(self) -> bool:
        return is_index_file(self.source.name)


@dataclass(slots=True, eq=False)
class RouteNode:
    """One directory level of the route tree.

    Attributes:
        segment: Canonical directory token, or ``"/"`` for the root.
        layout: Layout file wrapping everything below this node, if any.
        pages: Routable page files in this directory, keyed by source path.
        children: Subdirectory nodes, keyed by canonical segment.

    """

    segment: RouteToken
    layout: PageFile | None = None
    pages: dict[str, PageFile] = field(default_factory=dict)
    children: dict[RouteToken, RouteNode] = field(default_factory=dict)

    def child(self, segment: RouteToken) -> RouteNode:
        """Return the child for *segment*, creating it if missing."""
        node = self.children.get(segment)
        if node is None:
            node = RouteNode(segment=segment)
            self.children[segment] = node
        return node

    def attach(self, page: PageFile) -> None:
        """Attach *page* as this node's layout or as one of its pages.

        A second layout at the same level replaces the first.
        """
        if page.is_layout:
            self.layout = page
        else:
            self.pages[str(page.source)] = page

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children.values():
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class RouteTree:
    """Result of a tree build.

    Attributes:
        root: The root node (segment ``"/"``).
        files: Every discovered file, layouts included, in identifier order.

    """

    root: RouteNode
    files: tuple[PageFile, ...]


def directory_segments(source: Path, pages_dir: Path) -> list[str]:
    """Split the directory of *source*, relative to *pages_dir*, into segments."""
    relative = os.path.relpath(source.parent, pages_dir)
    return [part for part in PurePath(relative).parts if part and part != "."]


def build_route_tree(files: Iterable[Path], pages_dir: Path) -> RouteTree:
    """Build the route tree for *files*, in the order given.

    Identifiers are assigned from a counter local to this call, so every
    file (layouts included) gets exactly one, densely from ``Page0``.
    """
    counter = itertools.count()
    root = RouteNode(segment=ROOT_SEGMENT)
    discovered: list[PageFile] = []

    for source in files:
        page = PageFile(source=source, component=f"Page{next(counter)}")
        discovered.append(page)

        node = root
        for segment in directory_segments(source, pages_dir):
            node = node.child(format_route_path(segment))
        node.attach(page)

    return RouteTree(root=root, files=tuple(discovered))
