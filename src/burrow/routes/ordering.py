"""Specificity ordering for sibling routes.

Static and index routes must come before dynamic and catch-all siblings so a
first-match router never lets a wildcard shadow a literal path.

Pages within one node sort by their own rank, ties broken by the longer
source path first.  Child nodes sort by *specificity*, the highest rank found
anywhere in their subtree, ties broken by the longer canonical segment
first.  A directory whose only wildcard sits three levels down still sorts
after purely static siblings.

Both tie-breaks are part of the output format: changing them changes the
generated module byte for byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from burrow.routes.segments import INDEX_RANK, path_priority

if TYPE_CHECKING:
    from burrow._types import Rank
    from burrow.routes.tree import PageFile, RouteNode


class SpecificityCache:
    """Memoized node specificity for one generation pass.

    Safe because the tree is never mutated after it is built.
    """

    __slots__ = ("_ranks",)

    def __init__(self) -> None:
        self._ranks: dict[RouteNode, Rank] = {}

    def specificity(self, node: RouteNode) -> Rank:
        """Highest page rank in *node*'s subtree (0 when it has no pages)."""
        cached = self._ranks.get(node)
        if cached is not None:
            return cached

        rank: Rank = INDEX_RANK
        for page in node.pages.values():
            rank = max(rank, path_priority(page.name))
        for child in node.children.values():
            rank = max(rank, self.specificity(child))

        self._ranks[node] = rank
        return rank


def sorted_pages(node: RouteNode) -> list[PageFile]:
    """Return *node*'s pages: index, static, dynamic, catch-all."""
    return sorted(
        node.pages.values(),
        key=lambda page: (path_priority(page.name), -len(str(page.source))),
    )


def sorted_children(node: RouteNode, cache: SpecificityCache) -> list[RouteNode]:
    """Return *node*'s children, least specific subtree first."""
    return sorted(
        node.children.values(),
        key=lambda child: (cache.specificity(child), -len(child.segment)),
    )
