"""Tests for burrow.routes.segments — file-naming conventions."""

import pytest

from burrow.routes.segments import (
    CATCH_ALL_RANK,
    DYNAMIC_RANK,
    INDEX_RANK,
    STATIC_RANK,
    format_route_path,
    is_index_file,
    is_layout_file,
    is_page_file,
    path_priority,
)


# ---------------------------------------------------------------------------
# format_route_path
# ---------------------------------------------------------------------------


class TestFormatRoutePath:
    """Canonicalization of filenames, segments and relative paths."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("about.tsx", "about"),
            ("contact.jsx", "contact"),
            ("index.tsx", ""),
            ("index", ""),
            ("[id].tsx", ":id"),
            ("[id]", ":id"),
            ("[...slug].tsx", "*"),
            ("[...slug]", "*"),
            ("blog/index.tsx", "blog"),
            ("posts/[id].tsx", "posts/:id"),
            ("docs/[...path].jsx", "docs/*"),
            ("[org]/[repo].tsx", ":org/:repo"),
        ],
    )
    def test_conventions(self, raw: str, expected: str) -> None:
        assert format_route_path(raw) == expected

    def test_backslashes_normalized(self) -> None:
        assert format_route_path("posts\\[id].tsx") == "posts/:id"

    def test_unrecognized_passes_through(self) -> None:
        assert format_route_path("styles.css") == "styles.css"
        assert format_route_path("my-page_v2") == "my-page_v2"

    def test_only_trailing_extension_stripped(self) -> None:
        assert format_route_path("tsx.tsx") == "tsx"

    def test_index_prefix_is_not_index(self) -> None:
        assert format_route_path("indexes.tsx") == "indexes"

    def test_layout_is_not_special_here(self) -> None:
        """Layouts are filtered by the tree builder, not the classifier."""
        assert format_route_path("layout.tsx") == "layout"

    def test_directory_and_file_tokens_agree(self) -> None:
        assert format_route_path("[id]") == format_route_path("[id].tsx")


# ---------------------------------------------------------------------------
# path_priority
# ---------------------------------------------------------------------------


class TestPathPriority:
    """Rank of a single file or segment name."""

    def test_index(self) -> None:
        assert path_priority("index.tsx") == INDEX_RANK == 0

    def test_static(self) -> None:
        assert path_priority("about.tsx") == STATIC_RANK == 1

    def test_dynamic(self) -> None:
        assert path_priority("[id].tsx") == DYNAMIC_RANK == 2

    def test_catch_all(self) -> None:
        assert path_priority("[...slug].tsx") == CATCH_ALL_RANK == 3

    def test_bare_index_segment_is_static(self) -> None:
        assert path_priority("index") == STATIC_RANK

    def test_catch_all_wins_over_dynamic(self) -> None:
        assert path_priority("[id]-[...rest].tsx") == CATCH_ALL_RANK


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


class TestPredicates:
    """Index, layout and page-extension checks."""

    def test_index_file(self) -> None:
        assert is_index_file("index.tsx")
        assert is_index_file("index.jsx")
        assert not is_index_file("reindex.tsx")

    def test_layout_file(self) -> None:
        assert is_layout_file("layout.tsx")
        assert not is_layout_file("layouts.tsx")
        assert not is_layout_file("my-layout.tsx")

    def test_page_file(self) -> None:
        assert is_page_file("about.tsx")
        assert is_page_file("about.jsx")
        assert not is_page_file("about.ts")
        assert not is_page_file("about.css")
