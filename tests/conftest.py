"""Shared test fixtures for burrow."""

from __future__ import annotations

from pathlib import Path

import pytest

from burrow.config import BurrowConfig

PAGE_SOURCE = "export default () => <div />;\n"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create an empty project with a ``src/pages`` directory.

    Returns the project root.
    """
    (tmp_path / "src" / "pages").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def pages_dir(project: Path) -> Path:
    """The pages root of ``project``."""
    return project / "src" / "pages"


@pytest.fixture
def config(project: Path) -> BurrowConfig:
    """A BurrowConfig rooted at ``project`` with default directories."""
    return BurrowConfig(root=project)


def write_pages(pages_dir: Path, *names: str) -> list[Path]:
    """Write page files under *pages_dir* and return their paths in order."""
    paths: list[Path] = []
    for name in names:
        path = pages_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(PAGE_SOURCE)
        paths.append(path)
    return paths


def page_paths(pages_dir: Path, *names: str) -> list[Path]:
    """Build page paths under *pages_dir* without touching the filesystem."""
    return [pages_dir / name for name in names]
