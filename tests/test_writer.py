"""Tests for burrow.pages.writer — replacing the generated module."""

from pathlib import Path

import pytest

from burrow._errors import WriteError
from burrow.pages.writer import write_module


class TestWriteModule:
    """Full-replacement writes of the routes module."""

    def test_writes_text(self, tmp_path: Path) -> None:
        target = tmp_path / "router.tsx"
        size = write_module(target, "export {};\n")
        assert target.read_text(encoding="utf-8") == "export {};\n"
        assert size == len(b"export {};\n")

    def test_counts_utf8_bytes(self, tmp_path: Path) -> None:
        assert write_module(tmp_path / "router.tsx", "// café\n") == len("// café\n".encode())

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "router.tsx"
        write_module(target, "x")
        assert target.read_text() == "x"

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "router.tsx"
        target.write_text("old contents that are longer")
        write_module(target, "new")
        assert target.read_text() == "new"

    def test_leaves_no_temporary_file(self, tmp_path: Path) -> None:
        write_module(tmp_path / "router.tsx", "x")
        assert [p.name for p in tmp_path.iterdir()] == ["router.tsx"]

    def test_parent_is_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "src").write_text("")
        with pytest.raises(WriteError, match="Failed to write"):
            write_module(tmp_path / "src" / "router.tsx", "x")

    def test_target_is_a_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "router.tsx"
        target.mkdir()
        with pytest.raises(WriteError):
            write_module(target, "x")
        assert target.is_dir()
        assert [p.name for p in tmp_path.iterdir()] == ["router.tsx"]
