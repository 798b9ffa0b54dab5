"""Tests for burrow.routes.assembler — the generated module text."""

from pathlib import Path

from burrow.routes.assembler import HEADER, assemble_module, framework_imports, lazy_import
from burrow.routes.tree import PageFile

OUTPUT = Path("/project/src/router.tsx")
PAGES = Path("/project/src/pages")


class TestLazyImport:
    """Deferred-loading declarations."""

    def test_relative_to_output_directory(self) -> None:
        page = PageFile(source=PAGES / "posts" / "[id].tsx", component="Page3")
        assert lazy_import(page, OUTPUT) == (
            "const Page3 = lazy(() => import('./pages/posts/[id].tsx'));"
        )

    def test_output_in_nested_directory(self) -> None:
        page = PageFile(source=PAGES / "index.tsx", component="Page0")
        output = Path("/project/src/generated/router.tsx")
        assert lazy_import(page, output) == (
            "const Page0 = lazy(() => import('./../pages/index.tsx'));"
        )


class TestFrameworkImports:
    """Import lines parameterized by the routing package."""

    def test_default_package(self) -> None:
        assert "from 'react-router-dom';" in framework_imports("react-router-dom")

    def test_custom_package(self) -> None:
        text = framework_imports("react-router")
        assert "import { Routes, Route, Outlet } from 'react-router';" in text
        assert "react-router-dom" not in text


class TestAssembleModule:
    """Full module layout."""

    def test_complete_module(self) -> None:
        files = (
            PageFile(source=PAGES / "layout.tsx", component="Page0"),
            PageFile(source=PAGES / "index.tsx", component="Page1"),
        )
        routes = [
            '<Route path="/" element={<Page0 />}>\n'
            "  <Route index element={<Page1 />} />\n"
            "</Route>",
        ]
        text = assemble_module(
            files, routes, output_file=OUTPUT, import_source="react-router-dom",
        )
        assert text == (
            "// ATTENTION: This file is automatically generated by burrow.\n"
            "// Do not edit manually.\n"
            "import { lazy, Suspense } from 'react';\n"
            "import { Routes, Route, Outlet } from 'react-router-dom';\n"
            "\n"
            "const Page0 = lazy(() => import('./pages/layout.tsx'));\n"
            "const Page1 = lazy(() => import('./pages/index.tsx'));\n"
            "\n"
            "const LoadingComponent = () => null;\n"
            "\n"
            "export const AppRoutes = () => (\n"
            "  <Suspense fallback={<LoadingComponent />}>\n"
            "    <Routes>\n"
            '      <Route path="/" element={<Page0 />}>\n'
            "        <Route index element={<Page1 />} />\n"
            "      </Route>\n"
            "    </Routes>\n"
            "  </Suspense>\n"
            ");\n"
        )

    def test_declarations_follow_identifier_order(self) -> None:
        files = tuple(
            PageFile(source=PAGES / f"p{i}.tsx", component=f"Page{i}") for i in range(3)
        )
        text = assemble_module(files, [], output_file=OUTPUT, import_source="x")
        positions = [text.index(f"const Page{i} =") for i in range(3)]
        assert positions == sorted(positions)

    def test_empty(self) -> None:
        text = assemble_module((), [], output_file=OUTPUT, import_source="react-router-dom")
        assert text.startswith(HEADER)
        assert "lazy(() => import" not in text
        assert "    <Routes>\n    </Routes>\n" in text
        assert text.endswith(");\n")
