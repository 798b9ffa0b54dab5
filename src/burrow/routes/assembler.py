"""Module assembler — wrap emitted routes into the generated ``router.tsx``.

The generated module lazily imports every discovered file (layouts included)
in identifier order and renders the route declarations inside ``<Suspense>``
so a fallback shows while a page chunk loads.
"""

from __future__ import annotations

import os
import textwrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from burrow.routes.tree import PageFile

HEADER = (
    "// ATTENTION: This file is automatically generated by burrow.\n"
    "// Do not edit manually."
)

# Depth of the route declarations inside ``<Suspense><Routes>``
_ROUTES_INDENT = " " * 6


def lazy_import(page: PageFile, output_file: Path) -> str:
    """Return the deferred-loading declaration for *page*.

    The import specifier is relative to the directory of *output_file* and
    always uses forward slashes.
    """
    relative = os.path.relpath(page.source, output_file.parent).replace(os.sep, "/")
    return f"const {page.component} = lazy(() => import('./{relative}'));"


def framework_imports(import_source: str) -> str:
    return (
        "import { lazy, Suspense } from 'react';\n"
        f"import {{ Routes, Route, Outlet }} from '{import_source}';"
    )


def assemble_module(
    files: Sequence[PageFile],
    routes: Sequence[str],
    *,
    output_file: Path,
    import_source: str,
) -> str:
    """Concatenate header, imports, lazy declarations and routes into one module.

    Args:
        files: Every discovered file, in identifier order.
        routes: Top-level route declarations from the emitter.
        output_file: Where the module will be written; import specifiers are
            relative to its directory.
        import_source: Package providing ``Routes``, ``Route`` and ``Outlet``.

    """
    declarations = "\n".join(lazy_import(page, output_file) for page in files)
    body = textwrap.indent("\n".join(routes), _ROUTES_INDENT)

    lines = [HEADER, framework_imports(import_source), ""]
    if declarations:
        lines += [declarations, ""]
    lines += [
        "const LoadingComponent = () => null;",
        "",
        "export const AppRoutes = () => (",
        "  <Suspense fallback={<LoadingComponent />}>",
        "    <Routes>",
    ]
    if body:
        lines.append(body)
    lines += ["    </Routes>", "  </Suspense>", ");"]
    return "\n".join(lines) + "\n"
