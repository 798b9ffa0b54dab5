"""Burrow — file-system routes for React Router.

Scans a directory of page files and compiles it into a routes module:
nested ``<Route>`` declarations mirroring the directory tree, with layouts,
dynamic segments and catch-alls.

Quick start::

    import burrow

    burrow.generate("my-app/")        # Write src/router.tsx once
    burrow.watch("my-app/")           # Regenerate as pages come and go

File conventions::

    src/pages/index.tsx               -> index route
    src/pages/about.tsx               -> about
    src/pages/posts/[id].tsx          -> posts/:id
    src/pages/docs/[...slug].tsx      -> docs/*
    src/pages/dashboard/layout.tsx    -> wraps everything under dashboard/

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "BurrowConfig",
    "__version__",
    "generate",
    "generate_routes",
    "render_routes",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    if name == "BurrowConfig":
        from burrow.config import BurrowConfig

        return BurrowConfig

    if name == "generate":
        from burrow.app import generate

        return generate

    if name == "watch":
        from burrow.app import watch

        return watch

    if name == "generate_routes":
        from burrow.generator import generate_routes

        return generate_routes

    if name == "render_routes":
        from burrow.generator import render_routes

        return render_routes

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
