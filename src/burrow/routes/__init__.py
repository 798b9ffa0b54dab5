"""Route compiler — page files to nested route declarations.

Public API::

    from burrow.routes import build_route_tree, emit_routes, assemble_module

    tree = build_route_tree(files, pages_dir)
    routes = emit_routes(tree.root)
    text = assemble_module(tree.files, routes, output_file=out, import_source=src)
"""

from burrow.routes.assembler import assemble_module
from burrow.routes.emitter import emit_routes
from burrow.routes.segments import format_route_path, path_priority
from burrow.routes.tree import PageFile, RouteNode, RouteTree, build_route_tree

__all__ = [
    "PageFile",
    "RouteNode",
    "RouteTree",
    "assemble_module",
    "build_route_tree",
    "emit_routes",
    "format_route_path",
    "path_priority",
]
