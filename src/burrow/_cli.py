"""Burrow CLI — burrow generate / burrow watch.

Entry point for the ``burrow`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument(
        "--pages-dir", default=None, help="Pages directory (default: src/pages)",
    )
    parser.add_argument(
        "--output", default=None, help="Generated module (default: src/router.tsx)",
    )
    parser.add_argument(
        "--import-source",
        default=None,
        help="Package to import Routes/Route/Outlet from (default: react-router-dom)",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the burrow CLI."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Compile a directory of page files into a routes module.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # burrow generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the routes module once",
    )
    _add_common_arguments(generate_parser)

    # burrow watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Generate, then regenerate when pages are added or removed",
    )
    _add_common_arguments(watch_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from burrow import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from burrow._errors import BurrowError
    from burrow.app import generate, watch

    overrides = {
        "pages_dir": args.pages_dir,
        "output_file": args.output,
        "import_source": args.import_source,
    }

    try:
        if args.command == "generate":
            generate(args.root, **overrides)
        elif args.command == "watch":
            watch(args.root, **overrides)
    except BurrowError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
