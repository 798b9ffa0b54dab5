"""Generation pass — pages root in, routes module out.

    discover_pages -> build_route_tree -> emit_routes -> assemble_module -> write_module

``render_routes`` is the pure middle of the pipeline: the same ordered file
list always renders to byte-identical text.  ``generate_routes`` wraps it
with discovery and writing; if either fails, the pass aborts and the
previous output is left untouched.
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from burrow._errors import DiscoveryError, WriteError
from burrow.observability.events import GenerationFailed, RoutesGenerated, now_ns
from burrow.pages.discovery import discover_pages
from burrow.pages.writer import write_module
from burrow.routes.assembler import assemble_module
from burrow.routes.emitter import emit_routes
from burrow.routes.tree import build_route_tree

if TYPE_CHECKING:
    from collections.abc import Sequence

    from burrow.config import BurrowConfig
    from burrow.observability.log import EventLog


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one successful generation pass.

    Attributes:
        output_path: Absolute path to the written module.
        file_count: Number of page and layout files discovered.
        size_bytes: Size of the written module in bytes.
        duration_ms: Wall-clock time for the whole pass.
        text: The generated module.

    """

    output_path: Path
    file_count: int
    size_bytes: int
    duration_ms: float
    text: str


def render_routes(files: Sequence[Path], config: BurrowConfig) -> str:
    """Render the routes module for *files* without touching the filesystem."""
    tree = build_route_tree(files, config.pages_path)
    routes = emit_routes(tree.root)
    return assemble_module(
        tree.files,
        routes,
        output_file=config.output_path,
        import_source=config.import_source,
    )


def generate_routes(
    config: BurrowConfig,
    *,
    log: EventLog | None = None,
    quiet: bool = False,
) -> GenerationResult:
    """Run one full generation pass and write the result.

    Args:
        config: Resolved BurrowConfig.
        log: Optional EventLog receiving one event per pass.
        quiet: Suppress the status lines on stderr.

    Raises:
        DiscoveryError: If the pages root cannot be enumerated.
        WriteError: If the output module cannot be written.

    """
    pages_dir = str(config.pages_path)
    t0 = time.perf_counter()
    if not quiet:
        print("  Generating routes...", file=sys.stderr)

    try:
        files = discover_pages(config.pages_path)
    except DiscoveryError as exc:
        _record_failure(log, pages_dir, "discover", exc)
        raise

    text = render_routes(files, config)

    try:
        size = write_module(config.output_path, text)
    except WriteError as exc:
        _record_failure(log, pages_dir, "write", exc)
        raise

    elapsed = (time.perf_counter() - t0) * 1000
    if log is not None:
        log.append(RoutesGenerated(
            pages_dir=pages_dir,
            output_file=str(config.output_path),
            file_count=len(files),
            bytes_written=size,
            duration_ms=elapsed,
            timestamp_ns=now_ns(),
        ))
    if not quiet:
        files_label = "file" if len(files) == 1 else "files"
        print(
            f"  Routes generated: {len(files)} {files_label} -> "
            f"{config.output_path} ({elapsed:.0f}ms)",
            file=sys.stderr,
        )

    return GenerationResult(
        output_path=config.output_path,
        file_count=len(files),
        size_bytes=size,
        duration_ms=elapsed,
        text=text,
    )


def _record_failure(
    log: EventLog | None,
    pages_dir: str,
    stage: Literal["discover", "write"],
    exc: Exception,
) -> None:
    if log is None:
        return
    log.append(GenerationFailed(
        pages_dir=pages_dir,
        stage=stage,
        error=str(exc),
        timestamp_ns=now_ns(),
    ))
