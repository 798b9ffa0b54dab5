"""Burrow entry points — one-shot generation and watch mode.

The two public functions mirror a bundler plugin's lifecycle: ``generate``
is the build-start hook, ``watch`` is build start followed by regeneration
whenever pages are added to or removed from the pages root.
"""

import sys
from pathlib import Path

from burrow._errors import BurrowError
from burrow.config import BurrowConfig
from burrow.config_loader import load_config
from burrow.generator import GenerationResult, generate_routes
from burrow.observability import EventLog, GenerationFailed, PagesChanged, now_ns
from burrow.pages.watcher import ChangeEvent, PagesWatcher


def generate(root: str | Path = ".", **kwargs: object) -> GenerationResult:
    """Generate the routes module once.

    Args:
        root: Path to the project root directory.
        **kwargs: Override BurrowConfig fields.

    Raises:
        BurrowError: If the configuration is invalid, the pages root cannot
            be scanned, or the output cannot be written.

    """
    from burrow.banner import print_banner

    config = load_config(Path(root), **kwargs)
    print_banner(config, mode="generate")
    return generate_routes(config)


def watch(root: str | Path = ".", **kwargs: object) -> None:
    """Generate the routes module, then regenerate on page additions/removals.

    The initial pass must succeed; later failures are reported on stderr and
    the watcher keeps running.  Regenerations run one at a time, one per
    debounced batch of changes.  Ctrl+C stops the watcher and prints a
    summary of the session.

    Args:
        root: Path to the project root directory.
        **kwargs: Override BurrowConfig fields.

    """
    from burrow.banner import print_banner

    config = load_config(Path(root), **kwargs)
    log = EventLog()
    print_banner(config, mode="watch")
    generate_routes(config, log=log)

    watcher = PagesWatcher(config)
    try:
        for events in watcher.batches():
            regenerate(config, events, log=log)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
        _print_watch_summary(log)


def regenerate(
    config: BurrowConfig,
    events: tuple[ChangeEvent, ...],
    *,
    log: EventLog,
) -> GenerationResult | None:
    """Handle one batch of page changes.

    Returns the GenerationResult, or None if the pass failed.
    """
    created = sum(1 for event in events if event.kind == "created")
    log.append(PagesChanged(
        path=str(events[0].path) if events else "",
        created=created,
        deleted=len(events) - created,
        timestamp_ns=now_ns(),
    ))
    for event in events:
        print(f"  {event.kind}: {event.path}", file=sys.stderr)

    try:
        return generate_routes(config, log=log)
    except BurrowError as exc:
        print(f"  Generation error: {exc}", file=sys.stderr)
        return None


def _print_watch_summary(log: EventLog) -> None:
    """Print the watch session summary to stderr."""
    counts = log.counts()
    batches = counts.get("PagesChanged", 0)
    passes = counts.get("RoutesGenerated", 0)
    failed = counts.get("GenerationFailed", 0)

    lines = [
        "",
        "─" * 41,
        f"  {batches} change batch{'es' if batches != 1 else ''}, "
        f"{passes} pass{'es' if passes != 1 else ''} written",
    ]
    if failed:
        lines.append(f"  {failed} failed pass{'es' if failed != 1 else ''}, latest:")
        for event in log.query(event_type=GenerationFailed, limit=3):
            if isinstance(event, GenerationFailed):
                lines.append(f"    [{event.stage}] {event.error}")
    print("\n".join(lines), file=sys.stderr)
