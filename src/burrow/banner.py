"""Startup banner — mode-aware status output.

Prints a short banner naming the pages root, the output module and the
routing package.  Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow._types import BurrowMode
    from burrow.config import BurrowConfig


# ---------------------------------------------------------------------------
# ANSI helpers, disabled under NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_BROWN = "\033[38;5;136m" if _COLOR else ""

_MODE_STYLES: dict[str, tuple[str, str]] = {
    "generate": (_YELLOW, "generate"),
    "watch": (_GREEN, "watch"),
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    color, label = _MODE_STYLES.get(mode, (_DIM, mode))
    return f"{color}[{label}]{_RESET}"


def print_banner(config: BurrowConfig, mode: BurrowMode) -> None:
    """Print the Burrow startup banner to stderr.

    Args:
        config: Resolved BurrowConfig.
        mode: One of ``"generate"`` or ``"watch"``.

    """
    from burrow import __version__

    header = f"  {_BROWN}{_BOLD}Burrow{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(mode)}"
    lines: list[str] = [
        "",
        header,
        f"  {_DIM}{'─' * 43}{_RESET}",
        f"  {_DIM}├─{_RESET} pages: {_DIM}{config.pages_path}{_RESET}",
        f"  {_DIM}├─{_RESET} routing: {config.import_source}",
        f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}",
    ]

    if mode == "watch":
        lines.append("")
        lines.append(f"  {_DIM}Watching for added or removed pages...{_RESET}")

    lines.append("")
    print("\n".join(lines), file=sys.stderr)
