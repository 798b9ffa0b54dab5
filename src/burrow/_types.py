"""Shared type definitions for burrow."""

from typing import Literal, TypeAlias

# Entry point mode
BurrowMode: TypeAlias = Literal["generate", "watch"]

# Canonical route-path token (e.g. "about", ":id", "*", "")
RouteToken: TypeAlias = str

# Synthetic component identifier (e.g. "Page0")
ComponentName: TypeAlias = str

# Path-priority rank: 0 index, 1 static, 2 dynamic, 3 catch-all
Rank: TypeAlias = Literal[0, 1, 2, 3]
