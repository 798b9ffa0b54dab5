"""Load BurrowConfig from burrow.yaml / burrow.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from burrow._errors import ConfigError
from burrow.config import BurrowConfig

_CONFIG_KEYS = frozenset({"pages_dir", "output_file", "import_source"})


def load_config(root: Path, **overrides: object) -> BurrowConfig:
    """Load BurrowConfig from root, optionally merging a config file.

    Looks for burrow.yaml, burrow.yml, or burrow.toml in root. If found, loads
    and merges with overrides. Overrides that are ``None`` (unset CLI flags)
    are ignored; the rest take precedence.

    Raises:
        ConfigError: If the config file cannot be parsed or holds values of
            the wrong type.

    """
    file_config = _read_burrow_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    for key, value in merged.items():
        if key not in _CONFIG_KEYS:
            msg = f"Unknown config key {key!r}"
            raise ConfigError(msg)
        if not isinstance(value, str):
            msg = f"Config key {key!r} must be a str, got {type(value).__name__}"
            raise ConfigError(msg)
    return BurrowConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_burrow_config(root: Path) -> dict[str, object]:
    """Read burrow config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("burrow.yaml", "burrow.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "burrow.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_burrow_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_burrow_section(data)


def _flatten_burrow_section(data: dict[str, object]) -> dict[str, object]:
    """Extract burrow.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("burrow")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "burrow" and k in _CONFIG_KEYS:
            result[k] = v
    return result
