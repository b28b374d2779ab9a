"""Load statement defaults from YAML, TOML, or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .statement import StatementBuilder


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration dict from a file, dispatched by extension.

    Supported extensions: ``.json``, ``.toml``, ``.yaml`` / ``.yml``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == '.json':
        with open(path) as f:
            return json.load(f)

    if suffix == '.toml':
        return _load_toml(path)

    if suffix in ('.yaml', '.yml'):
        return _load_yaml(path)

    raise ValueError(
        f"Unsupported config file extension {suffix!r}. "
        "Use .json, .toml, .yaml, or .yml."
    )


def statement_from_config(path: str | Path) -> StatementBuilder:
    """Build a :class:`StatementBuilder` from a config file.

    Settings are read from a top-level ``sqrl`` table when present,
    otherwise from the top level::

        [sqrl]
        placeholder = "dollar"
    """
    data = load_config(path) or {}
    settings = data.get('sqrl', data)
    builder = StatementBuilder()
    name = settings.get('placeholder')
    if name:
        builder = builder.placeholder_format(name)
    return builder


# ── Internal loaders ─────────────────────────────────────────────

def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML using ``tomllib`` (3.11+) or ``tomli``."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "TOML support requires Python 3.11+ (built-in tomllib) "
                "or the 'tomli' package. Install with: pip install sqrl[toml]"
            )
    with open(path, 'rb') as f:
        return tomllib.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML using ``pyyaml``."""
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "YAML support requires the 'pyyaml' package. "
            "Install with: pip install sqrl[yaml]"
        )
    with open(path) as f:
        return yaml.safe_load(f)
