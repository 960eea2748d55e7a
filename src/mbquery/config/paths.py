"""Where: src/mbquery/config/paths.py
What: Locate the TOML configuration file.
Why: Keep the file portable (next to the checkout) while allowing an
     environment override for installed use.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "MBQUERY_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding a project marker, else the cwd."""

    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Resolve the config file: ``$MBQUERY_CONFIG`` or ``<root>/config/config.toml``."""

    mapping = env if env is not None else os.environ
    override = (mapping.get(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


__all__ = ["CONFIG_ENV_VAR", "default_config_path"]
