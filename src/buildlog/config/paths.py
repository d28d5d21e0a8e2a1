"""Location of the buildlog configuration file.

Policy (portable by default): ``<repo_root>/config/buildlog.toml``, where the
repository root is the nearest ancestor holding ``pyproject.toml`` or ``.git``.
``BUILDLOG_CONFIG`` overrides the location.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "BUILDLOG_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of ``start`` carrying a root marker.

    Falls back to the current working directory when no ancestor matches.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Environment mapping to consult instead of ``os.environ``.

    Returns:
        Path: ``$BUILDLOG_CONFIG`` when set to a non-blank value, otherwise
        ``<repo_root>/config/buildlog.toml``.
    """
    mapping = env if env is not None else os.environ
    override = (mapping.get(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "buildlog.toml").resolve()


__all__ = ["CONFIG_ENV_VAR", "default_config_path"]
