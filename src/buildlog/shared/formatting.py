"""Pure string helpers used when rendering report lines."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.filesize import decimal
from rich.pretty import pretty_repr

from buildlog.shared.records import StatLike

STAT_INDENT = " " * 7


def tildify(path: str, home: str | None = None) -> str:
    """Replace a leading home directory with ``~``."""

    home_dir = home if home is not None else str(Path.home())
    if not home_dir:
        return path
    home_dir = home_dir.rstrip("/\\") or home_dir
    if path == home_dir:
        return "~"
    for separator in ("/", "\\"):
        if path.startswith(home_dir + separator):
            return "~" + path[len(home_dir):]
    return path


def relative_path(path: str | None, cwd: str) -> str:
    """Return ``path`` relative to ``cwd``; empty for a missing path."""

    if not path:
        return ""
    try:
        return os.path.relpath(path, cwd)
    except ValueError:
        # Different drives on Windows have no relative form.
        return path


def format_size(size: int) -> str:
    """Human readable byte count in decimal units, e.g. ``12 bytes`` or ``1.5 kB``."""

    return decimal(size)


def pluralize(word: str, count: int) -> str:
    """Return ``word`` pluralized unless ``count`` is exactly one."""

    if count == 1:
        return word
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if word.endswith("y") and word[-2:-1] not in {"a", "e", "i", "o", "u"}:
        return word[:-1] + "ies"
    return word + "s"


def digits(value: int) -> int:
    """Display width of a non-negative integer."""

    return len(str(value))


def _stat_items(stat: StatLike) -> list[tuple[str, Any]]:
    if isinstance(stat, Mapping):
        return [(str(key), value) for key, value in stat.items()]
    return [
        (name, getattr(stat, name))
        for name in dir(stat)
        if name.startswith("st_") and not callable(getattr(stat, name))
    ]


def format_stat(stat: StatLike, indent: str = STAT_INDENT) -> str:
    """Render stat metadata as ``key: value`` lines.

    Continuation lines are indented so they align under the first value
    when the block is printed after a ``stat:  `` label.
    """

    lines = [f"{key}: {pretty_repr(value)}" for key, value in _stat_items(stat)]
    return ("\n" + indent).join(lines)


__all__ = [
    "STAT_INDENT",
    "digits",
    "format_size",
    "format_stat",
    "pluralize",
    "relative_path",
    "tildify",
]
