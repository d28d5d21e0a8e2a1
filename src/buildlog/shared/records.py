"""
Summary: Value objects for file records entering a pipeline and queued report lines.
Why: Keep the stream item shape and the log entry shape importable without cycles.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any


StatLike = os.stat_result | Mapping[str, Any]


@dataclass(slots=True)
class FileRecord:
    """A single file travelling through a build pipeline."""

    path: str | None = None
    cwd: str | None = None
    base: str | None = None
    contents: bytes | None = None
    stat: StatLike | None = None


@dataclass(slots=True, frozen=True)
class LineRecord:
    """One queued report entry describing an observed file.

    Attributes:
        output: Formatted line body before prefix, index and suffix decoration.
        absolute_path: Path rendering used inside ``output``; the relative path
            in minimal mode, the multi-line detail block otherwise.
        relative_path: Path relative to the working directory of the run.
        size: Byte length of the file contents, ``0`` when absent.
        action: Label describing what produced the file.
        source: The original pipeline item. Never mutated.
    """

    output: str
    absolute_path: str
    relative_path: str
    size: int
    action: str
    source: object

    def with_output(self, output: str) -> LineRecord:
        """Return a copy carrying replacement output text."""

        return replace(self, output=output)


LineModifier = Callable[[LineRecord], LineRecord | str | None]


__all__ = ["FileRecord", "LineModifier", "LineRecord", "StatLike"]
