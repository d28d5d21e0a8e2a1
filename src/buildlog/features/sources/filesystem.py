"""
Summary: Build pipeline file records from files and directories on disk.
Why: Give the CLI a real upstream producer to feed the logging transform.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from buildlog.platform.logging import logger
from buildlog.shared.records import FileRecord


def _record_for(file_path: Path, base: Path, cwd: Path, read_contents: bool) -> FileRecord:
    return FileRecord(
        path=str(file_path),
        cwd=str(cwd),
        base=str(base),
        contents=file_path.read_bytes() if read_contents else None,
        stat=file_path.stat(),
    )


def iter_file_records(
    paths: Iterable[Path],
    *,
    pattern: str = "*",
    cwd: Path | None = None,
    read_contents: bool = True,
) -> Iterator[FileRecord]:
    """Yield one record per file found under ``paths``.

    Files are yielded as given. Directories are walked recursively and
    their files matching ``pattern`` are yielded in sorted order, with the
    directory as ``base``.

    Args:
        paths: Files or directories to collect.
        pattern: Glob applied to directory walks.
        cwd: Working directory stored on each record. Defaults to ``Path.cwd()``.
        read_contents: Whether to load file bytes into ``contents``.

    Raises:
        FileNotFoundError: If one of ``paths`` does not exist.
    """

    working_dir = (cwd or Path.cwd()).resolve()
    for raw_path in paths:
        source = Path(raw_path).expanduser().resolve()
        if not source.exists():
            raise FileNotFoundError(f"Path does not exist: {raw_path}")

        if source.is_file():
            yield _record_for(source, source.parent, working_dir, read_contents)
            continue

        matches = sorted(candidate for candidate in source.rglob(pattern) if candidate.is_file())
        if not matches:
            logger.debug("No files matching %s under %s", pattern, source)
        for file_path in matches:
            yield _record_for(file_path, source, working_dir, read_contents)


__all__ = ["iter_file_records"]
