"""buildlog: pass-through logging transform for build pipelines."""

from buildlog.features.transform import (
    LoggerOptions,
    LoggingTransform,
    clean,
    drain,
    edit,
    log_files,
    run_stream,
    verbose_requested,
)
from buildlog.shared.records import FileRecord, LineRecord

__all__ = [
    "FileRecord",
    "LineRecord",
    "LoggerOptions",
    "LoggingTransform",
    "clean",
    "drain",
    "edit",
    "log_files",
    "run_stream",
    "verbose_requested",
]
