"""
Summary: Public surface of the pass-through logging transform.
Why: Let pipelines import the transform, its options and the stream driver from one place.
"""

from .loader import Loader, SpinnerLoader
from .logging_transform import LoggingTransform, clean, edit, log_files
from .options import (
    CLEAN_ACTION,
    DEFAULT_PREFIX,
    EDIT_ACTION,
    LOG_SPACER,
    LoggerOptions,
    verbose_requested,
)
from .pipeline import StreamStage, drain, run_stream

__all__ = [
    "CLEAN_ACTION",
    "DEFAULT_PREFIX",
    "EDIT_ACTION",
    "LOG_SPACER",
    "Loader",
    "LoggerOptions",
    "LoggingTransform",
    "SpinnerLoader",
    "StreamStage",
    "clean",
    "drain",
    "edit",
    "log_files",
    "run_stream",
    "verbose_requested",
]
