"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and Rich handlers.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import BuildLogRichHandler, PlainTextFormatter

__all__ = [
    "LOGGER_NAME",
    "BuildLogRichHandler",
    "PlainTextFormatter",
    "logger",
    "setup_logger",
]
