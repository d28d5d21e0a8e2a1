# Where: buildlog.shared.__init__
# What: Provide a concise import surface for shared records and formatters.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .formatting import digits, format_size, format_stat, pluralize, relative_path, tildify
from .records import FileRecord, LineModifier, LineRecord, StatLike

__all__ = [
    "FileRecord",
    "LineModifier",
    "LineRecord",
    "StatLike",
    "digits",
    "format_size",
    "format_stat",
    "pluralize",
    "relative_path",
    "tildify",
]
