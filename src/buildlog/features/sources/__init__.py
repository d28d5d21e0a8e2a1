"""Upstream producers of pipeline file records."""

from .filesystem import iter_file_records

__all__ = ["iter_file_records"]
