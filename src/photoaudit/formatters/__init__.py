"""Text formatters for photoaudit."""

from .summary import format_quiet, format_summary

__all__ = [
    "format_summary",
    "format_quiet",
]
