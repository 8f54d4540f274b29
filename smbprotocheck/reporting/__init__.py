"""Reporting: console output."""

from smbprotocheck.reporting.console import (
    format_judgment,
    print_judgment,
    print_summary,
    summary_line,
)

__all__ = [
    "format_judgment",
    "print_judgment",
    "print_summary",
    "summary_line",
]
