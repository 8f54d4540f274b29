"""Rich console reporting."""

from rich.console import Console
from rich.text import Text

from smbprotocheck.core.constants import (
    STATUS_MARK,
    STATUS_STYLE,
    SUMMARY_CLEAN,
    SUMMARY_ISSUES,
)
from smbprotocheck.core.models import AuditResult, Judgment

console = Console()


def format_judgment(judgment: Judgment) -> Text:
    status = judgment.status.value
    return Text(
        f" {STATUS_MARK[status]} {judgment.text or judgment.label}",
        style=STATUS_STYLE[status],
    )


def print_judgment(judgment: Judgment, console: Console = console):
    console.print(format_judgment(judgment))


def summary_line(result: AuditResult) -> str:
    return SUMMARY_ISSUES if result.had_warnings else SUMMARY_CLEAN


def print_summary(result: AuditResult, console: Console = console):
    style = "red" if result.had_warnings else "green"
    console.print(Text(f" {summary_line(result)}", style=style))

