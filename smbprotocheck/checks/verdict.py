"""Classification of probe outcomes against the dialect policy."""

from smbprotocheck.core.models import DialectEntry, Judgment, ProbeOutcome, Status


def _text(label: str, connected: bool) -> str:
    return f"{label} is supported" if connected else f"{label} is not supported"


def judge_hardened(entry: DialectEntry, outcome: ProbeOutcome) -> Judgment:
    """
    Accepting a dialect that should be refused is a warning. Refusing one
    that should be accepted is only a notice and does not count as a
    security issue.
    """
    label = entry.dialect.value
    if outcome.connected == entry.expected_supported:
        status = Status.OK
    elif outcome.connected:
        status = Status.WARNING
    else:
        status = Status.NOTICE
    return Judgment(label, outcome.connected, status, _text(label, outcome.connected))


def judge_weakened(entry: DialectEntry, outcome: ProbeOutcome) -> Judgment:
    """Any session with legacy authentication enabled is a warning."""
    label = f"{entry.dialect.value} with broken auth"
    status = Status.WARNING if outcome.connected else Status.OK
    return Judgment(label, outcome.connected, status, _text(label, outcome.connected))


def judge_guest(connected: bool) -> Judgment:
    if connected:
        return Judgment("Guest access", True, Status.WARNING, "Guest access is allowed")
    return Judgment("Guest access", False, Status.OK, "Guest access is not allowed")
