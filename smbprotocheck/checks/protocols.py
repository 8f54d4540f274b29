"""Per-dialect probing under the hardened and weakened postures."""

from typing import Iterable, Iterator

from smbprotocheck.checks.verdict import judge_hardened, judge_weakened
from smbprotocheck.connector import Connector
from smbprotocheck.core.models import (
    AccessMode,
    AuditResult,
    DialectEntry,
    Posture,
    ProbeOutcome,
)

ProbeRow = tuple[DialectEntry, ProbeOutcome, ProbeOutcome]


def iter_probes(
    host: str,
    matrix: Iterable[DialectEntry],
    hardened: Posture,
    weakened: Posture,
    access: AccessMode,
    connector: Connector,
) -> Iterator[ProbeRow]:
    """Yield one row per matrix entry, in table order, as soon as it is probed."""
    for entry in matrix:
        ok_hardened = connector.probe(host, hardened, entry.dialect, access)
        ok_weakened = connector.probe(host, weakened, entry.dialect, access)
        yield (
            entry,
            ProbeOutcome(entry.dialect, hardened, ok_hardened),
            ProbeOutcome(entry.dialect, weakened, ok_weakened),
        )


def run_matrix(
    host: str,
    matrix: Iterable[DialectEntry],
    hardened: Posture,
    weakened: Posture,
    access: AccessMode,
    connector: Connector,
) -> list[ProbeRow]:
    return list(iter_probes(host, matrix, hardened, weakened, access, connector))


def check_protocols(
    host: str,
    matrix: Iterable[DialectEntry],
    hardened: Posture,
    weakened: Posture,
    access: AccessMode,
    connector: Connector,
    result: AuditResult,
) -> list[ProbeRow]:
    rows: list[ProbeRow] = []
    for row in iter_probes(host, matrix, hardened, weakened, access, connector):
        entry, outcome_hardened, outcome_weakened = row
        result.add(judge_hardened(entry, outcome_hardened))
        result.add(judge_weakened(entry, outcome_weakened))
        rows.append(row)
    return rows
