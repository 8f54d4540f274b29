"""Access, protocol and verdict checks."""

from smbprotocheck.checks.access import resolve_access
from smbprotocheck.checks.protocols import check_protocols, iter_probes, run_matrix
from smbprotocheck.checks.verdict import judge_guest, judge_hardened, judge_weakened

__all__ = [
    "resolve_access",
    "check_protocols",
    "iter_probes",
    "run_matrix",
    "judge_guest",
    "judge_hardened",
    "judge_weakened",
]
