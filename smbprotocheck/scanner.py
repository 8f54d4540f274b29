"""Audit orchestration."""

import time
from typing import Callable

from rich.console import Console

from smbprotocheck.checks import check_protocols, resolve_access
from smbprotocheck.connector import Connector, SmbClientConnector
from smbprotocheck.core.artifacts import ArtifactStore
from smbprotocheck.core.config import Settings
from smbprotocheck.core.matrix import PROTOCOL_MATRIX
from smbprotocheck.core.models import (
    AuditResult,
    Credential,
    DialectEntry,
    hardened_posture,
    weakened_posture,
)
from smbprotocheck.reporting import print_judgment, print_summary

console = Console()

ConnectorFactory = Callable[[ArtifactStore, Settings], Connector]


def run_audit(
    host: str,
    prompt: Callable[[], Credential],
    settings: Settings | None = None,
    matrix: tuple[DialectEntry, ...] = PROTOCOL_MATRIX,
    connector_factory: ConnectorFactory = SmbClientConnector,
    console: Console = console,
) -> AuditResult:
    """
    Run the full check against one host and print results as they arrive.

    Temporary files live only inside the ArtifactStore block, so they are
    gone before this returns or raises. AuthenticationFailed propagates
    to the caller with no protocol probed.
    """
    settings = settings or Settings()
    hardened, weakened = hardened_posture(), weakened_posture()
    result = AuditResult(host=host, on_add=lambda j: print_judgment(j, console))
    t_start = time.time()

    console.print("[dim] * Initializing[/dim]")
    with ArtifactStore([hardened, weakened], tmpdir=settings.tmpdir) as store:
        connector = connector_factory(store, settings)
        access = resolve_access(host, connector, hardened, prompt, result)
        check_protocols(host, matrix, hardened, weakened, access, connector, result)

    console.print(
        f"[dim] * Done in {time.time() - t_start:.1f}s  "
        f"checks={len(result.judgments)}  warnings={len(result.warnings())}[/dim]"
    )
    print_summary(result, console)
    return result
