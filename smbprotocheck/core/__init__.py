"""Core models, policy table, settings and temporary files."""

from smbprotocheck.core.artifacts import ArtifactStore
from smbprotocheck.core.config import Settings
from smbprotocheck.core.matrix import PROTOCOL_MATRIX, parse_matrix
from smbprotocheck.core.models import (
    AccessMode,
    AuditResult,
    Credential,
    Dialect,
    DialectEntry,
    Judgment,
    Posture,
    ProbeOutcome,
    Status,
    hardened_posture,
    weakened_posture,
)

__all__ = [
    "ArtifactStore",
    "Settings",
    "PROTOCOL_MATRIX",
    "parse_matrix",
    "AccessMode",
    "AuditResult",
    "Credential",
    "Dialect",
    "DialectEntry",
    "Judgment",
    "Posture",
    "ProbeOutcome",
    "Status",
    "hardened_posture",
    "weakened_posture",
]
