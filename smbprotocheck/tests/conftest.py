"""Shared fixtures: a scripted in-memory connector."""

from dataclasses import dataclass, field
from typing import Callable

import pytest
from rich.console import Console

from smbprotocheck.core.matrix import PROTOCOL_MATRIX
from smbprotocheck.core.models import AccessMode, Credential, Dialect, Posture

EXPECTED = {e.dialect: e.expected_supported for e in PROTOCOL_MATRIX}


@dataclass
class FakeConnector:
    """Answers probes from a rule; guest and credential checks are separate."""

    rule: Callable[[Posture, Dialect], bool] = lambda posture, dialect: False
    guest_ok: bool = False
    credentials_ok: bool = True
    calls: list[tuple] = field(default_factory=list)

    def probe(self, host, posture, dialect=None, access=None):
        self.calls.append((host, posture, dialect, access))
        if dialect is None:
            if access is None or access.guest:
                return self.guest_ok
            return self.credentials_ok
        return self.rule(posture, dialect)

    def dialect_calls(self):
        return [c for c in self.calls if c[2] is not None]


def policy_compliant(posture: Posture, dialect: Dialect) -> bool:
    """A well configured server: modern dialects only, NTLMv2 only."""
    return not posture.allow_legacy_auth and EXPECTED[dialect]


@pytest.fixture
def credential():
    return Credential(domain="WORKGROUP", username="alice", password="s3cret")


@pytest.fixture
def explicit_access(credential):
    return AccessMode.explicit(credential)


@pytest.fixture
def console():
    return Console(record=True, width=120, color_system=None)
