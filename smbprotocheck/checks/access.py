"""Guest access detection and credential validation."""

import logging
from typing import Callable

from smbprotocheck.checks.verdict import judge_guest
from smbprotocheck.connector import Connector
from smbprotocheck.core.errors import AuthenticationFailed
from smbprotocheck.core.models import AccessMode, AuditResult, Credential, Posture

logger = logging.getLogger(__name__)


def resolve_access(
    host: str,
    connector: Connector,
    hardened: Posture,
    prompt: Callable[[], Credential],
    result: AuditResult,
) -> AccessMode:
    """
    Decide how the protocol probes will authenticate.

    If the server lets a blank user in under the hardened posture, that is
    recorded as a warning and guest access is used for the rest of the run.
    Otherwise the operator is asked for credentials once; if the server
    rejects them AuthenticationFailed is raised and nothing else is probed.
    """
    guest_ok = connector.probe(host, hardened, access=AccessMode.as_guest())
    result.add(judge_guest(guest_ok))
    if guest_ok:
        result.access = AccessMode.as_guest()
        return result.access

    credential = prompt()
    access = AccessMode.explicit(credential)
    logger.debug(f"Validating credentials for {credential.username!r}")
    if not connector.probe(host, hardened, access=access):
        raise AuthenticationFailed(host, credential.username)

    result.access = access
    return access
