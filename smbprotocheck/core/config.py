"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass

from smbprotocheck.core.constants import DEFAULT_SMBCLIENT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    smbclient: str = DEFAULT_SMBCLIENT
    timeout: float = DEFAULT_TIMEOUT
    tmpdir: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        SMBPROTOCHECK_SMBCLIENT  smbclient binary (default: smbclient)
        SMBPROTOCHECK_TIMEOUT    per-probe timeout in seconds (default: 30)
        SMBPROTOCHECK_TMPDIR     directory for temporary files
        """
        return cls(
            smbclient=os.environ.get("SMBPROTOCHECK_SMBCLIENT") or DEFAULT_SMBCLIENT,
            timeout=_float_env("SMBPROTOCHECK_TIMEOUT", DEFAULT_TIMEOUT),
            tmpdir=os.environ.get("SMBPROTOCHECK_TMPDIR") or None,
        )
