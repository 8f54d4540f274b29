"""smbclient-backed connection probe."""

import logging
import shutil
import subprocess
from typing import Callable, Protocol

from smbprotocheck.core.artifacts import ArtifactStore
from smbprotocheck.core.config import Settings
from smbprotocheck.core.constants import GUEST_USER_ARG
from smbprotocheck.core.errors import ConnectorUnavailable
from smbprotocheck.core.models import AccessMode, Dialect, Posture

logger = logging.getLogger(__name__)


class Connector(Protocol):
    def probe(
        self,
        host: str,
        posture: Posture,
        dialect: Dialect | None = None,
        access: AccessMode | None = None,
    ) -> bool:
        """True only if a session could be fully established."""
        ...


def check_available(binary: str) -> str:
    path = shutil.which(binary)
    if not path:
        raise ConnectorUnavailable(binary)
    return path


class SmbClientConnector:
    """
    Runs `smbclient --list` once per probe.

    A posture maps to one of the config files held by the ArtifactStore.
    Pinning a dialect sets both the minimum and maximum client protocol to
    it, so success means the server accepted exactly that dialect. Every
    kind of failure, including timeouts and OS errors, is reported as
    False: refusal and unreachability are not told apart.
    """

    def __init__(
        self,
        store: ArtifactStore,
        settings: Settings | None = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.store = store
        self.settings = settings or Settings()
        self._run = runner

    def _auth_args(self, access: AccessMode | None) -> list[str]:
        if access is None or access.guest or access.credential is None:
            return [GUEST_USER_ARG]
        if self.store.auth_file is None:
            self.store.write_credentials(access.credential)
        return [f"--authentication-file={self.store.auth_file}"]

    def build_command(
        self,
        host: str,
        posture: Posture,
        dialect: Dialect | None = None,
        access: AccessMode | None = None,
    ) -> list[str]:
        cmd = [
            self.settings.smbclient,
            "--list",
            host,
            f"--configfile={self.store.config_for(posture)}",
        ]
        if dialect is not None:
            cmd += [f"--option=client min protocol={dialect.value}", "-m", dialect.value]
        cmd += self._auth_args(access)
        return cmd

    def probe(
        self,
        host: str,
        posture: Posture,
        dialect: Dialect | None = None,
        access: AccessMode | None = None,
    ) -> bool:
        cmd = self.build_command(host, posture, dialect, access)
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            proc = self._run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.settings.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"smbclient timed out after {self.settings.timeout}s")
            return False
        except OSError as e:
            logger.debug(f"smbclient could not be started: {e}")
            return False
        logger.debug(f"smbclient exited with status {proc.returncode}")
        return proc.returncode == 0
