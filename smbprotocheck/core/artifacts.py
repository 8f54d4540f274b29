"""Temporary smbclient configuration and authentication files."""

import logging
import os
import tempfile
from pathlib import Path

from smbprotocheck.core.constants import AUTH_FILE_PREFIX, CONFIG_FILE_PREFIX
from smbprotocheck.core.models import Credential, Posture

logger = logging.getLogger(__name__)


class ArtifactStore:
    """
    Owns every temporary file a run writes.

    Posture config files are written on entry. The credential file is only
    written once explicit credentials are known. Everything created is
    removed on exit, whatever the exit path.
    """

    def __init__(self, postures: list[Posture], tmpdir: str | None = None):
        self._postures = list(postures)
        self._tmpdir = tmpdir
        self._configs: dict[Posture, Path] = {}
        self._auth_file: Path | None = None
        self._created: list[Path] = []

    def __enter__(self) -> "ArtifactStore":
        try:
            for posture in self._postures:
                logger.debug(f"Writing {posture.name} config file")
                self._configs[posture] = self._write(
                    CONFIG_FILE_PREFIX, posture.to_config()
                )
        except BaseException:
            self.cleanup()
            raise
        return self

    def __exit__(self, *_):
        self.cleanup()

    def _write(self, prefix: str, content: str) -> Path:
        fd, name = tempfile.mkstemp(prefix=prefix, dir=self._tmpdir)
        path = Path(name)
        self._created.append(path)
        with os.fdopen(fd, "w") as fh:
            fh.write(content)
        logger.debug(f"Wrote {path}")
        return path

    def config_for(self, posture: Posture) -> Path:
        return self._configs[posture]

    def write_credentials(self, credential: Credential) -> Path:
        """Write the smbclient authentication file (mode 0600)."""
        self._auth_file = self._write(AUTH_FILE_PREFIX, credential.to_auth_file())
        return self._auth_file

    @property
    def auth_file(self) -> Path | None:
        return self._auth_file

    def cleanup(self):
        logger.debug("Doing cleanup")
        while self._created:
            path = self._created.pop()
            if path.exists():
                logger.debug(f"Deleting {path}")
                path.unlink()
        self._configs.clear()
        self._auth_file = None
