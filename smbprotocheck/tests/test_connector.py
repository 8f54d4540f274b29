"""Tests for the smbclient connector with a fake process runner."""

import subprocess

import pytest

from smbprotocheck.connector import SmbClientConnector, check_available
from smbprotocheck.core.artifacts import ArtifactStore
from smbprotocheck.core.config import Settings
from smbprotocheck.core.errors import AuthenticationFailed, ConnectorUnavailable
from smbprotocheck.core.models import AccessMode, Dialect, hardened_posture, weakened_posture
from smbprotocheck.scanner import run_audit


class FakeRunner:
    def __init__(self, returncode=0, exc=None):
        self.returncode = returncode
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture
def store(tmp_path):
    with ArtifactStore([hardened_posture(), weakened_posture()], tmpdir=str(tmp_path)) as s:
        yield s


def test_guest_probe_command(store):
    runner = FakeRunner()
    c = SmbClientConnector(store, Settings(smbclient="/usr/bin/smbclient"), runner=runner)

    assert c.probe("fs01", hardened_posture(), access=AccessMode.as_guest())

    cmd, kwargs = runner.calls[0]
    assert cmd == [
        "/usr/bin/smbclient",
        "--list",
        "fs01",
        f"--configfile={store.config_for(hardened_posture())}",
        "--user= % ",
    ]
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["timeout"] == Settings().timeout


def test_dialect_is_pinned(store, explicit_access):
    runner = FakeRunner()
    c = SmbClientConnector(store, runner=runner)

    c.probe("fs01", weakened_posture(), Dialect.SMB2_02, explicit_access)

    cmd = runner.calls[0][0]
    assert f"--configfile={store.config_for(weakened_posture())}" in cmd
    assert "--option=client min protocol=SMB2_02" in cmd
    assert cmd[cmd.index("-m") + 1] == "SMB2_02"
    assert cmd[-1] == f"--authentication-file={store.auth_file}"


def test_credentials_written_once(store, explicit_access):
    c = SmbClientConnector(store, runner=FakeRunner())
    c.probe("fs01", hardened_posture(), access=explicit_access)
    first = store.auth_file
    c.probe("fs01", hardened_posture(), Dialect.SMB3_11, explicit_access)

    assert store.auth_file == first
    assert first.read_text() == "username = alice\npassword = s3cret\ndomain = WORKGROUP\n"


@pytest.mark.parametrize(
    "runner",
    [
        FakeRunner(returncode=1),
        FakeRunner(exc=subprocess.TimeoutExpired("smbclient", 30)),
        FakeRunner(exc=FileNotFoundError("smbclient")),
    ],
)
def test_failures_collapse_to_false(store, runner):
    c = SmbClientConnector(store, runner=runner)
    assert c.probe("fs01", hardened_posture(), Dialect.NT1) is False


def test_password_not_on_command_line(store, explicit_access):
    runner = FakeRunner()
    SmbClientConnector(store, runner=runner).probe(
        "fs01", hardened_posture(), access=explicit_access
    )
    assert not any("s3cret" in arg for arg in runner.calls[0][0])


def test_bad_credentials_leave_no_files(tmp_path, console, credential):
    runner = FakeRunner(returncode=1)

    with pytest.raises(AuthenticationFailed):
        run_audit(
            "fs01",
            lambda: credential,
            settings=Settings(tmpdir=str(tmp_path)),
            connector_factory=lambda store, settings: SmbClientConnector(
                store, settings, runner=runner
            ),
            console=console,
        )

    # guest probe, then the credential check; no dialect probes
    assert len(runner.calls) == 2
    assert not any("-m" in cmd for cmd, _ in runner.calls)
    assert list(tmp_path.iterdir()) == []


def test_check_available(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda name: None)
    with pytest.raises(ConnectorUnavailable):
        check_available("smbclient")
    monkeypatch.setattr("shutil.which", lambda name: "/usr/bin/" + name)
    assert check_available("smbclient") == "/usr/bin/smbclient"
