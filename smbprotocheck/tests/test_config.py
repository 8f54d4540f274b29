"""Tests for environment settings."""

from smbprotocheck.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("SMBPROTOCHECK_SMBCLIENT", "SMBPROTOCHECK_TIMEOUT", "SMBPROTOCHECK_TMPDIR"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s == Settings()
    assert s.smbclient == "smbclient"
    assert s.timeout == 30.0
    assert s.tmpdir is None


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SMBPROTOCHECK_SMBCLIENT", "/opt/samba/bin/smbclient")
    monkeypatch.setenv("SMBPROTOCHECK_TIMEOUT", "5")
    monkeypatch.setenv("SMBPROTOCHECK_TMPDIR", str(tmp_path))
    s = Settings.from_env()
    assert s.smbclient == "/opt/samba/bin/smbclient"
    assert s.timeout == 5.0
    assert s.tmpdir == str(tmp_path)


def test_bad_timeout_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SMBPROTOCHECK_TIMEOUT", "soon")
    assert Settings.from_env().timeout == 30.0
    assert "SMBPROTOCHECK_TIMEOUT" in caplog.text

    monkeypatch.setenv("SMBPROTOCHECK_TIMEOUT", "-1")
    assert Settings.from_env().timeout == 30.0
