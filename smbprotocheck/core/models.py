"""Data models for postures, probe outcomes and audit results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class Dialect(str, Enum):
    """SMB dialects as smbclient names them, oldest first."""

    CORE = "CORE"
    COREPLUS = "COREPLUS"
    LANMAN1 = "LANMAN1"
    LANMAN2 = "LANMAN2"
    NT1 = "NT1"
    SMB2_02 = "SMB2_02"
    SMB2_10 = "SMB2_10"
    SMB2_22 = "SMB2_22"
    SMB2_24 = "SMB2_24"
    SMB3_00 = "SMB3_00"
    SMB3_02 = "SMB3_02"
    SMB3_10 = "SMB3_10"
    SMB3_11 = "SMB3_11"

    @classmethod
    def oldest(cls) -> "Dialect":
        return list(cls)[0]

    @classmethod
    def newest(cls) -> "Dialect":
        return list(cls)[-1]


@dataclass(frozen=True)
class Posture:
    name: str
    min_protocol: Dialect
    max_protocol: Dialect
    allow_legacy_auth: bool

    def to_config(self) -> str:
        """Render as a minimal smb.conf [global] section."""
        lines = ["[global]"]
        if self.allow_legacy_auth:
            lines += [
                "client ntlmv2 auth = no",
                "client plaintext auth = yes",
                "client lanman auth = yes",
            ]
        else:
            lines.append("client ntlmv2 auth = yes")
        lines.append(f"client min protocol = {self.min_protocol.value}")
        lines.append(f"client max protocol = {self.max_protocol.value}")
        return "\n".join(lines) + "\n"


def hardened_posture() -> Posture:
    """NTLMv2 or better only."""
    return Posture("hardened", Dialect.oldest(), Dialect.newest(), False)


def weakened_posture() -> Posture:
    """Plaintext, LANMAN and NTLMv1 authentication switched on."""
    return Posture("weakened", Dialect.oldest(), Dialect.newest(), True)


@dataclass(frozen=True)
class DialectEntry:
    dialect: Dialect
    expected_supported: bool


@dataclass(frozen=True)
class Credential:
    domain: str
    username: str
    password: str = field(repr=False)

    def to_auth_file(self) -> str:
        return (
            f"username = {self.username}\n"
            f"password = {self.password}\n"
            f"domain = {self.domain}\n"
        )


@dataclass(frozen=True)
class AccessMode:
    guest: bool
    credential: Credential | None = None

    @classmethod
    def as_guest(cls) -> "AccessMode":
        return cls(guest=True)

    @classmethod
    def explicit(cls, credential: Credential) -> "AccessMode":
        return cls(guest=False, credential=credential)


@dataclass(frozen=True)
class ProbeOutcome:
    dialect: Dialect | None
    posture: Posture
    connected: bool


class Status(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    NOTICE = "NOTICE"


@dataclass(frozen=True)
class Judgment:
    label: str
    connected: bool
    status: Status
    text: str = ""

    @property
    def is_warning(self) -> bool:
        return self.status is Status.WARNING


@dataclass
class AuditResult:
    host: str
    access: AccessMode | None = None
    judgments: list[Judgment] = field(default_factory=list)
    had_warnings: bool = False
    on_add: Callable[[Judgment], None] | None = field(
        default=None, repr=False, compare=False
    )

    def add(self, judgment: Judgment) -> Judgment:
        self.judgments.append(judgment)
        if judgment.is_warning:
            self.had_warnings = True
        if self.on_add:
            self.on_add(judgment)
        return judgment

    def warnings(self) -> list[Judgment]:
        return [j for j in self.judgments if j.is_warning]
