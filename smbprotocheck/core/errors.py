"""Exceptions for conditions that end a run."""


class ProbeCheckError(Exception):
    """Base exception for smbprotocheck errors."""
    pass


class AuthenticationFailed(ProbeCheckError):
    """The credentials entered by the operator were rejected."""
    def __init__(self, host: str, username: str):
        super().__init__(f"Authentication failed for {username!r} on {host}")
        self.host = host
        self.username = username


class ConnectorUnavailable(ProbeCheckError):
    """The smbclient binary could not be found."""
    def __init__(self, binary: str):
        super().__init__(f"smbclient not found: {binary!r} is not on PATH")
        self.binary = binary


class MatrixError(ProbeCheckError):
    """A protocol policy token could not be parsed."""
    pass


class Terminated(ProbeCheckError):
    """The process received a termination signal."""
    def __init__(self, signum: int):
        super().__init__(f"Terminated by signal {signum}")
        self.signum = signum
