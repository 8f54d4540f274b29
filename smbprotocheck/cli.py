"""CLI argument parsing and interactive prompts."""

import argparse
import contextlib
import getpass
import signal

from rich.console import Console
from rich.prompt import Prompt

from smbprotocheck import __version__
from smbprotocheck.core.constants import DEFAULT_HOST
from smbprotocheck.core.errors import Terminated
from smbprotocheck.core.models import Credential


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="smbprotocheck",
        description=(
            "smbprotocheck — check which SMB dialects and authentication "
            "methods a server accepts"
        ),
        epilog=(
            "Environment: SMBPROTOCHECK_SMBCLIENT, SMBPROTOCHECK_TIMEOUT, "
            "SMBPROTOCHECK_TMPDIR"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (very noisy)",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p.parse_args(argv)


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def prompt_host(console: Console | None = None) -> str:
    host = Prompt.ask("Host name", default=DEFAULT_HOST, console=console).strip()
    return host or DEFAULT_HOST


def prompt_credentials(console: Console | None = None) -> Credential:
    workgroup = Prompt.ask("Workgroup", default="", console=console)
    username = Prompt.ask("Username", default=_current_user(), console=console)
    password = Prompt.ask("Password", password=True, console=console)
    return Credential(domain=workgroup, username=username, password=password)


EXIT_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)


@contextlib.contextmanager
def exit_on_signals(signals: tuple[int, ...] = EXIT_SIGNALS):
    """
    Turn SIGTERM and SIGHUP into a Terminated exception while the block
    runs, so `with` blocks unwind and temporary files are removed.
    Previous handlers are restored on the way out.
    """

    def _raise(signum, _frame):
        raise Terminated(signum)

    previous = {s: signal.signal(s, _raise) for s in signals}
    try:
        yield
    finally:
        for s, handler in previous.items():
            signal.signal(s, handler)
