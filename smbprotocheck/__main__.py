#!/usr/bin/env python3
"""
smbprotocheck — SMB protocol and authentication posture checker

Install:
    pip install rich   (smbclient must be on PATH)

Usage:
    python -m smbprotocheck
    python -m smbprotocheck --debug
"""

import logging
import sys
from datetime import datetime

from rich.console import Console
from rich.panel import Panel

from smbprotocheck import __version__
from smbprotocheck.cli import (
    exit_on_signals,
    parse_args,
    prompt_credentials,
    prompt_host,
)
from smbprotocheck.connector import check_available
from smbprotocheck.core.config import Settings
from smbprotocheck.core.errors import (
    AuthenticationFailed,
    ConnectorUnavailable,
    Terminated,
)
from smbprotocheck.scanner import run_audit

console = Console()
logger = logging.getLogger("smbprotocheck")


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = Settings.from_env()
    try:
        smbclient = check_available(settings.smbclient)
    except ConnectorUnavailable as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(2)
    logger.debug(f"Using {smbclient}")

    console.print(
        Panel(
            "\n".join([
                f"[bold cyan]smbprotocheck v{__version__}[/bold cyan]",
                f"Timeout : {settings.timeout}s",
                f"Started : {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            ]),
            title="SMB Protocol Check",
            border_style="cyan",
        )
    )

    try:
        with exit_on_signals():
            host = prompt_host(console)
            run_audit(
                host,
                lambda: prompt_credentials(console),
                settings=settings,
                console=console,
            )
    except AuthenticationFailed as e:
        logger.debug(str(e))
        console.print("[red] *** Authentication failed - Quitting ***[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except Terminated as e:
        console.print(f"\n[yellow]Terminated by signal {e.signum}[/yellow]")
        sys.exit(128 + e.signum)


if __name__ == "__main__":
    main()
