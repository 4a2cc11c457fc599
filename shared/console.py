"""
SecretForge Console Interface
==============================

Rich-powered console abstraction giving every SecretForge command the
same banner, section headers, coloured status messages and
spinners.

User-supplied text (secrets in particular) is always printed as
:class:`rich.text.Text` or escaped, never interpreted as markup: a
generated password may well contain ``[`` and ``]``.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme
from rich.align import Align

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all SecretForge output
# ---------------------------------------------------------------------------
_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.warning": "bold yellow",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.dim": "dim white",
        "forge.secret": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___  ___  ___ ___ ___ _____ ___ ___  ___  ___ ___
 / __|| __|/ __| _ \ __|_   _| __/ _ \| _ \/ __| __|
 \__ \| _|| (__|   / _|  | | | _| (_) |   / (_ | _|
 |___/|___|\___|_|_\___| |_| |_| \___/|_|_\\___|___|
[/bright_cyan]"""

_TAGLINE = "Passwords, passphrases and PINs from the OS CSPRNG"


class ForgeConsole:
    """Unified console interface for SecretForge commands.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Generated Secret")
        con.success("Self-test passed")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        # highlight=False: secrets are printed as-is, never auto-coloured
        self._console = Console(theme=_FORGE_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the SecretForge banner with version and timestamp."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[forge.info]{_TAGLINE}[/forge.info]\n"
            f"[forge.dim]Version: {version}  |  {now}[/forge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {escape(title)}  ", style="forge.section")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[forge.success][✔] SUCCESS:[/forge.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[forge.warning][⚠] WARNING:[/forge.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[forge.error][✘] ERROR:[/forge.error] {escape(message)}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[forge.info][ℹ] INFO:[/forge.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context manager showing a spinner with a status message."""
        with self._console.status(
            f"[forge.info]{escape(message)}[/forge.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

