"""
Warden Console Interface
=========================

Thin layer over :class:`rich.console.Console` giving every Warden command
the same banner, section rules, status prefixes and table style. Results
go to stdout; diagnostics go through the logger on stderr.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_THEME = Theme({
    "warden.brand": "bold bright_cyan",
    "warden.rule": "bright_magenta",
    "warden.ok": "bold green",
    "warden.warn": "bold yellow",
    "warden.err": "bold red",
    "warden.note": "bright_blue",
    "warden.muted": "dim",
    "warden.sev.critical": "bold white on red",
    "warden.sev.high": "bold red",
    "warden.sev.medium": "bold yellow",
    "warden.sev.low": "bright_cyan",
    "warden.sev.info": "bright_blue",
})

_WORDMARK = (
    " _    _  ___  ____________ _____ _   _\n"
    "| |  | |/ _ \\ | ___ \\  _  \\  ___| \\ | |\n"
    "| |  | / /_\\ \\| |_/ / | | | |__ |  \\| |\n"
    "| |/\\| |  _  ||    /| | | |  __|| . ` |\n"
    "\\  /\\  / | | || |\\ \\| |/ /| |___| |\\  |\n"
    " \\/  \\/\\_| |_/\\_| \\_|___/ \\____/\\_| \\_/"
)

_TAGLINE = "Password Strength & Crack-Risk Analyzer"

TABLE_BORDER = "bright_cyan"
TABLE_HEADER = "bold bright_magenta"


def severity_style(severity: str) -> str:
    return f"warden.sev.{severity.lower()}"


class WardenConsole:
    """Styled console shared by the CLI and the output renderers.

    Args:
        quiet: Swallow regular output; errors still reach stderr.
        record: Keep a copy of the output for :meth:`export_text`.
        width: Fixed width; detected from the terminal when ``None``.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False, width: Optional[int] = None) -> None:
        self._console = Console(theme=_THEME, quiet=quiet, record=record, highlight=False, width=width)
        self._errors = Console(theme=_THEME, stderr=True, highlight=False)

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        body = Text(_WORDMARK, style="warden.brand", justify="center")
        body.append(f"\n\n{_TAGLINE}", style="bold")
        body.append(f"\nv{version}", style="warden.muted")
        self._console.print(Panel(body, border_style=TABLE_BORDER, expand=False))

    def section(self, title: str) -> None:
        self._console.print()
        self._console.rule(Text(title, style="bold"), style="warden.rule")

    # ------------------------------------------------------------------ #
    #  Status lines
    # ------------------------------------------------------------------ #

    def _status(self, style: str, tag: str, message: str, *, target: Optional[Console] = None) -> None:
        line = Text.assemble((f"{tag} ", style), message)
        (target or self._console).print(line)

    def success(self, message: str) -> None:
        self._status("warden.ok", "[ok]", message)

    def warning(self, message: str) -> None:
        self._status("warden.warn", "[warn]", message)

    def error(self, message: str) -> None:
        """Always printed, on stderr, regardless of ``quiet``."""
        self._status("warden.err", "[error]", message, target=self._errors)

    def info(self, message: str) -> None:
        self._status("warden.note", "[info]", message)

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    @staticmethod
    def new_table(title: Optional[str] = None) -> Table:
        """Empty table in the house style; callers add columns and rows."""
        return Table(
            title=title,
            border_style=TABLE_BORDER,
            header_style=TABLE_HEADER,
            show_lines=True,
        )

    def table(self, title: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        """Print a simple table; every cell is rendered as literal text."""
        tbl = self.new_table(title)
        for name in columns:
            tbl.add_column(name)
        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))
        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Numbered table of :class:`shared.models.Finding` objects."""
        tbl = self.new_table("Findings")
        tbl.add_column("#", justify="right", style="warden.muted")
        tbl.add_column("Severity")
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)
        for number, finding in enumerate(findings, start=1):
            sev = finding.severity.value
            tbl.add_row(
                str(number),
                Text(sev, style=severity_style(sev)),
                Text(finding.title),
                Text(finding.description),
            )
        self._console.print(tbl)

    def export_text(self) -> str:
        """Recorded output as plain text; needs ``record=True``."""
        return self._console.export_text()
