"""
Warden Console Output
======================

Rich-based console renderers for Warden results: the strength meter,
entropy and pattern tables, crack-time projections, risk reports, the
narrative security report and generated passwords.

Uses the shared :class:`~shared.console.WardenConsole` for consistent
styling across commands.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from shared.console import WardenConsole
from shared.models import ScanResult
from warden.analyzers.crack_time import HOUR, DAY, WEEK, YEAR
from warden.analyzers.security_report import TRANSPARENCY_LABEL
from warden.core.models import (
    CrackProjection,
    NarrativeRisk,
    PasswordAnalysis,
    RiskReport,
    SecurityReport,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very_weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}

_TIER_COLOURS: dict[str, str] = {
    "high": "bold red",
    "medium": "bold yellow",
    "low": "bold green",
}

_NARRATIVE_COLOURS: dict[NarrativeRisk, str] = {
    NarrativeRisk.CRITICAL: "bold white on red",
    NarrativeRisk.HIGH: "bold red",
    NarrativeRisk.MODERATE: "bold yellow",
    NarrativeRisk.LOW: "bold green",
}

_HORIZON_LABELS: dict[float, str] = {
    HOUR: "1 hour",
    DAY: "1 day",
    WEEK: "1 week",
    YEAR: "1 year",
}


def _horizon_label(seconds: float) -> str:
    return _HORIZON_LABELS.get(float(seconds), f"{seconds:g}s")


class WardenConsoleOutput:
    """Console renderers for Warden results.

    Usage::

        output = WardenConsoleOutput()
        output.display_analysis(analysis)
        output.display_risk(risk_report)
    """

    def __init__(self, console: Optional[WardenConsole] = None) -> None:
        self.console = console or WardenConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength Analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: PasswordAnalysis) -> None:
        """Strength meter, entropy table, patterns and suggestions."""
        self.console.section("Password Analysis")
        self._rich.print(Panel(self._meter(result), title="Strength Meter", border_style="cyan"))

        tbl = self.console.new_table()
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Password", Text(result.password_masked or "(empty)"))
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Character Classes", ", ".join(result.classes.names) or "none")
        tbl.add_row("Character Set", str(result.charset_size))
        tbl.add_row("Baseline Entropy", f"{result.entropy_bits} bits")
        tbl.add_row("Pattern Penalty", f"{result.entropy.penalty_bits:.1f} bits")
        tbl.add_row("Repetition Penalty", f"{result.entropy.repetition_penalty_bits:.1f} bits")
        tbl.add_row("Effective Entropy", f"{result.effective_entropy_bits} bits")
        tbl.add_row("Unique Characters", f"{result.metrics.unique_char_ratio:.0%}")
        self._rich.print(tbl)

        if result.findings:
            pattern_tbl = self.console.new_table("Patterns Detected")
            pattern_tbl.add_column("Pattern", style="bold yellow")
            pattern_tbl.add_column("Penalty", justify="right")
            pattern_tbl.add_column("Why it matters")
            for finding in result.findings:
                pattern_tbl.add_row(
                    Text(finding.label),
                    f"-{finding.penalty_bits:.1f} bits",
                    Text(finding.warning),
                )
            self._rich.print(pattern_tbl)

        self._bullets("Suggestions", result.suggestions)

    @staticmethod
    def _meter(result: PasswordAnalysis, width: int = 40) -> Text:
        colour = _STRENGTH_COLOURS.get(result.label.value, "white")
        filled = max(0, min(width, int(result.score / 100 * width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(width):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < width * 0.25:
                meter.append("█", style="red")
            elif i < width * 0.50:
                meter.append("█", style="yellow")
            elif i < width * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(result.label.display.upper(), style=colour)
        return meter

    # ------------------------------------------------------------------ #
    #  Crack Time
    # ------------------------------------------------------------------ #

    def display_projections(
        self,
        projections: Sequence[CrackProjection],
        effective_bits: float,
    ) -> None:
        """Crack time and success probability per attacker profile."""
        self.console.section("Crack-Time Projection")
        self.console.info(f"Effective entropy: {effective_bits:.1f} bits")

        horizons: list[float] = []
        for projection in projections:
            for h in projection.probabilities:
                if h not in horizons:
                    horizons.append(h)

        tbl = self.console.new_table()
        tbl.add_column("Attacker", style="bold")
        tbl.add_column("Speed", justify="right")
        tbl.add_column("Average Time", justify="right")
        for h in horizons:
            tbl.add_column(f"P({_horizon_label(h)})", justify="right")

        for projection in projections:
            tbl.add_row(
                projection.profile.label,
                f"{projection.profile.guesses_per_second:.0e} g/s",
                projection.display,
                *(f"{projection.probabilities.get(h, 0.0):.1%}" for h in horizons),
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Risk
    # ------------------------------------------------------------------ #

    def display_risk(self, report: RiskReport) -> None:
        """Numeric risk score, tier and the per-horizon probabilities."""
        self.console.section("Compromise Risk")

        colour = _TIER_COLOURS.get(report.tier.value, "white")
        header = Text()
        header.append("Risk Score: ", style="bold")
        header.append(f"{report.score}/100  ")
        header.append(report.tier.value.upper(), style=colour)
        header.append(f"\nPattern multiplier: x{report.pattern_multiplier:g}", style="dim")
        self._rich.print(Panel(header, title="Risk", border_style="cyan"))

        tbl = self.console.new_table()
        tbl.add_column("Attacker", style="bold")
        tbl.add_column("1 hour", justify="right")
        tbl.add_column("1 day", justify="right")
        tbl.add_column("1 week", justify="right")
        for name, probs in (("Online", report.online), ("Offline", report.offline)):
            tbl.add_row(name, f"{probs.p1h:.1%}", f"{probs.p1d:.1%}", f"{probs.p1w:.1%}")
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Narrative Report
    # ------------------------------------------------------------------ #

    def display_security_report(self, report: SecurityReport) -> None:
        """All sections of the narrative security report."""
        self.console.section("Security Report")

        colour = _NARRATIVE_COLOURS.get(report.risk.tier, "white")
        summary = Text()
        summary.append(f"{report.risk.tier.value}", style=colour)
        summary.append(f"  (confidence {report.risk.confidence}%)\n\n", style="dim")
        summary.append(report.executive_summary)
        self._rich.print(Panel(summary, title="Executive Summary", border_style="cyan"))

        self._lines("Technical Findings", report.technical_findings)
        self._lines("Attack Feasibility", report.attack_feasibility)

        self.console.table(
            "Estimated Crack Time",
            ["Scenario", "Time"],
            [
                ("Online (100/s)", report.estimated_crack_time.online),
                ("Laptop (1M/s)", report.estimated_crack_time.laptop),
                ("GPU farm (1B/s)", report.estimated_crack_time.gpu),
            ],
        )

        self._lines("Recommendations", report.recommendations)
        self._rich.print()
        self._rich.print(Text(TRANSPARENCY_LABEL, style="dim italic"))

    # ------------------------------------------------------------------ #
    #  Generation / generic results
    # ------------------------------------------------------------------ #

    def display_generated(self, password: str) -> None:
        self._rich.print(Panel(
            Text(password, style="bold bright_green"),
            title=f"Generated Password ({len(password)} chars)",
            border_style="green",
        ))

    def display_scan_result(self, result: ScanResult) -> None:
        """Findings table and summary of a :class:`ScanResult`."""
        if result.findings:
            self.console.findings_table(result.findings)
        if result.summary:
            self.console.info(result.summary)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _bullets(self, title: str, items: Sequence[str]) -> None:
        if not items:
            return
        self._rich.print()
        self._rich.print(f"[bold]{title}:[/bold]")
        for item in items:
            self._rich.print(f"  [bright_cyan]•[/bright_cyan] {escape(item)}")

    def _lines(self, title: str, lines: Sequence[str]) -> None:
        if not lines:
            return
        self._rich.print()
        self._rich.print(f"[bold bright_magenta]{title}[/bold bright_magenta]")
        for line in lines:
            self._rich.print(Text(f"  {line}"))
