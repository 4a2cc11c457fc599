"""
Forge Console Output
=====================

Rich-based console formatters for SecretForge: the generated secret with
its strength meter, strength reports, entropy measures and random source
self-test results.

Secrets are wrapped in :class:`rich.text.Text` so that brackets and other
markup characters print literally.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

import math
from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from forge.core.models import (
    Mode,
    StrengthLabel,
    StrengthReport,
    UniformityResult,
)


_LABEL_COLOURS: dict[StrengthLabel, str] = {
    StrengthLabel.VERY_WEAK: "bold white on red",
    StrengthLabel.WEAK: "bold red",
    StrengthLabel.GOOD: "bold yellow",
    StrengthLabel.STRONG: "bold bright_green",
}

# Meter fill (out of four segments) and bar colour per label
_LABEL_METER: dict[StrengthLabel, tuple[int, str]] = {
    StrengthLabel.VERY_WEAK: (1, "red"),
    StrengthLabel.WEAK: (2, "red"),
    StrengthLabel.GOOD: (3, "yellow"),
    StrengthLabel.STRONG: (4, "bright_green"),
}


class ForgeConsoleOutput:
    """Console output formatters for SecretForge results.

    Usage::

        console = ForgeConsole()
        output = ForgeConsoleOutput(console)
        output.display_secret(secret, report)
        output.display_uniformity(result)
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Secret Display
    # ------------------------------------------------------------------ #

    def display_secret(self, secret: str, report: StrengthReport) -> None:
        """Show a freshly generated secret with its strength meter."""
        title = {
            Mode.RANDOM: "Random Password",
            Mode.MEMORABLE: "Memorable Passphrase",
            Mode.PIN: "PIN",
        }[report.mode]
        self.console.section(title)

        self._rich.print(
            Panel(
                Text(secret, style="forge.secret"),
                title="Secret",
                border_style="bright_cyan",
                expand=False,
            )
        )
        self._rich.print(self.strength_meter(report.label))
        self.display_details(report)

    def display_report(self, report: StrengthReport) -> None:
        """Show the strength report of a caller-supplied secret."""
        self.console.section("Strength Assessment")
        self._rich.print(self.strength_meter(report.label))
        self.display_details(report)

    def display_details(self, report: StrengthReport) -> None:
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Mode", report.mode.value)
        tbl.add_row("Masked", Text(report.masked))
        tbl.add_row("Length", str(report.length))
        tbl.add_row("Distinct Symbols", str(report.distinct_symbols))
        tbl.add_row("Shannon Entropy", f"{report.entropy_per_symbol:.4f} bits/char")
        tbl.add_row("Min-Entropy", f"{report.min_entropy_per_symbol:.4f} bits/char")
        tbl.add_row("Score", f"{report.total_bits:.2f} bits")
        self._rich.print(tbl)

        if report.crack_time_estimates:
            crack_tbl = Table(
                title="Brute-Force Time Estimates",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=True,
            )
            crack_tbl.add_column("Attack Scenario", style="bold")
            crack_tbl.add_column("Speed", justify="right")
            crack_tbl.add_column("Estimated Time", justify="right")
            for estimate in report.crack_time_estimates:
                crack_tbl.add_row(
                    estimate.scenario,
                    f"{estimate.guesses_per_second:.0e} g/s",
                    estimate.display,
                )
            self._rich.print(crack_tbl)

    @staticmethod
    def strength_meter(label: StrengthLabel, width: int = 32) -> Text:
        """Four-segment strength bar followed by the label."""
        segment = width // 4
        level, bar_colour = _LABEL_METER[label]
        filled = level * segment

        meter = Text()
        meter.append("Strength: ", style="bold")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=bar_colour)
        meter.append("░" * (width - filled), style="dim")
        meter.append("]  ", style="dim")
        meter.append(label.display, style=_LABEL_COLOURS[label])
        return meter

    # ------------------------------------------------------------------ #
    #  Entropy Display
    # ------------------------------------------------------------------ #

    def display_entropy(self, text: str, shannon: float, min_entropy: float) -> None:
        """Show per-character entropy measures for an arbitrary string."""
        self.console.section("Entropy Analysis")

        distinct = len(set(text))
        ceiling = math.log2(distinct) if distinct > 1 else 0.0

        tbl = Table(
            title="Entropy Measures",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Measure", style="bold")
        tbl.add_column("Value", justify="right")

        tbl.add_row("Length", str(len(text)))
        tbl.add_row("Distinct Symbols", str(distinct))
        tbl.add_row("Shannon H(X)", f"{shannon:.4f} bits/char")
        tbl.add_row("Min-Entropy H_inf", f"{min_entropy:.4f} bits/char")
        tbl.add_row("Maximum for Symbol Count", f"{ceiling:.4f} bits/char")
        tbl.add_row("H(X) x Length", f"{shannon * len(text):.2f} bits")
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Self-Test Display
    # ------------------------------------------------------------------ #

    def display_uniformity(self, result: UniformityResult) -> None:
        """Show random source self-test results."""
        self.console.section("Random Source Self-Test")

        passed = sum(1 for t in result.tests if t.passed)
        summary = Text()
        summary.append("Overall: ", style="bold")
        summary.append(
            "PASS" if result.overall_pass else "FAIL",
            style="bold bright_green" if result.overall_pass else "bold red",
        )
        summary.append(f"\nSource: {result.source}")
        summary.append(f"\nTests: {passed}/{len(result.tests)} passed")
        summary.append(f"\nSamples: {result.samples:,}  |  Range: {result.range_size}\n")
        summary.append(result.assessment)
        self._rich.print(Panel(summary, title="Self-Test Results", border_style="cyan"))

        if result.tests:
            tbl = Table(
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=True,
            )
            tbl.add_column("#", style="dim", width=3, justify="right")
            tbl.add_column("Test Name", style="bold")
            tbl.add_column("p-value", justify="right")
            tbl.add_column("Statistic", justify="right")
            tbl.add_column("Result", justify="center")

            for idx, test in enumerate(result.tests, start=1):
                colour = "green" if test.passed else "red"
                tbl.add_row(
                    str(idx),
                    test.test_name,
                    f"{test.p_value:.6f}",
                    f"{test.statistic:.4f}",
                    f"[{colour}]{'PASS' if test.passed else 'FAIL'}[/{colour}]",
                )
            self._rich.print(tbl)
