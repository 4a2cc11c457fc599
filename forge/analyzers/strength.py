"""
Strength Classifier
====================

Maps a secret and the mode it was generated in to a
:class:`~forge.core.models.StrengthLabel`.

RANDOM and MEMORABLE secrets share one scheme. With
``score = shannon_entropy(secret) * len(secret)`` and strict ``<``:

    score < 19   VERY_WEAK
    score < 28   WEAK
    score < 38   GOOD
    otherwise    STRONG

PINs are rated by :class:`~forge.analyzers.pin_strength.PinStrengthAnalyzer`.

:meth:`StrengthClassifier.assess` adds brute-force crack time estimates
at four attack speeds, assuming an attacker needs half of a
``2 ** score`` keyspace on average.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

from typing import Optional

from shared.config import StrengthConfig
from forge.analyzers.entropy import EntropyScorer
from forge.analyzers.pin_strength import PinStrengthAnalyzer
from forge.core.errors import InvalidModeError
from forge.core.models import (
    CrackTimeEstimate,
    Mode,
    StrengthLabel,
    StrengthReport,
)


class StrengthClassifier:
    """Classify secrets by mode.

    Usage::

        classifier = StrengthClassifier()
        classifier.classify(Mode.RANDOM, "k3#qv9!z")   # StrengthLabel.WEAK
        classifier.classify(Mode.PIN, "1111")          # StrengthLabel.WEAK

    Args:
        config: Threshold configuration (defaults 19 / 28 / 38).
        scorer: Entropy scorer for RANDOM / MEMORABLE.
        pin_analyzer: PIN heuristic; built from *config* when omitted.
    """

    _ATTACK_SPEEDS: list[tuple[str, float]] = [
        ("Online attack (throttled)", 1e3),
        ("Offline attack (slow hash, e.g. bcrypt)", 1e6),
        ("Offline attack (fast hash, e.g. MD5 on GPU)", 1e9),
        ("Massive parallel / state-level", 1e12),
    ]

    _MAX_KEYSPACE_BITS: float = 1000.0

    def __init__(
        self,
        config: Optional[StrengthConfig] = None,
        scorer: Optional[EntropyScorer] = None,
        pin_analyzer: Optional[PinStrengthAnalyzer] = None,
    ) -> None:
        self.config = config or StrengthConfig()
        self.scorer = scorer or EntropyScorer()
        self.pin_analyzer = pin_analyzer or PinStrengthAnalyzer(self.config)

    # ------------------------------------------------------------------ #
    #  Classification
    # ------------------------------------------------------------------ #

    def classify(self, mode: Mode, secret: str) -> StrengthLabel:
        """Return the strength label of *secret* under *mode*.

        Raises:
            InvalidModeError: If *mode* is not a :class:`Mode`.
        """
        if not isinstance(mode, Mode):
            raise InvalidModeError(f"Unknown generation mode: {mode!r}")

        if mode is Mode.PIN:
            return self.pin_analyzer.calculate_strength(secret)
        return self.label_for_score(self.scorer.total_bits(secret))

    def label_for_score(self, score: float) -> StrengthLabel:
        """Map an entropy score (bits) to the four-tier label."""
        if score < self.config.very_weak_below:
            return StrengthLabel.VERY_WEAK
        if score < self.config.weak_below:
            return StrengthLabel.WEAK
        if score < self.config.good_below:
            return StrengthLabel.GOOD
        return StrengthLabel.STRONG

    # ------------------------------------------------------------------ #
    #  Full report
    # ------------------------------------------------------------------ #

    def assess(self, mode: Mode, secret: str) -> StrengthReport:
        """Classify *secret* and collect the measures behind the label.

        The report does not contain the secret itself.
        """
        label = self.classify(mode, secret)
        per_symbol = self.scorer.shannon_entropy(secret)
        total_bits = per_symbol * len(secret)

        return StrengthReport(
            mode=mode,
            masked=mask_secret(secret),
            length=len(secret),
            distinct_symbols=len(set(secret)),
            entropy_per_symbol=round(per_symbol, 4),
            min_entropy_per_symbol=round(self.scorer.min_entropy(secret), 4),
            total_bits=round(total_bits, 2),
            label=label,
            crack_time_estimates=self.estimate_crack_times(total_bits),
        )

    def estimate_crack_times(self, entropy_bits: float) -> list[CrackTimeEstimate]:
        """Expected brute-force time (half the keyspace) per attack speed."""
        # Capped so the keyspace stays a finite float
        bits = min(max(entropy_bits, 0.0), self._MAX_KEYSPACE_BITS)
        avg_attempts = 2.0 ** bits / 2

        estimates: list[CrackTimeEstimate] = []
        for scenario, speed in self._ATTACK_SPEEDS:
            seconds = avg_attempts / speed
            estimates.append(CrackTimeEstimate(
                scenario=scenario,
                guesses_per_second=speed,
                seconds=seconds,
                display=format_duration(seconds),
            ))
        return estimates


def mask_secret(secret: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(secret) <= 2:
        return "*" * len(secret)
    return secret[0] + "*" * (len(secret) - 2) + secret[-1]


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as a human-readable string."""
    year = 86400 * 365
    if seconds < 0.001:
        return "instant"
    if seconds < 1:
        return f"{seconds * 1000:.0f} milliseconds"
    if seconds < 60:
        return f"{seconds:.1f} seconds"
    if seconds < 3600:
        return f"{seconds / 60:.1f} minutes"
    if seconds < 86400:
        return f"{seconds / 3600:.1f} hours"
    if seconds < year:
        return f"{seconds / 86400:.1f} days"
    if seconds < year * 1000:
        return f"{seconds / year:.1f} years"
    if seconds < year * 1e6:
        return f"{seconds / (year * 1000):.1f} thousand years"
    if seconds < year * 1e9:
        return f"{seconds / (year * 1e6):.1f} million years"
    if seconds < year * 1e12:
        return f"{seconds / (year * 1e9):.1f} billion years"
    return f"{seconds / (year * 1e12):.1e} trillion years"
