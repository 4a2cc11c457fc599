"""
PIN Strength Heuristic
=======================

Character entropy says little about a short digit string, so PINs are
rated by a points rule instead:

1. A PIN on the common-PIN list is WEAK outright.
2. Base points from length::

       len < pin_min_length      -> 0
       len < pin_good_length     -> 1
       len < pin_strong_length   -> 2
       otherwise                 -> 3

3. -1 if the PIN repeats a block of one or two digits (``1111``,
   ``121212``).
4. -1 if the PIN is one ascending or descending run, wrapping 9 -> 0
   (``1234``, ``98765``, ``8901``).
5. ``points <= 0`` WEAK, ``points <= 2`` GOOD, otherwise STRONG.

With the default bands: ``1111`` -> WEAK, ``8068`` -> GOOD,
``11111`` -> GOOD, ``1234`` -> WEAK, ``27051983`` -> STRONG.

References:
    - Bonneau, J., Preibusch, S., & Anderson, R. (2012). A Birthday
      Present Every Eleven Wallets? The Security of Customer-Chosen
      Banking PINs. Financial Cryptography.
    - Berry, N. (2012). PIN Analysis. DataGenetics.
"""

from __future__ import annotations

from typing import Optional

from shared.config import StrengthConfig
from forge.core.models import StrengthLabel


class PinStrengthAnalyzer:
    """Rate PINs as WEAK, GOOD or STRONG.

    Usage::

        analyzer = PinStrengthAnalyzer()
        analyzer.calculate_strength("8068")   # StrengthLabel.GOOD
    """

    def __init__(self, config: Optional[StrengthConfig] = None) -> None:
        self.config = config or StrengthConfig()
        self._common = frozenset(self.config.common_pins)

    def calculate_strength(self, pin: str) -> StrengthLabel:
        """Classify *pin*. Never fails on string input."""
        return self._label_for(self.points(pin))

    def points(self, pin: str) -> int:
        """Score *pin* per the rule in the module docstring.

        Common PINs score 0 regardless of length.
        """
        if pin in self._common:
            return 0

        points = self._length_points(len(pin))
        if self.is_repeating_block(pin):
            points -= 1
        if self.is_sequential(pin):
            points -= 1
        return points

    # ------------------------------------------------------------------ #
    #  Pattern checks
    # ------------------------------------------------------------------ #

    @staticmethod
    def is_repeating_block(pin: str, max_period: int = 2) -> bool:
        """True if *pin* is a block of at most *max_period* digits repeated.

        Needs at least two full repetitions, so ``"12"`` is not a
        repeating block but ``"1212"`` and ``"111"`` are.
        """
        for period in range(1, max_period + 1):
            if len(pin) >= 2 * period and pin == (pin[:period] * len(pin))[: len(pin)]:
                return True
        return False

    @staticmethod
    def is_sequential(pin: str) -> bool:
        """True if every step between neighbouring digits is +1 or every step is -1 (mod 10)."""
        if len(pin) < 3 or not pin.isdigit():
            return False
        steps = {(int(b) - int(a)) % 10 for a, b in zip(pin, pin[1:])}
        return steps == {1} or steps == {9}

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _length_points(self, length: int) -> int:
        if length < self.config.pin_min_length:
            return 0
        if length < self.config.pin_good_length:
            return 1
        if length < self.config.pin_strong_length:
            return 2
        return 3

    @staticmethod
    def _label_for(points: int) -> StrengthLabel:
        if points <= 0:
            return StrengthLabel.WEAK
        if points <= 2:
            return StrengthLabel.GOOD
        return StrengthLabel.STRONG
