"""
Entropy Scorer
===============

Character-level Shannon entropy of a secret, computed over the string's
own empirical symbol distribution:

    H(s) = -sum_i (f_i / n) * log2(f_i / n)

where ``f_i`` is the count of distinct character *i* and ``n = len(s)``.
H is bits *per symbol*; ``H(s) * len(s)`` approximates the total bits
of randomness and is the score the strength classifier uses.

Reference values::

    ""      -> 0.0
    "aaaa"  -> 0.0
    "ab"    -> 1.0
    "sweet" -> 1.9219 (rounds to 2)

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
      Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

from shared.math_utils import min_entropy, shannon_entropy


class EntropyScorer:
    """Entropy measures over the characters of a string."""

    @staticmethod
    def shannon_entropy(secret: str) -> float:
        """Shannon entropy in bits per character; 0.0 for ``""``."""
        return shannon_entropy(secret)

    @staticmethod
    def min_entropy(secret: str) -> float:
        """Min-entropy in bits per character; 0.0 for ``""``."""
        return min_entropy(secret)

    def total_bits(self, secret: str) -> float:
        """``shannon_entropy(secret) * len(secret)``."""
        return self.shannon_entropy(secret) * len(secret)
