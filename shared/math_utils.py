"""
SecretForge Math Helpers
=========================

Character-distribution entropy for the strength classifier and the
chi-squared goodness-of-fit statistic for the random source self-test.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] NIST SP 800-90B (2018), Section 6.3: min-entropy estimation.
    [3] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations from the Probable ... Philosophical Magazine, 50(302).
    [4] Abramowitz, M. & Stegun, I. (1964). Handbook of Mathematical
        Functions, 26.4.4 - 26.4.5 (chi-squared probability function).
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Sequence

import numpy as np
from numpy.typing import ArrayLike


# ========================== Entropy ========================================


def _frequencies(symbols: Sequence[Hashable]) -> np.ndarray:
    """Relative frequency of each distinct symbol, in first-seen order."""
    counts = np.fromiter(Counter(symbols).values(), dtype=np.float64)
    return counts / len(symbols)


def shannon_entropy(symbols: Sequence[Hashable]) -> float:
    """Shannon entropy ``-sum(p * log2(p))`` of the empirical distribution.

    *symbols* may be a ``str``, ``bytes`` or any sequence of hashables.
    The result is in bits per symbol: 0.0 for empty or constant input,
    ``log2(k)`` for *k* equally frequent symbols.
    """
    if not symbols:
        return 0.0
    p = _frequencies(symbols)
    # + 0.0 turns the -0.0 of a single-symbol input into 0.0
    return float(-np.sum(p * np.log2(p))) + 0.0


def min_entropy(symbols: Sequence[Hashable]) -> float:
    """Min-entropy ``-log2(max p)`` in bits per symbol (0.0 for empty input).

    Never larger than :func:`shannon_entropy`; it rates a string by its
    most frequent symbol, the first guess of an attacker.
    """
    if not symbols:
        return 0.0
    return float(-np.log2(_frequencies(symbols).max())) + 0.0


# ========================== Chi-squared ====================================


def chi_squared_test(observed: ArrayLike, expected: ArrayLike) -> tuple[float, float]:
    """Pearson goodness of fit of *observed* counts against *expected*.

    Returns ``(statistic, p_value)`` where the statistic is
    ``sum((O - E) ** 2 / E)`` and the p-value is the chi-squared survival
    function with ``k - 1`` degrees of freedom.

    Raises:
        ValueError: If the shapes differ or any expected count is not positive.
    """
    obs = np.asarray(observed, dtype=np.float64)
    exp = np.asarray(expected, dtype=np.float64)
    if obs.shape != exp.shape:
        raise ValueError(f"Shape mismatch: observed {obs.shape}, expected {exp.shape}")
    if (exp <= 0).any():
        raise ValueError("Every expected count must be positive")

    statistic = float(((obs - exp) ** 2 / exp).sum())
    return statistic, chi2_survival(statistic, obs.size - 1)


def chi2_survival(statistic: float, dof: int) -> float:
    """``P(X >= statistic)`` for a chi-squared variable with integer *dof*.

    Closed form (Abramowitz & Stegun 26.4.4 / 26.4.5) with ``y = statistic / 2``::

        even dof:  exp(-y) * sum_{k=0}^{dof/2 - 1} y**k / k!
        odd dof:   erfc(sqrt(y)) + exp(-y) * sum_{k=1}^{(dof-1)/2} y**(k - 1/2) / Gamma(k + 1/2)

    The terms are summed in log space so large statistics underflow to 0
    instead of overflowing.
    """
    if dof <= 0 or statistic <= 0.0:
        return 1.0

    y = statistic / 2.0
    if dof % 2 == 0:
        k = np.arange(dof // 2, dtype=np.float64)
        log_gamma = np.array([math.lgamma(v + 1.0) for v in k])
        log_terms = k * math.log(y) - log_gamma - y
        base = 0.0
    else:
        k = np.arange(1, (dof - 1) // 2 + 1, dtype=np.float64)
        log_gamma = np.array([math.lgamma(v + 0.5) for v in k])
        log_terms = (k - 0.5) * math.log(y) - log_gamma - y
        base = math.erfc(math.sqrt(y))

    return min(1.0, base + float(np.exp(log_terms).sum()))
