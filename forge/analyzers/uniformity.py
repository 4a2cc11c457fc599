"""
Random Source Self-Test
========================

Statistical sanity checks for a :class:`SecureRandomSource`. Passing
does not prove a source is cryptographically secure, but a failing
result means the source must not be used to generate secrets.

Tests:
    1. Index uniformity -- Pearson chi-squared over ``samples`` draws of
       ``next_in_range(0, range_size - 1)``. This also measures the
       modulo reduction bias, which is far below the test's resolution
       for alphabet-sized ranges.
    2. Frequency (Monobit) -- proportion of ones in ``samples`` full
       32-bit draws (NIST SP 800-22, Section 2.1).
    3. Runs -- number of bit transitions in the same stream
       (NIST SP 800-22, Section 2.3).

The null hypothesis (output is uniform) is rejected when
``p_value < 0.01``.

References:
    - NIST SP 800-22 Rev. 1a (2010). A Statistical Test Suite for
      Random and Pseudorandom Number Generators for Cryptographic
      Applications.
    - Pearson, K. (1900). On the Criterion that a Given System of
      Deviations from the Probable ... Philosophical Magazine, 50(302).
"""

from __future__ import annotations

import math

import numpy as np

from shared.math_utils import chi_squared_test
from forge.core.models import UniformityResult, UniformityTestResult
from forge.core.random_source import WORD_MODULUS, SecureRandomSource


class UniformityTester:
    """Run the self-test suite against a random source.

    Usage::

        tester = UniformityTester()
        result = tester.run(SystemRandomSource(), samples=20_000, range_size=62)
        print("PASS" if result.overall_pass else "FAIL")
    """

    # Significance level (alpha) for each hypothesis test
    ALPHA: float = 0.01

    # Fewer draws than this give no meaningful p-values
    MIN_SAMPLES: int = 100

    # Largest index range the chi-squared test accepts; bounds the count vector
    MAX_RANGE_SIZE: int = 1 << 16

    def run(
        self,
        source: SecureRandomSource,
        samples: int = 10_000,
        range_size: int = 62,
    ) -> UniformityResult:
        """Draw from *source* and run every test.

        Args:
            source: Random source under test.
            samples: Draws per test.
            range_size: Number of equally likely indices for the
                chi-squared test, from 2 to :attr:`MAX_RANGE_SIZE`.

        Raises:
            ValueError: If *range_size* is outside that interval.
        """
        if not 2 <= range_size <= self.MAX_RANGE_SIZE:
            raise ValueError(
                f"range_size must be in [2, {self.MAX_RANGE_SIZE}], got {range_size}"
            )

        source_name = type(source).__name__
        if samples < self.MIN_SAMPLES:
            return UniformityResult(
                source=source_name,
                samples=samples,
                range_size=range_size,
                tests=[],
                overall_pass=False,
                assessment=(
                    f"Insufficient samples ({samples}). Minimum {self.MIN_SAMPLES} "
                    f"draws required for reliable statistical testing."
                ),
            )

        indices = np.fromiter(
            (source.next_in_range(0, range_size - 1) for _ in range(samples)),
            dtype=np.int64,
            count=samples,
        )
        words = np.fromiter(
            (source.next_in_range(0, WORD_MODULUS - 1) for _ in range(samples)),
            dtype=np.uint32,
            count=samples,
        )
        bits = np.unpackbits(words.view(np.uint8))

        tests = [
            self.index_uniformity_test(indices, range_size),
            self.frequency_test(bits),
            self.runs_test(bits),
        ]
        failed = sum(1 for t in tests if not t.passed)

        return UniformityResult(
            source=source_name,
            samples=samples,
            range_size=range_size,
            tests=tests,
            overall_pass=(failed == 0),
            assessment=(
                f"All {len(tests)} tests passed. Output is consistent with a uniform source."
                if failed == 0
                else f"{failed} of {len(tests)} tests failed. Do not use this source for secrets."
            ),
        )

    # ------------------------------------------------------------------ #
    #  Test 1: Index uniformity
    # ------------------------------------------------------------------ #

    def index_uniformity_test(
        self, indices: np.ndarray, range_size: int
    ) -> UniformityTestResult:
        """Chi-squared goodness of fit of drawn indices against uniform."""
        observed = np.bincount(indices, minlength=range_size)[:range_size]
        expected = np.full(range_size, len(indices) / range_size)
        chi2, p_value = chi_squared_test(observed, expected)
        return self._result(
            "Index Uniformity (chi-squared)", p_value, chi2,
            f"{len(indices)} draws over {range_size} indices, "
            f"{range_size - 1} degrees of freedom.",
        )

    # ------------------------------------------------------------------ #
    #  Tests 2 and 3: bit-level checks on raw 32-bit draws
    # ------------------------------------------------------------------ #

    def frequency_test(self, bits: np.ndarray) -> UniformityTestResult:
        """Monobit test (NIST SP 800-22, 2.1).

        With ``S = ones - zeros`` over *n* bits, ``p = erfc(|S| / sqrt(2n))``.
        """
        n = bits.size
        ones = int(np.count_nonzero(bits))
        excess = 2 * ones - n
        statistic = abs(excess) / math.sqrt(n)
        p_value = math.erfc(statistic / math.sqrt(2.0))
        return self._result(
            "Frequency (Monobit)", p_value, statistic,
            f"{ones} ones in {n} bits (excess {excess:+d}).",
        )

    def runs_test(self, bits: np.ndarray) -> UniformityTestResult:
        """Runs test (NIST SP 800-22, 2.3).

        Only meaningful once the monobit proportion is within
        ``2 / sqrt(n)`` of one half; otherwise it is reported as failed.
        """
        n = bits.size
        ones_ratio = float(np.count_nonzero(bits)) / n
        if abs(ones_ratio - 0.5) >= 2.0 / math.sqrt(n):
            return self._result(
                "Runs", 0.0, 0.0,
                f"Not run: ones ratio {ones_ratio:.4f} is too far from 0.5.",
            )

        runs = 1 + int(np.count_nonzero(np.diff(bits.astype(np.int8))))
        spread = ones_ratio * (1.0 - ones_ratio)
        z = abs(runs - 2.0 * n * spread) / (2.0 * math.sqrt(2.0 * n) * spread)
        return self._result(
            "Runs", math.erfc(z), float(runs),
            f"{runs} runs in {n} bits, ones ratio {ones_ratio:.4f}.",
        )

    def _result(
        self, name: str, p_value: float, statistic: float, description: str
    ) -> UniformityTestResult:
        return UniformityTestResult(
            test_name=name,
            p_value=p_value,
            passed=p_value >= self.ALPHA,
            description=description,
            statistic=statistic,
        )
