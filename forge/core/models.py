"""
Forge Core Data Models
=======================

Pydantic models for the SecretForge engine: generation modes and their
options, strength labels, strength reports and random source self-test
results.

Reports never hold the secret they describe; :class:`StrengthReport`
carries only a masked rendering for display.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-22 Rev. 1a (2010). A Statistical Test Suite for
      Random and Pseudorandom Number Generators.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Mode(str, enum.Enum):
    """Kind of secret to generate."""

    RANDOM = "RANDOM"
    MEMORABLE = "MEMORABLE"
    PIN = "PIN"


class StrengthLabel(str, enum.Enum):
    """Qualitative strength of a generated secret.

    RANDOM and MEMORABLE secrets use all four tiers; PIN classification
    never yields ``VERY_WEAK``.
    """

    VERY_WEAK = "VERY_WEAK"
    WEAK = "WEAK"
    GOOD = "GOOD"
    STRONG = "STRONG"

    @property
    def display(self) -> str:
        """Sentence-case label, e.g. ``"Very weak"``."""
        return self.value.replace("_", " ").capitalize()


# ===================================================================== #
#  Generation Options
# ===================================================================== #


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RandomOptions(_Options):
    """Options for a RANDOM password.

    Attributes:
        length: Number of characters to draw.
        include_numbers: Append the digits 0-9 to the alphabet.
        include_symbols: Append the punctuation set to the alphabet.
    """

    mode: Literal[Mode.RANDOM] = Mode.RANDOM
    length: int = 16
    include_numbers: bool = True
    include_symbols: bool = True


class MemorableOptions(_Options):
    """Options for a MEMORABLE passphrase (``word_count`` words)."""

    mode: Literal[Mode.MEMORABLE] = Mode.MEMORABLE
    word_count: int = 4


class PinOptions(_Options):
    """Options for a numeric PIN (``digit_count`` digits)."""

    mode: Literal[Mode.PIN] = Mode.PIN
    digit_count: int = 6


GenerationOptions = Annotated[
    Union[RandomOptions, MemorableOptions, PinOptions],
    Field(discriminator="mode"),
]


# ===================================================================== #
#  Strength Report Models
# ===================================================================== #


class CrackTimeEstimate(BaseModel):
    """Brute-force crack time at a given attack speed.

    Attributes:
        scenario: Description of the attack scenario.
        guesses_per_second: Attack speed in guesses per second.
        seconds: Expected time to hit the secret (half the keyspace).
        display: Human-readable time string.
    """

    scenario: str
    guesses_per_second: float
    seconds: float
    display: str = ""


class StrengthReport(BaseModel):
    """Strength assessment of one secret.

    Attributes:
        mode: Mode the secret was generated in.
        masked: First and last symbol with the rest starred out.
        length: Length of the secret in characters.
        distinct_symbols: Number of distinct characters.
        entropy_per_symbol: Shannon entropy in bits per character.
        min_entropy_per_symbol: Min-entropy in bits per character.
        total_bits: ``entropy_per_symbol * length``, the classifier score.
        label: Strength label for the secret's mode.
        crack_time_estimates: Brute-force estimates derived from total_bits.
    """

    mode: Mode
    masked: str = ""
    length: int = 0
    distinct_symbols: int = 0
    entropy_per_symbol: float = 0.0
    min_entropy_per_symbol: float = 0.0
    total_bits: float = 0.0
    label: StrengthLabel = StrengthLabel.VERY_WEAK
    crack_time_estimates: list[CrackTimeEstimate] = Field(default_factory=list)


# ===================================================================== #
#  Random Source Self-Test Models
# ===================================================================== #


class UniformityTestResult(BaseModel):
    """Result of a single statistical test on random source output.

    Attributes:
        test_name: Name of the statistical test.
        p_value: Computed p-value.
        passed: Whether ``p_value >= alpha``.
        description: What was measured.
        statistic: The raw test statistic.
    """

    test_name: str
    p_value: float = 0.0
    passed: bool = False
    description: str = ""
    statistic: float = 0.0


class UniformityResult(BaseModel):
    """Aggregated result of a random source self-test.

    Attributes:
        source: Class name of the tested random source.
        samples: Number of draws taken per test.
        range_size: Size of the index range sampled in the chi-squared test.
        tests: Individual test results.
        overall_pass: True when at least one test ran and every test passed.
        assessment: Human-readable summary.
    """

    source: str = ""
    samples: int = 0
    range_size: int = 0
    tests: list[UniformityTestResult] = Field(default_factory=list)
    overall_pass: bool = False
    assessment: str = ""
