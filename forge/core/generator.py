"""
Secret Generator
=================

Produces RANDOM passwords, MEMORABLE passphrases and numeric PINs. Every
symbol or word is an independent draw, with replacement, of
``random_source.next_in_range(0, k - 1)`` over a pool of size *k*:

    RANDOM     pool = AlphabetBuilder alphabet, joined with ""
    MEMORABLE  pool = WordList,                 joined with " "
    PIN        pool = the 10 digits,            joined with ""

A count of zero yields the empty string; negative counts are rejected.
The generator keeps no reference to the secrets it returns.
"""

from __future__ import annotations

from typing import Callable, Optional

from forge.core.alphabet import AlphabetBuilder
from forge.core.errors import InvalidModeError, InvalidOptionsError
from forge.core.models import (
    GenerationOptions,
    MemorableOptions,
    Mode,
    PinOptions,
    RandomOptions,
)
from forge.core.random_source import SecureRandomSource, SystemRandomSource
from forge.core.wordlist import WordList


class SecretGenerator:
    """Generate secrets for each :class:`Mode`.

    The word list is loaded lazily (bundled list by default) so that
    RANDOM and PIN generation never touch it.

    Usage::

        generator = SecretGenerator()
        generator.generate(Mode.PIN, PinOptions(digit_count=6))
        # '804215'

    Args:
        random_source: Index source; the OS CSPRNG unless a test injects
            a deterministic double.
        alphabet_builder: Builds the RANDOM-mode alphabet.
        wordlist: Passphrase vocabulary, or a zero-argument factory for it.
    """

    def __init__(
        self,
        random_source: Optional[SecureRandomSource] = None,
        alphabet_builder: Optional[AlphabetBuilder] = None,
        wordlist: WordList | Callable[[], WordList] | None = None,
    ) -> None:
        self.random_source: SecureRandomSource = random_source or SystemRandomSource()
        self.alphabet_builder = alphabet_builder or AlphabetBuilder()
        self._wordlist = wordlist if wordlist is not None else WordList.bundled

    @property
    def wordlist(self) -> WordList:
        if callable(self._wordlist):
            self._wordlist = self._wordlist()
        return self._wordlist

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def generate(self, mode: Mode, options: GenerationOptions) -> str:
        """Generate one secret.

        Args:
            mode: Kind of secret.
            options: Options model whose ``mode`` tag equals *mode*.

        Returns:
            The secret string.

        Raises:
            InvalidOptionsError: Negative count, or options for another mode.
            InvalidModeError: *mode* is not a :class:`Mode`.
            EntropySourceUnavailableError: The CSPRNG cannot be used.
        """
        if not isinstance(mode, Mode):
            raise InvalidModeError(f"Unknown generation mode: {mode!r}")
        if getattr(options, "mode", None) != mode:
            raise InvalidOptionsError(
                f"{type(options).__name__} cannot be used for mode {mode.value}"
            )

        if mode is Mode.RANDOM:
            return self.random_password(options)  # type: ignore[arg-type]
        if mode is Mode.MEMORABLE:
            return self.passphrase(options)  # type: ignore[arg-type]
        return self.pin(options)  # type: ignore[arg-type]

    def random_password(self, options: RandomOptions) -> str:
        count = _require_count("length", options.length)
        alphabet = self.alphabet_builder.build(
            options.include_numbers, options.include_symbols
        )
        return "".join(self._draw(alphabet, count))

    def passphrase(self, options: MemorableOptions) -> str:
        count = _require_count("word_count", options.word_count)
        if count == 0:
            return ""
        words = self.wordlist
        top = len(words) - 1
        return " ".join(
            words.word_at(self.random_source.next_in_range(0, top))
            for _ in range(count)
        )

    def pin(self, options: PinOptions) -> str:
        count = _require_count("digit_count", options.digit_count)
        return "".join(self._draw(self.alphabet_builder.digits(), count))

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _draw(self, pool: str, count: int) -> list[str]:
        """Draw *count* symbols from *pool* independently and uniformly."""
        if count == 0:
            return []
        top = len(pool) - 1
        return [pool[self.random_source.next_in_range(0, top)] for _ in range(count)]


def _require_count(name: str, value: int) -> int:
    """Reject negative or non-integer counts; zero is allowed."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptionsError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidOptionsError(f"{name} must be >= 0, got {value}")
    return value
