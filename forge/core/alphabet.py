"""
Alphabet Builder
=================

Assembles the RANDOM-mode character set. The order is fixed (letters,
then digits, then symbols) so that index draws are reproducible in
tests; selection is uniform over positions, so order and duplicates do
not affect security.
"""

from __future__ import annotations

from typing import Optional

from shared.config import GeneratorConfig
from forge.core.errors import EmptyAlphabetError


class AlphabetBuilder:
    """Build alphabets from the configured letter, digit and symbol sets.

    The letter set is always included. Only lowercase letters ship in the
    default configuration.

    Usage::

        builder = AlphabetBuilder()
        builder.build(include_numbers=True, include_symbols=False)
        # 'abcdefghijklmnopqrstuvwxyz0123456789'
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()

    def digits(self) -> str:
        """Return the PIN alphabet (the configured digit set)."""
        if not self.config.digits:
            raise EmptyAlphabetError("Configured digit set is empty")
        return self.config.digits

    def build(self, include_numbers: bool, include_symbols: bool) -> str:
        """Return the concatenated alphabet.

        Raises:
            EmptyAlphabetError: If the configured sets yield no symbols.
        """
        alphabet = self.config.letters
        if include_numbers:
            alphabet += self.config.digits
        if include_symbols:
            alphabet += self.config.symbols

        if not alphabet:
            raise EmptyAlphabetError(
                "Configured letters, digits and symbols produce an empty alphabet"
            )
        return alphabet
