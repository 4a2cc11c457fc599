"""
Forge Error Taxonomy
=====================

Every failure the generator or the classifiers can raise derives from
:class:`ForgeError`. Operations are atomic: they either return a value or
raise one of these without side effects. Nothing is retried.
"""

from __future__ import annotations


class ForgeError(Exception):
    """Base class for all SecretForge errors."""


class ConfigurationError(ForgeError):
    """Invalid generation settings or unusable static data."""


class InvalidOptionsError(ConfigurationError):
    """A length / count is negative or the options do not match the mode."""


class EmptyAlphabetError(ConfigurationError):
    """The configured character sets produce an empty alphabet."""


class EmptyWordListError(ConfigurationError):
    """The word list used for passphrases contains no words."""


class UnusableWordListError(ConfigurationError):
    """A word list file cannot be read, or an entry is not a single word."""


class EntropySourceUnavailableError(ForgeError):
    """The operating system CSPRNG could not be used.

    Fatal: a secret must never be produced from a fallback generator.
    """


class InvalidModeError(ForgeError, ValueError):
    """A value that is not a :class:`~forge.core.models.Mode` reached a mode switch."""
