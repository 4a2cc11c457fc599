"""
SecretForge -- Secret Generation and Strength Scoring
======================================================

Generates random passwords, memorable passphrases and numeric PINs from
the operating system CSPRNG and rates their strength.

Modules:
    - forge.core.engine: Facade over generation and classification
    - forge.core.models: Pydantic data models
    - forge.core.generator: Secret generator and its collaborators
    - forge.analyzers: Entropy scorer, strength classifier, PIN
      heuristic and random source self-test
    - forge.output: Console output
    - forge.cli: Click-based command-line interface

Quick use::

    import forge
    from forge.core.models import Mode, RandomOptions

    secret = forge.generate(Mode.RANDOM, RandomOptions(length=20))
    forge.classify(Mode.RANDOM, secret)

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

__version__ = "1.0.0"
__tool_name__ = "forge"

if TYPE_CHECKING:
    from forge.core.engine import ForgeEngine
    from forge.core.models import GenerationOptions, Mode, StrengthLabel

_default_engine: Optional[ForgeEngine] = None


def _engine() -> ForgeEngine:
    global _default_engine
    if _default_engine is None:
        from shared.config import get_config
        from forge.core.engine import ForgeEngine

        _default_engine = ForgeEngine(get_config())
    return _default_engine


def generate(mode: Mode | str, options: GenerationOptions) -> str:
    """Generate a secret with the default engine."""
    return _engine().generate(mode, options)


def classify(mode: Mode | str, secret: str) -> StrengthLabel:
    """Classify a secret with the default engine."""
    return _engine().classify(mode, secret)


def shannon_entropy(secret: str) -> float:
    """Shannon entropy of a string in bits per character."""
    return _engine().shannon_entropy(secret)


__all__ = ["generate", "classify", "shannon_entropy", "__version__"]
