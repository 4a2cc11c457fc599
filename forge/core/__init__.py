"""
Forge Core Module
==================

Contains the engine (``forge.core.engine``), the secret generator with
its collaborators, the error taxonomy and the data models. The engine is
not re-exported here because it depends on ``forge.analyzers``, which in
turn depends on the models below.
"""

from forge.core.errors import (
    ConfigurationError,
    EmptyAlphabetError,
    EmptyWordListError,
    EntropySourceUnavailableError,
    ForgeError,
    InvalidModeError,
    InvalidOptionsError,
    UnusableWordListError,
)
from forge.core.models import (
    MemorableOptions,
    Mode,
    PinOptions,
    RandomOptions,
    StrengthLabel,
    StrengthReport,
    UniformityResult,
)

__all__ = [
    "ConfigurationError",
    "EmptyAlphabetError",
    "EmptyWordListError",
    "EntropySourceUnavailableError",
    "ForgeError",
    "InvalidModeError",
    "InvalidOptionsError",
    "MemorableOptions",
    "Mode",
    "PinOptions",
    "RandomOptions",
    "StrengthLabel",
    "StrengthReport",
    "UniformityResult",
    "UnusableWordListError",
]
