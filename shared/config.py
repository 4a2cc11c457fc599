"""
SecretForge Configuration Management
=====================================

Settings for SecretForge, held in dataclasses and read from an optional
``forge.toml`` file.

Symbol sets, caller-side length bounds and strength thresholds all live
here so that the generator and the classifiers receive them as explicit
values rather than reading module globals.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# Project-level configuration file, optional
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "forge.toml"

# Most frequently chosen 4-digit PINs (Berry, 2012 DataGenetics analysis).
_COMMON_PINS: tuple[str, ...] = (
    "1234", "1111", "0000", "1212", "7777", "1004", "2000", "4444",
    "2222", "6969", "9999", "3333", "5555", "6666", "1122", "1313",
    "8888", "4321", "2001", "1010",
)


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for the secret generator.

    The three character sets are concatenated in order (letters, digits,
    symbols) to form the RANDOM-mode alphabet. The ``min_*`` / ``max_*``
    bounds are caller policy applied by the CLI; the generator itself
    accepts any non-negative count.
    """

    letters: str = "abcdefghijklmnopqrstuvwxyz"
    digits: str = "0123456789"
    symbols: str = "!@#$%^&*(){}[]-=_+|/?,<.>;:'\""

    default_length: int = 16
    default_word_count: int = 4
    default_digit_count: int = 6

    min_length: int = 6
    max_length: int = 256
    min_word_count: int = 3
    max_word_count: int = 12
    min_digit_count: int = 4
    max_digit_count: int = 12

    # Empty string selects the word list bundled with the package
    wordlist_path: str = ""


@dataclass(frozen=False, slots=True)
class StrengthConfig:
    """Thresholds for strength classification.

    ``very_weak_below``, ``weak_below`` and ``good_below`` are compared
    with strict ``<`` against ``shannon_entropy(secret) * len(secret)``.

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    """

    very_weak_below: float = 19.0
    weak_below: float = 28.0
    good_below: float = 38.0

    # PIN heuristic length bands
    pin_min_length: int = 4
    pin_good_length: int = 5
    pin_strong_length: int = 8
    common_pins: list[str] = field(default_factory=lambda: list(_COMMON_PINS))


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================

# TOML table name -> ForgeConfig attribute
_SECTIONS: dict[str, str] = {
    "global": "global_settings",
    "generator": "generator",
    "strength": "strength",
}


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """All SecretForge settings.

    Usage::

        config = ForgeConfig.load()                # forge.toml at the project root, if any
        config = ForgeConfig.load("custom.toml")
        config.strength.good_below                 # 38.0

    A file only needs the keys it changes::

        [generator]
        default_length = 24

        [strength]
        common_pins = ["1234", "0000"]
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    strength: StrengthConfig = field(default_factory=StrengthConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Read *path* (default: ``forge.toml`` at the project root).

        A missing default file gives the built-in defaults. Unknown tables
        and keys are ignored.

        Raises:
            FileNotFoundError: *path* was given and does not exist.
        """
        if path is None:
            if not _DEFAULT_CONFIG_PATH.is_file():
                return cls()
            config_path = _DEFAULT_CONFIG_PATH
        else:
            config_path = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
        config = cls()
        for table, attr in _SECTIONS.items():
            values = raw.get(table)
            if isinstance(values, dict):
                setattr(config, attr, _merge(getattr(config, attr), values))
        return config

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dictionary of every setting."""
        return asdict(self)


def _merge(section: Any, values: dict[str, Any]) -> Any:
    """Copy of dataclass *section* with the declared keys of *values* applied."""
    known = {f.name for f in fields(section)}
    updates = {k: v for k, v in values.items() if k in known}
    return type(section)(**{**asdict(section), **updates})


# ========================= Module-level convenience ========================

_cached: ForgeConfig | None = None


def get_config(path: str | Path | None = None) -> ForgeConfig:
    """Process-wide configuration, loaded on first use.

    Passing *path* reloads from that file and replaces the cached instance.
    """
    global _cached
    if _cached is None or path is not None:
        _cached = ForgeConfig.load(path)
    return _cached
