"""Shared fixtures for the SecretForge test suite."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pytest

from shared.config import ForgeConfig
from forge.core.alphabet import AlphabetBuilder
from forge.core.engine import ForgeEngine
from forge.core.generator import SecretGenerator
from forge.core.random_source import WORD_MODULUS, reduce_to_range
from forge.core.wordlist import WordList


class SeededRandomSource:
    """Deterministic stand-in for the OS CSPRNG, driven by a numpy Generator.

    Draws one 32-bit word per call and reduces it exactly like
    :class:`SystemRandomSource`, so the generator code paths are the same.
    """

    def __init__(self, seed: int = 1234) -> None:
        self._rng = np.random.default_rng(seed)
        self.calls: list[tuple[int, int]] = []

    def next_in_range(self, min_value: int, max_value: int) -> int:
        self.calls.append((min_value, max_value))
        word = int(self._rng.integers(0, WORD_MODULUS, dtype=np.uint64))
        return reduce_to_range(word, min_value, max_value)


class ScriptedRandomSource:
    """Replays a fixed list of 32-bit words, then cycles."""

    def __init__(self, words: Iterable[int]) -> None:
        self._words = list(words)
        self._pos = 0

    def next_in_range(self, min_value: int, max_value: int) -> int:
        word = self._words[self._pos % len(self._words)]
        self._pos += 1
        return reduce_to_range(word, min_value, max_value)


class ConstantRandomSource:
    """Always returns the lowest value in range (a deliberately broken source)."""

    def next_in_range(self, min_value: int, max_value: int) -> int:
        return min_value


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    return SeededRandomSource(seed=20240611)


@pytest.fixture
def small_wordlist() -> WordList:
    return WordList(["apple", "river", "stone", "cloud", "maple"], source="<test>")


@pytest.fixture
def generator(seeded_source, small_wordlist) -> SecretGenerator:
    return SecretGenerator(
        random_source=seeded_source,
        alphabet_builder=AlphabetBuilder(),
        wordlist=small_wordlist,
    )


@pytest.fixture
def config() -> ForgeConfig:
    return ForgeConfig()


@pytest.fixture
def engine(config, seeded_source) -> ForgeEngine:
    return ForgeEngine(config, random_source=seeded_source)
