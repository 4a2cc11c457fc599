"""Tests for RANDOM, MEMORABLE and PIN generation."""

from __future__ import annotations

import string

import pytest

from conftest import ScriptedRandomSource, SeededRandomSource
from shared.config import GeneratorConfig
from forge.core.alphabet import AlphabetBuilder
from forge.core.errors import EmptyAlphabetError, InvalidModeError, InvalidOptionsError
from forge.core.generator import SecretGenerator
from forge.core.models import MemorableOptions, Mode, PinOptions, RandomOptions
from forge.core.wordlist import WordList


FULL_ALPHABET = AlphabetBuilder().build(True, True)


class TestRandomPassword:
    @pytest.mark.parametrize("length", [1, 6, 16, 64, 256])
    def test_length(self, generator, length):
        secret = generator.generate(Mode.RANDOM, RandomOptions(length=length))
        assert len(secret) == length

    def test_characters_come_from_alphabet(self, generator):
        secret = generator.generate(Mode.RANDOM, RandomOptions(length=500))
        assert set(secret) <= set(FULL_ALPHABET)

    def test_letters_only(self, generator):
        options = RandomOptions(length=300, include_numbers=False, include_symbols=False)
        secret = generator.generate(Mode.RANDOM, options)
        assert set(secret) <= set(string.ascii_lowercase)

    def test_numbers_without_symbols(self, generator):
        options = RandomOptions(length=300, include_numbers=True, include_symbols=False)
        secret = generator.generate(Mode.RANDOM, options)
        assert set(secret) <= set(string.ascii_lowercase + string.digits)

    def test_index_draws_cover_alphabet_bounds(self, seeded_source, generator):
        generator.generate(Mode.RANDOM, RandomOptions(length=50))
        assert seeded_source.calls
        assert all(call == (0, len(FULL_ALPHABET) - 1) for call in seeded_source.calls)

    def test_scripted_draws_map_to_positions(self):
        source = ScriptedRandomSource([0, 1, 2, 25])
        generator = SecretGenerator(random_source=source)
        options = RandomOptions(length=4, include_numbers=False, include_symbols=False)
        assert generator.generate(Mode.RANDOM, options) == "abcz"

    def test_modulo_wraps_large_words(self):
        # 26 letters: 26 -> 'a', 27 -> 'b'
        source = ScriptedRandomSource([26, 27])
        generator = SecretGenerator(random_source=source)
        options = RandomOptions(length=2, include_numbers=False, include_symbols=False)
        assert generator.generate(Mode.RANDOM, options) == "ab"

    def test_zero_length_is_empty(self, generator):
        assert generator.generate(Mode.RANDOM, RandomOptions(length=0)) == ""

    def test_single_symbol_alphabet(self, seeded_source):
        builder = AlphabetBuilder(GeneratorConfig(letters="x", digits="", symbols=""))
        generator = SecretGenerator(random_source=seeded_source, alphabet_builder=builder)
        assert generator.generate(Mode.RANDOM, RandomOptions(length=8)) == "xxxxxxxx"

    def test_negative_length_rejected(self, generator):
        with pytest.raises(InvalidOptionsError):
            generator.generate(Mode.RANDOM, RandomOptions(length=-1))

    def test_empty_alphabet_rejected(self, seeded_source):
        builder = AlphabetBuilder(GeneratorConfig(letters="", digits="", symbols=""))
        generator = SecretGenerator(random_source=seeded_source, alphabet_builder=builder)
        with pytest.raises(EmptyAlphabetError):
            generator.generate(Mode.RANDOM, RandomOptions(length=8))


class TestPassphrase:
    @pytest.mark.parametrize("count", [1, 3, 4, 12])
    def test_word_count(self, generator, small_wordlist, count):
        secret = generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=count))
        words = secret.split(" ")
        assert len(words) == count
        assert all(word in small_wordlist for word in words)

    def test_single_space_separator(self, generator):
        secret = generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=6))
        assert "  " not in secret
        assert not secret.startswith(" ") and not secret.endswith(" ")

    def test_scripted_words(self, small_wordlist):
        source = ScriptedRandomSource([4, 0, 7])
        generator = SecretGenerator(random_source=source, wordlist=small_wordlist)
        secret = generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=3))
        assert secret == "maple apple stone"

    def test_zero_words_is_empty(self, generator):
        assert generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=0)) == ""

    def test_single_word_list(self, seeded_source):
        generator = SecretGenerator(random_source=seeded_source, wordlist=WordList(["echo"]))
        secret = generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=3))
        assert secret == "echo echo echo"

    def test_negative_count_rejected(self, generator):
        with pytest.raises(InvalidOptionsError):
            generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=-3))

    def test_bundled_list_is_lazy(self, seeded_source):
        loads = []

        def factory():
            loads.append(1)
            return WordList(["lazy"])

        generator = SecretGenerator(random_source=seeded_source, wordlist=factory)
        generator.generate(Mode.PIN, PinOptions(digit_count=4))
        assert loads == []
        generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=2))
        generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=2))
        assert loads == [1]

    def test_default_uses_bundled_list(self, seeded_source):
        generator = SecretGenerator(random_source=seeded_source)
        secret = generator.generate(Mode.MEMORABLE, MemorableOptions(word_count=4))
        bundled = WordList.bundled()
        assert all(word in bundled for word in secret.split(" "))


class TestPin:
    @pytest.mark.parametrize("digits", [1, 4, 6, 12])
    def test_digits_only(self, generator, digits):
        secret = generator.generate(Mode.PIN, PinOptions(digit_count=digits))
        assert len(secret) == digits
        assert secret.isdigit()

    def test_zero_digits_is_empty(self, generator):
        assert generator.generate(Mode.PIN, PinOptions(digit_count=0)) == ""

    def test_negative_count_rejected(self, generator):
        with pytest.raises(InvalidOptionsError):
            generator.generate(Mode.PIN, PinOptions(digit_count=-1))

    def test_draws_over_ten_digits(self, seeded_source, generator):
        generator.generate(Mode.PIN, PinOptions(digit_count=6))
        assert seeded_source.calls == [(0, 9)] * 6


class TestGenerateDispatch:
    def test_options_must_match_mode(self, generator):
        with pytest.raises(InvalidOptionsError):
            generator.generate(Mode.PIN, RandomOptions(length=8))

    def test_unknown_mode(self, generator):
        with pytest.raises(InvalidModeError):
            generator.generate("RANDOM", RandomOptions(length=8))

    def test_repeat_calls_differ(self):
        generator = SecretGenerator(random_source=SeededRandomSource(seed=7))
        seen = {
            generator.generate(Mode.RANDOM, RandomOptions(length=16)) for _ in range(200)
        }
        assert len(seen) == 200

    def test_system_source_calls_differ(self):
        generator = SecretGenerator()
        first = [generator.generate(Mode.RANDOM, RandomOptions(length=20)) for _ in range(50)]
        assert len(set(first)) == 50
