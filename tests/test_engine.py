"""Tests for the ForgeEngine facade and the module-level helpers."""

from __future__ import annotations

import logging
import secrets

import pytest

import forge
from shared.config import ForgeConfig, GlobalConfig
from forge.core.engine import ForgeEngine
from forge.core.errors import (
    ConfigurationError,
    EntropySourceUnavailableError,
    InvalidModeError,
    InvalidOptionsError,
)
from forge.core.models import (
    MemorableOptions,
    Mode,
    PinOptions,
    RandomOptions,
    StrengthLabel,
)
from forge.core.wordlist import WordList


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestGenerate:
    def test_random(self, engine):
        secret = engine.generate(Mode.RANDOM, RandomOptions(length=24))
        assert len(secret) == 24

    def test_mode_given_as_string(self, engine):
        secret = engine.generate("pin", PinOptions(digit_count=6))
        assert secret.isdigit() and len(secret) == 6

    def test_unknown_mode(self, engine):
        with pytest.raises(InvalidModeError):
            engine.generate("BOGUS", RandomOptions())

    def test_negative_length(self, engine):
        with pytest.raises(InvalidOptionsError):
            engine.generate(Mode.RANDOM, RandomOptions(length=-5))

    def test_injected_wordlist(self, seeded_source):
        engine = ForgeEngine(random_source=seeded_source, wordlist=WordList(["fjord"]))
        assert engine.generate(Mode.MEMORABLE, MemorableOptions(word_count=2)) == "fjord fjord"

    def test_wordlist_from_config_path(self, tmp_path, seeded_source):
        path = tmp_path / "words.txt"
        path.write_text("glacier\n", encoding="utf-8")
        config = ForgeConfig()
        config.generator.wordlist_path = str(path)
        engine = ForgeEngine(config, random_source=seeded_source)
        assert engine.generate(Mode.MEMORABLE, MemorableOptions(word_count=3)) == (
            "glacier glacier glacier"
        )

    def test_missing_configured_wordlist(self, tmp_path, seeded_source):
        config = ForgeConfig()
        config.generator.wordlist_path = str(tmp_path / "absent.txt")
        engine = ForgeEngine(config, random_source=seeded_source)
        with pytest.raises(ConfigurationError):
            engine.generate(Mode.MEMORABLE, MemorableOptions(word_count=3))

    def test_shared_logger_keeps_handlers(self, seeded_source):
        first = ForgeEngine(random_source=seeded_source)
        handlers = list(first.logger.underlying.handlers)
        second = ForgeEngine(
            random_source=seeded_source, wordlist=WordList(["fjord"]), logger=first.logger
        )
        assert second.logger is first.logger
        assert first.logger.underlying.handlers == handlers

    def test_entropy_source_unavailable(self, monkeypatch):
        def broken(n):
            raise NotImplementedError

        monkeypatch.setattr(secrets, "token_bytes", broken)
        with pytest.raises(EntropySourceUnavailableError):
            ForgeEngine().generate(Mode.PIN, PinOptions())


class TestClassify:
    def test_classify(self, engine):
        assert engine.classify(Mode.PIN, "8068") == StrengthLabel.GOOD
        assert engine.classify("RANDOM", "abcdefghijklmnop") == StrengthLabel.STRONG

    def test_invalid_mode(self, engine):
        with pytest.raises(InvalidModeError):
            engine.classify("HEX", "abc")

    def test_shannon_entropy(self, engine):
        assert engine.shannon_entropy("ab") == pytest.approx(1.0)
        assert engine.shannon_entropy("") == 0.0

    def test_generate_with_report(self, engine):
        secret, report = engine.generate_with_report(Mode.RANDOM, RandomOptions(length=32))
        assert report.length == len(secret) == 32
        assert report.label == engine.classify(Mode.RANDOM, secret)


class TestParseOptions:
    def test_random(self):
        options = ForgeEngine.parse_options({"mode": "RANDOM", "length": 20})
        assert isinstance(options, RandomOptions)
        assert options.length == 20
        assert options.include_symbols is True

    def test_memorable(self):
        options = ForgeEngine.parse_options({"mode": "MEMORABLE", "word_count": 5})
        assert isinstance(options, MemorableOptions)
        assert options.word_count == 5

    @pytest.mark.parametrize(
        "data",
        [
            {"mode": "HEX", "length": 8},
            {"length": 8},
            {"mode": "PIN", "length": 8},
            {"mode": "PIN", "digit_count": "many"},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(InvalidOptionsError):
            ForgeEngine.parse_options(data)


class TestCheckSource:
    def test_defaults_to_full_alphabet(self, engine):
        result = engine.check_source(samples=500)
        assert result.range_size == len(engine.generator.alphabet_builder.build(True, True))
        assert len(result.tests) == 3

    def test_explicit_range(self, engine):
        assert engine.check_source(samples=500, range_size=10).range_size == 10


class TestNoSecretInLogs:
    def test_generated_secret_never_logged(self, seeded_source):
        config = ForgeConfig(global_settings=GlobalConfig(debug=True))
        engine = ForgeEngine(config, random_source=seeded_source)
        handler = _ListHandler()
        engine.logger.underlying.addHandler(handler)

        secret = engine.generate(Mode.RANDOM, RandomOptions(length=40))
        engine.classify(Mode.RANDOM, secret)

        assert handler.records
        for record in handler.records:
            assert secret not in record.getMessage()
            assert secret not in repr(getattr(record, "forge_context", {}))


class TestModuleHelpers:
    def test_generate_and_classify(self):
        secret = forge.generate(Mode.PIN, PinOptions(digit_count=8))
        assert len(secret) == 8
        assert forge.classify(Mode.PIN, secret) in set(StrengthLabel)
        assert forge.shannon_entropy("aaaa") == 0.0
