"""Tests for the PIN strength heuristic."""

from __future__ import annotations

import pytest

from shared.config import StrengthConfig
from forge.analyzers.pin_strength import PinStrengthAnalyzer
from forge.core.models import StrengthLabel


@pytest.fixture
def analyzer() -> PinStrengthAnalyzer:
    return PinStrengthAnalyzer()


class TestReferenceCases:
    @pytest.mark.parametrize(
        "pin, expected",
        [
            ("1111", StrengthLabel.WEAK),
            ("8068", StrengthLabel.GOOD),
            ("11111", StrengthLabel.GOOD),
        ],
    )
    def test_reference(self, analyzer, pin, expected):
        assert analyzer.calculate_strength(pin) == expected


class TestPinRules:
    @pytest.mark.parametrize("pin", ["1234", "0000", "1212", "6969", "4321"])
    def test_common_pins_are_weak(self, analyzer, pin):
        assert analyzer.calculate_strength(pin) == StrengthLabel.WEAK

    def test_sequential_four_digit_is_weak(self, analyzer):
        assert analyzer.calculate_strength("8901") == StrengthLabel.WEAK

    def test_short_pin_is_weak(self, analyzer):
        assert analyzer.calculate_strength("857") == StrengthLabel.WEAK
        assert analyzer.calculate_strength("") == StrengthLabel.WEAK

    def test_varied_six_digit_is_good(self, analyzer):
        assert analyzer.calculate_strength("804215") == StrengthLabel.GOOD

    def test_long_varied_pin_is_strong(self, analyzer):
        assert analyzer.calculate_strength("27051983") == StrengthLabel.STRONG
        assert analyzer.calculate_strength("492817360515") == StrengthLabel.STRONG

    def test_long_repeating_pin_is_penalised(self, analyzer):
        assert analyzer.calculate_strength("12121212") == StrengthLabel.GOOD
        assert analyzer.calculate_strength("98765") == StrengthLabel.GOOD

    def test_never_very_weak(self, analyzer):
        for pin in ("", "0", "1111", "123", "12345678", "99999999"):
            assert analyzer.calculate_strength(pin) != StrengthLabel.VERY_WEAK

    def test_non_digit_input_does_not_fail(self, analyzer):
        assert analyzer.calculate_strength("abcd") == StrengthLabel.GOOD

    def test_custom_common_list(self):
        analyzer = PinStrengthAnalyzer(StrengthConfig(common_pins=["8068"]))
        assert analyzer.calculate_strength("8068") == StrengthLabel.WEAK


class TestPatternChecks:
    @pytest.mark.parametrize("pin", ["111", "1111", "11111", "1212", "121212", "12121"])
    def test_repeating_blocks(self, pin):
        assert PinStrengthAnalyzer.is_repeating_block(pin)

    @pytest.mark.parametrize("pin", ["", "1", "12", "8068", "123123", "1213"])
    def test_not_repeating_blocks(self, pin):
        assert not PinStrengthAnalyzer.is_repeating_block(pin)

    @pytest.mark.parametrize("pin", ["123", "1234", "8901", "98765", "2109"])
    def test_sequential(self, pin):
        assert PinStrengthAnalyzer.is_sequential(pin)

    @pytest.mark.parametrize("pin", ["12", "1243", "1111", "8068", "abc"])
    def test_not_sequential(self, pin):
        assert not PinStrengthAnalyzer.is_sequential(pin)
