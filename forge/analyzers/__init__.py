"""
Forge Analyzers
================

Scoring modules: character entropy, strength classification, the PIN
heuristic and the random source self-test.
"""

from forge.analyzers.entropy import EntropyScorer
from forge.analyzers.pin_strength import PinStrengthAnalyzer
from forge.analyzers.strength import StrengthClassifier
from forge.analyzers.uniformity import UniformityTester

__all__ = [
    "EntropyScorer",
    "PinStrengthAnalyzer",
    "StrengthClassifier",
    "UniformityTester",
]
