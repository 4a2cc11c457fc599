"""
Forge Engine
=============

Facade over the generator, the strength classifier and the random source
self-test. Callers (the CLI, or any integrating application) supply a
mode plus options and receive the secret and its strength label.

The engine is synchronous and holds no per-call state, so one instance
may be shared across threads. It logs modes, sizes and labels; it never
logs, caches or persists a secret.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from shared.config import ForgeConfig
from shared.logger import ForgeLogger
from forge.analyzers.entropy import EntropyScorer
from forge.analyzers.pin_strength import PinStrengthAnalyzer
from forge.analyzers.strength import StrengthClassifier
from forge.analyzers.uniformity import UniformityTester
from forge.core.alphabet import AlphabetBuilder
from forge.core.errors import (
    EntropySourceUnavailableError,
    InvalidModeError,
    InvalidOptionsError,
)
from forge.core.generator import SecretGenerator
from forge.core.models import (
    GenerationOptions,
    Mode,
    StrengthLabel,
    StrengthReport,
    UniformityResult,
)
from forge.core.random_source import SecureRandomSource, SystemRandomSource
from forge.core.wordlist import WordList

_OPTIONS_ADAPTER: TypeAdapter[GenerationOptions] = TypeAdapter(GenerationOptions)


class ForgeEngine:
    """Generate and classify secrets.

    Usage::

        engine = ForgeEngine()
        secret = engine.generate(Mode.RANDOM, RandomOptions(length=20))
        label = engine.classify(Mode.RANDOM, secret)

    Engines built with the same configuration should share one logger:
    a new :class:`ForgeLogger` replaces the handlers of the process-wide
    ``secretforge.engine`` logger.

    Attributes:
        config: SecretForge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        random_source: Optional[SecureRandomSource] = None,
        wordlist: Optional[WordList] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        gs = self.config.global_settings
        self.logger = logger or ForgeLogger(
            "engine",
            log_level="DEBUG" if gs.debug else gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
        )

        self.random_source: SecureRandomSource = random_source or SystemRandomSource()
        self.scorer = EntropyScorer()
        self.generator = SecretGenerator(
            random_source=self.random_source,
            alphabet_builder=AlphabetBuilder(self.config.generator),
            wordlist=wordlist or self._load_wordlist,
        )
        self.classifier = StrengthClassifier(
            config=self.config.strength,
            scorer=self.scorer,
            pin_analyzer=PinStrengthAnalyzer(self.config.strength),
        )
        self._uniformity_tester = UniformityTester()

    # ------------------------------------------------------------------ #
    #  Core operations
    # ------------------------------------------------------------------ #

    def generate(self, mode: Mode | str, options: GenerationOptions) -> str:
        """Generate one secret.

        Raises:
            InvalidOptionsError: Negative count or mismatched options.
            InvalidModeError: Unknown *mode*.
            EntropySourceUnavailableError: The CSPRNG cannot be used.
        """
        mode = self._coerce_mode(mode)
        with self.logger.operation("generate"):
            try:
                secret = self.generator.generate(mode, options)
            except EntropySourceUnavailableError:
                self.logger.exception("Refusing to generate a %s secret", mode.value)
                raise
            self.logger.debug(
                "Generated %s secret of %d characters",
                mode.value,
                len(secret),
                mode=mode.value,
            )
            return secret

    def classify(self, mode: Mode | str, secret: str) -> StrengthLabel:
        """Return the strength label for *secret* under *mode*."""
        mode = self._coerce_mode(mode)
        label = self.classifier.classify(mode, secret)
        with self.logger.operation("classify"):
            self.logger.debug(
                "Classified %s secret as %s", mode.value, label.value,
                length=len(secret),
            )
        return label

    def shannon_entropy(self, secret: str) -> float:
        """Shannon entropy of *secret* in bits per character."""
        return self.scorer.shannon_entropy(secret)

    # ------------------------------------------------------------------ #
    #  Extended operations
    # ------------------------------------------------------------------ #

    def assess(self, mode: Mode | str, secret: str) -> StrengthReport:
        """Classify *secret* and return the full strength report."""
        return self.classifier.assess(self._coerce_mode(mode), secret)

    def generate_with_report(
        self, mode: Mode | str, options: GenerationOptions
    ) -> tuple[str, StrengthReport]:
        """Generate a secret and assess it in one call."""
        mode = self._coerce_mode(mode)
        secret = self.generate(mode, options)
        return secret, self.assess(mode, secret)

    def check_source(
        self, samples: int = 10_000, range_size: Optional[int] = None
    ) -> UniformityResult:
        """Run the statistical self-test against this engine's random source.

        *range_size* defaults to the size of the full RANDOM alphabet.
        """
        if range_size is None:
            range_size = len(self.generator.alphabet_builder.build(True, True))
        with self.logger.operation("self_test"), self.logger.timed("random source self-test"):
            result = self._uniformity_tester.run(
                self.random_source, samples=samples, range_size=range_size
            )
        if not result.overall_pass:
            self.logger.warning(
                "Random source self-test failed: %s", result.assessment,
                source=result.source,
            )
        return result

    @staticmethod
    def parse_options(data: dict[str, Any]) -> GenerationOptions:
        """Build an options model from a plain mapping tagged by ``mode``.

        Raises:
            InvalidOptionsError: If the mapping does not describe valid options.
        """
        try:
            return _OPTIONS_ADAPTER.validate_python(data)
        except ValidationError as exc:
            raise InvalidOptionsError(str(exc)) from exc

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _load_wordlist(self) -> WordList:
        path = self.config.generator.wordlist_path
        wordlist = WordList.from_file(path) if path else WordList.bundled()
        self.logger.debug("Loaded word list %s (%d words)", wordlist.source, len(wordlist))
        return wordlist

    @staticmethod
    def _coerce_mode(mode: Mode | str) -> Mode:
        if isinstance(mode, Mode):
            return mode
        try:
            return Mode(str(mode).upper())
        except ValueError as exc:
            raise InvalidModeError(f"Unknown generation mode: {mode!r}") from exc
