"""
Passphrase Word List
=====================

An immutable, ordered vocabulary for MEMORABLE passphrases. The generator
only needs ``len()`` and :meth:`WordList.word_at`; where the words come
from (the bundled list, a user file, an in-memory iterable) is decided
by the caller.

File format: one word per line, UTF-8. Blank lines and lines starting
with ``#`` are skipped; surrounding whitespace is stripped. Lines holding
more than one word (``ice cream``) are skipped as well, since a
passphrase is split back into its words on single spaces.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator

from forge.core.errors import EmptyWordListError, UnusableWordListError

_BUNDLED_RESOURCE = "data/wordlist.txt"


class WordList:
    """Ordered, non-empty sequence of words.

    Raises:
        EmptyWordListError: If *words* contains no usable entries.
        UnusableWordListError: If an entry is empty or contains whitespace.
    """

    __slots__ = ("_words", "source")

    def __init__(self, words: Iterable[str], source: str = "<memory>") -> None:
        self._words: tuple[str, ...] = tuple(words)
        self.source = source
        for word in self._words:
            if not word or word != "".join(word.split()):
                raise UnusableWordListError(
                    f"Word list {source} holds {word!r}, which is not a single word"
                )
        if not self._words:
            raise EmptyWordListError(f"Word list {source} is empty")

    # ------------------------------------------------------------------ #
    #  Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<memory>") -> WordList:
        """Build a word list from raw lines, skipping blanks and comments."""
        words = []
        for line in lines:
            word = line.strip()
            if word and not word.startswith("#") and len(word.split()) == 1:
                words.append(word)
        return cls(words, source=source)

    @classmethod
    def from_file(cls, path: str | Path) -> WordList:
        """Load a word list file (see module docstring for the format).

        Raises:
            UnusableWordListError: If the file is missing, unreadable or not UTF-8.
        """
        path = Path(path)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise UnusableWordListError(f"Cannot read word list {path}: {exc}") from exc
        return cls.from_lines(lines, source=str(path))

    @classmethod
    def bundled(cls) -> WordList:
        """Load the English word list shipped inside the package."""
        resource = resources.files("forge").joinpath(_BUNDLED_RESOURCE)
        text = resource.read_text(encoding="utf-8")
        return cls.from_lines(text.splitlines(), source=f"forge/{_BUNDLED_RESOURCE}")

    # ------------------------------------------------------------------ #
    #  Access
    # ------------------------------------------------------------------ #

    def word_at(self, index: int) -> str:
        """Return the word at *index* (``0 <= index < len(self)``)."""
        if not 0 <= index < len(self._words):
            raise IndexError(
                f"Word index {index} outside [0, {len(self._words) - 1}]"
            )
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"WordList(source={self.source!r}, words={len(self._words)})"
