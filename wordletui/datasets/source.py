"""
Word source: the vocabulary a game draws its target from and checks guesses
against.

Two lists are involved:
  - answers : words that may be picked as the target
  - allowed : extra words accepted as guesses (optional; answers are always
              accepted too)

Words are stored lowercase; `contains` normalises its argument the same way,
so lookups are case-insensitive. Lines that are not exactly N alphabetic
letters are dropped at load time and reported once as a warning.

The vocabulary is read once and never mutated afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

import numpy as np

from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = "fiveletterwords.txt"


class VocabularyError(Exception):
    """The vocabulary could not be loaded; no game can be played."""


class EmptyVocabularyError(VocabularyError):
    """The vocabulary holds no usable answers."""


def default_words_path() -> Path:
    """Path of the word list shipped with the package."""
    return Path(__file__).parent / "data" / DEFAULT_WORDS_FILE


def _clean(words: Iterable[str], N: int) -> Tuple[List[str], int]:
    """Normalise words; return (kept words in input order, dropped count)."""
    kept: List[str] = []
    seen = set()
    dropped = 0
    for raw in words:
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) != N or not w.isalpha():
            dropped += 1
            continue
        if w not in seen:
            seen.add(w)
            kept.append(w)
    return kept, dropped


class WordSource:
    """Supplies random targets and answers membership queries."""

    def __init__(self, words: Iterable[str], *, word_length: int = 5,
                 allowed: Iterable[str] | None = None, seed: int | None = None):
        self.N = int(word_length)
        self.rng = np.random.default_rng(seed)

        self._answers, dropped = _clean(words, self.N)
        extra, dropped_allowed = _clean(allowed or [], self.N)
        self._known: FrozenSet[str] = frozenset(self._answers) | frozenset(extra)

        if dropped or dropped_allowed:
            logger.warning("dropped %d answer and %d allowed line(s) that are not %d letters",
                           dropped, dropped_allowed, self.N)

    @classmethod
    def from_file(cls, path: Path | str, *, word_length: int = 5,
                  allowed_path: Path | str | None = None,
                  seed: int | None = None) -> "WordSource":
        """
        Load answers (and optionally extra allowed guesses) from word-list files.

        Raises:
          VocabularyError if a file is missing or unreadable.
        """
        try:
            words = read_lines(path)
            allowed = read_lines(allowed_path) if allowed_path else None
        except (OSError, UnicodeDecodeError) as e:
            raise VocabularyError(f"cannot read word list: {e}") from e

        source = cls(words, word_length=word_length, allowed=allowed, seed=seed)
        logger.info("loaded %d answers (%d known words) from %s",
                    len(source), source.known_count, path)
        return source

    def __len__(self) -> int:
        return len(self._answers)

    @property
    def known_count(self) -> int:
        return len(self._known)

    def pick_random_word(self) -> str:
        """
        Return a uniformly random answer.

        Raises:
          EmptyVocabularyError if there is nothing to pick from.
        """
        if not self._answers:
            raise EmptyVocabularyError("word list contains no usable words")
        return self._answers[int(self.rng.integers(len(self._answers)))]

    def contains(self, word: str) -> bool:
        return word.strip().lower() in self._known

