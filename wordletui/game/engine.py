"""
Game engine: the single owner of a GameState.

Transitions (one guess at a time):
  IN_PROGRESS --submit, all 'G'-------------------------> WON   (round unchanged)
  IN_PROGRESS --submit, not a win, last round-----------> LOST
  IN_PROGRESS --submit, not a win, rounds left----------> IN_PROGRESS (round += 1)
  IN_PROGRESS --submit, wrong length / unknown word-----> IN_PROGRESS (last_error set)

Rejected guesses never raise; they only set `last_error`. The one error that
escapes is a vocabulary failure while picking a target (construction/reset).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Protocol

from wordletui.config import MAX_ROUNDS, WORD_LENGTH
from wordletui.datasets.source import VocabularyError
from wordletui.engine import check_guess, is_win, merge_letter_states, score
from .state import GameSnapshot, GameState, Outcome, RowView, SessionStats

logger = logging.getLogger(__name__)


class WordProvider(Protocol):
    def pick_random_word(self) -> str: ...

    def contains(self, word: str) -> bool: ...


class GameEngine:
    def __init__(self, words: WordProvider, *, max_rounds: int = MAX_ROUNDS,
                 word_length: int = WORD_LENGTH, duplicate_aware: bool = False):
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1; got {max_rounds}")
        self.words = words
        self.max_rounds = int(max_rounds)
        self.word_length = int(word_length)
        self.duplicate_aware = duplicate_aware
        self.stats = SessionStats()
        self.state = self._new_state()

    def _new_state(self) -> GameState:
        target = self.words.pick_random_word()
        if len(target) != self.word_length:
            raise VocabularyError(
                f"picked target {target!r} is not {self.word_length} letters long")
        logger.info("new game started (%d rounds, %s scoring)", self.max_rounds,
                    "classic" if self.duplicate_aware else "simple")
        return GameState(target_word=target)

    # ---- input operations ----

    def type_letter(self, c: str) -> None:
        """Append a letter to the current input; ignored when full or finished."""
        s = self.state
        if s.finished or len(s.current_input) >= self.word_length:
            return
        if len(c) != 1 or not c.isalpha():
            return
        s.current_input += c.lower()

    def backspace(self) -> None:
        s = self.state
        if s.finished or not s.current_input:
            return
        s.current_input = s.current_input[:-1]

    def submit_guess(self) -> GameSnapshot:
        """
        Validate, score and record the current input.

        A rejected guess leaves everything but `last_error` untouched. An
        accepted one is written to both histories and moves the game on
        (win, loss, or next round). Submitting after the game has ended is a
        no-op.
        """
        s = self.state
        if s.finished:
            return self.snapshot()

        guess = s.current_input
        error = check_guess(guess, self.words.contains, self.word_length)
        if error is not None:
            logger.debug("rejected %r in round %d: %s", guess, s.round, error)
            s.last_error = error
            return self.snapshot()

        pattern = score(guess, s.target_word, duplicate_aware=self.duplicate_aware)
        s.guess_history[s.round] = guess
        s.feedback_history[s.round] = pattern
        s.last_error = None
        logger.debug("round %d: %s -> %s", s.round, guess, pattern)

        if is_win(pattern):
            s.outcome = Outcome.WON
            self._record_result(won=True)
            logger.info("game won in %d guess(es)", s.round + 1)
        elif s.round == self.max_rounds - 1:
            s.outcome = Outcome.LOST
            self._record_result(won=False)
            logger.info("game lost; target was %s", s.target_word)
        else:
            s.round += 1
            s.current_input = ""

        return self.snapshot()

    def reveal_toggle(self) -> None:
        self.state.reveal_answer = not self.state.reveal_answer

    def reset(self) -> None:
        """
        Start over with a fresh target. Session stats survive; the game being
        abandoned is not counted. Raises EmptyVocabularyError like the word
        source does.
        """
        self.state = self._new_state()

    def _record_result(self, *, won: bool) -> None:
        self.stats = replace(
            self.stats,
            games_played=self.stats.games_played + 1,
            games_won=self.stats.games_won + (1 if won else 0),
        )

    # ---- read side ----

    def snapshot(self) -> GameSnapshot:
        s = self.state
        rows = []
        for r in range(self.max_rounds):
            if r in s.guess_history:
                rows.append(RowView(letters=s.guess_history[r], feedback=s.feedback_history[r]))
            elif r == s.round and not s.finished:
                rows.append(RowView(letters=s.current_input, active=True))
            else:
                rows.append(RowView())

        letters: Dict[str, str] = {}
        for r, guess in s.guess_history.items():
            merge_letter_states(letters, guess, s.feedback_history[r])

        show_target = s.reveal_answer or s.outcome is Outcome.LOST
        return GameSnapshot(
            rows=tuple(rows),
            round=s.round,
            max_rounds=self.max_rounds,
            word_length=self.word_length,
            current_input=s.current_input,
            outcome=s.outcome,
            last_error=s.last_error,
            reveal_answer=s.reveal_answer,
            target_word=s.target_word if show_target else None,
            letter_states=MappingProxyType(letters),
            stats=self.stats,
        )
