"""
Guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is accepted iff:
  - it has exact length N
  - the word source knows it

Rather than a bare bool, `check_guess` returns the message to show the
player, or None when the guess may be scored. The length check runs first,
so a short guess is never looked up in the vocabulary.
"""

from typing import Callable, Optional

UNKNOWN_WORD = "Word doesn't exist!"


def wrong_length_message(N: int) -> str:
    return f"Word must be {N} letters long!"


def check_guess(word: str, contains: Callable[[str], bool], N: int) -> Optional[str]:
    """
    Return a rejection message for `word`, or None if it is a valid guess.

    Args:
      word     : proposed guess (already normalised by the caller)
      contains : membership test, usually WordSource.contains
      N        : required word length
    """
    if len(word) != N:
        return wrong_length_message(N)
    if not contains(word):
        return UNKNOWN_WORD
    return None
