"""
Wordle-style scoring (feedback) for a single (guess, target) pair.

Conventions:
  - 'G' : correct = right letter in the right position
  - 'Y' : present = letter occurs in the target, but elsewhere
  - 'X' : absent  = letter not in the target

Two schemes are available:
  - single-pass (default): every position is judged on its own. A guessed
    letter is 'Y' whenever the target contains it anywhere, no matter how
    many times the guess repeats it.
  - duplicate-aware (classic Wordle): greens are marked first, then yellows
    are capped by how many unmatched copies of the letter the target still has.

Both are deterministic (same inputs -> same outputs).
"""

from collections import Counter
from typing import Dict, Literal

# Type alias for clarity; each pattern character is one of 'G', 'Y', 'X'
PatternChar = Literal["G", "Y", "X"]

CORRECT: PatternChar = "G"
PRESENT: PatternChar = "Y"
ABSENT: PatternChar = "X"

# Keyboard overlay never downgrades a letter: correct > present > absent
_PRIORITY = {ABSENT: 0, PRESENT: 1, CORRECT: 2}


def score(guess: str, target: str, *, duplicate_aware: bool = False) -> str:
    """
    Compute the feedback pattern for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); the caller validates length first, so a
        mismatch here is a programming error.

    Returns:
      - string of the same length composed only of 'G', 'Y', 'X'

    Examples:
      score("music", "mulch")                        -> "GGXXY"
      score("eerie", "crane")                        -> "YYYXG"
      score("eerie", "crane", duplicate_aware=True)  -> "XXYXG"
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    if duplicate_aware:
        return _score_two_pass(guess, target)

    pattern = []
    for g, t in zip(guess, target):
        if g == t:
            pattern.append(CORRECT)
        elif g in target:
            pattern.append(PRESENT)
        else:
            pattern.append(ABSENT)
    return "".join(pattern)


def _score_two_pass(guess: str, target: str) -> str:
    n = len(guess)
    pattern = [ABSENT] * n

    # Pass 1: mark greens and count the target letters left unmatched.
    remaining: Counter = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = CORRECT
        else:
            remaining[t] += 1

    # Pass 2: yellows only while the letter still has an unmatched copy.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)


def is_win(pattern: str) -> bool:
    """True only for a non-empty pattern made entirely of 'G'."""
    return bool(pattern) and all(c == CORRECT for c in pattern)


def merge_letter_states(letters: Dict[str, str], guess: str, pattern: str) -> Dict[str, str]:
    """
    Fold one scored guess into a letter -> best-code map (in place) and
    return it. A letter keeps its strongest code across guesses.
    """
    for ch, code in zip(guess, pattern):
        current = letters.get(ch)
        if current is None or _PRIORITY[code] > _PRIORITY[current]:
            letters[ch] = code
    return letters
