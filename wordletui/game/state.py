"""
Game data models.

GameState is the mutable record owned by a single GameEngine. Renderers never
see it directly: they receive a GameSnapshot, a frozen copy with only what a
screen needs (the target is hidden unless revealed or the game was lost).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class GameState:
    target_word: str
    round: int = 0
    guess_history: Dict[int, str] = field(default_factory=dict)
    feedback_history: Dict[int, str] = field(default_factory=dict)
    current_input: str = ""
    outcome: Outcome = Outcome.IN_PROGRESS
    last_error: Optional[str] = None
    reveal_answer: bool = False

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class SessionStats:
    """Finished games in this process; never written to disk."""
    games_played: int = 0
    games_won: int = 0


@dataclass(frozen=True)
class RowView:
    """One grid row. `feedback` is None unless the row was submitted."""
    letters: str = ""
    feedback: Optional[str] = None
    active: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    rows: Tuple[RowView, ...]
    round: int
    max_rounds: int
    word_length: int
    current_input: str
    outcome: Outcome
    last_error: Optional[str]
    reveal_answer: bool
    target_word: Optional[str]
    letter_states: Mapping[str, str]     # read-only view
    stats: SessionStats

    @property
    def guesses_used(self) -> int:
        return sum(1 for r in self.rows if r.feedback is not None)
