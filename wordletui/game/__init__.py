from .state import GameState, GameSnapshot, Outcome, RowView, SessionStats
from .engine import GameEngine, WordProvider
from .events import Event, dispatch

__all__ = [
    "GameState", "GameSnapshot", "Outcome", "RowView", "SessionStats",
    "GameEngine", "WordProvider", "Event", "dispatch",
]
