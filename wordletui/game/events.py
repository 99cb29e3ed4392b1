"""
Input events and their dispatch.

Each event maps to exactly one engine operation. The front end translates raw
keys into events; nothing here knows about terminals.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .engine import GameEngine


class Event(Enum):
    LETTER = "letter"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    REVEAL = "reveal"
    RESET = "reset"
    QUIT = "quit"


def dispatch(engine: GameEngine, event: Event, char: Optional[str] = None) -> bool:
    """
    Apply one event to the engine. Returns False when the loop should stop.

    RESET may raise EmptyVocabularyError; everything else is recoverable.
    """
    if event is Event.QUIT:
        return False
    if event is Event.LETTER:
        if char:
            engine.type_letter(char)
    elif event is Event.BACKSPACE:
        engine.backspace()
    elif event is Event.SUBMIT:
        engine.submit_guess()
    elif event is Event.REVEAL:
        engine.reveal_toggle()
    elif event is Event.RESET:
        engine.reset()
    return True
