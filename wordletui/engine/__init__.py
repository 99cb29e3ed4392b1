from .scoring import score, is_win, merge_letter_states, CORRECT, PRESENT, ABSENT
from .validation import check_guess, wrong_length_message, UNKNOWN_WORD

__all__ = [
    "score", "is_win", "merge_letter_states", "CORRECT", "PRESENT", "ABSENT",
    "check_guess", "wrong_length_message", "UNKNOWN_WORD",
]
