# apps/cli/play.py
"""
Terminal front end for wordletui.

This script:
  1) Builds the game configuration (environment, then CLI flags).
  2) Loads the vocabulary; a missing or empty list aborts before the screen
     is taken over.
  3) Runs the curses loop: keys become events, events go to the engine, and
     every frame is drawn from a fresh snapshot.

Keys: a-z type, Backspace delete, Enter submit,
      Ctrl-V reveal word, Ctrl-R new word, Ctrl-Q quit.
"""

from __future__ import annotations

import argparse
import curses
import logging
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

from wordletui.config import LOG_LEVELS, GameConfig
from wordletui.datasets import VocabularyError, WordSource, default_words_path
from wordletui.engine import ABSENT, CORRECT, PRESENT
from wordletui.game import Event, GameEngine, GameSnapshot, Outcome, dispatch
from wordletui.utils.game_logger import configure_logging

logger = logging.getLogger("wordletui.cli")

KEY_CTRL_Q = 17
KEY_CTRL_R = 18
KEY_CTRL_V = 22

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

# Color pair indices
COLOR_TITLE = 1
COLOR_CORRECT = 2
COLOR_PRESENT = 3
COLOR_ABSENT = 4
COLOR_BORDER = 5
COLOR_STATUS = 6
COLOR_WIN = 7
COLOR_LOSE = 8
COLOR_INPUT = 9


def key_to_event(ch: int) -> Optional[Tuple[Event, Optional[str]]]:
    """Translate a curses key code into (event, letter); None for unbound keys."""
    if ch == KEY_CTRL_Q:
        return Event.QUIT, None
    if ch == KEY_CTRL_R:
        return Event.RESET, None
    if ch == KEY_CTRL_V:
        return Event.REVEAL, None
    if ch in (curses.KEY_BACKSPACE, 127, 8):
        return Event.BACKSPACE, None
    if ch in (curses.KEY_ENTER, 10, 13):
        return Event.SUBMIT, None
    if 0 <= ch < 256 and chr(ch).isascii() and chr(ch).isalpha():
        return Event.LETTER, chr(ch).lower()
    return None


def status_message(snap: GameSnapshot) -> Tuple[str, int]:
    """Message line text and its color pair for a snapshot."""
    if snap.last_error:
        return snap.last_error, COLOR_LOSE
    if snap.outcome is Outcome.WON:
        return f"Brilliant! You got it in {snap.guesses_used}! Ctrl-R for a new word.", COLOR_WIN
    if snap.outcome is Outcome.LOST:
        return f"The word was \"{snap.target_word.upper()}\". Ctrl-R for a new word.", COLOR_LOSE
    remaining = snap.max_rounds - snap.round
    return f"Guess a {snap.word_length}-letter word! {remaining} guess{'es' if remaining != 1 else ''} left.", COLOR_STATUS


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
def init_colors():
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_CORRECT, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(COLOR_PRESENT, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(COLOR_ABSENT, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(COLOR_BORDER, curses.COLOR_BLUE, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_LOSE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_INPUT, curses.COLOR_CYAN, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that ignores curses errors at the screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def code_attr(code: Optional[str]) -> int:
    if code == CORRECT:
        return curses.color_pair(COLOR_CORRECT) | curses.A_BOLD
    if code == PRESENT:
        return curses.color_pair(COLOR_PRESENT) | curses.A_BOLD
    if code == ABSENT:
        return curses.color_pair(COLOR_ABSENT)
    return curses.color_pair(COLOR_BORDER) | curses.A_BOLD


def draw_grid(win, y, x, snap: GameSnapshot):
    for r, row in enumerate(snap.rows):
        for col in range(snap.word_length):
            cx = x + col * 5
            letter = row.letters[col].upper() if col < len(row.letters) else None
            if row.feedback is not None:
                safe_addstr(win, y + r * 2, cx, f" {letter} ", code_attr(row.feedback[col]))
            elif row.active:
                cell = f" {letter} " if letter else " _ "
                safe_addstr(win, y + r * 2, cx, cell,
                            curses.color_pair(COLOR_INPUT) | curses.A_BOLD)
            else:
                safe_addstr(win, y + r * 2, cx, " · ", curses.color_pair(COLOR_STATUS))


def draw_keyboard(win, y, x, snap: GameSnapshot):
    for ri, row in enumerate(KEYBOARD_ROWS):
        for ci, letter in enumerate(row):
            cx = x + ri * 2 + ci * 4
            safe_addstr(win, y + ri * 2, cx, f" {letter.upper()} ",
                        code_attr(snap.letter_states.get(letter)))


def draw(stdscr, snap: GameSnapshot):
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    title = " Wordle TUI "
    safe_addstr(stdscr, 0, 0, "═" * width, curses.color_pair(COLOR_BORDER))
    safe_addstr(stdscr, 0, max(0, (width - len(title)) // 2), title,
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)

    grid_x = max(0, (width - snap.word_length * 5) // 2)
    draw_grid(stdscr, 2, grid_x, snap)

    below = 2 + snap.max_rounds * 2
    if snap.target_word:
        word = snap.target_word.upper()
        safe_addstr(stdscr, below, max(0, (width - len(word)) // 2), word,
                    curses.color_pair(COLOR_LOSE) | curses.A_UNDERLINE | curses.A_BOLD)

    draw_keyboard(stdscr, below + 2, max(0, (width - 42) // 2), snap)

    msg, color = status_message(snap)
    safe_addstr(stdscr, height - 3, max(0, (width - len(msg)) // 2), msg,
                curses.color_pair(color) | curses.A_BOLD)
    safe_addstr(stdscr, height - 2, 0, "═" * width, curses.color_pair(COLOR_BORDER))
    info = " Enter=Submit  Bksp=Delete  ^V=Reveal  ^R=New word  ^Q=Quit "
    safe_addstr(stdscr, height - 1, 0, info, curses.color_pair(COLOR_STATUS))
    score = f" Won: {snap.stats.games_won}/{snap.stats.games_played} "
    safe_addstr(stdscr, height - 1, max(0, width - len(score) - 1), score,
                curses.color_pair(COLOR_STATUS) | curses.A_BOLD)

    stdscr.refresh()


def run(stdscr, engine: GameEngine) -> None:
    """Main curses loop; returns on quit."""
    curses.raw()  # let Ctrl-Q / Ctrl-V through instead of flow control
    curses.curs_set(0)
    stdscr.keypad(True)
    init_colors()

    while True:
        draw(stdscr, engine.snapshot())
        mapped = key_to_event(stdscr.getch())
        if mapped is None:
            continue
        event, char = mapped
        if not dispatch(engine, event, char):
            break


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordletui — guess the five-letter word")
    ap.add_argument("--words", help=f"answers word list (default: bundled {default_words_path().name})")
    ap.add_argument("--allowed", help="extra accepted guesses, one per line")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible targets")
    ap.add_argument("--max-rounds", type=int, help="guesses per game (default 6)")
    ap.add_argument("--classic", action="store_true", default=None,
                    help="duplicate-aware scoring, as in classic Wordle")
    ap.add_argument("--log-dir", help="directory for game logs")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                    help="logging level for the game log")
    return ap


def load_config(argv: Optional[List[str]] = None) -> GameConfig:
    """Environment defaults, overridden by any flag given on the command line."""
    ap = build_parser()
    args = ap.parse_args(argv)
    overrides = {
        "words_path": args.words,
        "allowed_path": args.allowed,
        "seed": args.seed,
        "max_rounds": args.max_rounds,
        "duplicate_aware": args.classic,
        "log_dir": args.log_dir,
        "log_level": args.log_level,
    }
    try:
        cfg = GameConfig.from_env()
        # replace() re-runs the dataclass checks on the merged values
        return replace(cfg, **{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        ap.error(str(e))


def build_engine(cfg: GameConfig) -> GameEngine:
    """Load the vocabulary and start the first game. Raises VocabularyError."""
    words = WordSource.from_file(
        cfg.words_path or default_words_path(),
        word_length=cfg.word_length,
        allowed_path=cfg.allowed_path,
        seed=cfg.seed,
    )
    return GameEngine(words, max_rounds=cfg.max_rounds, word_length=cfg.word_length,
                      duplicate_aware=cfg.duplicate_aware)


def main(argv: Optional[List[str]] = None) -> int:
    cfg = load_config(argv)
    configure_logging(cfg.log_dir, cfg.log_level)

    try:
        engine = build_engine(cfg)
        curses.wrapper(run, engine)
    except VocabularyError as e:
        logger.error("cannot start game: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
