"""
Game configuration.

Rule constants live here as Final values. Runtime settings are read from the
environment with sensible defaults; command-line flags override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Optional

WORD_LENGTH: Final[int] = 5
MAX_ROUNDS: Final[int] = 6
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer; got {raw!r}") from e


@dataclass
class GameConfig:
    words_path: Optional[str] = None     # None -> bundled word list
    allowed_path: Optional[str] = None
    max_rounds: int = MAX_ROUNDS
    word_length: int = WORD_LENGTH
    duplicate_aware: bool = False
    seed: Optional[int] = None
    log_dir: str = "logs"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1; got {self.max_rounds}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative; got {self.seed}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "GameConfig":
        max_rounds = _env_int("WORDLE_MAX_ROUNDS")
        return cls(
            words_path=os.getenv("WORDLE_WORDS") or None,
            allowed_path=os.getenv("WORDLE_ALLOWED") or None,
            max_rounds=MAX_ROUNDS if max_rounds is None else max_rounds,
            duplicate_aware=_env_bool("WORDLE_CLASSIC"),
            seed=_env_int("WORDLE_SEED"),
            log_dir=os.getenv("LOG_DIR", "logs"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
