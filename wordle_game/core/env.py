# wordle_game/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

KNOWN_KEYS = [
    "WORDLE_WORD",
    "WORDLE_ATTEMPTS",
    "WORDLE_PLAIN",        # "1"/"true" disables colours
]

DEFAULT_WORD = "test"
DEFAULT_ATTEMPTS = 5


@dataclass(frozen=True)
class Settings:
    word: str
    attempts: int
    plain: bool


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which game keys are present.
    The target word is masked so --debug does not spoil the game.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = "…" if k == "WORDLE_WORD" else v
    return found


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def get_settings(
    word: str | None = None,
    attempts: int | None = None,
    plain: bool = False,
) -> Settings:
    """
    Build game settings (call load_env first).
    Explicit values win; the environment is only read for the missing ones.
    """
    if attempts is None:
        raw_attempts = os.getenv("WORDLE_ATTEMPTS")
        try:
            attempts = int(raw_attempts) if raw_attempts else DEFAULT_ATTEMPTS
        except ValueError as e:
            raise ValueError(f"WORDLE_ATTEMPTS must be an integer, got {raw_attempts!r}") from e
    return Settings(
        word=word or os.getenv("WORDLE_WORD") or DEFAULT_WORD,
        attempts=attempts,
        plain=plain or _as_bool(os.getenv("WORDLE_PLAIN")),
    )
