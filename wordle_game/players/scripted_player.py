from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from ..core.board import Board
from ..utils import check_guess


class ScriptExhaustedError(RuntimeError):
    """The script ran out of guesses before the game ended."""


class ScriptedPlayer:
    """Plays a fixed list of guesses in order (bots, replays, tests)."""

    def __init__(self, guesses: Iterable[str], word_length: int | None = None):
        """
        Args:
            guesses: Guesses to play, first to last
            word_length: If given, every guess is checked against it up front

        Raises:
            InvalidGuessError: If a guess has the wrong length
        """
        self.guesses: List[str] = [g.strip() for g in guesses]
        if word_length is not None:
            self.guesses = [check_guess(g, word_length) for g in self.guesses]
        self._next = 0

    @classmethod
    def from_file(cls, path: str | Path, word_length: int | None = None) -> "ScriptedPlayer":
        """Load one guess per non-blank line."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls([line for line in lines if line.strip()], word_length=word_length)

    @property
    def remaining(self) -> int:
        return len(self.guesses) - self._next

    def get_play(self, board: Board) -> str:
        if self._next >= len(self.guesses):
            raise ScriptExhaustedError(
                f"Script exhausted after {len(self.guesses)} guesses"
            )
        guess = self.guesses[self._next]
        self._next += 1
        return guess
