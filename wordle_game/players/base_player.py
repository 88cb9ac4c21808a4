from __future__ import annotations
from typing import Protocol

from ..core.board import Board


class BasePlayer(Protocol):
    """Protocol defining the interface all guess sources must implement."""

    def get_play(self, board: Board) -> str:
        """
        Produce the next guess.

        Args:
            board: Current board, read-only. Players may inspect previous
                rows but must never modify the board.

        Returns:
            A guess whose length equals the board width. Players retry
            internally on malformed input; they never hand the session an
            invalid guess.
        """
        ...


PROMPT = "Insert your guess: "
INVALID_INPUT_MESSAGE = "Invalid input, try again"
READ_ERROR_MESSAGE = "There was an error while reading the input, try again"
