from __future__ import annotations
import logging
from typing import Callable, Optional

from rich.console import Console
from tenacity import Retrying, retry_if_exception_type

from ..core.board import Board
from ..utils import InvalidGuessError, check_guess, is_valid_length
from .base_player import INVALID_INPUT_MESSAGE, PROMPT, READ_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class HumanPlayer:
    """Interactive player reading guesses from the terminal."""

    def __init__(
        self,
        word_length: int,
        input_fn: Optional[Callable[[str], str]] = None,
        console: Console | None = None,
    ):
        """
        Initialize a human player.

        Args:
            word_length: Required guess length (the target word's length)
            input_fn: Line reader taking a prompt (defaults to console.input)
            console: Rich console used for prompts and warnings
        """
        self.word_length = word_length
        self.console = console or Console()
        self.input_fn = input_fn or self.console.input

    def validate_input(self, text: str) -> bool:
        return is_valid_length(text, self.word_length)

    def get_play(self, board: Board) -> str:
        # Retry forever on bad input or read errors; EOF and Ctrl-C propagate.
        for attempt in Retrying(
            retry=retry_if_exception_type((InvalidGuessError, OSError)),
            reraise=True,
        ):
            with attempt:
                guess = self._read_guess()
        return guess

    def _read_guess(self) -> str:
        try:
            raw = self.input_fn(PROMPT)
        except OSError as e:
            logger.debug("Failed to read guess: %s", e)
            self.console.print(f"[red]{READ_ERROR_MESSAGE}[/]")
            raise

        try:
            return check_guess(raw, self.word_length)
        except InvalidGuessError as e:
            logger.debug("Rejected guess: %s", e)
            self.console.print(f"[yellow]{INVALID_INPUT_MESSAGE}[/]")
            raise
