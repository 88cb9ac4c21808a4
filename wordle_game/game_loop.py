"""
Core game loop: one session from the empty board to a win or a loss.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .core.board import Board, EvaluatedRow
from .evaluation import evaluate, is_win
from .players.base_player import BasePlayer
from .render import BaseRenderer, NullRenderer
from .utils import fold_case, normalize_guess

logger = logging.getLogger(__name__)


class GameState(Enum):
    AWAITING_GUESS = "AWAITING_GUESS"
    EVALUATED = "EVALUATED"
    FINISHED = "FINISHED"


@dataclass(frozen=True)
class GameSummary:
    """Final outcome of a session."""
    won: bool
    attempts_used: int
    word: str


class GameSession:
    """
    Owns the target word, the attempt budget and the board, and drives the
    turn loop against a player.

    The player guarantees every guess has the target's length; the session
    does not validate guesses, and a wrong length is fatal in `evaluate`.
    """

    def __init__(
        self,
        word: str,
        number_of_attempts: int,
        player: BasePlayer,
        renderer: Optional[BaseRenderer] = None,
    ):
        if not word:
            raise ValueError("Target word must not be empty")
        if number_of_attempts <= 0:
            raise ValueError(f"Number of attempts must be positive, got {number_of_attempts}")

        self.word = fold_case(word)
        self.number_of_attempts = number_of_attempts
        self.attempts_left = number_of_attempts
        self.board = Board(len(self.word), number_of_attempts)
        self.player = player
        self.renderer = renderer or NullRenderer()
        self.state = GameState.AWAITING_GUESS
        self.trace: List[Dict[str, Any]] = []

    @property
    def current_word_index(self) -> int:
        return self.number_of_attempts - self.attempts_left

    @property
    def finished(self) -> bool:
        return self.state is GameState.FINISHED

    def play_turn(self) -> EvaluatedRow:
        """Request one guess, evaluate it, record it and update the state."""
        if self.finished:
            raise RuntimeError("Game is already finished")

        guess = normalize_guess(self.player.get_play(self.board))
        diff = EvaluatedRow(evaluate(self.word, guess))
        turn = self.current_word_index + 1

        self.board.add_word(diff, self.current_word_index)
        self.state = GameState.EVALUATED
        self.renderer.render(self.board)

        if is_win(self.word, guess):
            self.state = GameState.FINISHED
        else:
            self.attempts_left -= 1
            if self.attempts_left == 0:
                self.state = GameState.FINISHED
            else:
                self.state = GameState.AWAITING_GUESS

        logger.debug(
            "Turn %d: guess=%r attempts_left=%d state=%s",
            turn, guess, self.attempts_left, self.state.value,
        )
        self.trace.append({
            "turn": turn,
            "guess": guess,
            "feedback": [s.status.value for s in diff.slots],
            "attempts_left": self.attempts_left,
        })
        return diff

    def summary(self) -> GameSummary:
        if not self.finished:
            raise RuntimeError("Game is still in progress")
        return GameSummary(
            won=self.attempts_left > 0,
            attempts_used=self.board.filled,
            word=self.word,
        )

    def run(self) -> GameSummary:
        """Play until the word is guessed or the attempts run out."""
        self.renderer.render(self.board)
        while not self.finished:
            self.play_turn()

        result = self.summary()
        logger.info(
            "Game over: %s after %d/%d attempts",
            "won" if result.won else "lost",
            result.attempts_used,
            self.number_of_attempts,
        )
        return result


def play_game(
    word: str,
    number_of_attempts: int,
    player: BasePlayer,
    renderer: Optional[BaseRenderer] = None,
) -> GameSummary:
    """
    Play a single game.

    Args:
        word: Target word (compared lower-cased)
        number_of_attempts: Guess budget, must be positive
        player: Guess source
        renderer: Board presentation (defaults to no output)

    Returns:
        GameSummary with `won`, `attempts_used` and `word`
    """
    return GameSession(word, number_of_attempts, player, renderer).run()
