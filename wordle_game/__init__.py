"""
Word guessing game - core modules.
"""

from .evaluation import evaluate, is_win
from .game_loop import GameSession, GameState, GameSummary, play_game

__all__ = [
    "evaluate",
    "is_win",
    "GameSession",
    "GameState",
    "GameSummary",
    "play_game",
]
