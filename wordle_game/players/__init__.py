"""
Guess sources for the word game.

A player is anything with `get_play(board) -> str`:
- HumanPlayer reads from the terminal and re-prompts on bad input
- ScriptedPlayer replays a fixed list of guesses (bots, tests)

Usage:
    from wordle_game.players import get_player

    player = get_player("human", word_length=5)
"""

from .base_player import BasePlayer
from .human_player import HumanPlayer
from .scripted_player import ScriptedPlayer, ScriptExhaustedError
from .player_factory import get_player, PLAYER_PRESETS

__all__ = [
    # Main functions
    "get_player",

    # Player classes
    "HumanPlayer",
    "ScriptedPlayer",
    "ScriptExhaustedError",

    # Base types
    "BasePlayer",

    # Constants
    "PLAYER_PRESETS",
]
