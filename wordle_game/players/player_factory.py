from __future__ import annotations
from typing import Dict

from .base_player import BasePlayer
from .human_player import HumanPlayer
from .scripted_player import ScriptedPlayer


# Player kinds understood by get_player
PLAYER_PRESETS: Dict[str, str] = {
    "human": "Interactive guesses typed on the terminal",
    "scripted": "Guesses read from a text file, one per line",
}


def get_player(kind: str, word_length: int, script: str | None = None) -> BasePlayer:
    """
    Factory function to get the appropriate player.

    Args:
        kind: One of PLAYER_PRESETS
        word_length: Length every guess must have
        script: Path to the guesses file (required for "scripted")

    Returns:
        A player implementing BasePlayer

    Raises:
        ValueError: If the kind is unknown or a script is missing
    """
    if kind == "human":
        return HumanPlayer(word_length)

    elif kind == "scripted":
        if not script:
            raise ValueError("A scripted player needs a script file")
        return ScriptedPlayer.from_file(script, word_length=word_length)

    else:
        raise ValueError(
            f"Unknown player kind: {kind}\n"
            f"Supported: {', '.join(PLAYER_PRESETS)}"
        )
