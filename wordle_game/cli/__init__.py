"""
CLI commands for the word game.
"""

from .play import app, main as play

__all__ = [
    "app",
    "play",
]
