"""
Utility functions for guess handling and trace export.
"""

import pathlib
from typing import Any, Dict, Iterable

import orjson


class InvalidGuessError(ValueError):
    """Raised by players when input is not a structurally valid guess."""


def fold_case(text: str) -> str:
    """
    Lower-case letter by letter without changing the length.
    Letters whose lower case is longer than one character (e.g. "İ") are kept.
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def normalize_guess(text: str) -> str:
    """Normalize a guess for comparison: stripped and case-folded."""
    return fold_case(text.strip())


def is_valid_length(text: str, word_length: int) -> bool:
    return len(text) == word_length


def check_guess(text: str, word_length: int) -> str:
    """
    Strip a raw guess and make sure it fits the board.
    Returns the stripped text; raises InvalidGuessError otherwise.
    """
    guess = text.strip()
    if not is_valid_length(guess, word_length):
        raise InvalidGuessError(
            f"Expected {word_length} letters, got {len(guess)}: {guess!r}"
        )
    return guess


def write_jsonl(path: pathlib.Path, rows: Iterable[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        for r in rows:
            f.write(orjson.dumps(r) + b"\n")
