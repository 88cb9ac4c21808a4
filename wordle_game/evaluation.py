"""
Guess evaluation: per-letter feedback for a guess against the target word.
"""

from typing import Sequence, Tuple

from .core.board import SlotResult, match, non_match, partial_match
from .utils import fold_case


def evaluate(target: Sequence[str], guess: Sequence[str]) -> Tuple[SlotResult, ...]:
    """
    Compare `guess` with `target` position by position.

    A letter that does not occur anywhere in the target is a non-match; a
    letter in the same position as in the target is a match; any other letter
    is a partial match. Letter frequencies are not tracked, so a repeated
    guessed letter can be a partial match at several positions:

        >>> [s.status.name for s in evaluate("aab", "aaa")]
        ['MATCH', 'MATCH', 'PARTIAL_MATCH']

    Raises:
        ValueError: If the guess length differs from the target length.
            Players guarantee the length, so this is an integration bug.
    """
    if len(guess) != len(target):
        raise ValueError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    slots = []
    for i in range(len(target)):
        letter = guess[i]
        if letter not in target:
            slots.append(non_match(letter))
        elif target[i] == letter:
            slots.append(match(letter))
        else:
            slots.append(partial_match(letter))
    return tuple(slots)


def is_win(target: str, guess: str) -> bool:
    """Case-insensitive full-word equality."""
    return fold_case(guess) == fold_case(target)
