from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union


class SlotStatus(Enum):
    """Relationship of a guessed letter to the target word."""
    MATCH = "MATCH"
    PARTIAL_MATCH = "PARTIAL_MATCH"
    NON_MATCH = "NON_MATCH"


@dataclass(frozen=True)
class SlotResult:
    letter: str
    status: SlotStatus


def match(letter: str) -> SlotResult:
    return SlotResult(letter, SlotStatus.MATCH)


def partial_match(letter: str) -> SlotResult:
    return SlotResult(letter, SlotStatus.PARTIAL_MATCH)


def non_match(letter: str) -> SlotResult:
    return SlotResult(letter, SlotStatus.NON_MATCH)


@dataclass(frozen=True)
class EmptyRow:
    """Placeholder row; only knows how wide it is."""
    width: int


@dataclass(frozen=True)
class EvaluatedRow:
    slots: Tuple[SlotResult, ...]

    @property
    def word(self) -> str:
        return "".join(s.letter for s in self.slots)


Row = Union[EmptyRow, EvaluatedRow]


class Board:
    """
    Guess history of a session: one row per attempt, filled in order.

    Players and renderers receive the board read-only; only the owning
    session calls `add_word`.
    """

    def __init__(self, width: int, length: int):
        self._width = width
        self._rows: List[Row] = [EmptyRow(width) for _ in range(length)]
        self._filled = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def filled(self) -> int:
        """Number of evaluated rows."""
        return self._filled

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(r.word for r in self._rows if isinstance(r, EvaluatedRow))

    def add_word(self, row: EvaluatedRow, index: int) -> None:
        if index != self._filled:
            raise ValueError(
                f"Rows are filled in order: expected index {self._filled}, got {index}"
            )
        if index >= len(self._rows):
            raise ValueError(f"Board is full ({len(self._rows)} rows)")
        if len(row.slots) != self._width:
            raise ValueError(f"Row has {len(row.slots)} slots, board width is {self._width}")
        self._rows[index] = row
        self._filled += 1

    def __len__(self) -> int:
        return len(self._rows)
