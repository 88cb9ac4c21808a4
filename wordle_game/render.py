"""
Board presentation: coloured console output via rich, plus plain text.
"""

import sys
from typing import Dict, Optional, Protocol, TextIO

from rich.console import Console
from rich.text import Text

from .core.board import Board, EmptyRow, Row, SlotResult, SlotStatus

BORDER = "|"
EMPTY_SLOT = "#"

SLOT_STYLES: Dict[SlotStatus, str] = {
    SlotStatus.MATCH: "green",
    SlotStatus.PARTIAL_MATCH: "yellow",
    SlotStatus.NON_MATCH: "white",
}
FRAME_STYLE = "blue"


class BaseRenderer(Protocol):
    """Anything that can show the board after it changes."""

    def render(self, board: Board) -> None:
        ...


def slot_to_text(slot: SlotResult) -> str:
    """Colourless encoding: MATCH upper-case, PARTIAL_MATCH in parentheses, NON_MATCH '-'."""
    if slot.status is SlotStatus.MATCH:
        return slot.letter.upper()
    if slot.status is SlotStatus.PARTIAL_MATCH:
        return f"({slot.letter})"
    return "-"


def row_to_text(row: Row) -> str:
    if isinstance(row, EmptyRow):
        body = EMPTY_SLOT * row.width
    else:
        body = "".join(slot_to_text(s) for s in row.slots)
    return f"{BORDER}{body}{BORDER}"


def board_to_text(board: Board) -> str:
    return "\n".join(row_to_text(r) for r in board.rows)


def row_to_rich(row: Row) -> Text:
    text = Text(BORDER, style=FRAME_STYLE)
    if isinstance(row, EmptyRow):
        text.append(EMPTY_SLOT * row.width, style=FRAME_STYLE)
    else:
        for slot in row.slots:
            text.append(slot.letter, style=SLOT_STYLES[slot.status])
    text.append(BORDER, style=FRAME_STYLE)
    return text


class ConsoleRenderer:
    """Coloured board: green match, yellow partial match, white miss."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, board: Board) -> None:
        for row in board.rows:
            self.console.print(row_to_rich(row))


class PlainRenderer:
    """Board without colours, for logs and dumb terminals."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def render(self, board: Board) -> None:
        stream = self.stream or sys.stdout
        stream.write(board_to_text(board) + "\n")
        stream.flush()


class NullRenderer:
    def render(self, board: Board) -> None:
        pass
