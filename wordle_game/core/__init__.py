from .board import (
    Board,
    EmptyRow,
    EvaluatedRow,
    Row,
    SlotResult,
    SlotStatus,
    match,
    non_match,
    partial_match,
)
from .env import Settings, get_settings, load_env

__all__ = [
    "Board",
    "EmptyRow",
    "EvaluatedRow",
    "Row",
    "SlotResult",
    "SlotStatus",
    "match",
    "non_match",
    "partial_match",
    "Settings",
    "get_settings",
    "load_env",
]
