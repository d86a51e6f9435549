"""xoengine package exposing board evaluation, minimax search, and the web API."""

from .ai import MinimaxAI, SearchResult, search
from .game import (
    IN_PROGRESS,
    TIE,
    WINNING_LINES,
    Board,
    Outcome,
    available_moves,
    evaluate,
    side_to_move,
)
from .ui import app

__all__ = [
    "Board",
    "IN_PROGRESS",
    "MinimaxAI",
    "Outcome",
    "SearchResult",
    "TIE",
    "WINNING_LINES",
    "app",
    "available_moves",
    "evaluate",
    "search",
    "side_to_move",
]
