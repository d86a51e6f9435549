"""FastAPI interface exposing the engine to a browser or other client.

Every request carries the whole board, so the app keeps no game state.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .ai import MinimaxAI, search
from .game import BOARD_SIZE, EMPTY, O, X, Board, evaluate, side_to_move

logger = logging.getLogger(__name__)

app = FastAPI(title="xoengine", description="Tic-tac-toe outcome and minimax API")


class BoardRequest(BaseModel):
    """Request payload carrying a board snapshot."""

    cells: List[Optional[str]] = Field(
        min_length=BOARD_SIZE,
        max_length=BOARD_SIZE,
        description="Nine cells, row by row: 'X', 'O', '' or null",
    )


class SearchRequest(BoardRequest):
    maximizing: bool = Field(
        default=True, description="True searches for O, False for X"
    )


class TurnRequest(BoardRequest):
    model_config = ConfigDict(populate_by_name=True)

    ai_player: str = Field(default=O, alias="aiPlayer")

    @field_validator("ai_player")
    @classmethod
    def ensure_known_player(cls, value: str) -> str:
        value = value.upper()
        if value not in (X, O):
            raise ValueError(f"Unknown player {value!r}. Choose X or O.")
        return value


def _parse_board(cells: List[Optional[str]]) -> Board:
    try:
        return Board.from_cells(cells)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _serialize_board(board: Board) -> Dict[str, object]:
    outcome = evaluate(board)
    return {
        "cells": [c if c != EMPTY else "" for c in board.cells],
        "winner": outcome.winner,
        "drawn": outcome.drawn,
        "terminal": outcome.terminal,
        "sideToMove": None if outcome.terminal else side_to_move(board),
    }


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/evaluate")
def evaluate_board(request: BoardRequest) -> Dict[str, object]:
    board = _parse_board(request.cells)
    return _serialize_board(board)


@app.post("/api/search")
def search_board(request: SearchRequest) -> Dict[str, object]:
    board = _parse_board(request.cells)
    result = search(board, request.maximizing)
    return {"score": result.score, "move": result.move, "nodes": result.nodes}


@app.post("/api/turn")
def take_turn(request: TurnRequest) -> Dict[str, object]:
    """Play the automated player's move if it is its turn."""
    board = _parse_board(request.cells)
    ai = MinimaxAI(player=request.ai_player)
    try:
        move = ai.choose(board)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    board = board.place(move, ai.player)
    state = _serialize_board(board)
    state["move"] = move
    if state["terminal"]:
        logger.info("game over: winner=%s drawn=%s", state["winner"], state["drawn"])
    return state
