"""Exhaustive minimax search and the automated player built on it."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional
import logging
import math

from .game import EMPTY, O, X, Board, Player, evaluate, evaluate_cells, side_to_move

logger = logging.getLogger(__name__)

# Scores are from O's point of view: O maximizes, X minimizes.
WIN_SCORE = 10
TIE_SCORE = 0


@dataclass(frozen=True)
class SearchResult:
    score: int
    move: Optional[int] = None
    nodes: int = 1


def terminal_score(winner: Optional[Player]) -> int:
    if winner == O:
        return WIN_SCORE
    if winner == X:
        return -WIN_SCORE
    return TIE_SCORE


@contextmanager
def placed(cells: List[str], idx: int, player: Player) -> Iterator[None]:
    """Put ``player`` on ``cells[idx]`` for the duration of the block.

    The cell is emptied again on every exit path.
    """
    cells[idx] = player
    try:
        yield
    finally:
        cells[idx] = EMPTY


def search(board: Board, maximizing: bool, depth: int = 0) -> SearchResult:
    """Return the best score reachable from ``board`` and the move achieving it.

    ``maximizing`` selects who moves: True places O, False places X. Ties
    between equally scored moves go to the lowest cell index. Scores do not
    depend on ``depth``, so a slow win is valued the same as a fast one.

    The caller's board is never modified; exploration happens on a private
    copy. A full board that is not terminal cannot occur, but if it did the
    result would carry an infinite sentinel score and no move.
    """
    cells = list(board.cells)
    result = _minimax(cells, depth, maximizing)
    logger.debug(
        "search depth=%d maximizing=%s -> score=%s move=%s nodes=%d",
        depth,
        maximizing,
        result.score,
        result.move,
        result.nodes,
    )
    return result


def _minimax(cells: List[str], depth: int, maximizing: bool) -> SearchResult:
    outcome = evaluate_cells(cells)
    if outcome.terminal:
        return SearchResult(score=terminal_score(outcome.winner))

    nodes = 1
    best_move: Optional[int] = None

    if maximizing:
        best_score = -math.inf
        for idx in range(len(cells)):
            if cells[idx] != EMPTY:
                continue
            with placed(cells, idx, O):
                child = _minimax(cells, depth + 1, False)
            nodes += child.nodes
            if child.score > best_score:
                best_score, best_move = child.score, idx
    else:
        best_score = math.inf
        for idx in range(len(cells)):
            if cells[idx] != EMPTY:
                continue
            with placed(cells, idx, X):
                child = _minimax(cells, depth + 1, True)
            nodes += child.nodes
            if child.score < best_score:
                best_score, best_move = child.score, idx

    return SearchResult(score=best_score, move=best_move, nodes=nodes)  # type: ignore[arg-type]


@dataclass
class MinimaxAI:
    """Automated player that always picks a minimax-optimal move.

    Usage:
      - MinimaxAI(player="O")
      - choose(board) -> cell_index
      - play(board) -> new Board with the move applied
    """

    player: Player = O

    def __post_init__(self) -> None:
        self.player = self.player.upper()
        if self.player not in (X, O):
            raise ValueError(f"Unknown player {self.player!r}")

    @property
    def maximizing(self) -> bool:
        return self.player == O

    def choose(self, board: Board) -> int:
        if evaluate(board).terminal:
            raise ValueError("Game already finished")
        if side_to_move(board) != self.player:
            raise ValueError("It is not this AI player's turn")

        result = search(board, self.maximizing)
        if result.move is None:
            raise RuntimeError("No valid moves available")
        logger.info(
            "%s plays %d (score %d, %d nodes)",
            self.player,
            result.move,
            result.score,
            result.nodes,
        )
        return result.move

    def play(self, board: Board) -> Board:
        return board.place(self.choose(board), self.player)
