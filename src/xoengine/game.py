"""Board snapshots and outcome detection for 3x3 tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

Player = str  # "X" or "O"

X: Player = "X"
O: Player = "O"
EMPTY = " "

BOARD_SIZE = 9

# Rows, then columns, then diagonals. Order decides which line wins when a
# malformed board holds more than one.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def _normalize_cell(value: object) -> str:
    if value is None or value == "" or value == EMPTY:
        return EMPTY
    if isinstance(value, str) and value.upper() in (X, O):
        return value.upper()
    raise ValueError(f"Unrecognized cell value {value!r}")


# ---------- Board ----------


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the nine cells, indexed row by row."""

    cells: Tuple[str, ...] = field(default=(EMPTY,) * BOARD_SIZE)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != BOARD_SIZE:
            raise ValueError(
                f"Board must have {BOARD_SIZE} cells, got {len(cells)}"
            )
        object.__setattr__(self, "cells", tuple(_normalize_cell(c) for c in cells))

    @classmethod
    def from_cells(cls, cells: Iterable[object]) -> "Board":
        return cls(cells=tuple(cells))

    def __getitem__(self, idx: int) -> str:
        return self.cells[idx]

    def count(self, player: Player) -> int:
        return sum(1 for c in self.cells if c == player)

    def is_reachable(self) -> bool:
        """True when the mark counts fit alternating play starting with X."""
        diff = self.count(X) - self.count(O)
        return diff in (0, 1)

    def place(self, idx: int, player: Player) -> "Board":
        """Return a new board with ``player`` placed at ``idx``."""
        if player not in (X, O):
            raise ValueError(f"Unknown player {player!r}")
        if not 0 <= idx < BOARD_SIZE:
            raise ValueError(f"Cell index {idx} out of range")
        if self.cells[idx] != EMPTY:
            raise ValueError("Cell already occupied")
        cells = list(self.cells)
        cells[idx] = player
        return Board(cells=tuple(cells))


# ---------- Outcome ----------


@dataclass(frozen=True)
class Outcome:
    winner: Optional[Player] = None
    drawn: bool = False

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(winner=player)

    @property
    def terminal(self) -> bool:
        return self.winner is not None or self.drawn


IN_PROGRESS = Outcome()
TIE = Outcome(drawn=True)


def evaluate(board: Board) -> Outcome:
    """Report the winner, a tie, or that the game is still in progress."""
    return evaluate_cells(board.cells)


def evaluate_cells(cells: Sequence[str]) -> Outcome:
    # Shared with the search loop, which works on a private list.
    for a, b, c in WINNING_LINES:
        v = cells[a]
        if v != EMPTY and v == cells[b] == cells[c]:
            return Outcome.win(v)
    if EMPTY in cells:
        return IN_PROGRESS
    return TIE


# ---------- Caller-side helpers ----------


def available_moves(board: Board) -> List[int]:
    """Empty cell indices in ascending order."""
    return [i for i, c in enumerate(board.cells) if c == EMPTY]


def side_to_move(board: Board) -> Player:
    """Whose turn it is, derived from the marks on the board (X plays first)."""
    return X if board.count(X) == board.count(O) else O
