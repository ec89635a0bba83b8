from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .board import Board, Coord


class Phase(Enum):
    AWAITING_FIRST_PICK = "awaiting_first_pick"
    AWAITING_SECOND_PICK = "awaiting_second_pick"
    RESOLVING = "resolving"
    WON = "won"


@dataclass(frozen=True)
class GameState:
    """Represents one game session: the board, the turn phase, the open picks and the score."""
    board: Board
    phase: Phase = Phase.AWAITING_FIRST_PICK
    first: Optional[Coord] = None
    second: Optional[Coord] = None
    pairs_found: int = 0
    moves: int = 0  # completed two-card attempts
    started_at: float = 0.0

    @property
    def total_pairs(self) -> int:
        return (self.board.rows * self.board.cols) // 2

    @property
    def is_won(self) -> bool:
        return self.phase is Phase.WON

    def with_phase(self, phase: Phase, **changes) -> 'GameState':
        return replace(self, phase=phase, **changes)


def new_game(board: Board, started_at: float = 0.0) -> GameState:
    return GameState(board=board, started_at=started_at)
