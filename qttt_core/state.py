from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Hashable, Mapping, Optional, Tuple

from .board import BOARD_IDS, Mark, SubBoard

PlayerId = Hashable


class GameStatus:
    WAITING_TO_START = 'WAITING_TO_START'
    IN_PROGRESS = 'IN_PROGRESS'
    OVER = 'OVER'


@dataclass(frozen=True)
class Move:
    """A committed move: which sub-board, which cell, and the mark placed."""
    board: str
    row: int
    col: int
    mark: Mark


def empty_boards() -> Mapping[str, SubBoard]:
    return MappingProxyType({board_id: SubBoard() for board_id in BOARD_IDS})


@dataclass(frozen=True)
class MatchState:
    """Immutable snapshot of a match, including the three sub-boards."""
    x: Optional[PlayerId] = None
    o: Optional[PlayerId] = None
    status: str = GameStatus.WAITING_TO_START
    moves: Tuple[Move, ...] = ()
    x_score: int = 0
    o_score: int = 0
    winner: Optional[PlayerId] = None
    boards: Mapping[str, SubBoard] = field(default_factory=empty_boards)

    def next_mark(self) -> Mark:
        # Turn is derived from the move count: X moves on even counts.
        return 'X' if len(self.moves) % 2 == 0 else 'O'

    def player_for(self, mark: Mark) -> Optional[PlayerId]:
        return self.x if mark == 'X' else self.o

    def mark_of(self, player: PlayerId) -> Optional[Mark]:
        if self.x is not None and self.x == player:
            return 'X'
        if self.o is not None and self.o == player:
            return 'O'
        return None

    def seated(self) -> Tuple[PlayerId, ...]:
        return tuple(p for p in (self.x, self.o) if p is not None)

    def board(self, board_id: str) -> SubBoard:
        return self.boards[board_id]

    def all_completed(self) -> bool:
        return all(b.completed for b in self.boards.values())

    def with_board(self, board_id: str, sub: SubBoard) -> 'MatchState':
        boards = dict(self.boards)
        boards[board_id] = sub
        return replace(self, boards=MappingProxyType(boards))
