from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ErrorKind, InvalidParametersError
from .rules import apply_move, seat_player, unseat_player
from .state import GameStatus, MatchState, PlayerId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardMove:
    board: str
    row: int
    col: int


@dataclass(frozen=True)
class GameMove:
    """A move as delivered by the session layer: who, which game, and where."""
    player_id: PlayerId
    game_id: str
    move: BoardMove


class QuantumTicTacToeGame:
    """
    One Quantum Tic-Tac-Toe match across sub-boards A, B and C.

    Every operation validates against the current snapshot and, on success, swaps in
    the next snapshot in a single assignment. A rejected operation raises
    InvalidParametersError and leaves the match exactly as it was. Callers must
    serialize operations against one instance.
    """

    def __init__(self, game_id: Optional[str] = None, early_finish: bool = False):
        self.id = game_id or uuid.uuid4().hex
        self.early_finish = early_finish
        self._state = MatchState()

    @property
    def state(self) -> MatchState:
        return self._state

    def snapshot(self) -> MatchState:
        return self._state

    @property
    def players(self) -> Tuple[PlayerId, ...]:
        return self._state.seated()

    def join(self, player: PlayerId) -> None:
        self._state = seat_player(self._state, player)
        logger.info("game %s: %s joined as %s", self.id, player, self._state.mark_of(player))
        if self._state.status == GameStatus.IN_PROGRESS and not self._state.moves:
            logger.info("game %s: started (%s vs %s)", self.id, self._state.x, self._state.o)

    def leave(self, player: PlayerId) -> None:
        self._state = unseat_player(self._state, player)
        logger.info("game %s: %s left", self.id, player)
        if self._state.status == GameStatus.OVER:
            logger.info("game %s: over by departure, winner %s", self.id, self._state.winner)

    def apply_move(self, player: PlayerId, board: str, row: int, col: int) -> None:
        nxt = apply_move(self._state, player, board, row, col, early_finish=self.early_finish)
        self._state = nxt
        logger.debug("game %s: %s -> %s%d%d", self.id, nxt.moves[-1].mark, board, row, col)
        if nxt.status == GameStatus.OVER:
            logger.info(
                "game %s: over, score X %d - O %d, winner %s",
                self.id, nxt.x_score, nxt.o_score, nxt.winner,
            )

    def handle_move(self, game_move: GameMove) -> None:
        """Applies a move envelope, rejecting one addressed to another game."""
        if game_move.game_id != self.id:
            raise InvalidParametersError(ErrorKind.GAME_ID_MISMATCH)
        m = game_move.move
        self.apply_move(game_move.player_id, m.board, m.row, m.col)
