from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Tuple

from .board import BOARD_IDS, SIZE, Mark
from .errors import ErrorKind, InvalidParametersError
from .state import GameStatus, MatchState, Move, PlayerId


def seat_player(state: MatchState, player: PlayerId) -> MatchState:
    """Seats a player as X, or as O if X is taken. Filling both seats starts the match."""
    if state.mark_of(player) is not None:
        raise InvalidParametersError(ErrorKind.PLAYER_ALREADY_IN_GAME)
    if state.x is None:
        return replace(state, x=player)
    if state.o is None:
        return replace(state, o=player, status=GameStatus.IN_PROGRESS)
    raise InvalidParametersError(ErrorKind.GAME_FULL)


def unseat_player(state: MatchState, player: PlayerId) -> MatchState:
    """
    Handles a player leaving.

    With both seats filled the match ends (or stays ended) and the remaining player
    is recorded as winner; the seats, moves and scores stay as they were. A sole
    waiting player simply vacates the seat.
    """
    mark = state.mark_of(player)
    if mark is None:
        raise InvalidParametersError(ErrorKind.PLAYER_NOT_IN_GAME)
    if state.x is not None and state.o is not None:
        remaining = state.o if mark == 'X' else state.x
        return replace(state, status=GameStatus.OVER, winner=remaining)
    if mark == 'X':
        return replace(state, x=None, status=GameStatus.WAITING_TO_START, winner=None)
    return replace(state, o=None, status=GameStatus.WAITING_TO_START, winner=None)


def _check_coordinates(board_id: str, row: int, col: int) -> None:
    if board_id not in BOARD_IDS:
        raise InvalidParametersError(ErrorKind.INVALID_MOVE, f"Unknown board {board_id!r}")
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < SIZE:
            raise InvalidParametersError(
                ErrorKind.INVALID_MOVE, f"Row and column must be integers in 0..{SIZE - 1}"
            )


def validate_move(state: MatchState, player: PlayerId, board_id: str, row: int, col: int) -> Mark:
    """Runs every move precondition in order and returns the mark the player will place."""
    if state.status != GameStatus.IN_PROGRESS:
        raise InvalidParametersError(ErrorKind.GAME_NOT_IN_PROGRESS)
    _check_coordinates(board_id, row, col)
    mark = state.next_mark()
    seated = state.player_for(mark)
    if seated is None or seated != player:
        raise InvalidParametersError(ErrorKind.NOT_YOUR_TURN)
    sub = state.board(board_id)
    if sub.completed:
        raise InvalidParametersError(ErrorKind.BOARD_ALREADY_DECIDED)
    if not sub.is_empty(row, col):
        raise InvalidParametersError(ErrorKind.CELL_OCCUPIED)
    return mark


def decide_winner(state: MatchState, early_finish: bool = False) -> Tuple[bool, Optional[PlayerId]]:
    """
    Returns (over, winner) for the current board outcomes.

    The match is over when all three sub-boards are completed; the player with the
    strictly higher score wins and a level score has no winner. With `early_finish`
    the match also ends once the leader's margin exceeds the boards still open.
    """
    if state.all_completed():
        if state.x_score > state.o_score:
            return True, state.x
        if state.o_score > state.x_score:
            return True, state.o
        return True, None
    if early_finish:
        remaining = sum(1 for b in state.boards.values() if not b.completed)
        if state.x_score - state.o_score > remaining:
            return True, state.x
        if state.o_score - state.x_score > remaining:
            return True, state.o
    return False, None


def apply_move(
    state: MatchState,
    player: PlayerId,
    board_id: str,
    row: int,
    col: int,
    early_finish: bool = False,
) -> MatchState:
    """Validates a move and returns the resulting state, scored and checked for termination."""
    mark = validate_move(state, player, board_id, row, col)
    before = state.board(board_id)
    after = before.place(row, col, mark)

    new_state = state.with_board(board_id, after)
    new_state = replace(new_state, moves=state.moves + (Move(board_id, row, col, mark),))
    if after.winner is not None and before.winner is None:
        if after.winner == 'X':
            new_state = replace(new_state, x_score=new_state.x_score + 1)
        else:
            new_state = replace(new_state, o_score=new_state.o_score + 1)

    over, winner = decide_winner(new_state, early_finish)
    if over:
        new_state = replace(new_state, status=GameStatus.OVER, winner=winner)
    return new_state


def legal_moves(state: MatchState) -> List[Tuple[str, int, int]]:
    """Lists every (board, row, col) the player to move may choose."""
    if state.status != GameStatus.IN_PROGRESS:
        return []
    out: List[Tuple[str, int, int]] = []
    for board_id in BOARD_IDS:
        sub = state.board(board_id)
        if sub.completed:
            continue
        for r, c in sub.empty_cells():
            out.append((board_id, r, c))
    return out
