from __future__ import annotations

GAME_FULL_MESSAGE = 'Game is full'
PLAYER_ALREADY_IN_GAME_MESSAGE = 'Player is already in this game'
PLAYER_NOT_IN_GAME_MESSAGE = 'Player is not in this game'
GAME_NOT_IN_PROGRESS_MESSAGE = 'Game is not in progress'
MOVE_NOT_YOUR_TURN_MESSAGE = 'Not your turn'
BOARD_ALREADY_DECIDED_MESSAGE = 'That board has already been decided'
BOARD_POSITION_NOT_EMPTY_MESSAGE = 'Board position is not empty'
INVALID_MOVE_MESSAGE = 'Invalid move'
GAME_ID_MISMATCH_MESSAGE = 'Game ID mismatch'


class ErrorKind:
    GAME_FULL = 'GameFull'
    PLAYER_ALREADY_IN_GAME = 'PlayerAlreadyInGame'
    PLAYER_NOT_IN_GAME = 'PlayerNotInGame'
    GAME_NOT_IN_PROGRESS = 'GameNotInProgress'
    NOT_YOUR_TURN = 'NotYourTurn'
    BOARD_ALREADY_DECIDED = 'BoardAlreadyDecided'
    CELL_OCCUPIED = 'CellOccupied'
    INVALID_MOVE = 'InvalidMove'
    GAME_ID_MISMATCH = 'GameIdMismatch'


_DEFAULT_MESSAGES = {
    ErrorKind.GAME_FULL: GAME_FULL_MESSAGE,
    ErrorKind.PLAYER_ALREADY_IN_GAME: PLAYER_ALREADY_IN_GAME_MESSAGE,
    ErrorKind.PLAYER_NOT_IN_GAME: PLAYER_NOT_IN_GAME_MESSAGE,
    ErrorKind.GAME_NOT_IN_PROGRESS: GAME_NOT_IN_PROGRESS_MESSAGE,
    ErrorKind.NOT_YOUR_TURN: MOVE_NOT_YOUR_TURN_MESSAGE,
    ErrorKind.BOARD_ALREADY_DECIDED: BOARD_ALREADY_DECIDED_MESSAGE,
    ErrorKind.CELL_OCCUPIED: BOARD_POSITION_NOT_EMPTY_MESSAGE,
    ErrorKind.INVALID_MOVE: INVALID_MOVE_MESSAGE,
    ErrorKind.GAME_ID_MISMATCH: GAME_ID_MISMATCH_MESSAGE,
}


class InvalidParametersError(ValueError):
    """Raised when a join, leave or move is rejected. Carries a `kind` and a message."""

    def __init__(self, kind: str, message: str | None = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES.get(kind, kind)
        super().__init__(self.message)
