from __future__ import annotations

# Facade module that re-exports the Quantum Tic-Tac-Toe core.
# The Flask app and tests import from here; single-responsibility modules live under qttt_core/*.

from qttt_core.board import (  # noqa: F401
    BOARD_IDS,
    SIZE,
    WIN_LINES,
    SubBoard,
    check_win,
    other_mark,
)
from qttt_core.state import GameStatus, MatchState, Move  # noqa: F401
from qttt_core.errors import (  # noqa: F401
    BOARD_ALREADY_DECIDED_MESSAGE,
    BOARD_POSITION_NOT_EMPTY_MESSAGE,
    GAME_FULL_MESSAGE,
    GAME_ID_MISMATCH_MESSAGE,
    GAME_NOT_IN_PROGRESS_MESSAGE,
    INVALID_MOVE_MESSAGE,
    MOVE_NOT_YOUR_TURN_MESSAGE,
    PLAYER_ALREADY_IN_GAME_MESSAGE,
    PLAYER_NOT_IN_GAME_MESSAGE,
    ErrorKind,
    InvalidParametersError,
)
from qttt_core.rules import (  # noqa: F401
    apply_move,
    decide_winner,
    legal_moves,
    seat_player,
    unseat_player,
    validate_move,
)
from qttt_core.engine import BoardMove, GameMove, QuantumTicTacToeGame  # noqa: F401
from qttt_core.render import render_boards  # noqa: F401


def main() -> None:
    # CLI driver delegated to qttt_core.cli
    from qttt_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
