from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    BOARD_IDS,
    ErrorKind,
    GameStatus,
    InvalidParametersError,
    MatchState,
    QuantumTicTacToeGame,
    SubBoard,
    legal_moves,
)

logger = logging.getLogger(__name__)

EARLY_FINISH = os.getenv("QTTT_EARLY_FINISH", "false").strip().lower() in ("1", "true", "yes", "on")

app = Flask(__name__)


class _Match:
    """A registered game plus the lock that serializes calls against it."""

    def __init__(self, game: QuantumTicTacToeGame):
        self.game = game
        self.lock = threading.Lock()


_games: Dict[str, _Match] = {}
_registry_lock = threading.Lock()


# ---------- JSON helpers ----------

def board_to_json(b: SubBoard) -> Dict[str, Any]:
    return {
        "cells": [list(row) for row in b.rows()],
        "completed": bool(b.completed),
        "winner": b.winner,
        "winLine": list(b.win_line) if b.win_line is not None else None,
    }


def state_to_json(s: MatchState) -> Dict[str, Any]:
    return {
        "x": s.x,
        "o": s.o,
        "status": s.status,
        "moves": [
            {"board": m.board, "row": int(m.row), "col": int(m.col), "mark": m.mark}
            for m in s.moves
        ],
        "xScore": int(s.x_score),
        "oScore": int(s.o_score),
        "winner": s.winner,
        "turn": s.next_mark() if s.status == GameStatus.IN_PROGRESS else None,
        "boards": {board_id: board_to_json(s.board(board_id)) for board_id in BOARD_IDS},
    }


def _game_response(game: QuantumTicTacToeGame) -> Dict[str, Any]:
    return {
        "ok": True,
        "gameId": game.id,
        "state": state_to_json(game.state),
        "legalMoves": [list(m) for m in legal_moves(game.state)],
    }


def _error(message: str, status: int, kind: Optional[str] = None) -> Tuple[Any, int]:
    body: Dict[str, Any] = {"ok": False, "error": message}
    if kind is not None:
        body["kind"] = kind
    return jsonify(body), status


def _lookup(game_id: str) -> Optional[_Match]:
    with _registry_lock:
        return _games.get(game_id)


def _player_from_body(body: Dict[str, Any]) -> Optional[str]:
    player = body.get("player")
    if not isinstance(player, str) or not player:
        return None
    return player


def reset_registry() -> None:
    with _registry_lock:
        _games.clear()


# ---------- Game API ----------

@app.post("/api/games")
def api_create() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    early = body.get("earlyFinish", EARLY_FINISH)
    if not isinstance(early, bool):
        return _error("earlyFinish must be a boolean", 400)
    game = QuantumTicTacToeGame(early_finish=early)
    with _registry_lock:
        _games[game.id] = _Match(game)
    logger.info("created game %s (early finish: %s)", game.id, game.early_finish)
    return jsonify(_game_response(game)), 201


@app.get("/api/games/<game_id>")
def api_state(game_id: str) -> Any:
    match = _lookup(game_id)
    if match is None:
        return _error("Unknown game", 404)
    with match.lock:
        return jsonify(_game_response(match.game))


@app.post("/api/games/<game_id>/join")
def api_join(game_id: str) -> Any:
    return _seat_action(game_id, "join")


@app.post("/api/games/<game_id>/leave")
def api_leave(game_id: str) -> Any:
    return _seat_action(game_id, "leave")


def _seat_action(game_id: str, action: str) -> Any:
    match = _lookup(game_id)
    if match is None:
        return _error("Unknown game", 404)
    body = request.get_json(force=True, silent=True) or {}
    player = _player_from_body(body)
    if player is None:
        return _error("player required", 400)
    with match.lock:
        try:
            getattr(match.game, action)(player)
        except InvalidParametersError as e:
            logger.warning("game %s: %s by %s rejected: %s", game_id, action, player, e.message)
            return _error(e.message, 400, e.kind)
        return jsonify(_game_response(match.game))


@app.post("/api/games/<game_id>/move")
def api_move(game_id: str) -> Any:
    match = _lookup(game_id)
    if match is None:
        return _error("Unknown game", 404)
    body = request.get_json(force=True, silent=True) or {}
    player = _player_from_body(body)
    if player is None:
        return _error("player required", 400)
    board = body.get("board")
    row = body.get("row")
    col = body.get("col")
    if not isinstance(board, str) or type(row) is not int or type(col) is not int:
        return _error("bad move: board must be a string, row and col integers", 400, ErrorKind.INVALID_MOVE)
    board = board.upper()
    with match.lock:
        try:
            match.game.apply_move(player, board, row, col)
        except InvalidParametersError as e:
            logger.warning("game %s: move by %s rejected: %s", game_id, player, e.message)
            return _error(e.message, 400, e.kind)
        return jsonify(_game_response(match.game))


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("QTTT_LOG_LEVEL", "INFO").upper())
    app.run(host=os.getenv("QTTT_HOST", "127.0.0.1"), port=int(os.getenv("QTTT_PORT", "5000")))
