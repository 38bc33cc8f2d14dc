from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .engine import QuantumTicTacToeGame
from .errors import InvalidParametersError
from .render import render_boards
from .state import GameStatus


def parse_move(text: str) -> Tuple[str, int, int]:
    """Parses 'A 0 2', 'a,0,2' or 'A02' into (board, row, col)."""
    cleaned = text.replace(',', ' ').strip()
    parts = [t for t in cleaned.split(' ') if t != '']
    if len(parts) == 1 and len(parts[0]) == 3:
        parts = list(parts[0])
    if len(parts) != 3:
        raise ValueError(f"expected 'board row col', got {text!r}")
    return parts[0].upper(), int(parts[1]), int(parts[2])


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Quantum Tic-Tac-Toe hot-seat game')
    parser.add_argument('--player-x', default='player1', help='Name of the player seated as X')
    parser.add_argument('--player-o', default='player2', help='Name of the player seated as O')
    parser.add_argument('--early-finish', action='store_true',
                        help='End the match as soon as one side cannot be caught')
    args = parser.parse_args(argv)

    game = QuantumTicTacToeGame(early_finish=args.early_finish)
    game.join(args.player_x)
    game.join(args.player_o)
    print(render_boards(game.state))

    while game.state.status == GameStatus.IN_PROGRESS:
        mark = game.state.next_mark()
        player = game.state.player_for(mark)
        try:
            text = input(f"{player} ({mark}) move as 'board row col', or 'quit': ").strip()
        except EOFError:
            text = 'quit'
        if text.lower() in ('q', 'quit', 'exit'):
            game.leave(player)
            break
        try:
            board, row, col = parse_move(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        try:
            game.apply_move(player, board, row, col)
        except InvalidParametersError as e:
            print(f"{e.message}. Try again.")
            continue
        print(render_boards(game.state))

    final = game.state
    if final.winner is not None:
        print(f"{final.winner} wins! (X {final.x_score} - O {final.o_score})")
    else:
        print(f"Draw. (X {final.x_score} - O {final.o_score})")
