"""
Quantum Tic-Tac-Toe core Python package.

Pure game logic for a two-player match played across three independent
3x3 sub-boards. Modules:
- board.py: SubBoard, Mark, WIN_LINES and line detection
- state.py: MatchState, Move, GameStatus
- errors.py: InvalidParametersError and its messages
- rules.py: seating, move validation and scoring as pure transitions
- engine.py: QuantumTicTacToeGame, the stateful wrapper a session talks to
- render.py: text rendering of the three boards
- cli.py: hot-seat terminal driver
"""
