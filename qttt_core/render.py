from __future__ import annotations

from typing import List

from .board import BOARD_IDS, SIZE
from .state import MatchState


def render_boards(state: MatchState) -> str:
    """Renders the three sub-boards side by side with a header and status line."""
    lines: List[str] = []
    header: List[str] = []
    for board_id in BOARD_IDS:
        sub = state.board(board_id)
        if sub.winner is not None:
            tag = f"{board_id}:{sub.winner}"
        elif sub.completed:
            tag = f"{board_id}:="
        else:
            tag = board_id
        header.append(tag.ljust(2 * SIZE - 1))
    lines.append("   ".join(header))
    for r in range(SIZE):
        row: List[str] = []
        for board_id in BOARD_IDS:
            cells = state.board(board_id).rows()[r]
            row.append(" ".join(cell or "." for cell in cells))
        lines.append("   ".join(row))
    lines.append(f"X {state.x_score} - O {state.o_score}  [{state.status}]")
    return "\n".join(lines)
