"""Move validation for the game loop; raises where the core only answers booleans."""

from Gomoku_Heuristic_AI.engine import rules


def check_move(move, board):
    """
    Validate a (row, col) move against bounds and occupancy.
    Raises ValueError on invalid moves.
    """
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed move: {move!r}") from exc

    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not rules.is_valid(board, row, col):
        raise ValueError("Cell already occupied")
    return True
