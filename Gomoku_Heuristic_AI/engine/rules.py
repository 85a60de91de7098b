"""Freestyle Gomoku rules: five-or-more wins through the last move, full board draws."""

from Gomoku_Heuristic_AI.Board import EMPTY, is_full, is_valid_move, place

WIN_LENGTH = 5
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]  # horizontal, vertical, diagonal, anti-diagonal


def count_dir(board, row, col, dr, dc, color):
    """Count contiguous stones of color from (row, col) (exclusive) in (dr, dc)."""
    count = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == color:
        count += 1
        r += dr
        c += dc
    return count


def has_five(board, row, col, color):
    """True if (row, col) plus its runs of `color` reach five along any orientation."""
    for dr, dc in DIRECTIONS:
        total = 1 + count_dir(board, row, col, dr, dc, color) + count_dir(board, row, col, -dr, -dc, color)
        if total >= WIN_LENGTH:
            return True
    return False


def is_draw(board):
    # Callers check has_five first: a full board with a five is a win.
    return is_full(board)


def game_result(board, row, col, color):
    """Return color on a win, EMPTY on a draw, None while the game continues."""
    if has_five(board, row, col, color):
        return color
    if is_draw(board):
        return EMPTY
    return None


# Names used by the turn-taking layer.
apply_move = place
is_valid = is_valid_move

__all__ = [
    "DIRECTIONS",
    "WIN_LENGTH",
    "apply_move",
    "count_dir",
    "game_result",
    "has_five",
    "is_draw",
    "is_full",
    "is_valid",
]
