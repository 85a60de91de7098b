"""Candidate move generation (occupied-neighborhood, centre fallback, top-N ranking)."""

from Gomoku_Heuristic_AI.Board import center, empty_cells, has_occupied_neighbor

from . import heuristic


# Up, down, left, right, then the four diagonals.
OPENING_OFFSETS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)

CENTRE_FALLBACK_DISTANCE = 5


def generate_candidates(board, radius):
    """Empty cells with at least one stone within `radius`, row-major order."""
    return [
        (r, c)
        for r, c in empty_cells(board)
        if has_occupied_neighbor(board, r, c, radius)
    ]


def centre_fallback(board, max_distance=CENTRE_FALLBACK_DISTANCE):
    """Empty cells within Manhattan distance `max_distance` of the centre."""
    cr, cc = center(board.size)
    return [
        (r, c)
        for r, c in empty_cells(board)
        if abs(r - cr) + abs(c - cc) <= max_distance
    ]


def opening_move(board):
    """Centre if free, else the first free cell adjacent to it; None if all are taken."""
    cr, cc = center(board.size)
    if board.is_empty(cr, cc):
        return cr, cc
    for dr, dc in OPENING_OFFSETS:
        if board.is_empty(cr + dr, cc + dc):
            return cr + dr, cc + dc
    return None


def search_radius(stone_count):
    return 1 if stone_count <= 8 else 2


def rank_candidates(board, color, cap, weights=None):
    """
    Score neighborhood candidates for `color` and return the best `cap` as
    [(score, (row, col)), ...]. Ties keep enumeration order (stable sort).
    """
    radius = search_radius(board.stone_count)
    cells = generate_candidates(board, radius)
    if cells:
        scored = [(heuristic.evaluate(board, r, c, color, weights), (r, c)) for r, c in cells]
    else:
        baseline = (weights or heuristic.DEFAULT_WEIGHTS)["none"]
        scored = [(baseline, pos) for pos in centre_fallback(board)]

    scored.sort(key=lambda item: item[0], reverse=True)
    return scored[:cap]
