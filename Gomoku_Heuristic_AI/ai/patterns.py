"""Line-shape classification (five, open/closed fours, threes, open twos) through a cell."""

from dataclasses import dataclass

from Gomoku_Heuristic_AI.Board import EMPTY
from Gomoku_Heuristic_AI.engine.rules import DIRECTIONS, count_dir

TIERS = ("five", "live_four", "rush_four", "live_three", "sleep_three", "live_two")


@dataclass
class PatternSet:
    """Union of tiers found across the four orientations, strongest first."""

    five: bool = False
    live_four: bool = False
    rush_four: bool = False
    live_three: bool = False
    sleep_three: bool = False
    live_two: bool = False

    def best_tier(self):
        for tier in TIERS:
            if getattr(self, tier):
                return tier
        return None

    def tiers(self):
        return [tier for tier in TIERS if getattr(self, tier)]


def _open_end(board, row, col, dr, dc, run):
    r, c = row + dr * (run + 1), col + dc * (run + 1)
    return board.in_bounds(r, c) and board.cells[r][c] == EMPTY


def line_shape(board, row, col, dr, dc, color):
    """
    Return (count, open_ends) for the run of `color` through (row, col) along (dr, dc).
    The cell itself counts as `color` whatever it holds; board edges close an end.
    """
    forward = count_dir(board, row, col, dr, dc, color)
    backward = count_dir(board, row, col, -dr, -dc, color)
    open_ends = int(_open_end(board, row, col, dr, dc, forward)) + int(_open_end(board, row, col, -dr, -dc, backward))
    return 1 + forward + backward, open_ends


def classify(count, open_ends):
    if count >= 5:
        return "five"
    if count == 4:
        if open_ends == 2:
            return "live_four"
        if open_ends == 1:
            return "rush_four"
    elif count == 3:
        if open_ends == 2:
            return "live_three"
        if open_ends == 1:
            return "sleep_three"
    elif count == 2 and open_ends == 2:
        return "live_two"
    return None


def analyze(board, row, col, color):
    """Classify every orientation through (row, col) as if `color` owned that cell."""
    result = PatternSet()
    for dr, dc in DIRECTIONS:
        tier = classify(*line_shape(board, row, col, dr, dc, color))
        if tier is not None:
            setattr(result, tier, True)
    return result
