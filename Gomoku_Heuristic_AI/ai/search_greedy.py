"""One-ply greedy move choice: opening, win/block short-circuits, ranked candidates."""

import random

from Gomoku_Heuristic_AI.Board import center, empty_cells, has_occupied_neighbor, opponent

from . import heuristic
from . import move_selector
from . import patterns as pattern_mod


DIFFICULTIES = ("easy", "medium", "hard")
CANDIDATE_CAPS = {"easy": 8, "medium": 12, "hard": 20}

CRITICAL_RADIUS = 2
CRITICAL_TIERS = ("five", "live_four", "rush_four")
OPENING_STONE_LIMIT = 4
EASY_TOP_K = 3


def find_critical_move(board, color, weights=None):
    """
    Strongest critical tier `color` can reach in one move near existing stones.
    Returns (tier, score, (row, col)) or None; within a tier the first cell in
    row-major order wins.
    """
    weights = weights or heuristic.DEFAULT_WEIGHTS
    hits = {}
    for r, c in empty_cells(board):
        if not has_occupied_neighbor(board, r, c, CRITICAL_RADIUS):
            continue
        found = pattern_mod.analyze(board.place(r, c, color), r, c, color)
        for tier in CRITICAL_TIERS:
            if getattr(found, tier) and tier not in hits:
                hits[tier] = (r, c)
        if "five" in hits:
            break

    for tier in CRITICAL_TIERS:
        if tier in hits:
            return tier, weights[tier], hits[tier]
    return None


def choose_move(board, color, difficulty="medium", rng=None, weights=None):
    """
    Return (row, col) for `color` on `board`, or None when no empty cell is left.
    `rng` only needs a `choice` method; it is consulted on easy difficulty.
    """
    if difficulty not in CANDIDATE_CAPS:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")
    weights = weights or heuristic.DEFAULT_WEIGHTS
    rng = rng or random

    stones = board.stone_count
    if stones == 0:
        return center(board.size)

    win = find_critical_move(board, color, weights)
    if win is not None:
        return win[2]

    # Only threats scored at least a live four preempt ranking.
    block = find_critical_move(board, opponent(color), weights)
    if block is not None and block[1] >= weights["live_four"]:
        return block[2]

    if stones <= OPENING_STONE_LIMIT:
        book = move_selector.opening_move(board)
        if book is not None:
            return book

    ranked = move_selector.rank_candidates(board, color, CANDIDATE_CAPS[difficulty], weights)
    if not ranked:
        return None

    if difficulty == "easy" and len(ranked) > 1:
        _, move = rng.choice(ranked[:EASY_TOP_K])
        return move
    return ranked[0][1]


def decide_move(board, difficulty, ai_color, rng=None, weights=None):
    """Application entry point: the AI's move for `ai_color`, or None if there is none."""
    return choose_move(board, ai_color, difficulty=difficulty, rng=rng, weights=weights)
