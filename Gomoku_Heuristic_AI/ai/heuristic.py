"""Tier score table and offense/defense evaluation of a candidate cell."""

from pathlib import Path
import yaml

from Gomoku_Heuristic_AI.Board import opponent
from . import patterns as pattern_mod

# Default tier scores; can be overridden by loading config/weights.yaml if desired.
DEFAULT_WEIGHTS = {
    "five": 1_000_000,
    "live_four": 500_000,
    "rush_four": 10_000,
    "live_three": 5_000,
    "sleep_three": 500,
    "live_two": 100,
    "none": 10,
}

# Tuned, not derived: opponent shapes count 20% more than our own.
DEFENSE_WEIGHT = 1.2


def load_weights(path="config/weights.yaml"):
    """Load tier weights from YAML; fallback to defaults on missing file or keys."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Gomoku_Heuristic_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for tier, score in (data.get("weights") or {}).items():
        if tier not in weights:
            raise ValueError(f"Unknown pattern tier in weights file: {tier}")
        weights[tier] = int(score)
    return weights


def tier_score(patterns, weights=None):
    """Score of the strongest tier present in a PatternSet."""
    weights = weights or DEFAULT_WEIGHTS
    tier = patterns.best_tier()
    return weights[tier if tier is not None else "none"]


def side_score(board, row, col, color, weights=None):
    """Score `color` would get by taking (row, col); the hypothetical board is discarded."""
    trial = board.place(row, col, color)
    return tier_score(pattern_mod.analyze(trial, row, col, color), weights)


def evaluate(board, row, col, color, weights=None):
    """
    Desirability of (row, col) for `color`: own gain plus what the opponent
    would gain there, the latter weighted by DEFENSE_WEIGHT.
    The result is a float; only its ordering matters to the ranking.
    """
    offense = side_score(board, row, col, color, weights)
    defense = side_score(board, row, col, opponent(color), weights)
    return offense + defense * DEFENSE_WEIGHT
