"""Greedy heuristic AI player with easy/medium/hard tuning."""

from Gomoku_Heuristic_AI.Player import Player
from Gomoku_Heuristic_AI.ai import heuristic, search_greedy


class HeuristicAI(Player):
    def __init__(self, color=1, difficulty="medium", weights=None, rng=None):
        super().__init__(color)
        if difficulty not in search_greedy.DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")
        self.difficulty = difficulty
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.rng = rng

    def next_move(self, board):
        move = search_greedy.decide_move(
            board,
            self.difficulty,
            self.color,
            rng=self.rng,
            weights=self.weights,
        )
        if move is None:
            raise ValueError("No move available")
        return move
