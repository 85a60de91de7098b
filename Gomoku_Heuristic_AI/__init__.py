"""Gomoku_Heuristic_AI package exports."""

from .Board import Board, BLACK, WHITE, EMPTY, Move
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer
from .HeuristicAI import HeuristicAI
from .ai.search_greedy import decide_move

# Subpackages for rules, AI, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Move",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "HeuristicAI",
    "decide_move",
    "ai",
    "engine",
    "utils",
]
