"""Entry point for terminal Gomoku games. Load config, wire players, start Omokgame."""

import random
from pathlib import Path

import yaml

from Gomoku_Heuristic_AI.Board import BLACK, EMPTY, WHITE
from Gomoku_Heuristic_AI.HeuristicAI import HeuristicAI
from Gomoku_Heuristic_AI.Omokgame import Omokgame
from Gomoku_Heuristic_AI.Player import HumanPlayer
from Gomoku_Heuristic_AI.ai import heuristic
from Gomoku_Heuristic_AI.utils.cli import parse_args
from Gomoku_Heuristic_AI.utils.logger import log_event
from Gomoku_Heuristic_AI.utils.records import HistoryStore, StatsStore


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gomoku_Heuristic_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        log_event(f"Settings file not found at {path}; using defaults.")
        return {}


def build_players(mode, difficulty, weights, rng):
    def ai(color):
        return HeuristicAI(color=color, difficulty=difficulty, weights=weights, rng=rng)

    if mode == "ai-vs-ai":
        return ai(BLACK), ai(WHITE)
    if mode == "human-vs-ai":
        return HumanPlayer(color=BLACK), ai(WHITE)
    if mode == "ai-vs-human":
        return ai(BLACK), HumanPlayer(color=WHITE)
    if mode == "human-vs-human":
        return HumanPlayer(color=BLACK), HumanPlayer(color=WHITE)
    raise ValueError(f"Unsupported mode: {mode}")


def record_result(game, human_color, difficulty, stats, history):
    """Update stats/history from the human player's point of view."""
    if game.winner == EMPTY:
        result = "draw"
        stats.record_draw()
    elif game.winner == human_color:
        result = "win"
        stats.record_win(difficulty, game.move_count, game.elapsed_seconds)
    else:
        result = "lose"
        stats.record_loss()
    history.save_game(result, difficulty, game.history, game.elapsed_seconds)


def render(board, last_move, color, result):
    print(board.render())


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 15)
    difficulty = args.difficulty or settings.get("difficulty", "medium")
    weights_path = args.weights or settings.get("weights_path", "config/weights.yaml")
    weights = heuristic.load_weights(weights_path)
    rng = random.Random(args.seed)

    black, white = build_players(args.mode, difficulty, weights, rng)
    ai_color = WHITE if args.mode == "human-vs-ai" else BLACK

    game = Omokgame(
        black_player=black,
        white_player=white,
        board_size=board_size,
        ai_color=ai_color,
        difficulty=difficulty,
        logger=log_event,
        renderer=render,
        rng=rng,
        weights=weights,
    )
    result = game.play()
    outcome = {BLACK: "Black wins", WHITE: "White wins", EMPTY: "Draw"}
    print(outcome.get(result, "Unknown result"))

    if args.mode in ("human-vs-ai", "ai-vs-human") and not args.no_records:
        stats = StatsStore(resolve_project_path(settings.get("stats_path", "records/stats.json"))).load()
        history = HistoryStore(
            resolve_project_path(settings.get("history_path", "records/history.json")),
            board_size=board_size,
        ).load()
        record_result(game, -ai_color, difficulty, stats, history)
    return result


if __name__ == "__main__":
    main()
