"""CLI options for selecting players, difficulty, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku heuristic AI (freestyle, 15x15)")
    parser.add_argument("--board-size", type=int, help="Board size (default 15)")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        help="AI difficulty (default from settings or medium)",
    )
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default="human-vs-ai",
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", help="Path to pattern weight YAML (overrides settings)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for easy-mode move sampling")
    parser.add_argument("--no-records", action="store_true", help="Do not update stats/history files")
    return parser.parse_args(argv)
