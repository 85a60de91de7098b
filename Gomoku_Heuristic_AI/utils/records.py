"""Win/loss statistics and finished-game history, persisted as JSON files."""

import csv
import datetime
import io
import json
import uuid
from pathlib import Path

from Gomoku_Heuristic_AI.Board import BLACK, Move, board_from_moves
from Gomoku_Heuristic_AI.utils.logger import log_event

DIFFICULTY_ORDER = ("hard", "medium", "easy")
RESULT_LABELS = {"win": "Win", "lose": "Loss", "draw": "Draw"}
MAX_HISTORY_COUNT = 100
GAME_RECORD_KEYS = ("id", "date", "result", "opponent", "total_moves", "duration", "moves")


def _now_iso():
    return datetime.datetime.now().isoformat(timespec="seconds")


def _format_duration(seconds):
    return f"{seconds // 60}:{seconds % 60:02d}"


def _read_json(path, logger):
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger(f"Failed to load {path}: {exc}")
        return None


def _write_json(path, data, logger):
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as exc:
        logger(f"Failed to save {path}: {exc}")
        return False
    return True


def _is_best_score(score):
    return (
        isinstance(score, dict)
        and isinstance(score.get("min_moves"), int)
        and isinstance(score.get("best_time"), int)
    )


def _is_game_record(game):
    return (
        isinstance(game, dict)
        and all(key in game for key in GAME_RECORD_KEYS)
        and game["result"] in RESULT_LABELS
        and isinstance(game["moves"], list)
    )


class StatsStore:
    """Player results against the AI, with the best (fewest moves, then fastest) win per difficulty."""

    def __init__(self, path, logger=log_event):
        self.path = Path(path)
        self.logger = logger
        self.reset(persist=False)

    def reset(self, persist=True):
        self.wins = 0
        self.losses = 0
        self.draws = 0
        self.best_scores = {d: None for d in DIFFICULTY_ORDER}
        if persist:
            self.save()

    def load(self):
        data = _read_json(self.path, self.logger)
        self.reset(persist=False)
        if not isinstance(data, dict):
            return self
        try:
            self.wins = int(data.get("wins", 0))
            self.losses = int(data.get("losses", 0))
            self.draws = int(data.get("draws", 0))
            for difficulty, score in (data.get("best_scores") or {}).items():
                if difficulty not in self.best_scores or not score:
                    continue
                if not _is_best_score(score):
                    self.logger(f"Ignoring malformed best score for {difficulty} in {self.path}")
                    continue
                self.best_scores[difficulty] = dict(score)
        except (AttributeError, TypeError, ValueError) as exc:
            self.logger(f"Ignoring malformed stats in {self.path}: {exc}")
            self.reset(persist=False)
        return self

    def to_dict(self):
        return {
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "best_scores": dict(self.best_scores),
        }

    def save(self):
        return _write_json(self.path, self.to_dict(), self.logger)

    def record_win(self, difficulty, moves, duration):
        self.wins += 1
        self.update_best_score(difficulty, moves, duration)
        self.save()

    def record_loss(self):
        self.losses += 1
        self.save()

    def record_draw(self):
        self.draws += 1
        self.save()

    def update_best_score(self, difficulty, moves, duration):
        current = self.best_scores.get(difficulty)
        if (
            current is None
            or moves < current["min_moves"]
            or (moves == current["min_moves"] and duration < current["best_time"])
        ):
            self.best_scores[difficulty] = {
                "difficulty": difficulty,
                "min_moves": moves,
                "best_time": duration,
                "date": _now_iso(),
            }

    @property
    def total_games(self):
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self):
        decided = self.wins + self.losses
        if self.total_games == 0 or decided == 0:
            return 0.0
        return self.wins / decided * 100

    def best_scores_list(self):
        return [self.best_scores[d] for d in DIFFICULTY_ORDER if self.best_scores[d]]

    def export(self, fmt="json"):
        if fmt == "json":
            return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
        if fmt != "csv":
            raise ValueError(f"Unsupported stats export format: {fmt}")

        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["item", "value"])
        writer.writerow(["wins", self.wins])
        writer.writerow(["losses", self.losses])
        writer.writerow(["draws", self.draws])
        writer.writerow(["total", self.total_games])
        writer.writerow(["win_rate", f"{self.win_rate:.1f}%"])
        writer.writerow([])
        writer.writerow(["difficulty", "min_moves", "best_time", "date"])
        for score in self.best_scores_list():
            writer.writerow([
                score["difficulty"],
                score["min_moves"],
                _format_duration(score["best_time"]),
                score["date"][:10],
            ])
        return buf.getvalue().rstrip("\n")


class HistoryStore:
    """Finished games (newest first) with a replay cursor over their move lists."""

    def __init__(self, path, max_count=MAX_HISTORY_COUNT, logger=log_event, board_size=15):
        self.path = Path(path)
        self.max_count = max_count
        self.logger = logger
        self.board_size = board_size
        self.games = []
        self.replay_game = None
        self.replay_index = 0

    def load(self):
        data = _read_json(self.path, self.logger)
        if data is None:
            self.games = []
            return self
        if not isinstance(data, list):
            self.logger(f"Ignoring malformed history in {self.path}")
            self.games = []
            return self
        self.games = [game for game in data if _is_game_record(game)]
        dropped = len(data) - len(self.games)
        if dropped:
            self.logger(f"Dropped {dropped} malformed game record(s) from {self.path}")
        return self

    def save(self):
        return _write_json(self.path, self.games, self.logger)

    def save_game(self, result, difficulty, moves, duration):
        if result not in RESULT_LABELS:
            raise ValueError(f"Unknown game result: {result}")
        now = datetime.datetime.now()
        record = {
            "id": uuid.uuid4().hex,
            "date": now.isoformat(timespec="seconds"),
            "result": result,
            "opponent": f"AI ({difficulty})",
            "total_moves": len(moves),
            "difficulty": difficulty,
            "duration": duration,
            "moves": [list(m) for m in moves],
        }
        self.games.insert(0, record)
        del self.games[self.max_count:]
        self.save()
        return record

    def find(self, game_id):
        for game in self.games:
            if game["id"] == game_id:
                return game
        return None

    def delete(self, game_id):
        game = self.find(game_id)
        if game is None:
            return False
        self.games.remove(game)
        self.save()
        return True

    def clear(self):
        self.games = []
        self.save()

    def __len__(self):
        return len(self.games)

    # --- Replay ---

    def start_replay(self, game_id):
        game = self.find(game_id)
        if game is None:
            return False
        self.replay_game = game
        self.replay_index = 0
        return True

    def exit_replay(self):
        self.replay_game = None
        self.replay_index = 0

    @property
    def is_replaying(self):
        return self.replay_game is not None

    def replay_step(self, step):
        if self.replay_game is None:
            return
        self.replay_index = max(0, min(step, self.replay_game["total_moves"]))

    def replay_first(self):
        self.replay_step(0)

    def replay_prev(self):
        self.replay_step(self.replay_index - 1)

    def replay_next(self):
        self.replay_step(self.replay_index + 1)

    def replay_last(self):
        if self.replay_game is not None:
            self.replay_step(self.replay_game["total_moves"])

    @property
    def is_replay_at_start(self):
        return self.replay_index == 0

    @property
    def is_replay_at_end(self):
        if self.replay_game is None:
            return False
        return self.replay_index >= self.replay_game["total_moves"]

    def replay_board(self):
        """Board after the first `replay_index` moves of the replayed game, or None."""
        if self.replay_game is None:
            return None
        moves = [Move(*m) for m in self.replay_game["moves"][:self.replay_index]]
        return board_from_moves(moves, self.board_size)

    # --- Export ---

    def export(self, fmt="json"):
        if fmt == "json":
            return json.dumps(self.games, ensure_ascii=False, indent=2)
        if fmt != "text":
            raise ValueError(f"Unsupported history export format: {fmt}")
        blocks = []
        for game in self.games:
            blocks.append(
                "\n".join([
                    f"Date: {game['date']}",
                    f"Result: {RESULT_LABELS[game['result']]}",
                    f"Opponent: {game['opponent']}",
                    f"Moves: {game['total_moves']}",
                    f"Duration: {game['duration'] // 60}m{game['duration'] % 60}s",
                ])
            )
        return "\n---\n".join(blocks)

    def export_game(self, game_id, fmt="json"):
        game = self.find(game_id)
        if game is None:
            return None
        if fmt == "json":
            return json.dumps(game, ensure_ascii=False, indent=2)
        if fmt != "sgf":
            raise ValueError(f"Unsupported game export format: {fmt}")
        nodes = "".join(
            f";{'B' if color == BLACK else 'W'}[{col},{row}]"
            for row, col, color in game["moves"]
        )
        return f"(;GM[1]SZ[{self.board_size}]PB[Black]PW[White]\n{nodes}\n)"
