"""Game session: turn management, move history, undo, and the blocking game loop."""

import time

from Gomoku_Heuristic_AI.Board import (
    BLACK,
    BOARD_SIZE,
    EMPTY,
    WHITE,
    Move,
    board_from_moves,
    empty_board,
    opponent,
)
from Gomoku_Heuristic_AI.ai import search_greedy
from Gomoku_Heuristic_AI.engine import referee, rules
from Gomoku_Heuristic_AI.utils.logger import log_event

COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


class Omokgame:
    def __init__(
        self,
        black_player=None,
        white_player=None,
        board_size=BOARD_SIZE,
        ai_color=WHITE,
        difficulty="medium",
        logger=log_event,
        renderer=None,
        rng=None,
        weights=None,
    ):
        self.board_size = board_size
        self.players = {BLACK: black_player, WHITE: white_player}
        self.ai_color = ai_color
        self.difficulty = difficulty
        self.logger = logger
        self.renderer = renderer
        self.rng = rng
        self.weights = weights
        self.reset()

    def reset(self):
        self.board = empty_board(self.board_size)
        self.history = []
        self.winner = None  # None while ongoing, EMPTY for a draw
        self.started_at = time.monotonic()

    @property
    def current_color(self):
        # Derived from the history tail so undo never needs a separate counter.
        if not self.history:
            return BLACK
        return opponent(self.history[-1].color)

    @property
    def is_over(self):
        return self.winner is not None

    @property
    def move_count(self):
        return len(self.history)

    @property
    def last_move(self):
        return self.history[-1] if self.history else None

    @property
    def elapsed_seconds(self):
        return int(time.monotonic() - self.started_at)

    def play_move(self, row, col):
        """Place a stone for the side to move. Returns False if the game is over or the move invalid."""
        if self.is_over or not rules.is_valid(self.board, row, col):
            return False

        color = self.current_color
        self.board = rules.apply_move(self.board, row, col, color)
        self.history.append(Move(row, col, color))
        self.winner = rules.game_result(self.board, row, col, color)
        return True

    def ai_move(self):
        """Let the heuristic AI move for the side to move; returns the Move or None."""
        if self.is_over:
            return None
        move = search_greedy.decide_move(
            self.board,
            self.difficulty,
            self.current_color,
            rng=self.rng,
            weights=self.weights,
        )
        if move is None or not self.play_move(*move):
            return None
        return self.history[-1]

    def _undo_steps(self):
        # The AI's lone opening stone is undone alone; otherwise undo a player/AI pair.
        if self.ai_color == BLACK and len(self.history) == 1:
            return 1
        return 2

    @property
    def can_undo(self):
        return not self.is_over and len(self.history) >= self._undo_steps()

    def undo(self):
        """Undo the last player/AI pair. Returns False when nothing can be undone."""
        if not self.history or self.is_over:
            return False
        steps = self._undo_steps()
        if len(self.history) < steps:
            return False

        del self.history[-steps:]
        self.board = board_from_moves(self.history, self.board_size)
        self.winner = None
        return True

    def status_text(self):
        if self.winner is None:
            return f"{COLOR_NAMES[self.current_color]} to move"
        if self.winner == EMPTY:
            return "Draw"
        return f"{COLOR_NAMES[self.winner]} wins"

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        if self.players[BLACK] is None or self.players[WHITE] is None:
            raise ValueError("play() requires both a black and a white player")

        while not self.is_over:
            color = self.current_color
            if self.renderer:
                self.renderer(self.board, self.last_move, color, self.winner)

            player = self.players[color]
            try:
                move = player.next_move(self.board)
                referee.check_move(move, self.board)
            except ValueError as exc:
                self.logger(f"Disqualification: {COLOR_NAMES[color]} - {exc}")
                self.winner = opponent(color)
                break

            self.play_move(*move)
            self.logger(f"Move {self.move_count}: {'B' if color == BLACK else 'W'} {tuple(move)}")

        if self.renderer:
            self.renderer(self.board, self.last_move, self.current_color, self.winner)
        self.logger(f"Result: {self.status_text()}")
        return self.winner
