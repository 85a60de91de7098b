"""Abstract player interface for human or AI controllers."""


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board):
        """Text-input player; raises ValueError on unparsable input."""
        raw = self.input_fn("Enter move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
