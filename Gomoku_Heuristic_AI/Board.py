"""Immutable board value and the board-query primitives used by rules and AI."""

from collections import namedtuple

BLACK = -1
WHITE = 1
EMPTY = 0  # also "no player": draw / undecided

BOARD_SIZE = 15

Move = namedtuple("Move", ["row", "col", "color"])


def opponent(color):
    return -color


class Board:
    """
    Fixed-size square grid stored as a tuple of row tuples (-1 black, 0 empty, 1 white).
    Every mutator returns a new Board; reads outside the grid see an empty cell.
    """

    __slots__ = ("size", "cells")

    def __init__(self, size=BOARD_SIZE, cells=None):
        self.size = size
        if cells is None:
            cells = tuple((EMPTY,) * size for _ in range(size))
        self.cells = cells

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, self.cells))

    def __repr__(self):
        return f"Board(size={self.size}, stones={self.stone_count})"

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        if not self.in_bounds(row, col):
            return EMPTY
        return self.cells[row][col]

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    @property
    def stone_count(self):
        return sum(1 for line in self.cells for v in line if v != EMPTY)

    def place(self, row, col, color):
        """Return a board with `color` at (row, col); invalid moves return self unchanged."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.is_empty(row, col):
            return self
        return self._with_cell(row, col, color)

    def remove(self, row, col):
        """Return a board with (row, col) cleared."""
        if not self.in_bounds(row, col) or self.cells[row][col] == EMPTY:
            return self
        return self._with_cell(row, col, EMPTY)

    def _with_cell(self, row, col, value):
        line = self.cells[row]
        new_line = line[:col] + (value,) + line[col + 1:]
        return Board(self.size, self.cells[:row] + (new_line,) + self.cells[row + 1:])

    def render(self):
        """Plain-text diagram with column/row indices for terminal play."""
        symbols = {BLACK: "X", WHITE: "O", EMPTY: "."}
        header = "   " + " ".join(f"{c % 10}" for c in range(self.size))
        rows = [header]
        for r, line in enumerate(self.cells):
            rows.append(f"{r:2d} " + " ".join(symbols[v] for v in line))
        return "\n".join(rows)


def empty_board(size=BOARD_SIZE):
    return Board(size)


def center(size=BOARD_SIZE):
    mid = size // 2
    return mid, mid


def is_valid_move(board, row, col):
    return board.is_empty(row, col)


def place(board, row, col, color):
    return board.place(row, col, color)


def is_full(board):
    return all(v != EMPTY for line in board.cells for v in line)


def is_board_empty(board):
    return all(v == EMPTY for line in board.cells for v in line)


def empty_cells(board):
    """All empty coordinates in row-major order."""
    return [
        (r, c)
        for r in range(board.size)
        for c in range(board.size)
        if board.cells[r][c] == EMPTY
    ]


def _window(board, row, col, radius):
    for r in range(max(0, row - radius), min(board.size - 1, row + radius) + 1):
        for c in range(max(0, col - radius), min(board.size - 1, col + radius) + 1):
            if r == row and c == col:
                continue
            yield r, c


def neighbors_within(board, row, col, radius):
    """Empty cells in the square window around (row, col), clipped to the board."""
    return [(r, c) for r, c in _window(board, row, col, radius) if board.cells[r][c] == EMPTY]


def has_occupied_neighbor(board, row, col, radius):
    return any(board.cells[r][c] != EMPTY for r, c in _window(board, row, col, radius))


def board_from_moves(moves, size=BOARD_SIZE):
    """Rebuild a board from an ordered sequence of Move records."""
    board = Board(size)
    for move in moves:
        board = board.place(move.row, move.col, move.color)
    return board
