"""Greedy move choice: opening, critical win/block, opening book, ranking, difficulty."""

import random

import pytest

from Gomoku_Heuristic_AI.Board import BLACK, WHITE, Board, Move, board_from_moves, empty_board, is_full
from Gomoku_Heuristic_AI.ai import heuristic, move_selector, search_greedy


def build(black=(), white=()):
    return board_from_moves([Move(r, c, BLACK) for r, c in black] + [Move(r, c, WHITE) for r, c in white])


class RecordingPicker:
    """rng stand-in: remembers the pool offered and picks by index."""

    def __init__(self, index=0):
        self.index = index
        self.pools = []

    def choice(self, seq):
        self.pools.append(list(seq))
        return seq[self.index]


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
@pytest.mark.parametrize("color", [BLACK, WHITE])
def test_empty_board_opens_at_center(difficulty, color):
    assert search_greedy.decide_move(empty_board(), difficulty, color) == (7, 7)


def test_immediate_win_beats_higher_scoring_block():
    b = build(
        black=[(7, 2), (3, 4), (3, 5), (3, 6), (3, 7)],
        white=[(7, 3), (7, 4), (7, 5), (7, 6)],
    )
    # Blocking black's open four outscores completing our five under evaluate().
    assert heuristic.evaluate(b, 3, 3, WHITE) > heuristic.evaluate(b, 7, 7, WHITE)
    for difficulty in search_greedy.DIFFICULTIES:
        assert search_greedy.decide_move(b, difficulty, WHITE) == (7, 7)


def test_five_is_preferred_over_earlier_live_four():
    b = build(
        white=[(2, 5), (2, 6), (2, 7), (12, 1), (12, 2), (12, 3), (12, 4)],
        black=[(12, 0), (0, 0), (0, 14), (14, 14)],
    )
    # (2, 4) / (2, 8) make a live four and come first in row-major order; (12, 5) wins.
    assert search_greedy.find_critical_move(b, WHITE)[0] == "five"
    assert search_greedy.decide_move(b, "hard", WHITE) == (12, 5)


def test_blocks_open_four():
    b = build(black=[(5, 5), (5, 6), (5, 7), (5, 8)], white=[(10, 2), (12, 12), (1, 13)])
    for difficulty in search_greedy.DIFFICULTIES:
        assert search_greedy.decide_move(b, difficulty, WHITE, rng=RecordingPicker(2)) in {(5, 4), (5, 9)}


def test_own_rush_four_is_taken_before_blocking_open_four():
    b = build(black=[(5, 5), (5, 6), (5, 7), (5, 8), (10, 0)], white=[(10, 1), (10, 2), (10, 3)])
    assert search_greedy.find_critical_move(b, WHITE)[0] == "rush_four"
    for difficulty in search_greedy.DIFFICULTIES:
        assert search_greedy.decide_move(b, difficulty, WHITE) == (10, 4)


def test_blocks_closed_four_that_would_become_five():
    b = build(black=[(9, 3), (9, 4), (9, 5), (9, 6)], white=[(9, 2), (0, 0), (14, 14)])
    assert search_greedy.decide_move(b, "medium", WHITE) == (9, 7)


def test_rush_four_threat_falls_through_to_ranking(monkeypatch):
    b = build(black=[(5, 5), (5, 6), (5, 7)], white=[(5, 4), (0, 14), (14, 0)])
    tier, score, cell = search_greedy.find_critical_move(b, BLACK)
    assert (tier, cell) == ("rush_four", (5, 8))
    assert score < heuristic.DEFAULT_WEIGHTS["live_four"]

    monkeypatch.setattr(search_greedy.move_selector, "rank_candidates", lambda *a, **k: [(1, (0, 0))])
    assert search_greedy.decide_move(b, "medium", WHITE) == (0, 0)


def test_opening_book_around_taken_center():
    b = build(black=[(7, 7)])
    assert search_greedy.decide_move(b, "hard", WHITE) == (6, 7)
    b = build(black=[(7, 7), (8, 7)], white=[(6, 7)])
    assert search_greedy.decide_move(b, "hard", WHITE) == (7, 6)


def test_opening_move_exhausted_returns_none():
    ring = [(7 + dr, 7 + dc) for dr, dc in move_selector.OPENING_OFFSETS]
    b = build(black=[(7, 7)] + ring[:4], white=ring[4:])
    assert move_selector.opening_move(b) is None


def test_medium_and_hard_take_the_top_candidate():
    b = build(black=[(7, 7), (7, 8), (8, 8)], white=[(6, 6), (9, 9), (6, 8)])
    for difficulty in ("medium", "hard"):
        cap = search_greedy.CANDIDATE_CAPS[difficulty]
        ranked = move_selector.rank_candidates(b, WHITE, cap)
        assert search_greedy.decide_move(b, difficulty, WHITE, rng=RecordingPicker(2)) == ranked[0][1]


def test_easy_samples_from_top_three():
    b = build(black=[(7, 7), (7, 8), (8, 8)], white=[(6, 6), (9, 9), (6, 8)])
    ranked = move_selector.rank_candidates(b, WHITE, search_greedy.CANDIDATE_CAPS["easy"])
    picker = RecordingPicker(index=2)
    move = search_greedy.decide_move(b, "easy", WHITE, rng=picker)
    assert picker.pools == [ranked[:3]]
    assert move == ranked[2][1]


def test_easy_with_seeded_rng_is_reproducible():
    b = build(black=[(7, 7), (7, 8), (8, 8)], white=[(6, 6), (9, 9), (6, 8)])
    first = search_greedy.decide_move(b, "easy", WHITE, rng=random.Random(7))
    second = search_greedy.decide_move(b, "easy", WHITE, rng=random.Random(7))
    top3 = {pos for _, pos in move_selector.rank_candidates(b, WHITE, 8)[:3]}
    assert first == second
    assert first in top3


def test_decide_move_does_not_mutate_board():
    b = build(black=[(7, 7), (7, 8), (8, 8)], white=[(6, 6), (9, 9), (6, 8)])
    before = b.cells
    mv = search_greedy.decide_move(b, "hard", BLACK)
    assert b.cells == before
    assert b.is_empty(*mv)


def test_full_board_has_no_move():
    size = 15
    b = Board(size, tuple(
        tuple(BLACK if ((c // 2) + r) % 2 == 0 else WHITE for c in range(size))
        for r in range(size)
    ))
    assert is_full(b)
    assert search_greedy.decide_move(b, "hard", WHITE) is None
    assert search_greedy.decide_move(b, "easy", BLACK) is None


def test_unknown_difficulty_rejected():
    with pytest.raises(ValueError):
        search_greedy.decide_move(empty_board(), "impossible", WHITE)


def test_candidate_radius_grows_with_stone_count():
    assert move_selector.search_radius(8) == 1
    assert move_selector.search_radius(9) == 2
    b = build(black=[(7, 7)])
    assert len(move_selector.generate_candidates(b, 1)) == 8
    assert len(move_selector.generate_candidates(b, 2)) == 24


def test_ranking_is_stable_and_capped():
    b = build(black=[(7, 7)])
    ranked = move_selector.rank_candidates(b, WHITE, 20)
    assert len(ranked) == 8
    scores = [s for s, _ in ranked]
    assert scores == sorted(scores, reverse=True)
    # All eight neighbours tie; enumeration (row-major) order is kept.
    assert [pos for _, pos in ranked] == move_selector.generate_candidates(b, 1)
    assert len(move_selector.rank_candidates(b, WHITE, 3)) == 3


def test_centre_fallback_on_stoneless_board():
    cells = move_selector.centre_fallback(empty_board())
    assert len(cells) == 61
    ranked = move_selector.rank_candidates(empty_board(), WHITE, 8)
    assert ranked[0] == (heuristic.DEFAULT_WEIGHTS["none"], (2, 7))
    assert len(ranked) == 8
