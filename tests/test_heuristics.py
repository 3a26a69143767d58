"""Unit tests for pattern scoring and board evaluation."""

import pytest

from gomoku.core.board import Board, Player
from gomoku.ai.heuristics import (
    Heuristic,
    blocked_sequence_score,
    centrality_bonus,
    evaluate_board,
    evaluate_line,
    evaluate_single_point_move,
    score_line,
    sequence_score,
)


OPEN = {1: 1, 2: 50, 3: 500, 4: 10_000}
HALF = {1: 0, 2: 10, 3: 100, 4: 1_000}


def row_board(black=(), white=(), row=0, size=15):
    board = Board(size)
    for c in black:
        board.set_stone(row, c, Player.BLACK)
    for c in white:
        board.set_stone(row, c, Player.WHITE)
    return board


class TestSequenceTables:
    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_open_sequence(self, count):
        assert sequence_score(count, 2) == OPEN[count]
        assert sequence_score(count, 3) == OPEN[count]
        assert sequence_score(count, 1) == HALF[count]
        assert sequence_score(count, 0) == 0

    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_blocked_sequence(self, count):
        assert blocked_sequence_score(count, 2) == HALF[count]
        assert blocked_sequence_score(count, 1) == HALF[count]
        assert blocked_sequence_score(count, 0) == 0

    def test_five(self):
        assert sequence_score(5, 0) == 100_000
        assert sequence_score(6, 2) == 100_000
        assert blocked_sequence_score(5, 1) == 100_000


class TestEvaluateLine:
    def test_open_three(self):
        board = row_board(black=(2, 3, 4))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 500

    def test_three_blocked_by_opponent(self):
        board = row_board(black=(2, 3, 4), white=(1,))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 100

    def test_three_blocked_both_sides(self):
        board = row_board(black=(2, 3, 4), white=(1, 5))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 0

    def test_two_against_edge(self):
        board = row_board(black=(0, 1))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 10

    def test_trailing_run_scored_as_blocked(self):
        board = row_board(black=(13, 14))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 10

    def test_open_four(self):
        board = row_board(black=(5, 6, 7, 8))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 10_000

    def test_five(self):
        board = row_board(black=(0, 1, 2, 3, 4))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 100_000

    def test_single_open_stone(self):
        board = row_board(black=(7,))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 1

    def test_two_runs(self):
        # open two + open three
        board = row_board(black=(1, 2, 6, 7, 8))
        assert evaluate_line(board, (0, 0), (0, 1), Player.BLACK) == 50 + 500

    def test_other_side_scores_separately(self):
        board = row_board(black=(2, 3, 4), white=(1,))
        assert evaluate_line(board, (0, 0), (0, 1), Player.WHITE) == 0

    def test_diagonal_walk(self):
        board = Board()
        for i in (3, 4, 5):
            board.set_stone(i, i, Player.BLACK)
        assert evaluate_line(board, (0, 0), (1, 1), Player.BLACK) == 500

    def test_start_off_board(self):
        assert evaluate_line(Board(), (15, 0), (0, 1), Player.BLACK) == 0

    def test_score_line_raw(self):
        assert score_line([0, 1, 1, 1, 0], 1) == 500
        assert score_line([2, 1, 1, 1, 0], 1) == 100
        assert score_line([], 1) == 0


def evaluate_by_walking(board, player, opponent):
    """Reference sum over every line start, walking each line."""
    n = board.size
    starts = []
    starts += [((i, 0), (0, 1)) for i in range(n)]
    starts += [((0, j), (1, 0)) for j in range(n)]
    starts += [((i, 0), (1, 1)) for i in range(n)]
    starts += [((0, j), (1, 1)) for j in range(1, n)]
    starts += [((i, n - 1), (1, -1)) for i in range(n)]
    starts += [((0, j), (1, -1)) for j in range(n - 2, -1, -1)]
    return sum(
        evaluate_line(board, s, d, player) - evaluate_line(board, s, d, opponent)
        for s, d in starts
    )


class TestEvaluateBoard:
    def test_empty_board(self):
        assert evaluate_board(Board(), Player.BLACK, Player.WHITE) == 0

    def test_single_center_stone(self):
        board = Board()
        board.place(7, 7)
        # open single on each of the 4 axes
        assert evaluate_board(board, Player.BLACK, Player.WHITE) == 4
        assert evaluate_board(board, Player.WHITE, Player.BLACK) == -4

    def test_symmetric_difference(self):
        board = Board()
        for r, c in [(7, 7), (7, 8), (7, 9), (6, 8)]:
            board.set_stone(r, c, Player.BLACK)
        for r, c in [(8, 8), (8, 9), (5, 5)]:
            board.set_stone(r, c, Player.WHITE)
        ours = evaluate_board(board, Player.BLACK, Player.WHITE)
        theirs = evaluate_board(board, Player.WHITE, Player.BLACK)
        assert ours == -theirs
        assert ours > 0

    def test_matches_line_walk(self):
        board = Board()
        stones = [(7, 7), (7, 8), (6, 6), (8, 8), (3, 10), (0, 0), (14, 1), (10, 4)]
        for i, (r, c) in enumerate(stones):
            board.set_stone(r, c, Player.BLACK if i % 2 == 0 else Player.WHITE)
        assert evaluate_board(board, Player.BLACK, Player.WHITE) == evaluate_by_walking(
            board, Player.BLACK, Player.WHITE
        )

    def test_heuristic_wrapper(self):
        board = Board()
        board.place(7, 7)
        assert Heuristic(board).evaluate(Player.BLACK) == 4
        assert Heuristic(board).evaluate(Player.BLACK, Player.WHITE) == 4


class TestSinglePointMove:
    def test_centrality_bonus(self):
        assert centrality_bonus(15, 7, 7) == 45
        assert centrality_bonus(15, 0, 0) == 3
        assert centrality_bonus(15, 0, 14) == 3
        assert centrality_bonus(15, 7, 8) == 42

    def test_center_on_empty_board(self):
        # 45 centrality + open single on 4 axes
        assert evaluate_single_point_move(Board(), 7, 7, Player.BLACK) == 49

    def test_corner(self):
        assert evaluate_single_point_move(Board(), 0, 0, Player.BLACK) == 3

    def test_extends_open_three(self):
        board = Board()
        board.set_stone(7, 5, Player.BLACK)
        board.set_stone(7, 6, Player.BLACK)
        board.set_stone(7, 7, Player.BLACK)
        # open three horizontally + 3 open singles + centrality
        assert evaluate_single_point_move(board, 7, 7, Player.BLACK) == 500 + 3 + 45

    def test_blocked_side(self):
        board = Board()
        board.set_stone(7, 6, Player.BLACK)
        board.set_stone(7, 5, Player.WHITE)
        # horizontal: two with one open end -> 10
        assert evaluate_single_point_move(board, 7, 7, Player.BLACK) == 10 + 3 + 45

    def test_five(self):
        board = Board()
        for c in (3, 4, 5, 6):
            board.set_stone(7, c, Player.BLACK)
        score = evaluate_single_point_move(board, 7, 7, Player.BLACK)
        assert score >= 100_000
