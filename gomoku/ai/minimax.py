"""Minimax with Alpha-Beta pruning, forced-move blocking and a per-search transposition cache."""

import logging
import random
import time
from typing import List, Optional

from gomoku.core.board import Board, Player
from gomoku.core.move import Move
from gomoku.ai.config import SearchConfig, SCORE_FIVE
from gomoku.ai.heuristics import Heuristic, evaluate_single_point_move
from gomoku.ai.movegen import MoveGenerator
from gomoku.ai.transposition import CacheKey, TranspositionCache

logger = logging.getLogger(__name__)


def winning_reply(board: Board, player: Player) -> Optional[Move]:
    """First empty cell (row-major) where `player` would complete five, or None."""
    for move in board.legal_moves():
        if board.is_winning_move(move.row, move.col, player):
            return move
    return None


class MinimaxAI:
    """Fixed-depth Minimax AI with Alpha-Beta pruning."""

    def __init__(
        self,
        config: SearchConfig,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.cache = TranspositionCache()
        self.nodes_explored = 0
        self.last_score: Optional[float] = None

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Best move for board.current_player, or None if the board is full.

        The input board is never modified.
        """
        start = time.time()
        self.nodes_explored = 0
        self.last_score = None

        if board.is_full():
            return None

        center = board.center()
        if board.is_valid_move(center.row, center.col):
            return center

        if self.config.greedy:
            move = self._greedy_move(board)
        else:
            move = self._search_root(board)

        logger.debug(
            "depth=%d move=%s score=%s nodes=%d cache=%s %.3fs",
            self.config.depth,
            move,
            self.last_score,
            self.nodes_explored,
            self.cache.stats() if self.config.use_cache else "off",
            time.time() - start,
        )
        return move

    def _greedy_move(self, board: Board) -> Optional[Move]:
        """Score every legal move on its own; ties go to a coin flip."""
        player = board.current_player
        best_score = float("-inf")
        best_move: Optional[Move] = None
        for move in board.legal_moves():
            test = board.clone()
            test.place(move.row, move.col)
            score = evaluate_single_point_move(test, move.row, move.col, player)
            if score > best_score or (score == best_score and self.rng.random() > 0.5):
                best_score = score
                best_move = move
        self.last_score = best_score
        return best_move

    def _search_root(self, board: Board) -> Optional[Move]:
        """Alpha-beta at root. Immediate wins first, then forced blocks, then search."""
        if self.config.use_cache:
            self.cache.reset()

        player = board.current_player
        opponent = player.opponent()

        candidates: List[Move] = MoveGenerator(board, self.config).candidates(prune=True)

        best_move: Optional[Move] = None
        best_score = float("-inf")
        for move in candidates:
            child = board.clone()
            child.place(move.row, move.col)
            if child.check_win(move.row, move.col):
                self.last_score = SCORE_FIVE
                return move

            block = winning_reply(board, opponent)
            if block is not None:
                logger.debug("forced block at %s", block)
                self.last_score = None
                return block

            child.switch_turn()
            score = self._alpha_beta(
                child,
                self.config.depth - 1,
                best_score,
                float("inf"),
                False,
                player,
                opponent,
            )
            if score > best_score:
                best_score = score
                best_move = move

        self.last_score = best_score
        return best_move

    def _alpha_beta(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        is_maximizing: bool,
        player: Player,
        opponent: Player,
    ) -> float:
        """Alpha-beta recursion. Scores are from `player`'s point of view."""
        self.nodes_explored += 1
        use_cache = self.config.use_cache
        key = CacheKey.of(board, is_maximizing, depth) if use_cache else None

        if key is not None:
            cached = self.cache.probe(key, alpha, beta)
            if cached is not None:
                return cached

        if depth == 0:
            score = Heuristic(board).evaluate(player, opponent)
            if key is not None:
                self.cache.store(key, score, float("-inf"), float("inf"))
            return score

        possible_moves = MoveGenerator(board, self.config).candidates()
        if not possible_moves:
            return 0

        alpha_orig, beta_orig = alpha, beta
        side = player if is_maximizing else opponent

        if is_maximizing:
            best = float("-inf")
            for move in possible_moves:
                child = board.clone()
                child.set_turn(side)
                child.place(move.row, move.col)
                if child.check_win(move.row, move.col):
                    best = SCORE_FIVE
                    break
                child.switch_turn()
                score = self._alpha_beta(child, depth - 1, alpha, beta, False, player, opponent)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
        else:
            best = float("inf")
            for move in possible_moves:
                child = board.clone()
                child.set_turn(side)
                child.place(move.row, move.col)
                if child.check_win(move.row, move.col):
                    best = -SCORE_FIVE
                    break
                child.switch_turn()
                score = self._alpha_beta(child, depth - 1, alpha, beta, True, player, opponent)
                best = min(best, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break

        if key is not None:
            self.cache.store(key, best, alpha_orig, beta_orig)
        return best
