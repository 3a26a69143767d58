from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from gomoku.core.board import Board
from gomoku.core.move import Move
from gomoku.ai.config import (
    SearchConfig,
    MAX_CANDIDATES,
    PROXIMITY_RANGE,
    PROXIMITY_WEIGHT,
    VICINITY_RANGE,
)
from gomoku.ai.heuristics import centrality_bonus


@dataclass(frozen=True)
class PrioritizedMove:
    """Move with priority score (higher = better)."""
    move: Move
    priority: int


def pruned_moves(board: Board, distance: int = VICINITY_RANGE) -> List[Move]:
    """
    Get all empty cells within `distance` of an existing stone.

    Uses Chebyshev neighborhood: any (dr, dc) with max(|dr|,|dc|) <= distance.
    Row-major order. Empty board -> no candidates.
    """
    n = board.size
    near = np.zeros((n, n), dtype=bool)
    for stone, _ in board.iter_stones():
        r0, r1 = max(0, stone.row - distance), min(n, stone.row + distance + 1)
        c0, c1 = max(0, stone.col - distance), min(n, stone.col + distance + 1)
        near[r0:r1, c0:c1] = True
    return [m for m in (Move(int(r), int(c)) for r, c in np.argwhere(near))
            if board.is_valid_move(m.row, m.col)]


def proximity_score(board: Board, move: Move) -> int:
    """Centrality bonus plus a weight for every stone within Manhattan distance PROXIMITY_RANGE."""
    n = board.size
    score = centrality_bonus(n, move.row, move.col)
    rng = PROXIMITY_RANGE
    for r in range(max(0, move.row - rng), min(n - 1, move.row + rng) + 1):
        for c in range(max(0, move.col - rng), min(n - 1, move.col + rng) + 1):
            if board.is_valid_move(r, c):
                continue
            distance = move.manhattan(r, c)
            if distance <= rng:
                score += (rng - distance + 1) * PROXIMITY_WEIGHT
    return score


def order_by_heuristic(board: Board, moves: List[Move]) -> List[Move]:
    """Best first; equal scores keep their input order."""
    prioritized = [PrioritizedMove(m, proximity_score(board, m)) for m in moves]
    prioritized.sort(key=lambda p: p.priority, reverse=True)
    return [p.move for p in prioritized]


class MoveGenerator:
    """
    Generates and orders candidate moves for search.

    Pruning and the candidate cap follow the search config:
      - prune_moves: only cells near existing stones
      - cap_candidates: keep the MAX_CANDIDATES best after ordering
    """

    def __init__(self, board: Board, config: SearchConfig) -> None:
        self.board = board
        self.config = config

    def candidates(self, prune: bool | None = None) -> List[Move]:
        """
        Return candidate moves ordered by proximity priority (best first).

        Args:
            prune: Override config.prune_moves (the root always prunes).
        """
        if prune is None:
            prune = self.config.prune_moves
        moves = pruned_moves(self.board) if prune else self.board.legal_moves()
        ordered = order_by_heuristic(self.board, moves)
        if self.config.cap_candidates:
            return ordered[:MAX_CANDIDATES]
        return ordered
