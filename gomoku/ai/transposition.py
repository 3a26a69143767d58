"""
Transposition cache for one top-level search.

Entries are keyed by (packed board cells, maximizing flag, remaining depth)
and remember whether the stored score is exact or only a bound produced by
an alpha-beta cutoff.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from gomoku.core.board import Board


class BoundType(Enum):
    EXACT = 0   # searched with a full window
    LOWER = 1   # beta cutoff, true value >= score
    UPPER = 2   # alpha cutoff, true value <= score


@dataclass(frozen=True)
class CacheKey:
    cells: bytes
    maximizing: bool
    depth: int

    @classmethod
    def of(cls, board: Board, maximizing: bool, depth: int) -> "CacheKey":
        return cls(board.key(), maximizing, depth)


@dataclass(frozen=True)
class CacheEntry:
    score: float
    bound: BoundType


class TranspositionCache:
    def __init__(self) -> None:
        self.table: Dict[CacheKey, CacheEntry] = {}
        self.hits = 0
        self.stores = 0

    def __len__(self) -> int:
        return len(self.table)

    def probe(self, key: CacheKey, alpha: float, beta: float) -> Optional[float]:
        """
        Cached score if it settles the node for the window (alpha, beta), else None.
        """
        entry = self.table.get(key)
        if entry is None:
            return None
        if (
            entry.bound == BoundType.EXACT
            or (entry.bound == BoundType.LOWER and entry.score >= beta)
            or (entry.bound == BoundType.UPPER and entry.score <= alpha)
        ):
            self.hits += 1
            return entry.score
        return None

    def store(self, key: CacheKey, score: float, alpha: float, beta: float) -> None:
        """Store `score` found with the window the node was entered with."""
        if score <= alpha:
            bound = BoundType.UPPER
        elif score >= beta:
            bound = BoundType.LOWER
        else:
            bound = BoundType.EXACT
        self.table[key] = CacheEntry(score, bound)
        self.stores += 1

    def stats(self) -> Tuple[int, int, int]:
        """(entries, hits, stores)"""
        return len(self.table), self.hits, self.stores

    def reset(self) -> None:
        self.table.clear()
        self.hits = 0
        self.stores = 0
