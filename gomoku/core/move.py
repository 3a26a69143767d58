from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    Immutable move on the board.
    Coordinates are 0-based: (0..size-1, 0..size-1)
    """
    row: int
    col: int

    def __str__(self) -> str:
        """Return form like '7 7' (row col)."""
        return f"{self.row} {self.col}"

    def manhattan(self, row: int, col: int) -> int:
        return abs(self.row - row) + abs(self.col - col)
