"""Board state and move types."""

from gomoku.core.board import Board, Player
from gomoku.core.move import Move

__all__ = ["Board", "Player", "Move"]
