"""Five-in-a-row search engine."""

from gomoku.core.board import Board, Player
from gomoku.core.move import Move
from gomoku.ai.config import Difficulty, SearchConfig
from gomoku.ai.gomoku_ai import GomokuAI

__all__ = ["Board", "Player", "Move", "Difficulty", "SearchConfig", "GomokuAI"]
