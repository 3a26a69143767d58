"""AI engine package."""

from gomoku.ai.gomoku_ai import GomokuAI
from gomoku.ai.minimax import MinimaxAI

__all__ = ["GomokuAI", "MinimaxAI"]
