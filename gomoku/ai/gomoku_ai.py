import random
from typing import Optional, Union

from gomoku.core.board import Board
from gomoku.core.move import Move
from gomoku.ai.minimax import MinimaxAI
from gomoku.ai.config import AI_LEVELS, Difficulty, SearchConfig


class GomokuAI:
    def __init__(
        self,
        lvl: Union[Difficulty, SearchConfig] = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if isinstance(lvl, SearchConfig):
            cfg = lvl
        else:
            cfg = AI_LEVELS[Difficulty(lvl)]
        if rng is None and seed is not None:
            rng = random.Random(seed)
        self.lvl = lvl
        self.config = cfg
        self.ai = MinimaxAI(config=cfg, rng=rng)

    @property
    def nodes_explored(self) -> int:
        return self.ai.nodes_explored

    def best_move(self, board: Board) -> Optional[Move]:
        """
        Get the best move for board.current_player.
        0-based Move, or None when no move is left (draw).
        """
        return self.ai.get_best_move(board)

    get_move = best_move
