
from __future__ import annotations

import argparse
import logging
from typing import Optional

from gomoku.core.board import Board, Player
from gomoku.ai.config import Difficulty
from gomoku.ai.gomoku_ai import GomokuAI

logger = logging.getLogger(__name__)


def play(black: GomokuAI, white: GomokuAI, board_size: int, max_moves: int) -> tuple[Board, Optional[Player]]:
    """
    Engine vs engine. Returns the final board and the winner (None = draw / cut off).
    Turn order and win checks are driven here, through the Board API only.
    """
    board = Board(board_size)
    engines = {Player.BLACK: black, Player.WHITE: white}
    for ply in range(max_moves):
        side = board.current_player
        move = engines[side].best_move(board)
        if move is None:
            logger.info("no moves left after %d plies", ply)
            return board, None
        if not board.place(move.row, move.col):
            logger.error("%s proposed illegal move %s", side, move)
            return board, side.opponent()
        logger.info("%3d %s %s", ply + 1, side, move)
        if board.check_win(move.row, move.col):
            return board, side
        board.switch_turn()
    return board, None


def main():
    levels = [d.value for d in Difficulty]
    ap = argparse.ArgumentParser(description="Self-play between two engine tiers")
    ap.add_argument("--black", choices=levels, default=Difficulty.HARD.value)
    ap.add_argument("--white", choices=levels, default=Difficulty.MEDIUM.value)
    ap.add_argument("--size", type=int, default=15)
    ap.add_argument("--max-moves", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None, help="Seed for EASY tie-breaks")
    ap.add_argument("-v", "--verbose", action="store_true")

    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    black = GomokuAI(Difficulty(args.black), seed=args.seed)
    white = GomokuAI(Difficulty(args.white), seed=args.seed)
    max_moves = args.max_moves if args.max_moves is not None else args.size * args.size

    board, winner = play(black, white, args.size, max_moves)
    print(board.to_ascii())
    if winner is None:
        print("Draw")
    else:
        print(f"{winner} wins")


if __name__ == "__main__":
    main()
