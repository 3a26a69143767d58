"""Pattern-based heuristic evaluation (open / blocked runs along every line)."""

from typing import Dict, Optional, Sequence, Tuple

from gomoku.core.board import Board, Player
from gomoku.ai.config import (
    SCORE_FIVE,
    SCORE_OPEN_FOUR,
    SCORE_FOUR,
    SCORE_OPEN_THREE,
    SCORE_THREE,
    SCORE_OPEN_TWO,
    SCORE_TWO,
    SCORE_OPEN_ONE,
    SCORE_CENTER,
)


# run length -> score, by number of open ends
OPEN_SCORES: Dict[int, int] = {
    4: SCORE_OPEN_FOUR,
    3: SCORE_OPEN_THREE,
    2: SCORE_OPEN_TWO,
    1: SCORE_OPEN_ONE,
}
BLOCKED_SCORES: Dict[int, int] = {
    4: SCORE_FOUR,
    3: SCORE_THREE,
    2: SCORE_TWO,
    1: 0,
}


def sequence_score(count: int, open_ends: int) -> int:
    """Score a run that ended on an empty cell."""
    if count >= 5:
        return SCORE_FIVE
    if open_ends >= 2:
        return OPEN_SCORES.get(count, 0)
    if open_ends == 1:
        return BLOCKED_SCORES.get(count, 0)
    return 0


def blocked_sequence_score(count: int, open_ends: int) -> int:
    """Score a run cut off by an opponent stone or the board edge."""
    if count >= 5:
        return SCORE_FIVE
    if open_ends >= 1:
        return BLOCKED_SCORES.get(count, 0)
    return 0


def centrality_bonus(size: int, row: int, col: int) -> int:
    center = size // 2
    distance = abs(row - center) + abs(col - center)
    return max(0, size - distance) * SCORE_CENTER


def score_line(cells: Sequence[int], side: int) -> int:
    """
    Score one line of raw cell values for `side`.

    `empty` holds the empties bounding the current run: the ones seen before
    it, then one more for the empty that ends it.
    """
    empty_value = Player.EMPTY.value
    score = 0
    count = 0
    empty = 0
    for stone in cells:
        if stone == side:
            count += 1
            if count >= 5:
                score += SCORE_FIVE
                count = 0
                empty = 0
        elif stone == empty_value:
            if count > 0:
                empty += 1
                score += sequence_score(count, empty)
                count = 0
                empty = 1
            else:
                empty += 1
        else:
            if count > 0:
                score += blocked_sequence_score(count, empty)
            count = 0
            empty = 0
    if count > 0:
        score += blocked_sequence_score(count, empty)
    return score


def evaluate_line(
    board: Board,
    start: Tuple[int, int],
    direction: Tuple[int, int],
    side: Player,
) -> int:
    """Walk from `start` along `direction` to the board edge and score `side`'s runs."""
    row, col = start
    dr, dc = direction
    cells = []
    while board.in_bounds(row, col):
        cells.append(board.get_stone(row, col).value)
        row += dr
        col += dc
    return score_line(cells, side.value)


def evaluate_board(board: Board, player: Player, opponent: Player) -> int:
    """
    Evaluate the whole board. Positive = good for `player`.

    Sums every row, column and diagonal (both families) for `player`
    minus the same sum for `opponent`.
    """
    p = player.value
    o = opponent.value
    score = 0
    for cells in board.lines():
        score += score_line(cells, p) - score_line(cells, o)
    return score


def evaluate_single_point_move(board: Board, row: int, col: int, player: Player) -> int:
    """
    Cheap move-local estimate: runs through (row, col) on the 4 axes plus centrality.

    (row, col) itself counts as `player`'s stone whether or not it is placed.
    """
    score = centrality_bonus(board.size, row, col)
    for dr, dc in board.directions():
        count = 1
        open_ends = 0
        for sr, sc in ((dr, dc), (-dr, -dc)):
            r, c = row, col
            for _ in range(5):
                r += sr
                c += sc
                if not board.in_bounds(r, c):
                    break
                stone = board.get_stone(r, c)
                if stone == player:
                    count += 1
                    continue
                if stone == Player.EMPTY:
                    open_ends += 1
                break
        score += sequence_score(count, open_ends)
    return score


class Heuristic:
    """Evaluates board state from the maximizing player's perspective."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def evaluate(self, player: Player, opponent: Optional[Player] = None) -> int:
        if opponent is None:
            opponent = player.opponent()
        return evaluate_board(self.board, player, opponent)
