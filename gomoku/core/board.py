from typing import List, Tuple, Iterator
import numpy as np
from enum import Enum

from gomoku.core.move import Move


class Player(Enum):
    """Player constants."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def symbol(self) -> str:
        return {0: ".", 1: "O", 2: "X"}[self.value]

    def opponent(self) -> "Player":
        if self == Player.BLACK:
            return Player.WHITE
        if self == Player.WHITE:
            return Player.BLACK
        return Player.EMPTY

    def __str__(self) -> str:
        return self.name


class Board:
    """
    Represents the game board state: grid plus side to move.

    - Uses 0-based (row, col) externally.
    - Internally stores a size x size int8 grid of Player values.
    - Never raises on bad coordinates; queries return False / EMPTY instead.
    """

    def __init__(self, size: int = 15) -> None:
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self._size: int = size
        self._grid: np.ndarray = np.zeros((size, size), dtype=np.int8)
        self._current: Player = Player.BLACK
        self._moves: int = 0  # number of placed stones (non-empty)

    @property
    def size(self) -> int:
        return self._size

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def current_player(self) -> Player:
        return self._current

    def clone(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self._size)
        new_board._grid = np.copy(self._grid)
        new_board._current = self._current
        new_board._moves = self._moves
        return new_board

    # ---------- Bounds / indexing ----------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def center(self) -> Move:
        return Move(self._size // 2, self._size // 2)

    # ---------- Cell access ----------

    def get_stone(self, row: int, col: int) -> Player:
        """Stone at (row, col); EMPTY when out of range."""
        if not self.in_bounds(row, col):
            return Player.EMPTY
        return Player(int(self._grid[row, col]))

    def is_valid_move(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._grid[row, col] == Player.EMPTY.value

    def place(self, row: int, col: int) -> bool:
        """
        Place the current player's stone at (row, col).

        Does not switch turn. Returns False (board unchanged) if the
        cell is out of bounds or occupied.
        """
        if not self.is_valid_move(row, col):
            return False
        self._grid[row, col] = self._current.value
        self._moves += 1
        return True

    make_move = place

    def set_stone(self, row: int, col: int, player: Player) -> bool:
        """
        Write a cell directly (EMPTY clears it). Used to set up positions.

        Returns False if out of bounds or player is not a Player.
        """
        if not isinstance(player, Player) or not self.in_bounds(row, col):
            return False
        before = self._grid[row, col]
        if before == Player.EMPTY.value and player != Player.EMPTY:
            self._moves += 1
        elif before != Player.EMPTY.value and player == Player.EMPTY:
            self._moves -= 1
        self._grid[row, col] = player.value
        return True

    # ---------- Turn ----------

    def switch_turn(self) -> None:
        self._current = self._current.opponent()

    def set_turn(self, player: Player) -> None:
        """Set side to move; anything but BLACK/WHITE is ignored."""
        if player in (Player.BLACK, Player.WHITE):
            self._current = player

    # ---------- Iteration / helpers ----------

    def iter_stones(self) -> Iterator[Tuple[Move, Player]]:
        """Yield all non-empty stones as (Move, Player), row-major."""
        for r, c in np.argwhere(self._grid != Player.EMPTY.value):
            yield Move(int(r), int(c)), Player(int(self._grid[r, c]))

    def legal_moves(self) -> List[Move]:
        """All empty cells, row-major."""
        return [Move(int(r), int(c)) for r, c in np.argwhere(self._grid == Player.EMPTY.value)]

    def is_empty_board(self) -> bool:
        """Check if board is completely empty."""
        return self._moves == 0

    def is_full(self) -> bool:
        return self._moves >= self._size * self._size

    def key(self) -> bytes:
        """Packed cell array, usable as a dict key."""
        return self._grid.tobytes()

    def lines(self) -> List[List[int]]:
        """
        Every full row, column and diagonal (both families) as lists of cell values,
        each ordered from its first cell in scan direction.
        """
        g = self._grid
        n = self._size
        flipped = np.fliplr(g)
        out: List[List[int]] = []
        out.extend(g.tolist())
        out.extend(g.T.tolist())
        for offset in range(-(n - 1), n):
            out.append(np.diagonal(g, offset).tolist())
        for offset in range(-(n - 1), n):
            out.append(np.diagonal(flipped, offset).tolist())
        return out

    # ---------- Directional scan ----------

    @staticmethod
    def directions() -> Tuple[Tuple[int, int], ...]:
        """4 unique directions as (drow, dcol); opposites are implied."""
        return ((0, 1), (1, 0), (1, 1), (1, -1))

    def count_in_direction(self, row: int, col: int, player: Player, dr: int, dc: int) -> int:
        """
        Count consecutive stones of `player` from (row, col) outward in direction (dr, dc),
        excluding the start cell itself.
        """
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self._grid[r, c] == player.value:
            count += 1
            r += dr
            c += dc
        return count

    def line_length_through(self, row: int, col: int, player: Player, dr: int, dc: int) -> int:
        """
        Total consecutive length of `player` stones passing through (row, col)
        along direction (dr, dc), counting (row, col) itself.
        """
        return (
            1
            + self.count_in_direction(row, col, player, dr, dc)
            + self.count_in_direction(row, col, player, -dr, -dc)
        )

    def check_win(self, row: int, col: int) -> bool:
        """
        True if the side to move has 5 or more in a row through (row, col).

        Call after place() and before switch_turn(). Overlines count.
        """
        if not self.in_bounds(row, col):
            return False
        for dr, dc in self.directions():
            if self.line_length_through(row, col, self._current, dr, dc) >= 5:
                return True
        return False

    def is_winning_move(self, row: int, col: int, player: Player) -> bool:
        """
        Would placing `player` at empty (row, col) make 5+ in a row?
        Virtual placement: the board is not modified.
        """
        if not self.is_valid_move(row, col) or player == Player.EMPTY:
            return False
        return any(
            self.line_length_through(row, col, player, dr, dc) >= 5
            for dr, dc in self.directions()
        )

    # ---------- Rendering (debug / logs) ----------

    def to_ascii(self, show_coords: bool = True) -> str:
        """
        Render board as ASCII.
        Uses Player.symbol(): EMPTY '.', BLACK 'O', WHITE 'X'
        """
        lines: List[str] = []
        if show_coords:
            header = "".join([str(i).rjust(3) for i in range(self._size)])
            lines.append("   " + header)
        for r in range(self._size):
            row_syms = [Player(int(v)).symbol().rjust(3) for v in self._grid[r]]
            if show_coords:
                lines.append(str(r).rjust(3) + "".join(row_syms))
            else:
                lines.append("".join(row_syms))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_ascii()
