"""
Board state and move ledger for Hex.

HexBoard owns the status of every cell, the per-player sets of occupied cell
indices, the occupied counter and the randomization ledger used by the
completion sampler. All mutation goes through place/undo (real and tentative
moves) or through the low-level fill/release helpers used by
hex_mc.inference.completion_sampler.
"""

import logging
from functools import lru_cache
from typing import Dict, FrozenSet, List, Set, Tuple

from hex_mc.config import INITIAL_LAST_MOVER
from hex_mc.enums import Piece, Player, get_player_name, player_to_piece
from hex_mc.inference.grid import HexGrid
from hex_mc.inference.win_detection import has_won as _has_won

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_grid(size: int) -> HexGrid:
    """Shared immutable adjacency graph for a board size."""
    return HexGrid(size)


class HexBoard:
    """
    N×N Hex board with incremental place/undo bookkeeping.

    Invariant: a cell is Empty iff its index is in neither player set, and
    Blue/Red iff it is in exactly that player's set. len(blue) + len(red)
    always equals `occupied`.
    """

    def __init__(self, size: int):
        self.grid = get_grid(size)
        self.size = size
        self._cells: List[Piece] = [Piece.EMPTY] * self.grid.num_cells
        self._player_cells: Dict[Player, Set[int]] = {Player.BLUE: set(), Player.RED: set()}
        self.occupied = 0
        self.last_mover = INITIAL_LAST_MOVER
        # Indices filled by the most recent random completion
        self.randomized: List[int] = []

    # ---------- Queries ----------

    def in_bounds(self, row: int, col: int) -> bool:
        return self.grid.in_bounds(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        """
        Check if a position is empty.

        Raises:
            IndexError: If coordinates are out of bounds; check in_bounds first.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Position ({row}, {col}) is out of bounds")
        return self._cells[self.grid.rowcol_to_index(row, col)] == Piece.EMPTY

    def is_legal(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.is_empty(row, col)

    def piece_at(self, row: int, col: int) -> Piece:
        if not self.in_bounds(row, col):
            raise IndexError(f"Position ({row}, {col}) is out of bounds")
        return self._cells[self.grid.rowcol_to_index(row, col)]

    def piece_at_index(self, idx: int) -> Piece:
        return self._cells[idx]

    def cells_of(self, player: Player) -> FrozenSet[int]:
        return frozenset(self._player_cells[player])

    def owns(self, player: Player, idx: int) -> bool:
        return idx in self._player_cells[player]

    def legal_moves(self) -> List[Tuple[int, int]]:
        """Legal (row, col) pairs in row-major order."""
        return [self.grid.index_to_rowcol(i) for i, p in enumerate(self._cells) if p == Piece.EMPTY]

    def is_full(self) -> bool:
        return self.occupied == self.grid.num_cells

    def has_won(self, player: Player) -> bool:
        return _has_won(self, player)

    def snapshot(self) -> Tuple[Piece, ...]:
        """Immutable copy of every cell status, for equality checks."""
        return tuple(self._cells)

    # ---------- Move ledger ----------

    def place(self, player: Player, row: int, col: int) -> bool:
        """
        Place a stone for `player`.

        Returns:
            True if the stone was placed, False if the move was illegal
            (out of bounds or occupied). Illegal moves leave the board unchanged.
        """
        if not self.is_legal(row, col):
            logger.warning(f"({row}, {col}) is not a legal move for {get_player_name(player)}")
            return False
        idx = self.grid.rowcol_to_index(row, col)
        self._cells[idx] = player_to_piece(player)
        self._player_cells[player].add(idx)
        self.occupied += 1
        # A real move invalidates any pending random completion
        self.randomized.clear()
        self.last_mover = player
        return True

    def undo(self, player: Player, row: int, col: int) -> bool:
        """
        Retract a stone placed by `player`. Out-of-bounds or empty targets, and
        cells holding the other player's stone, are a silent no-op and return False.
        """
        if not self.in_bounds(row, col) or self.is_empty(row, col):
            return False
        idx = self.grid.rowcol_to_index(row, col)
        if idx not in self._player_cells[player]:
            return False
        self._cells[idx] = Piece.EMPTY
        self._player_cells[player].discard(idx)
        self.occupied -= 1
        return True

    def clear(self) -> None:
        """Reset the board to its freshly constructed state."""
        self._cells = [Piece.EMPTY] * self.grid.num_cells
        for cells in self._player_cells.values():
            cells.clear()
        self.randomized.clear()
        self.occupied = 0
        self.last_mover = INITIAL_LAST_MOVER

    # ---------- Low-level helpers for the completion sampler ----------

    def fill_cell(self, idx: int, player: Player) -> None:
        """Assign an Empty cell to `player` without touching the ledger."""
        self._cells[idx] = player_to_piece(player)
        self._player_cells[player].add(idx)
        self.occupied += 1

    def recolor_cell(self, idx: int, player: Player) -> None:
        """Move an occupied cell to `player`, keeping the occupied count."""
        previous = Player.RED if player == Player.BLUE else Player.BLUE
        self._player_cells[previous].discard(idx)
        self._player_cells[player].add(idx)
        self._cells[idx] = player_to_piece(player)

    def release_cell(self, idx: int) -> None:
        """Return an occupied cell to Empty."""
        for cells in self._player_cells.values():
            cells.discard(idx)
        self._cells[idx] = Piece.EMPTY
        self.occupied -= 1

    def copy(self) -> "HexBoard":
        """Independent board with the same state, sharing the immutable grid."""
        new_board = HexBoard(self.size)
        new_board._cells = self._cells.copy()
        new_board._player_cells = {p: cells.copy() for p, cells in self._player_cells.items()}
        new_board.occupied = self.occupied
        new_board.last_mover = self.last_mover
        new_board.randomized = self.randomized.copy()
        return new_board

    def __repr__(self) -> str:
        return (f"HexBoard(size={self.size}, occupied={self.occupied}, "
                f"last_mover={get_player_name(self.last_mover)})")
