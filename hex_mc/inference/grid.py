"""
Static hexagonal adjacency graph for an N×N Hex board.

Cells live in a flat arena addressed by row-major index (row * size + col).
Each cell stores a fixed tuple of up to 6 neighbor indices, computed once at
construction. The graph never changes afterwards, so one HexGrid can be
shared by any number of boards of the same size.
"""

from typing import List, Tuple

from hex_mc.config import MIN_BOARD_SIZE

# Hex neighbor directions in construction order:
# left, right, up-same, up-right, down-same, down-left
HEX_NEIGHBOR_DIRECTIONS = [(0, -1), (0, 1), (-1, 0), (-1, 1), (1, 0), (1, -1)]


class HexGrid:
    """Neighbor lookup table and coordinate helpers for one board size."""

    def __init__(self, size: int):
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
        self.size = size
        self.num_cells = size * size
        self._neighbors: List[Tuple[int, ...]] = []
        self._initialize_neighbors()

    def _initialize_neighbors(self) -> None:
        for r in range(self.size):
            for c in range(self.size):
                neighbors = []
                for dr, dc in HEX_NEIGHBOR_DIRECTIONS:
                    nr, nc = r + dr, c + dc
                    if self.in_bounds(nr, nc):
                        neighbors.append(self.rowcol_to_index(nr, nc))
                self._neighbors.append(tuple(neighbors))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def rowcol_to_index(self, row: int, col: int) -> int:
        """Convert (row, col) to arena index."""
        return row * self.size + col

    def index_to_rowcol(self, idx: int) -> Tuple[int, int]:
        """Convert arena index to (row, col)."""
        return idx // self.size, idx % self.size

    def neighbors(self, idx: int) -> Tuple[int, ...]:
        return self._neighbors[idx]

    # Border index lists

    def top_row(self) -> List[int]:
        return list(range(self.size))

    def bottom_row(self) -> List[int]:
        start = self.size * (self.size - 1)
        return list(range(start, start + self.size))

    def left_column(self) -> List[int]:
        return [r * self.size for r in range(self.size)]

    def right_column(self) -> List[int]:
        return [r * self.size + self.size - 1 for r in range(self.size)]

    def __repr__(self) -> str:
        return f"HexGrid(size={self.size})"
