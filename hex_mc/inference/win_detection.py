"""
Border-to-border connectivity check for Hex.

Blue wins by connecting the top row to the bottom row; Red wins by connecting
the left column to the right column. The check is a depth-first search over
same-color cells using the board's fixed hex adjacency, seeded from the
player's start border and stopping at the first cell on the opposite border.
It never mutates the board.
"""

from typing import TYPE_CHECKING, List, Set, Tuple

from hex_mc.enums import Player

if TYPE_CHECKING:
    from hex_mc.inference.board import HexBoard


def border_cells(board: "HexBoard", player: Player) -> Tuple[List[int], Set[int]]:
    """
    The player's stones on its start and success borders.

    Returns:
        (frontier, success): Blue starts from the bottom row and must reach the
        top row; Red starts from the left column and must reach the right column.
    """
    grid = board.grid
    if player == Player.BLUE:
        start, goal = grid.bottom_row(), grid.top_row()
    else:
        start, goal = grid.left_column(), grid.right_column()
    frontier = [idx for idx in start if board.owns(player, idx)]
    success = {idx for idx in goal if board.owns(player, idx)}
    return frontier, success


def has_won(board: "HexBoard", player: Player) -> bool:
    frontier, success = border_cells(board, player)
    if not frontier or not success:
        return False

    grid = board.grid
    stack = list(frontier)
    queued = set(frontier)
    visited = set()
    while stack:
        top = stack.pop()
        visited.add(top)
        queued.discard(top)
        for n in grid.neighbors(top):
            if n in visited or n in queued or not board.owns(player, n):
                continue
            if n in success:
                return True
            stack.append(n)
            queued.add(n)
    return False
