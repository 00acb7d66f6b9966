"""
Game engine and move search for Hex.

This module provides the board model, win detection, random completion
sampling and Monte Carlo move selection.
"""

from .board import HexBoard
from .move_selection import MonteCarloMoveSelector, MoveChoice, choose_move

__all__ = [
    'HexBoard',
    'MonteCarloMoveSelector',
    'MoveChoice',
    'choose_move',
]
