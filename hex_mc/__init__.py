"""
hex_mc: Hex board engine with a Monte Carlo computer player.

The engine models the hexagonal connectivity graph, a place/undo move ledger,
border-to-border win detection, and an AI that scores every legal cell by
sampling random full-board completions.
"""

# Version info
__version__ = "1.0.0"

__all__ = [
    "enums",
    "config",
    "inference",
]

from . import enums
from . import config
from . import inference
