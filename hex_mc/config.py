"""
Configuration constants and settings for the Hex engine.

This module contains all the configuration constants used throughout the
project, including board limits, AI difficulty tiers and display thresholds.
"""

from dataclasses import dataclass
from typing import Optional

from hex_mc.enums import Difficulty, Player

# Global configuration settings

# Verbose logging levels:
# 0: Critical issues and errors
# 1: Important info and warnings
# 2: Detailed info (default for development)
# 3: Very detailed debug info
VERBOSE_LEVEL = 1

# Board configuration
MIN_BOARD_SIZE = 3
DEFAULT_BOARD_SIZE = 11

# Blue moves first; it is also the "last mover" of a fresh board, so the odd
# cell of a random completion goes to Red until a real move is made.
INITIAL_LAST_MOVER = Player.BLUE

# Number of random completions evaluated per candidate cell
DIFFICULTY_TRIALS = {
    Difficulty.EASY: 257,
    Difficulty.MEDIUM: 513,
    Difficulty.HARD: 1025,
}
DEFAULT_DIFFICULTY = Difficulty.HARD

# AI confidence readout: (upper bound, face). Last tier catches everything else.
CONFIDENCE_TIERS = [
    (0.3, "(ç_ç)"),
    (0.6, "(o_o)"),
    (0.85, "(ù_ù)"),
    (float("inf"), "\\($_$)/"),
]


@dataclass
class SelectorConfig:
    """
    Run knobs for Monte Carlo move selection.

    - trials_per_candidate: random completions per legal cell
    - seed: generator seed; None draws fresh OS entropy
    - workers: >1 evaluates candidates in a process pool on board copies
    """

    trials_per_candidate: int = DIFFICULTY_TRIALS[DEFAULT_DIFFICULTY]
    seed: Optional[int] = None
    workers: int = 1

    @classmethod
    def from_difficulty(cls, difficulty: Difficulty, seed: Optional[int] = None,
                        workers: int = 1) -> "SelectorConfig":
        return cls(trials_per_candidate=DIFFICULTY_TRIALS[difficulty], seed=seed, workers=workers)
