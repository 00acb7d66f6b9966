"""
Random generator utilities.

The engine never touches global random state: every sampler and selector
receives an explicit numpy Generator built here.
"""

from typing import List, Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Build a generator for one game.

    Args:
        seed: Fixed seed for reproducible play, or None for fresh OS entropy
    """
    return np.random.default_rng(seed)


def spawn_seeds(rng: np.random.Generator, count: int) -> List[int]:
    """Independent integer seeds for worker processes, drawn from `rng`."""
    return [int(s) for s in rng.integers(0, 2**63 - 1, size=count)]
