"""
Monte Carlo move selection for Hex.

Every legal cell is evaluated by placing a tentative stone, running a batch of
random full-board completions, and counting how often the resulting board is a
win for the mover. The cell with the highest win rate is chosen; ties keep the
first cell in row-major scan order.

Because a completely filled Hex board always has exactly one winner, the win
rate of a random completion is a cheap estimate of the position's value.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from hex_mc.config import SelectorConfig
from hex_mc.enums import Difficulty, Player, get_player_name
from hex_mc.inference.board import HexBoard
from hex_mc.inference.completion_sampler import CompletionSampler, PermutationSource
from hex_mc.utils.random_utils import make_rng, spawn_seeds

logger = logging.getLogger(__name__)


@dataclass
class MoveChoice:
    """Result of a move search: the chosen cell and its estimated win rate."""
    row: int
    col: int
    confidence: float
    win_rates: Dict[Tuple[int, int], float] = field(default_factory=dict, repr=False)

    @property
    def move(self) -> Tuple[int, int]:
        return self.row, self.col

    def as_tuple(self) -> Tuple[int, int, float]:
        return self.row, self.col, self.confidence


def evaluate_candidate(board: HexBoard, sampler: CompletionSampler, player: Player,
                       row: int, col: int, trials: int) -> float:
    """
    Estimate the win rate of `player` moving at (row, col).

    The tentative stone and every random completion are removed before
    returning, so the board is left as it was found.
    """
    board.place(player, row, col)
    wins = 0
    for _ in range(trials):
        sampler.fill_random()
        if board.has_won(player):
            wins += 1
    sampler.revert()
    board.undo(player, row, col)
    return wins / trials


def _evaluate_on_copy(args: Tuple[HexBoard, Player, int, int, int, int]) -> float:
    """Process-pool entry point: evaluate one candidate on a private board."""
    board, player, row, col, trials, seed = args
    sampler = CompletionSampler(board, np.random.default_rng(seed))
    return evaluate_candidate(board, sampler, player, row, col, trials)


def _evaluate_parallel(board: HexBoard, player: Player, candidates: List[Tuple[int, int]],
                       trials: int, rng: np.random.Generator, workers: int) -> List[float]:
    seeds = spawn_seeds(rng, len(candidates))
    jobs = [(board.copy(), player, r, c, trials, seed) for (r, c), seed in zip(candidates, seeds)]
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_evaluate_on_copy, jobs))


def choose_move(board: HexBoard, player: Player, trials_per_candidate: int,
                rng: Optional[PermutationSource] = None, workers: int = 1) -> Optional[MoveChoice]:
    """
    Pick the legal cell with the best estimated win rate for `player`.

    Args:
        board: Board to search; unchanged on return
        player: Player to move
        trials_per_candidate: Random completions per legal cell
        rng: Permutation source (numpy Generator); a fresh one if None
        workers: >1 evaluates candidates in a process pool on board copies.
            Requires a numpy Generator as `rng`.

    Returns:
        MoveChoice with the chosen cell and its win rate as confidence, or
        None if the board has no legal cell.

    Raises:
        ValueError: If trials_per_candidate < 1
    """
    if trials_per_candidate < 1:
        raise ValueError(f"trials_per_candidate must be positive, got {trials_per_candidate}")
    if rng is None:
        rng = make_rng()

    candidates = board.legal_moves()
    if not candidates:
        logger.warning("No legal moves left; nothing to choose")
        return None

    last_mover = board.last_mover
    if workers > 1:
        rates = _evaluate_parallel(board, player, candidates, trials_per_candidate, rng, workers)
    else:
        sampler = CompletionSampler(board, rng)
        rates = [evaluate_candidate(board, sampler, player, r, c, trials_per_candidate)
                 for r, c in candidates]
    board.last_mover = last_mover

    # Strict improvement only: first cell in scan order keeps ties
    best_rate = -1.0
    best_move = candidates[0]
    for move, rate in zip(candidates, rates):
        logger.debug(f"Candidate {move}: win rate {rate:.3f}")
        if best_rate < rate:
            best_rate = rate
            best_move = move

    return MoveChoice(row=best_move[0], col=best_move[1], confidence=best_rate,
                      win_rates=dict(zip(candidates, rates)))


class MonteCarloMoveSelector:
    """
    Computer player: uniform-random full-board completion sampling.

    Holds one generator for the whole game so successive moves draw from a
    single stream.
    """

    def __init__(self, config: Optional[SelectorConfig] = None):
        self.config = config if config is not None else SelectorConfig()
        if self.config.trials_per_candidate < 1:
            raise ValueError(f"trials_per_candidate must be positive, got {self.config.trials_per_candidate}")
        self.rng = make_rng(self.config.seed)
        self.last_choice: Optional[MoveChoice] = None

    @classmethod
    def from_difficulty(cls, difficulty: Difficulty, seed: Optional[int] = None,
                        workers: int = 1) -> "MonteCarloMoveSelector":
        return cls(SelectorConfig.from_difficulty(difficulty, seed=seed, workers=workers))

    def select(self, board: HexBoard, player: Player) -> Optional[MoveChoice]:
        t0 = time.perf_counter()
        choice = choose_move(board, player, self.config.trials_per_candidate,
                             rng=self.rng, workers=self.config.workers)
        elapsed = time.perf_counter() - t0
        if choice is not None:
            logger.info(
                f"{get_player_name(player)} AI chose ({choice.row}, {choice.col}) "
                f"with confidence {choice.confidence:.2f} after "
                f"{len(choice.win_rates)} candidates x {self.config.trials_per_candidate} trials "
                f"in {elapsed:.2f}s"
            )
        self.last_choice = choice
        return choice
