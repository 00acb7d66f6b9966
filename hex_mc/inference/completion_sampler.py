"""
Random full-board completions for Monte Carlo evaluation.

A completion assigns every currently-Empty cell to Blue or Red with a split
that respects turn parity: each color gets half of the free cells and an odd
cell goes to the player who did not make the last real move. The filled
indices are recorded in the board's randomization ledger so that later trials
in the same batch only reshuffle those cells, and so revert() can return them
to Empty exactly.
"""

import logging
from typing import Dict, List, Protocol, Sequence

from hex_mc.enums import Piece, Player, get_opponent, piece_to_player
from hex_mc.inference.board import HexBoard

logger = logging.getLogger(__name__)


class PermutationSource(Protocol):
    """Anything that can produce a uniform random permutation of range(n),
    e.g. numpy.random.Generator."""

    def permutation(self, n: int) -> Sequence[int]:
        ...


def split_free_cells(free_count: int, last_mover: Player) -> Dict[Player, int]:
    """
    Number of random cells each player receives.

    The odd cell, if any, goes to the opponent of the last real mover.
    """
    counts = {Player.BLUE: free_count // 2, Player.RED: free_count // 2}
    if free_count % 2 != 0:
        counts[get_opponent(last_mover)] += 1
    return counts


def _permuted(labels: List[Player], rng: PermutationSource) -> List[Player]:
    return [labels[i] for i in rng.permutation(len(labels))]


class CompletionSampler:
    """Fills and reverts random completions on one board."""

    def __init__(self, board: HexBoard, rng: PermutationSource):
        self.board = board
        self.rng = rng

    def fill_random(self) -> None:
        """
        Fill every Empty cell with a random Blue/Red label.

        With an empty ledger the free cells are scanned and labelled from
        scratch. With a populated ledger the existing label multiset of the
        ledger cells is permuted in place, so the split stays fixed for the
        whole trial batch.
        """
        board = self.board
        if not board.randomized:
            self._fill_fresh()
        else:
            self._reshuffle()

    def _fill_fresh(self) -> None:
        board = self.board
        free_count = board.grid.num_cells - board.occupied
        if free_count == 0:
            return
        counts = split_free_cells(free_count, board.last_mover)
        logger.debug(f"Fresh completion of {free_count} cells: {counts[Player.BLUE]} blue, {counts[Player.RED]} red")
        labels = [Player.BLUE] * counts[Player.BLUE] + [Player.RED] * counts[Player.RED]
        labels = _permuted(labels, self.rng)

        c = 0
        for idx in range(board.grid.num_cells):
            if board.piece_at_index(idx) == Piece.EMPTY:
                board.fill_cell(idx, labels[c])
                board.randomized.append(idx)
                c += 1

    def _reshuffle(self) -> None:
        board = self.board
        current = [piece_to_player(board.piece_at_index(idx)) for idx in board.randomized]
        labels = _permuted(current, self.rng)
        for idx, old, new in zip(board.randomized, current, labels):
            if new != old:
                board.recolor_cell(idx, new)

    def revert(self) -> None:
        """Return every ledger cell to Empty and clear the ledger."""
        board = self.board
        for idx in board.randomized:
            board.release_cell(idx)
        board.randomized.clear()
