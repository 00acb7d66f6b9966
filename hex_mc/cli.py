"""
Command-line interface for playing Hex against the Monte Carlo AI.

This module only sequences prompts, input parsing and turns; all game logic
lives in hex_mc.inference.
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Tuple

from hex_mc.config import DEFAULT_BOARD_SIZE, DIFFICULTY_TRIALS, MIN_BOARD_SIZE, VERBOSE_LEVEL
from hex_mc.enums import Difficulty, Player, get_opponent, int_to_difficulty, int_to_player
from hex_mc.inference.board import HexBoard
from hex_mc.inference.board_display import display_hex_board, format_confidence, player_label
from hex_mc.inference.move_selection import MonteCarloMoveSelector

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

QUIT_WORDS = ('q', 'quit', 'exit')
DIFFICULTY_NAMES = {d.name.lower(): d for d in Difficulty}
COLOR_NAMES = {'blue': Player.BLUE, 'red': Player.RED}


def setup_logging(verbose: int = VERBOSE_LEVEL):
    """Configure logging for the CLI."""
    if verbose >= 3:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Play Hex against a Monte Carlo AI")
    parser.add_argument("--board-size", type=int, help=f"Board size N for an NxN board (minimum {MIN_BOARD_SIZE})")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTY_NAMES), help="AI difficulty: easy, medium or hard")
    parser.add_argument("--color", choices=sorted(COLOR_NAMES), help="Your color; Blue moves first")
    parser.add_argument("--seed", type=int, help="Seed the AI for a reproducible game")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for AI search (default: 1)")
    parser.add_argument("--verbose", type=int, default=VERBOSE_LEVEL, help="Logging verbosity 0-3")
    return parser.parse_args(argv)


def _check_quit(text: str) -> None:
    if text.strip().lower() in QUIT_WORDS:
        print("Quitting game by user request.")
        sys.exit(0)


def prompt_int(prompt: str, input_fn: InputFn = input) -> int:
    while True:
        text = input_fn(prompt)
        _check_quit(text)
        try:
            return int(text.strip())
        except ValueError:
            print(f"> Please enter a whole number, got {text!r}")


def prompt_board_size(input_fn: InputFn = input) -> int:
    size = prompt_int("> Choose the HexBoard size [size x size]: ", input_fn)
    return clamp_board_size(size)


def clamp_board_size(size: int) -> int:
    if size < MIN_BOARD_SIZE:
        print(f"> Board size raised to the minimum of {MIN_BOARD_SIZE}")
        return MIN_BOARD_SIZE
    return size


def prompt_color(input_fn: InputFn = input) -> Player:
    while True:
        choice = prompt_int("> Choose Player: Blue [1], Red [2]: ", input_fn)
        try:
            return int_to_player(choice - 1)
        except ValueError:
            print("> Please choose 1 or 2")


def prompt_difficulty(input_fn: InputFn = input) -> Difficulty:
    """Ask for a difficulty tier; anything unrecognised falls back to Hard."""
    choice = prompt_int("> Choose difficulty [Easy 1, Medium 2, Hard 3]: ", input_fn)
    try:
        return int_to_difficulty(choice)
    except ValueError:
        return Difficulty.HARD


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a human move given as 1-based "row col" (comma or space separated).

    Returns:
        0-based (row, col)

    Raises:
        ValueError: If the text is not two integers
    """
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    row, col = (int(p) for p in parts)
    return row - 1, col - 1


def get_human_move(board: HexBoard, input_fn: InputFn = input) -> Tuple[int, int]:
    """Prompt until the human enters a legal move."""
    while True:
        text = input_fn("> Insert move (row col, or 'q' to quit): ")
        _check_quit(text)
        try:
            row, col = parse_move(text)
        except ValueError as e:
            print(f"> Invalid input: {e}")
            continue
        if board.is_legal(row, col):
            return row, col
        print(f"> ({row + 1},{col + 1}) is not a legal move")


def play_game(board: HexBoard, human: Player, selector: MonteCarloMoveSelector,
              input_fn: InputFn = input, show: Callable[[HexBoard], None] = display_hex_board) -> Player:
    """
    Alternate human and AI turns until someone wins. Blue moves first.

    Returns:
        The winning player
    """
    current = Player.BLUE
    show(board)
    while True:
        if current == human:
            row, col = get_human_move(board, input_fn)
        else:
            choice = selector.select(board, current)
            if choice is None:
                raise RuntimeError("AI found no legal move on an undecided board")
            row, col = choice.move
        board.place(current, row, col)
        show(board)
        print(f"> {player_label(current)} occupied Hex ({row + 1},{col + 1})")
        if current != human:
            print(f"> {format_confidence(selector.last_choice.confidence)}")
        if board.has_won(current):
            return current
        current = get_opponent(current)


def main(argv=None, input_fn: InputFn = input) -> Optional[Player]:
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    size = clamp_board_size(args.board_size) if args.board_size is not None else prompt_board_size(input_fn)
    human = COLOR_NAMES[args.color] if args.color else prompt_color(input_fn)
    difficulty = DIFFICULTY_NAMES[args.difficulty] if args.difficulty else prompt_difficulty(input_fn)
    logger.info(f"New game: {size}x{size}, human plays {player_label(human)}, "
                f"{difficulty.name.lower()} AI ({DIFFICULTY_TRIALS[difficulty]} trials per candidate)")

    board = HexBoard(size)
    selector = MonteCarloMoveSelector.from_difficulty(difficulty, seed=args.seed, workers=args.workers)
    try:
        winner = play_game(board, human, selector, input_fn)
    except (KeyboardInterrupt, EOFError):
        print("\nKeyboard interrupt detected. Exiting game.")
        return None
    print()
    print(f"> {player_label(winner)} has won!")
    return winner


if __name__ == "__main__":
    main()
