"""
Centralized enum definitions for Hex engine semantic types.

This module is the single source of truth for representing players, cell
pieces and AI difficulty tiers. Other modules should import these Enums
rather than duplicating constants.
"""

from enum import Enum


class StrictEnum(Enum):
    """Base class for enums that prevent cross-type comparisons."""
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            raise TypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        return super().__eq__(other)

    def __hash__(self):
        """Make enums hashable so they can be used as dictionary keys."""
        return hash(self.value)


class Player(StrictEnum):
    """Player constants. Blue connects top/bottom, Red connects left/right."""
    BLUE = 0
    RED = 1


class Piece(StrictEnum):
    """Cell status constants (character encoding)."""
    EMPTY = "e"
    BLUE = "b"
    RED = "r"


class Difficulty(StrictEnum):
    """AI difficulty tiers, numbered as they are offered at the prompt."""
    EASY = 1
    MEDIUM = 2
    HARD = 3


# ============================================================================
# Helper Functions for Enum-Primitive Conversion
# ============================================================================

def piece_to_char(piece: Piece) -> str:
    """Convert Piece enum to character representation."""
    return piece.value


def char_to_piece(char: str) -> Piece:
    """Convert character to Piece enum."""
    mapping = {"e": Piece.EMPTY, "b": Piece.BLUE, "r": Piece.RED}
    if char not in mapping:
        raise ValueError(f"Invalid piece character: {char}")
    return mapping[char]


def player_to_int(player: Player) -> int:
    """Convert Player enum to integer representation."""
    return player.value


def int_to_player(player_int: int) -> Player:
    """Convert integer to Player enum."""
    if player_int not in (Player.BLUE.value, Player.RED.value):
        raise ValueError(f"Invalid player integer: {player_int}")
    return Player(player_int)


def player_to_piece(player: Player) -> Piece:
    """The piece a player's stones show on the board."""
    return Piece.BLUE if player == Player.BLUE else Piece.RED


def piece_to_player(piece: Piece) -> Player:
    """Owner of a stone. Empty cells have no owner."""
    if piece == Piece.EMPTY:
        raise ValueError("Empty cell has no owning player")
    return Player.BLUE if piece == Piece.BLUE else Player.RED


def get_opponent(player: Player) -> Player:
    return Player.RED if player == Player.BLUE else Player.BLUE


def int_to_difficulty(level: int) -> Difficulty:
    """Convert the 1/2/3 prompt answer to a Difficulty."""
    valid = [d.value for d in Difficulty]
    if level not in valid:
        raise ValueError(f"Invalid difficulty level: {level} (expected one of {valid})")
    return Difficulty(level)


# ============================================================================
# Display Helpers
# ============================================================================

def get_piece_display_symbol(piece: Piece) -> str:
    """Get the display symbol for a piece."""
    symbols = {
        Piece.EMPTY: "*",
        Piece.BLUE: "X",
        Piece.RED: "O"
    }
    return symbols[piece]


def get_player_name(player: Player) -> str:
    return "Blue" if player == Player.BLUE else "Red"
