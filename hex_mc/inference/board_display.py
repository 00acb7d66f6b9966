import sys
from typing import Optional, TextIO, Tuple

from hex_mc.config import CONFIDENCE_TIERS
from hex_mc.enums import Piece, Player, get_piece_display_symbol, get_player_name


def ansi_colored(text, color):
    colors = {
        'blue': '\033[34m',
        'red': '\033[31m',
        'reset': '\033[0m',
    }
    return f"{colors.get(color, '')}{text}{colors['reset']}"


def player_label(player: Player, use_color: bool = False) -> str:
    name = get_player_name(player)
    if not use_color:
        return name
    return ansi_colored(name, 'blue' if player == Player.BLUE else 'red')


def board_to_string(board, use_color: bool = False,
                    highlight_move: Optional[Tuple[int, int]] = None) -> str:
    """
    Render a HexBoard as skewed ASCII art with 1-based row/column labels.

    Cells in a row are joined by " - "; the lines between rows draw the two
    diagonal links of each cell ("\\ /"). `highlight_move` (0-based) is drawn
    as '#'.
    """
    n = board.size
    lines = ['  ' + ''.join(f"{c + 1:2d}  " for c in range(n))]
    for row in range(n):
        indent = ' ' * (2 * row)
        cells = []
        for col in range(n):
            piece = board.piece_at(row, col)
            symbol = get_piece_display_symbol(piece)
            if highlight_move is not None and (row, col) == highlight_move:
                symbol = '#'
            elif use_color and piece == Piece.BLUE:
                symbol = ansi_colored(symbol, 'blue')
            elif use_color and piece == Piece.RED:
                symbol = ansi_colored(symbol, 'red')
            cells.append(symbol)
        lines.append(f"{row + 1:2d} " + indent + ' - '.join(cells))
        if row < n - 1:
            lines.append('   ' + indent + ' ' + ' / '.join(['\\'] * n))
    return '\n'.join(lines)


def display_hex_board(board, file: Optional[TextIO] = None,
                      highlight_move: Optional[Tuple[int, int]] = None) -> None:
    """
    Display a HexBoard as ASCII art, with optional move highlighting.
    Args:
        board: HexBoard to draw
        file: file-like object to write to (default: stdout, colored if a tty)
        highlight_move: (row, col) tuple to highlight, or None
    """
    use_color = file is None and sys.stdout.isatty()
    output = board_to_string(board, use_color=use_color, highlight_move=highlight_move)
    if file is not None:
        print(output, file=file)
    else:
        print(output)


def confidence_face(confidence: float) -> str:
    for upper, face in CONFIDENCE_TIERS:
        if confidence < upper:
            return face
    return CONFIDENCE_TIERS[-1][1]


def format_confidence(confidence: float) -> str:
    """AI confidence readout, e.g. 'AI Confidence: 0.42 (o_o)'."""
    return f"AI Confidence: {confidence:.2f} {confidence_face(confidence)}"
