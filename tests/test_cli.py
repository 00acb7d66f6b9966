"""
Tests for the human-vs-AI command-line driver.
"""

import pytest

from hex_mc import cli
from hex_mc.enums import Difficulty, Player
from hex_mc.inference.board import HexBoard
from hex_mc.inference.move_selection import MoveChoice


def scripted(answers):
    """input() replacement that returns the given answers in order."""
    it = iter(answers)
    return lambda prompt="": next(it)


class ScriptedSelector:
    """Stands in for MonteCarloMoveSelector with a fixed list of moves."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.last_choice = None

    def select(self, board, player):
        row, col = self.moves.pop(0)
        self.last_choice = MoveChoice(row=row, col=col, confidence=0.5)
        return self.last_choice


class TestParsing:

    def test_parse_move(self):
        assert cli.parse_move("1 1") == (0, 0)
        assert cli.parse_move(" 3,2 ") == (2, 1)

    @pytest.mark.parametrize("text", ["", "1", "a b", "1 2 3"])
    def test_parse_move_rejects(self, text):
        with pytest.raises(ValueError):
            cli.parse_move(text)

    def test_clamp_board_size(self):
        assert cli.clamp_board_size(1) == 3
        assert cli.clamp_board_size(7) == 7

    def test_parse_arguments(self):
        args = cli.parse_arguments(["--board-size", "5", "--difficulty", "easy", "--color", "red"])
        assert args.board_size == 5
        assert args.difficulty == "easy"
        assert args.color == "red"
        assert args.workers == 1


class TestPrompts:

    def test_human_move_reprompts_until_legal(self):
        board = HexBoard(3)
        board.place(Player.RED, 0, 0)
        move = cli.get_human_move(board, scripted(["nonsense", "1 1", "4 4", "2 3"]))
        assert move == (1, 2)

    def test_quit(self):
        with pytest.raises(SystemExit):
            cli.get_human_move(HexBoard(3), scripted(["q"]))

    def test_board_size_prompt(self):
        assert cli.prompt_board_size(scripted(["x", "2"])) == 3

    def test_color_prompt(self):
        assert cli.prompt_color(scripted(["0", "2"])) == Player.RED
        assert cli.prompt_color(scripted(["1"])) == Player.BLUE

    def test_difficulty_prompt_falls_back_to_hard(self):
        assert cli.prompt_difficulty(scripted(["1"])) == Difficulty.EASY
        assert cli.prompt_difficulty(scripted(["9"])) == Difficulty.HARD


class TestPlayGame:

    def test_human_blue_wins(self, capsys):
        board = HexBoard(3)
        selector = ScriptedSelector([(0, 0), (1, 0)])
        winner = cli.play_game(board, Player.BLUE, selector,
                               scripted(["1 2", "2 2", "3 2"]), show=lambda b: None)
        assert winner == Player.BLUE
        assert board.occupied == 5
        out = capsys.readouterr().out
        assert "AI Confidence: 0.50" in out

    def test_ai_blue_moves_first(self):
        board = HexBoard(3)
        selector = ScriptedSelector([(0, 0), (1, 0), (2, 0)])
        winner = cli.play_game(board, Player.RED, selector,
                               scripted(["1 2", "2 2"]), show=lambda b: None)
        assert winner == Player.BLUE
        assert board.cells_of(Player.BLUE) == frozenset({0, 3, 6})

    def test_main_runs_full_game(self, capsys):
        cells = [f"{r} {c}" for r in range(1, 4) for c in range(1, 4)]
        winner = cli.main(["--board-size", "3", "--difficulty", "easy", "--color", "blue",
                           "--seed", "1", "--verbose", "0"], input_fn=scripted(cells))
        assert winner in (Player.BLUE, Player.RED)
        assert "has won!" in capsys.readouterr().out
