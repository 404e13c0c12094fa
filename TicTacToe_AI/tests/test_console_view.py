"""Console view input parsing and play-again loop, driven by scripted input."""

from TicTacToe_AI.TicTacToeGame import TicTacToeGame
from TicTacToe_AI.engine.rules import GameState
from TicTacToe_AI.gui.console_view import ConsoleView


class ScriptedInput:
    def __init__(self, answers):
        self._answers = list(answers)

    def __call__(self, prompt=""):
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


class SeqComputer:
    def __init__(self, moves):
        self._moves = list(moves)

    def next_move(self, board):
        return self._moves.pop(0)


def make_view(answers, computer_moves):
    lines = []
    game = TicTacToeGame(computer=SeqComputer(computer_moves), logger=lambda *_: None)
    view = ConsoleView(game, input_fn=ScriptedInput(answers), output=lines.append)
    return game, view, lines


def test_read_move_skips_bad_input():
    _, view, lines = make_view(["abc", "0", "10", " 5 "], [])
    assert view.read_move() == 4
    assert lines.count("Enter a number from 1 to 9.") == 3


def test_read_move_quit_and_eof():
    _, view, _ = make_view(["q"], [])
    assert view.read_move() is None
    assert view.read_move() is None  # input exhausted -> EOF


def test_run_plays_to_human_win_and_stops():
    game, view, lines = make_view(["1", "2", "3", "n"], [4, 5])
    view.run()
    assert game.state is GameState.HUMAN_WIN
    assert any("You Win!" in line for line in lines)
    assert view.render not in game._observers


def test_run_reports_taken_cell_and_resets_on_play_again():
    game, view, lines = make_view(["1", "1", "2", "3", "y", "q"], [4, 5])
    view.run()
    assert "That cell is taken." in lines
    assert game.board.move_count == 0
    assert game.state is GameState.IN_PROGRESS
