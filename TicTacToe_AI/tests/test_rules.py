"""Win/draw detection, outcome precedence, and apply/reset rules."""

import itertools

import pytest

from TicTacToe_AI.Board import Board
from TicTacToe_AI.Player import Player
from TicTacToe_AI.engine import rules
from TicTacToe_AI.engine.errors import CellOccupied, InvalidIndex
from TicTacToe_AI.engine.rules import GameState, WIN_LINES

H, C = Player.HUMAN, Player.COMPUTER


def board_from(cells):
    b = Board()
    for i, cell in enumerate(cells):
        if cell is not None:
            b.place(i, cell)
    return b


def test_win_lines_are_the_eight_fixed_triples():
    assert len(WIN_LINES) == 8
    assert len(set(WIN_LINES)) == 8
    assert (0, 4, 8) in WIN_LINES and (2, 4, 6) in WIN_LINES


@pytest.mark.parametrize("line", WIN_LINES)
def test_each_line_wins(line):
    b = board_from([H if i in line else None for i in range(9)])
    assert rules.check_win(b, H)
    assert not rules.check_win(b, C)
    assert rules.winning_line(b, H) == line


def test_check_win_matches_superset_definition_for_all_three_mark_sets():
    for picked in itertools.combinations(range(9), 3):
        b = board_from([C if i in picked else None for i in range(9)])
        expected = any(set(picked).issuperset(line) for line in WIN_LINES)
        assert rules.check_win(b, C) == expected


def test_full_board_without_line_is_draw():
    # X O X / X O O / O X X
    b = board_from([H, C, H, H, C, C, C, H, H])
    assert rules.check_draw(b)
    assert not rules.check_win(b, H)
    assert not rules.check_win(b, C)
    assert rules.evaluate(b) is GameState.DRAW


def test_full_board_with_line_is_win_not_draw():
    # X X X / O O X / X O O
    b = board_from([H, H, H, C, C, H, H, C, C])
    assert b.is_full()
    assert not rules.check_draw(b)
    assert rules.evaluate(b) is GameState.HUMAN_WIN


def test_partial_board_is_in_progress():
    b = board_from([H, C, None, None, None, None, None, None, None])
    assert not rules.check_draw(b)
    assert rules.evaluate(b) is GameState.IN_PROGRESS
    assert not GameState.IN_PROGRESS.is_terminal


def test_computer_line_evaluates_to_computer_win():
    b = board_from([None, None, C, None, C, None, C, H, H])
    assert rules.evaluate(b) is GameState.COMPUTER_WIN


def test_apply_move_on_occupied_cell_does_not_change_board():
    b = rules.apply_move(Board(), 3, H)
    snapshot = (b.cells[:], b.move_count, b.history[:])
    with pytest.raises(CellOccupied):
        rules.apply_move(b, 3, C)
    assert (b.cells, b.move_count, b.history) == snapshot


def test_is_occupied_bounds():
    b = Board()
    assert rules.is_occupied(b, 0) is False
    with pytest.raises(InvalidIndex):
        rules.is_occupied(b, 9)


def test_reset_returns_empty_board():
    b = rules.reset()
    assert b.cells == [None] * 9
    assert rules.evaluate(b) is GameState.IN_PROGRESS
