"""Computer move selection: win > block > center > random empty cell."""

import random

try:
    from Player import Player
    from engine.errors import EmptyMoveSpace
    from engine.rules import WIN_LINES
except ImportError:
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine.errors import EmptyMoveSpace
    from TicTacToe_AI.engine.rules import WIN_LINES


def find_winning_move(board, player):
    """
    Return the empty cell that completes a line for player, or None.
    Lines are scanned in WIN_LINES order so the result is deterministic.
    """
    cells = board.cells
    for line in WIN_LINES:
        empty = [i for i in line if cells[i] is None]
        if len(empty) != 1:
            continue
        if all(cells[i] is player for i in line if i != empty[0]):
            return empty[0]
    return None


def select_computer_move(board, rng=None):
    """
    Pick the computer's move on a board that still has an empty cell.
    rng: optional random.Random used for the fallback pick (module random otherwise).
    """
    legal = board.empty_indices()
    if not legal:
        raise EmptyMoveSpace("No empty cells left for the computer")

    move = find_winning_move(board, Player.COMPUTER)
    if move is not None:
        return move

    move = find_winning_move(board, Player.HUMAN)
    if move is not None:
        return move

    if board.cells[board.CENTER] is None:
        return board.CENTER

    return (rng or random).choice(legal)
