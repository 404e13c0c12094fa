"""Computer opponent: rule-based move selection with an optional seeded RNG."""

import random

try:
    from ai import move_selector
except ImportError:
    from TicTacToe_AI.ai import move_selector


class ComputerPlayer:
    def __init__(self, seed=None):
        self.seed = seed
        self.rng = random.Random(seed)

    def next_move(self, board):
        return move_selector.select_computer_move(board, rng=self.rng)
