"""Tic-tac-toe rules: move application, win/draw detection, and game outcome."""

from enum import Enum

try:
    from Board import Board
    from Player import Player
    from engine.errors import CellOccupied
except ImportError:
    from TicTacToe_AI.Board import Board
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine.errors import CellOccupied


# Rows, columns, diagonals. Iteration order decides move-selector tie-breaks.
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    DRAW = "draw"

    @property
    def is_terminal(self):
        return self is not GameState.IN_PROGRESS


def is_occupied(board: Board, index: int) -> bool:
    return board.is_occupied(index)


def apply_move(board: Board, index: int, player: Player) -> Board:
    """Mark index for player and return the board. Raises CellOccupied without mutating."""
    if board.is_occupied(index):
        raise CellOccupied(f"cell {index} already occupied")
    board.place(index, player)
    return board


def winning_line(board: Board, player: Player):
    """Return the first win line fully held by player, or None."""
    held = board.positions(player)
    for line in WIN_LINES:
        if held.issuperset(line):
            return line
    return None


def check_win(board: Board, player: Player) -> bool:
    return winning_line(board, player) is not None


def check_draw(board: Board) -> bool:
    """Full board with no winner. Wins are checked first so a full winning board is never a draw."""
    if check_win(board, Player.HUMAN) or check_win(board, Player.COMPUTER):
        return False
    return board.is_full()


def evaluate(board: Board) -> GameState:
    if check_win(board, Player.HUMAN):
        return GameState.HUMAN_WIN
    if check_win(board, Player.COMPUTER):
        return GameState.COMPUTER_WIN
    if check_draw(board):
        return GameState.DRAW
    return GameState.IN_PROGRESS


def reset() -> Board:
    return Board()
