"""Game controller: human move entry point, computer reply, and observable state for the UI."""

from dataclasses import dataclass

try:
    from Board import Board
    from ComputerPlayer import ComputerPlayer
    from Player import Player
    from engine import referee, rules
    from engine.errors import CellOccupied
    from engine.rules import GameState
    from utils.logger import log_event
except ImportError:
    from TicTacToe_AI.Board import Board
    from TicTacToe_AI.ComputerPlayer import ComputerPlayer
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine import referee, rules
    from TicTacToe_AI.engine.errors import CellOccupied
    from TicTacToe_AI.engine.rules import GameState
    from TicTacToe_AI.utils.logger import log_event


@dataclass(frozen=True)
class AlertItem:
    title: str
    message: str
    button_title: str


ALERTS = {
    GameState.HUMAN_WIN: AlertItem("You Win!", "You beat the computer. Well done!", "Play again"),
    GameState.COMPUTER_WIN: AlertItem("You Lost!", "Better luck next time", "Play again"),
    GameState.DRAW: AlertItem("Draw!", "It's a draw", "Try again"),
}


class TicTacToeGame:
    def __init__(self, computer=None, logger=log_event, auto_reply=True):
        """
        computer: object with next_move(board) -> index (default: unseeded ComputerPlayer)
        logger: callable receiving one event string per move/outcome
        auto_reply: apply the computer's reply inside process_move; when False the
            board stays disabled until the UI calls computer_move()
        """
        self.board = Board()
        self.computer = computer or ComputerPlayer()
        self.logger = logger
        self.auto_reply = auto_reply
        self.state = GameState.IN_PROGRESS
        self.is_board_disabled = False
        self.last_move = None
        self._observers = []

    # --- Observers ---

    def subscribe(self, callback):
        """Register callback(game), invoked after every state change."""
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback):
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self):
        for callback in list(self._observers):
            callback(self)

    # --- Observable state ---

    @property
    def is_over(self):
        return self.state.is_terminal

    @property
    def alert(self):
        return ALERTS.get(self.state)

    @property
    def is_human_turn(self):
        return not self.is_over and not self.is_board_disabled

    # --- Turn handling ---

    def _apply(self, index, player):
        referee.check_move(index, self.board, player)
        rules.apply_move(self.board, index, player)
        self.last_move = index
        self.logger(f"Move {self.board.move_count}: {player.indicator} {index}")
        self.state = rules.evaluate(self.board)
        if self.state.is_terminal:
            self.is_board_disabled = True
            self.logger(f"Result: {self.alert.title}")

    def process_move(self, position):
        """
        Apply the human move at position, then the computer's reply if the game continues.
        Returns True if the human move was applied. Occupied cells, a finished game, or a
        disabled board reject the move without changing state.
        """
        if self.is_over or self.is_board_disabled:
            return False
        try:
            self._apply(position, Player.HUMAN)
        except CellOccupied as exc:
            self.logger(f"Rejected: {exc}")
            return False

        if not self.is_over:
            self.is_board_disabled = True
        self._notify()
        if not self.is_over and self.auto_reply:
            self.computer_move()
        return True

    def computer_move(self):
        """
        Apply the computer's reply. Returns the chosen index, or None if it is not the computer's turn.
        A rejected reply hands the board back to the human before the error propagates.
        """
        if self.is_over or not self.is_board_disabled:
            return None
        try:
            index = self.computer.next_move(self.board)
            self._apply(index, Player.COMPUTER)
        except ValueError:
            self.is_board_disabled = False
            self._notify()
            raise
        if not self.is_over:
            self.is_board_disabled = False
        self._notify()
        return index

    def reset_game(self):
        self.board.reset()
        self.state = GameState.IN_PROGRESS
        self.is_board_disabled = False
        self.last_move = None
        self.logger("Game reset")
        self._notify()
