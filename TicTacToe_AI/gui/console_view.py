"""Text-mode board renderer and stdin input loop."""

import logging

LOGGER = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


class ConsoleView:
    def __init__(self, game, input_fn=input, output=print):
        self.game = game
        self.input_fn = input_fn
        self.output = output

    def render(self, game):
        self.output("")
        self.output(str(game.board))
        if game.alert is not None:
            self.output(f"\n{game.alert.title} {game.alert.message}")

    def _ask(self, prompt):
        try:
            return self.input_fn(prompt).strip().lower()
        except EOFError:
            return None

    def read_move(self):
        """Prompt until a cell number 1-9 is entered. Returns index 0-8, or None to quit."""
        while True:
            raw = self._ask("Your move (1-9, q to quit): ")
            if raw is None or raw in QUIT_WORDS:
                return None
            if raw.isdigit() and 1 <= int(raw) <= 9:
                return int(raw) - 1
            LOGGER.debug("Ignoring console input %r", raw)
            self.output("Enter a number from 1 to 9.")

    def play_again(self):
        raw = self._ask(f"{self.game.alert.button_title}? [y/N]: ")
        return raw in ("y", "yes")

    def run(self):
        self.game.subscribe(self.render)
        try:
            self.render(self.game)
            while True:
                while not self.game.is_over:
                    move = self.read_move()
                    if move is None:
                        return
                    if not self.game.process_move(move):
                        self.output("That cell is taken.")
                if not self.play_again():
                    return
                self.game.reset_game()
        finally:
            self.game.unsubscribe(self.render)
