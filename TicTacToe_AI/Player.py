"""The two sides of a game: the human at the UI and the computer opponent."""

from enum import IntEnum


class Player(IntEnum):
    HUMAN = -1
    COMPUTER = 1

    @property
    def indicator(self):
        """Mark drawn for this player's cells."""
        return "X" if self is Player.HUMAN else "O"
