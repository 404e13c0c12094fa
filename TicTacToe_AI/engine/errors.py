"""Move errors raised by the board, referee, and move selector."""


class InvalidIndex(ValueError):
    """Index outside the 0-8 board range (caller bug)."""


class CellOccupied(ValueError):
    """Move targeted a cell that already holds a mark."""


class EmptyMoveSpace(ValueError):
    """Move selector was asked for a move on a full board."""
