"""Board state container for the fixed 3x3 grid (cells indexed 0-8, row-major)."""

try:
    from Player import Player
    from engine.errors import CellOccupied, InvalidIndex
except ImportError:
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine.errors import CellOccupied, InvalidIndex


class Board:
    SIZE = 3
    CELLS = SIZE * SIZE
    CENTER = 4

    def __init__(self):
        # Each cell is None (empty) or a Player
        self.cells = [None] * self.CELLS
        self.move_count = 0
        self.history = []

    def in_bounds(self, index):
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < self.CELLS

    def _check_index(self, index):
        if not self.in_bounds(index):
            raise InvalidIndex(f"index {index!r} outside board (0-{self.CELLS - 1})")

    def is_occupied(self, index):
        self._check_index(index)
        return self.cells[index] is not None

    def place(self, index, player):
        """Place a mark; raise if out of bounds or occupied. The board is untouched on error."""
        if not isinstance(player, Player):
            raise ValueError(f"player must be a Player, got {player!r}")
        self._check_index(index)
        if self.cells[index] is not None:
            raise CellOccupied(f"cell {index} already holds {self.cells[index].indicator}")
        self.cells[index] = player
        self.move_count += 1
        self.history.append((index, player))

    def positions(self, player):
        """Set of indices occupied by player."""
        return {i for i, cell in enumerate(self.cells) if cell is player}

    def empty_indices(self):
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self):
        return None not in self.cells

    def reset(self):
        self.cells = [None] * self.CELLS
        self.move_count = 0
        self.history = []

    def rows(self):
        return [self.cells[r * self.SIZE:(r + 1) * self.SIZE] for r in range(self.SIZE)]

    def __str__(self):
        lines = []
        for r, row in enumerate(self.rows()):
            marks = [
                cell.indicator if cell is not None else str(r * self.SIZE + c + 1)
                for c, cell in enumerate(row)
            ]
            lines.append(" " + " | ".join(marks))
        return "\n---+---+---\n".join(lines)
