"""Move validation for human and computer moves."""

try:
    from Player import Player
    from engine.errors import CellOccupied, InvalidIndex
except ImportError:
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine.errors import CellOccupied, InvalidIndex


def check_move(index, board, player):
    """
    Validate a move against bounds and occupancy.
    Raises InvalidIndex/CellOccupied on invalid moves, ValueError on an unknown player.
    """
    if not isinstance(player, Player):
        raise ValueError(f"Unknown player: {player!r}")
    if not board.in_bounds(index):
        raise InvalidIndex(f"Move {index!r} out of bounds")
    if board.is_occupied(index):
        raise CellOccupied(f"Cell {index} already occupied")

    return True
