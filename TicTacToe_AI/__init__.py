"""TicTacToe_AI package exports."""

from .Board import Board
from .Player import Player
from .ComputerPlayer import ComputerPlayer
from .TicTacToeGame import TicTacToeGame, AlertItem, ALERTS

# Subpackages for rules engine, move selection, views, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Player",
    "ComputerPlayer",
    "TicTacToeGame",
    "AlertItem",
    "ALERTS",
    "ai",
    "engine",
    "gui",
    "utils",
]
