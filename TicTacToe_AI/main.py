"""Entry point for tic-tac-toe games. Load config, wire the computer player and view, start playing."""

import logging
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import configure, log_event
    from TicTacToeGame import TicTacToeGame
    from ComputerPlayer import ComputerPlayer
    from gui.console_view import ConsoleView
    from gui.pygame_view import PygameView
except ImportError:
    from TicTacToe_AI.utils.cli import parse_args
    from TicTacToe_AI.utils.logger import configure, log_event
    from TicTacToe_AI.TicTacToeGame import TicTacToeGame
    from TicTacToe_AI.ComputerPlayer import ComputerPlayer
    from TicTacToe_AI.gui.console_view import ConsoleView
    from TicTacToe_AI.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent
LOGGER = logging.getLogger(__name__)


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `TicTacToe_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        LOGGER.warning("Settings file %s not found; using defaults", path)
        return {}


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure(args.log_level or settings.get("log_level", "WARNING"))
    delay = args.delay if args.delay is not None else settings.get("computer_delay_seconds", 0.5)
    seed = args.seed if args.seed is not None else settings.get("seed")
    window_size = args.window_size or settings.get("window_size", 480)

    computer = ComputerPlayer(seed=seed)

    game = TicTacToeGame(computer=computer, logger=log_event, auto_reply=not args.gui)
    if args.gui:
        view = PygameView(game, window_size=window_size, delay=delay)
    else:
        view = ConsoleView(game)
    view.run()


if __name__ == "__main__":
    main()
