"""CLI options for choosing the view, computer delay/seed, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe against a rule-based computer")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--delay", type=float, help="Seconds before the computer replies in the GUI (default from settings)")
    parser.add_argument("--seed", type=int, help="Seed for the computer's random fallback move")
    parser.add_argument("--window-size", type=int, help="GUI window size in pixels")
    parser.add_argument("--log-level", help="Level for diagnostic logging (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    return parser.parse_args(argv)
