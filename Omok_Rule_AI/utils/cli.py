"""CLI options for selecting the front end, opponent delay, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok Rule AI (Human vs rule-based opponent, 15x15 five-in-a-row)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    front = parser.add_mutually_exclusive_group()
    front.add_argument("--gui", action="store_true", help="Play in a pygame window (mouse to move, U undo, R restart)")
    front.add_argument("--console", action="store_true", help="Play in the terminal")
    parser.add_argument("--delay-ms", type=int, help="Delay before the opponent replies, in milliseconds")
    parser.add_argument("--seed", type=int, help="Seed for the opponent's random moves")
    parser.add_argument("--window-size", type=int, help="Pygame window size in pixels")
    parser.add_argument("--quiet", action="store_true", help="Disable move logging")
    return parser.parse_args(argv)
