"""Colorized status output for the operator."""

import sys

COLORS = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
}


def colorize(message: str, *colors: str) -> str:
    """Wrap a message in ANSI color codes, e.g. colorize("done", "bright", "green")."""
    prefix = "".join(COLORS[c] for c in colors)
    return f"{prefix}{message}{COLORS['reset']}"


def log(message: str, *colors: str) -> None:
    """Print a status message to stdout."""
    print(colorize(message, *colors), file=sys.stdout)
