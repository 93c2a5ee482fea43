"""Terminal colour codes and console logging."""

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences for terminal colours."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLDBLACK = "\033[1m\033[30m"
    BOLDRED = "\033[1m\033[31m"
    BOLDGREEN = "\033[1m\033[32m"
    BOLDYELLOW = "\033[1m\033[33m"
    BOLDBLUE = "\033[1m\033[34m"
    BOLDMAGENTA = "\033[1m\033[35m"
    BOLDCYAN = "\033[1m\033[36m"
    BOLDWHITE = "\033[1m\033[37m"


def colorize(text: object, color: Color) -> str:
    """Wrap ``text`` in ``color`` followed by a reset."""
    return f"{Color(color).value}{text}{Color.RESET.value}"


def log(message: object) -> None:
    """Write ``message`` and a newline to standard output."""
    print(message, flush=True)