import os
import sys
import textwrap

from typing import Optional, TextIO

from . import const

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BRIGHT_BLACK = "\033[90m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def enabled(stream: Optional[TextIO] = None) -> bool:
    """
    Checks whether escape codes should be written to `stream`, stdout by
    default. Colors are off for anything that is not a terminal and when
    `NO_COLOR` is set.
    """
    if os.environ.get(const.NO_COLOR_ENV):
        return False
    isatty = getattr(stream or sys.stdout, "isatty", None)
    return isatty is not None and isatty()


def paint(text: str, *codes: str, stream: Optional[TextIO] = None) -> str:
    if not codes or not enabled(stream):
        return text
    return "".join(codes) + text + RESET


def indent(text: str, width: int = 4) -> str:
    return textwrap.indent(text, " " * width)


def paragraph(text: str) -> str:
    return indent(textwrap.fill(text, const.HELP_WIDTH))


def title(text: str):
    print(paint(text, BOLD, WHITE, UNDERLINE))


def subtitle(text: str):
    print(paint(text, BOLD, WHITE) + ":")


def error(msg: str) -> None:
    print(f"{paint('Error:', RED, stream=sys.stderr)} {msg}\n", file=sys.stderr)
